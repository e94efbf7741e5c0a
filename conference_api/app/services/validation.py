"""
Payload validators.

Each validator takes a request payload and returns the list of
problems found, in a fixed order; an empty list means the payload is
acceptable.  Validators never touch the store.  Referential checks
(does the event exist?) belong to the services.

``partial=True`` restricts the checks to fields the client actually
sent, which is how updates of events, speakers, sponsors and
attendees are validated.  Agenda items are always validated in full,
on create and on update alike.
"""

from datetime import datetime
from typing import List, Optional

from ..schemas.agenda_item import AGENDA_ITEM_TYPES, AgendaItemPayload
from ..schemas.attendee import AttendeeBase
from ..schemas.common import to_utc
from ..schemas.event import EventBase
from ..schemas.speaker import SpeakerBase
from ..schemas.sponsor import SponsorBase


def _ends_before_start(start: Optional[datetime], end: Optional[datetime]) -> bool:
    return bool(start and end and to_utc(start) >= to_utc(end))


def _required(payload, field: str, message: str, partial: bool, errors: List[str]) -> None:
    if partial and field not in payload.model_fields_set:
        return
    if not getattr(payload, field):
        errors.append(message)


def validate_agenda_item(data: AgendaItemPayload) -> List[str]:
    """Validate an agenda item payload (create and update)."""
    errors: List[str] = []

    if not data.title:
        errors.append("Title is required")
    if not data.start_time:
        errors.append("Start time is required")
    if not data.end_time:
        errors.append("End time is required")
    if _ends_before_start(data.start_time, data.end_time):
        errors.append("End time must be after start time")

    if not data.type:
        errors.append("Type is required")
    elif data.type not in AGENDA_ITEM_TYPES:
        errors.append("Invalid type")

    if not data.event_id:
        errors.append("Event ID is required")

    return errors


def validate_event(data: EventBase, partial: bool = False) -> List[str]:
    errors: List[str] = []
    _required(data, "title", "Title is required", partial, errors)
    if _ends_before_start(data.start_date, data.end_date):
        errors.append("End date must be after start date")
    return errors


def validate_speaker(data: SpeakerBase, partial: bool = False) -> List[str]:
    errors: List[str] = []
    _required(data, "name", "Name is required", partial, errors)
    return errors


def validate_sponsor(data: SponsorBase, partial: bool = False) -> List[str]:
    errors: List[str] = []
    _required(data, "name", "Name is required", partial, errors)
    return errors


def validate_attendee(data: AttendeeBase, partial: bool = False) -> List[str]:
    errors: List[str] = []
    _required(data, "name", "Name is required", partial, errors)
    _required(data, "email", "Email is required", partial, errors)
    if data.email and "@" not in data.email:
        errors.append("Invalid email")
    _required(data, "event_id", "Event ID is required", partial, errors)
    return errors
