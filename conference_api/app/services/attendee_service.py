"""
Business logic for attendees.

Every attendee belongs to one event.  The event is checked on create
and whenever an update changes ``eventId``.  The server stamps
``registrationDate`` when the attendee is created and ``updatedAt`` on
every update.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from ..core.db import DocumentStore
from ..core.exceptions import NotFoundError
from ..schemas.attendee import AttendeeBase, AttendeeRead
from ..schemas.common import format_utc
from .base import CollectionService
from .validation import validate_attendee

logger = logging.getLogger(__name__)


def _now() -> str:
    return format_utc(datetime.now(timezone.utc))


class AttendeeService(CollectionService[AttendeeRead]):
    """Service for managing attendees."""

    collection_name = "attendees"
    entity_name = "Attendee"
    read_model = AttendeeRead

    def __init__(self, store: DocumentStore) -> None:
        super().__init__(store)
        self._events = store.collection("events")

    def validate(self, payload: AttendeeBase, partial: bool) -> List[str]:
        return validate_attendee(payload, partial=partial)

    async def check_references(self, payload: AttendeeBase) -> None:
        if payload.event_id and await self._events.get(payload.event_id) is None:
            logger.warning("Attendee references missing event %s", payload.event_id)
            raise NotFoundError("Event not found")

    def prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return {**data, "registrationDate": _now()}

    def prepare_update(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return {**data, "updatedAt": _now()}

    async def list_for_event(self, event_id: str) -> List[AttendeeRead]:
        """Return the attendees registered for ``event_id`` in registration order."""
        documents = await self._collection.where("eventId", "==", event_id).get()
        return [AttendeeRead.model_validate(document) for document in documents]
