"""
Business logic for events.

Events are standalone documents.  Agenda items and attendees point at
them through ``eventId``, but deleting an event leaves those documents
in place.
"""

from typing import List

from ..schemas.event import EventBase, EventRead
from .base import CollectionService
from .validation import validate_event


class EventService(CollectionService[EventRead]):
    """Service for managing events."""

    collection_name = "events"
    entity_name = "Event"
    read_model = EventRead

    def validate(self, payload: EventBase, partial: bool) -> List[str]:
        return validate_event(payload, partial=partial)
