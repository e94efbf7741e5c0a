"""
Pydantic models for agenda items.

Agenda items belong to an event (``eventId``) and reference any
number of speakers (``speakerIds``).  When read through the API each
item also carries ``speakers``: the referenced speaker documents that
still exist, in ``speakerIds`` order.

``AgendaItemPayload`` is used for both create and update bodies.  Its
fields are optional so that ``validate_agenda_item`` can produce the
error list clients expect (``"Title is required"`` and so on).
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .common import CamelModel, UtcDatetime
from .speaker import SpeakerRead

AGENDA_ITEM_TYPES = ("keynote", "session", "workshop", "break", "networking")


class AgendaItemBase(CamelModel):
    event_id: Optional[str] = None
    title: Optional[str] = Field(None, examples=["Opening keynote"])
    description: Optional[str] = None
    start_time: Optional[UtcDatetime] = Field(None, examples=["2025-09-01T09:00:00Z"])
    end_time: Optional[UtcDatetime] = Field(None, examples=["2025-09-01T10:00:00Z"])
    type: Optional[str] = Field(None, examples=list(AGENDA_ITEM_TYPES))
    location: Optional[str] = None
    speaker_ids: Optional[List[str]] = None


class AgendaItemPayload(AgendaItemBase):
    """Request body for creating or updating an agenda item."""
    pass


class AgendaItemRead(AgendaItemBase):
    id: str
    speaker_ids: List[str] = Field(default_factory=list)
    speakers: List[SpeakerRead] = Field(default_factory=list)

    @field_validator("speaker_ids", mode="before")
    @classmethod
    def _missing_ids_as_empty(cls, value):
        return [] if value is None else value


class Pagination(BaseModel):
    total: int
    page: int
    limit: int
    total_pages: int


class AgendaItemPage(BaseModel):
    items: List[AgendaItemRead]
    pagination: Pagination
