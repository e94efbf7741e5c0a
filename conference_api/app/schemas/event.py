"""
Pydantic models for event data.

``EventBase`` lists the fields an event document may carry.  All of
them are optional at the schema level so that the validators in
``services.validation`` can report missing fields with their own
messages instead of a generic schema error.  ``EventRead`` adds the
store‑assigned ``id``.
"""

from typing import Optional

from pydantic import Field

from .common import CamelModel, UtcDatetime


class EventBase(CamelModel):
    title: Optional[str] = Field(None, examples=["PyCon Berlin"])
    description: Optional[str] = Field(None, examples=["Three days of talks and workshops"])
    start_date: Optional[UtcDatetime] = Field(None, examples=["2025-09-01T09:00:00Z"])
    end_date: Optional[UtcDatetime] = Field(None, examples=["2025-09-03T18:00:00Z"])
    location: Optional[str] = Field(None, examples=["Berlin"])
    venue: Optional[str] = None
    capacity: Optional[int] = Field(None, ge=0)
    status: Optional[str] = Field(None, examples=["published"])


class EventCreate(EventBase):
    """Schema for creating an event."""
    pass


class EventUpdate(EventBase):
    """Schema for updating an event; only provided fields are written."""
    pass


class EventRead(EventBase):
    """Schema for reading an event from the API."""

    id: str
