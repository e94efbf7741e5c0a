"""
Pydantic models for attendees.

An attendee belongs to exactly one event through ``eventId``.  The
``registrationDate`` and ``updatedAt`` timestamps are assigned by the
server and therefore only appear on ``AttendeeRead``.
"""

from typing import Optional

from pydantic import Field

from .common import CamelModel, UtcDatetime


class AttendeeBase(CamelModel):
    event_id: Optional[str] = None
    name: Optional[str] = Field(None, examples=["Grace Hopper"])
    email: Optional[str] = Field(None, examples=["grace@example.com"])
    ticket_type: Optional[str] = Field(None, examples=["standard"])
    company: Optional[str] = None


class AttendeeCreate(AttendeeBase):
    pass


class AttendeeUpdate(AttendeeBase):
    pass


class AttendeeRead(AttendeeBase):
    id: str
    registration_date: Optional[UtcDatetime] = None
    updated_at: Optional[UtcDatetime] = None
