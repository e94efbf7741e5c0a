"""Pydantic models for speakers."""

from typing import Dict, Optional

from pydantic import Field

from .common import CamelModel


class SpeakerBase(CamelModel):
    name: Optional[str] = Field(None, examples=["Ada Lovelace"])
    bio: Optional[str] = None
    email: Optional[str] = None
    company: Optional[str] = None
    # Job title, e.g. "Staff Engineer".
    title: Optional[str] = None
    photo_url: Optional[str] = None
    social_links: Optional[Dict[str, str]] = None


class SpeakerCreate(SpeakerBase):
    pass


class SpeakerUpdate(SpeakerBase):
    pass


class SpeakerRead(SpeakerBase):
    id: str
