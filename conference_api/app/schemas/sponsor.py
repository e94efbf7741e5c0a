"""Pydantic models for sponsors.  Sponsors are not linked to other entities."""

from typing import Optional

from pydantic import Field

from .common import CamelModel


class SponsorBase(CamelModel):
    name: Optional[str] = Field(None, examples=["Acme Corp"])
    tier: Optional[str] = Field(None, examples=["gold"])
    website: Optional[str] = None
    logo_url: Optional[str] = None
    description: Optional[str] = None


class SponsorCreate(SponsorBase):
    pass


class SponsorUpdate(SponsorBase):
    pass


class SponsorRead(SponsorBase):
    id: str
