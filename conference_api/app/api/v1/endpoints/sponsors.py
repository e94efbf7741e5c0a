"""Sponsor endpoints.  Sponsors are independent of every other entity."""

from typing import List

from fastapi import APIRouter, Depends, status

from conference_api.app.api.deps import get_sponsor_service
from conference_api.app.api.routing import TimeoutRoute
from conference_api.app.schemas.common import MessageResponse
from conference_api.app.schemas.sponsor import SponsorCreate, SponsorRead, SponsorUpdate
from conference_api.app.services.sponsor_service import SponsorService


router = APIRouter(route_class=TimeoutRoute)


@router.post(
    "",
    response_model=SponsorRead,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_sponsor(
    sponsor: SponsorCreate,
    service: SponsorService = Depends(get_sponsor_service),
) -> SponsorRead:
    return await service.create(sponsor)


@router.get("", response_model=List[SponsorRead], response_model_exclude_none=True)
async def list_sponsors(service: SponsorService = Depends(get_sponsor_service)) -> List[SponsorRead]:
    return await service.list()


@router.get("/{sponsor_id}", response_model=SponsorRead, response_model_exclude_none=True)
async def get_sponsor(
    sponsor_id: str,
    service: SponsorService = Depends(get_sponsor_service),
) -> SponsorRead:
    return await service.get(sponsor_id)


@router.put("/{sponsor_id}", response_model=SponsorRead, response_model_exclude_none=True)
async def update_sponsor(
    sponsor_id: str,
    updates: SponsorUpdate,
    service: SponsorService = Depends(get_sponsor_service),
) -> SponsorRead:
    return await service.update(sponsor_id, updates)


@router.delete("/{sponsor_id}", response_model=MessageResponse)
async def delete_sponsor(
    sponsor_id: str,
    service: SponsorService = Depends(get_sponsor_service),
) -> MessageResponse:
    return MessageResponse(message=await service.delete(sponsor_id))
