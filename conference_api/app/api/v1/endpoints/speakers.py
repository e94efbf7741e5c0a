"""Speaker endpoints."""

from typing import List

from fastapi import APIRouter, Depends, status

from conference_api.app.api.deps import get_speaker_service
from conference_api.app.api.routing import TimeoutRoute
from conference_api.app.schemas.common import MessageResponse
from conference_api.app.schemas.speaker import SpeakerCreate, SpeakerRead, SpeakerUpdate
from conference_api.app.services.speaker_service import SpeakerService


router = APIRouter(route_class=TimeoutRoute)


@router.post(
    "",
    response_model=SpeakerRead,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_speaker(
    speaker: SpeakerCreate,
    service: SpeakerService = Depends(get_speaker_service),
) -> SpeakerRead:
    return await service.create(speaker)


@router.get("", response_model=List[SpeakerRead], response_model_exclude_none=True)
async def list_speakers(service: SpeakerService = Depends(get_speaker_service)) -> List[SpeakerRead]:
    return await service.list()


@router.get("/{speaker_id}", response_model=SpeakerRead, response_model_exclude_none=True)
async def get_speaker(
    speaker_id: str,
    service: SpeakerService = Depends(get_speaker_service),
) -> SpeakerRead:
    return await service.get(speaker_id)


@router.put("/{speaker_id}", response_model=SpeakerRead, response_model_exclude_none=True)
async def update_speaker(
    speaker_id: str,
    updates: SpeakerUpdate,
    service: SpeakerService = Depends(get_speaker_service),
) -> SpeakerRead:
    return await service.update(speaker_id, updates)


@router.delete("/{speaker_id}", response_model=MessageResponse)
async def delete_speaker(
    speaker_id: str,
    service: SpeakerService = Depends(get_speaker_service),
) -> MessageResponse:
    """Delete a speaker.

    Agenda items referencing the speaker are left untouched; they stop
    listing the speaker under ``speakers`` on subsequent reads.
    """
    return MessageResponse(message=await service.delete(speaker_id))
