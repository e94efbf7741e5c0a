"""
Attendee endpoints.

Besides plain CRUD, ``GET /attendees/event/{eventId}`` lists the
attendees registered for one event.  ``registrationDate`` and
``updatedAt`` are assigned by the server.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from conference_api.app.api.deps import get_attendee_service
from conference_api.app.api.routing import TimeoutRoute
from conference_api.app.schemas.attendee import AttendeeCreate, AttendeeRead, AttendeeUpdate
from conference_api.app.schemas.common import MessageResponse
from conference_api.app.services.attendee_service import AttendeeService


router = APIRouter(route_class=TimeoutRoute)


@router.post(
    "",
    response_model=AttendeeRead,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_attendee(
    attendee: AttendeeCreate,
    service: AttendeeService = Depends(get_attendee_service),
) -> AttendeeRead:
    """Register an attendee for an existing event (404 if the event is unknown)."""
    return await service.create(attendee)


@router.get("", response_model=List[AttendeeRead], response_model_exclude_none=True)
async def list_attendees(service: AttendeeService = Depends(get_attendee_service)) -> List[AttendeeRead]:
    return await service.list()


@router.get("/event/{event_id}", response_model=List[AttendeeRead], response_model_exclude_none=True)
async def list_event_attendees(
    event_id: str,
    service: AttendeeService = Depends(get_attendee_service),
) -> List[AttendeeRead]:
    """Return the attendees of one event.

    An unknown event id yields an empty list rather than a 404; the
    event itself is not looked up.
    """
    return await service.list_for_event(event_id)


@router.get("/{attendee_id}", response_model=AttendeeRead, response_model_exclude_none=True)
async def get_attendee(
    attendee_id: str,
    service: AttendeeService = Depends(get_attendee_service),
) -> AttendeeRead:
    return await service.get(attendee_id)


@router.put("/{attendee_id}", response_model=AttendeeRead, response_model_exclude_none=True)
async def update_attendee(
    attendee_id: str,
    updates: AttendeeUpdate,
    service: AttendeeService = Depends(get_attendee_service),
) -> AttendeeRead:
    """Update an attendee; ``updatedAt`` is refreshed on every call."""
    return await service.update(attendee_id, updates)


@router.delete("/{attendee_id}", response_model=MessageResponse)
async def delete_attendee(
    attendee_id: str,
    service: AttendeeService = Depends(get_attendee_service),
) -> MessageResponse:
    return MessageResponse(message=await service.delete(attendee_id))
