"""
Event endpoints.

CRUD operations for events.  Deleting an event does not cascade:
its agenda items and attendees stay in place and keep pointing at the
removed event id.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from conference_api.app.api.deps import get_event_service
from conference_api.app.api.routing import TimeoutRoute
from conference_api.app.schemas.common import MessageResponse
from conference_api.app.schemas.event import EventCreate, EventRead, EventUpdate
from conference_api.app.services.event_service import EventService


router = APIRouter(route_class=TimeoutRoute)


@router.post(
    "",
    response_model=EventRead,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_event(
    event: EventCreate,
    service: EventService = Depends(get_event_service),
) -> EventRead:
    """Create a new event and return it with its generated id."""
    return await service.create(event)


@router.get("", response_model=List[EventRead], response_model_exclude_none=True)
async def list_events(service: EventService = Depends(get_event_service)) -> List[EventRead]:
    """Return all events in creation order."""
    return await service.list()


@router.get("/{event_id}", response_model=EventRead, response_model_exclude_none=True)
async def get_event(
    event_id: str,
    service: EventService = Depends(get_event_service),
) -> EventRead:
    """Retrieve a single event by its id.  Responds 404 if it does not exist."""
    return await service.get(event_id)


@router.put("/{event_id}", response_model=EventRead, response_model_exclude_none=True)
async def update_event(
    event_id: str,
    updates: EventUpdate,
    service: EventService = Depends(get_event_service),
) -> EventRead:
    """Update an existing event.

    Partial updates are supported; fields missing from the body remain
    unchanged.  The response is the event as stored after the update.
    """
    return await service.update(event_id, updates)


@router.delete("/{event_id}", response_model=MessageResponse)
async def delete_event(
    event_id: str,
    service: EventService = Depends(get_event_service),
) -> MessageResponse:
    """Delete an event.  Related agenda items and attendees are kept."""
    return MessageResponse(message=await service.delete(event_id))
