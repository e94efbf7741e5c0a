"""
Agenda item endpoints.

``GET /agendaItems`` returns a paginated object rather than a bare
list::

    {"items": [...], "pagination": {"total", "page", "limit", "total_pages"}}

Each item carries ``speakers``, the referenced speaker documents that
still exist, in ``speakerIds`` order.

Query parameters:

- **eventId**: only items of this event.
- **page**: 1‑based page number (default 1).
- **limit**: page size (default 10).
- **sortBy**: document field to sort by (default ``startTime``).
- **sortOrder**: ``asc`` (default) or ``desc``.

Non‑numeric or non‑positive ``page``/``limit`` values are rejected
with 400.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from conference_api.app.api.deps import get_agenda_service
from conference_api.app.api.routing import TimeoutRoute
from conference_api.app.schemas.agenda_item import AgendaItemPage, AgendaItemPayload, AgendaItemRead
from conference_api.app.schemas.common import MessageResponse
from conference_api.app.services.agenda_service import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    DEFAULT_SORT_BY,
    DEFAULT_SORT_ORDER,
    AgendaService,
)


router = APIRouter(route_class=TimeoutRoute)


@router.post(
    "",
    response_model=AgendaItemRead,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_agenda_item(
    item: AgendaItemPayload,
    service: AgendaService = Depends(get_agenda_service),
) -> AgendaItemRead:
    """Create an agenda item.

    The event must exist (404 ``Event not found``) and every id in
    ``speakerIds`` must resolve (400 ``One or more speakers not found``).
    """
    return await service.create(item)


@router.get("", response_model=AgendaItemPage, response_model_exclude_none=True)
async def list_agenda_items(
    event_id: Optional[str] = Query(None, alias="eventId"),
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1),
    sort_by: str = Query(DEFAULT_SORT_BY, alias="sortBy", min_length=1),
    sort_order: str = Query(DEFAULT_SORT_ORDER, alias="sortOrder", pattern="^(asc|desc)$"),
    service: AgendaService = Depends(get_agenda_service),
) -> AgendaItemPage:
    return await service.list_agenda_items(
        event_id=event_id,
        page=page,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
    )


@router.get("/{item_id}", response_model=AgendaItemRead, response_model_exclude_none=True)
async def get_agenda_item(
    item_id: str,
    service: AgendaService = Depends(get_agenda_service),
) -> AgendaItemRead:
    return await service.get(item_id)


@router.put("/{item_id}", response_model=AgendaItemRead, response_model_exclude_none=True)
async def update_agenda_item(
    item_id: str,
    updates: AgendaItemPayload,
    service: AgendaService = Depends(get_agenda_service),
) -> AgendaItemRead:
    """Update an agenda item.

    The body is validated with the same rules as a create, so it must
    carry ``title``, ``startTime``, ``endTime``, ``type`` and
    ``eventId`` even when only one of them changes.
    """
    return await service.update(item_id, updates)


@router.delete("/{item_id}", response_model=MessageResponse)
async def delete_agenda_item(
    item_id: str,
    service: AgendaService = Depends(get_agenda_service),
) -> MessageResponse:
    return MessageResponse(message=await service.delete(item_id))
