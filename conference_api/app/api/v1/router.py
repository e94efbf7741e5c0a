"""
Top‑level router for version 1 of the API.

This router aggregates the entity routers under their path prefixes.
The tags double as human readable resource names in error messages
(see ``main``), so keep them plural and lower case.  The shared
``responses`` document the JSON error bodies in the OpenAPI schema.
"""

from fastapi import APIRouter

from ...schemas.common import ErrorResponse, ValidationErrorResponse
from .endpoints import agenda_items, attendees, events, speakers, sponsors

router = APIRouter(
    responses={
        400: {"model": ValidationErrorResponse, "description": "Invalid payload or query parameters"},
        404: {"model": ErrorResponse, "description": "Document not found"},
        500: {"model": ErrorResponse, "description": "Document store failure"},
        504: {"model": ErrorResponse, "description": "Request timed out"},
    }
)

router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(speakers.router, prefix="/speakers", tags=["speakers"])
router.include_router(sponsors.router, prefix="/sponsors", tags=["sponsors"])
router.include_router(attendees.router, prefix="/attendees", tags=["attendees"])
router.include_router(agenda_items.router, prefix="/agendaItems", tags=["agenda items"])
