"""
FastAPI dependencies.

The document store is created once by ``create_app`` and kept on
``app.state``.  Services are cheap wrappers around it and are built
per request, which keeps endpoints free of globals and lets tests
swap the store.
"""

from fastapi import Depends, Request

from ..core.db import DocumentStore
from ..services.agenda_service import AgendaService
from ..services.attendee_service import AttendeeService
from ..services.event_service import EventService
from ..services.speaker_service import SpeakerService
from ..services.sponsor_service import SponsorService


def get_store(request: Request) -> DocumentStore:
    return request.app.state.store


def get_event_service(store: DocumentStore = Depends(get_store)) -> EventService:
    return EventService(store)


def get_speaker_service(store: DocumentStore = Depends(get_store)) -> SpeakerService:
    return SpeakerService(store)


def get_sponsor_service(store: DocumentStore = Depends(get_store)) -> SponsorService:
    return SponsorService(store)


def get_attendee_service(store: DocumentStore = Depends(get_store)) -> AttendeeService:
    return AttendeeService(store)


def get_agenda_service(store: DocumentStore = Depends(get_store)) -> AgendaService:
    return AgendaService(store)
