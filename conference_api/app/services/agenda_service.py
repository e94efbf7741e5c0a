"""
Agenda items and the paginated agenda view.

``AgendaService.list_agenda_items`` builds one page of agenda items,
each enriched with the speaker documents it references:

1. query the ``agendaItems`` collection, filtered by ``eventId`` when
   given and sorted by ``sortBy``/``sortOrder``
2. count the filtered set to compute ``total_pages``
3. skip ``(page - 1) * limit`` items and take ``limit``; a page that
   starts past the end is not queried at all
4. collect the distinct speaker ids referenced by the page
5. fetch those speakers concurrently, once each; ids that no longer
   resolve are dropped
6. give every item a ``speakers`` list following its own
   ``speakerIds`` order

Pagination is offset based, so pages shift when items are inserted or
deleted between requests.  Sorting by a field some documents lack is
accepted; those documents sort as NULL.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, Iterable, List, Optional

from ..core.db import Document, DocumentStore
from ..core.exceptions import InvalidReferenceError, NotFoundError, ValidationError
from ..schemas.agenda_item import AgendaItemPage, AgendaItemPayload, AgendaItemRead, Pagination
from .base import CollectionService
from .validation import validate_agenda_item

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
DEFAULT_SORT_BY = "startTime"
DEFAULT_SORT_ORDER = "asc"


class AgendaService(CollectionService[AgendaItemRead]):
    """Service for agenda items and their speaker enrichment."""

    collection_name = "agendaItems"
    entity_name = "Agenda item"
    read_model = AgendaItemRead
    # Updates must satisfy the same rules as creates, even for partial bodies.
    strict_updates = True

    def __init__(self, store: DocumentStore) -> None:
        super().__init__(store)
        self._events = store.collection("events")
        self._speakers = store.collection("speakers")

    def validate(self, payload: AgendaItemPayload, partial: bool) -> List[str]:
        return validate_agenda_item(payload)

    async def check_references(self, payload: AgendaItemPayload) -> None:
        if payload.event_id and await self._events.get(payload.event_id) is None:
            logger.warning("Agenda item references missing event %s", payload.event_id)
            raise NotFoundError("Event not found")
        if payload.speaker_ids:
            found = await self.fetch_speakers(payload.speaker_ids)
            missing = [sid for sid in dict.fromkeys(payload.speaker_ids) if sid not in found]
            if missing:
                logger.warning("Agenda item references missing speakers %s", missing)
                raise InvalidReferenceError("One or more speakers not found")

    async def fetch_speakers(self, speaker_ids: Iterable[str]) -> Dict[str, Document]:
        """Fetch each distinct speaker id once, concurrently.

        Returns a mapping of id to speaker document for the ids that
        exist.  Order of completion does not matter; callers assemble
        results by id.
        """
        unique_ids = list(dict.fromkeys(speaker_ids))
        if not unique_ids:
            return {}
        documents = await asyncio.gather(*(self._speakers.get(sid) for sid in unique_ids))
        return {
            sid: document
            for sid, document in zip(unique_ids, documents)
            if document is not None
        }

    @staticmethod
    def _with_speakers(document: Document, speakers: Dict[str, Document]) -> AgendaItemRead:
        speaker_ids = document.get("speakerIds") or []
        resolved = [speakers[sid] for sid in speaker_ids if sid in speakers]
        return AgendaItemRead.model_validate({**document, "speakers": resolved})

    async def present(self, document: Document) -> AgendaItemRead:
        speakers = await self.fetch_speakers(document.get("speakerIds") or [])
        return self._with_speakers(document, speakers)

    async def list(self) -> List[AgendaItemRead]:
        page = await self.list_agenda_items(limit=None)
        return page.items

    async def list_agenda_items(
        self,
        event_id: Optional[str] = None,
        page: int = DEFAULT_PAGE,
        limit: Optional[int] = DEFAULT_LIMIT,
        sort_by: str = DEFAULT_SORT_BY,
        sort_order: str = DEFAULT_SORT_ORDER,
    ) -> AgendaItemPage:
        """Return one page of agenda items with resolved speakers.

        ``limit=None`` returns every matching item as a single page.
        A page past the end yields an empty ``items`` list.
        """
        errors = []
        if page < 1:
            errors.append("Page must be a positive integer")
        if limit is not None and limit < 1:
            errors.append("Limit must be a positive integer")
        if sort_order not in ("asc", "desc"):
            errors.append("Sort order must be 'asc' or 'desc'")
        if errors:
            raise ValidationError(errors)

        query = self._collection.query()
        if event_id:
            query = query.where("eventId", "==", event_id)
        query = query.order_by(sort_by, sort_order)

        total = await query.count()
        if limit is None:
            documents = await query.get()
        else:
            offset = (page - 1) * limit
            documents = []
            if offset < total:
                documents = await query.offset(offset).limit(min(limit, total - offset)).get()

        speaker_ids = (sid for document in documents for sid in document.get("speakerIds") or [])
        speakers = await self.fetch_speakers(speaker_ids)
        items = [self._with_speakers(document, speakers) for document in documents]

        page_size = limit if limit is not None else max(total, 1)
        logger.debug(
            "Agenda page %s (limit %s) for event %s: %s of %s items, %s speakers",
            page, limit, event_id, len(items), total, len(speakers),
        )
        return AgendaItemPage(
            items=items,
            pagination=Pagination(
                total=total,
                page=page,
                limit=page_size,
                total_pages=-(-total // page_size),
            ),
        )
