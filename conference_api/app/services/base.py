"""
Shared CRUD behaviour for collection‑backed services.

Every entity service wraps one collection of the document store and
follows the same flow:

* validate the payload (``ValidationError`` on failure)
* make sure the target document exists where one is required
  (``NotFoundError``)
* check that referenced documents exist (``check_references``)
* write the fields the client sent and return the stored document
  together with its id

Subclasses set the class attributes and override the hooks they need.
Reference checks are check‑then‑write: a referenced document deleted
between the check and the write is not detected.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Generic, List, Type, TypeVar

from pydantic import BaseModel

from ..core.db import Collection, Document, DocumentStore
from ..core.exceptions import NotFoundError, ValidationError
from ..schemas.common import CamelModel

ReadModel = TypeVar("ReadModel", bound=BaseModel)

logger = logging.getLogger(__name__)


class CollectionService(Generic[ReadModel]):
    """Base class for the entity services."""

    collection_name: str = ""
    # Human readable name used in messages, e.g. "Event not found".
    entity_name: str = ""
    read_model: Type[ReadModel]
    # When True, updates are validated with the full create rules.
    strict_updates: bool = False

    def __init__(self, store: DocumentStore) -> None:
        self._store = store
        self._collection: Collection = store.collection(self.collection_name)

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------
    def validate(self, payload: CamelModel, partial: bool) -> List[str]:
        return []

    async def check_references(self, payload: CamelModel) -> None:
        """Raise if the payload points at documents that do not exist."""

    def prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return data

    def prepare_update(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return data

    async def present(self, document: Document) -> ReadModel:
        return self.read_model.model_validate(document)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def _not_found(self) -> NotFoundError:
        return NotFoundError(f"{self.entity_name} not found")

    def _ensure_valid(self, payload: CamelModel, partial: bool) -> None:
        errors = self.validate(payload, partial)
        if errors:
            logger.info("Rejected %s payload: %s", self.entity_name.lower(), errors)
            raise ValidationError(errors)

    async def create(self, payload: CamelModel) -> ReadModel:
        self._ensure_valid(payload, partial=False)
        await self.check_references(payload)
        data = self.prepare_create(payload.to_document())
        data.pop("id", None)
        doc_id = await self._collection.add(data)
        logger.info("Created %s %s", self.entity_name.lower(), doc_id)
        return await self.present({**data, "id": doc_id})

    async def list(self) -> List[ReadModel]:
        documents = await self._collection.query().get()
        return [self.read_model.model_validate(document) for document in documents]

    async def get(self, doc_id: str) -> ReadModel:
        document = await self._collection.get(doc_id)
        if document is None:
            raise self._not_found()
        return await self.present(document)

    async def update(self, doc_id: str, payload: CamelModel) -> ReadModel:
        self._ensure_valid(payload, partial=not self.strict_updates)
        if await self._collection.get(doc_id) is None:
            raise self._not_found()
        await self.check_references(payload)
        data = self.prepare_update(payload.to_document())
        data.pop("id", None)
        if not await self._collection.update(doc_id, data):
            # Deleted after the existence check above.
            raise self._not_found()
        logger.info("Updated %s %s (%s)", self.entity_name.lower(), doc_id, ", ".join(sorted(data)))
        return await self.get(doc_id)

    async def delete(self, doc_id: str) -> str:
        if not await self._collection.delete(doc_id):
            raise self._not_found()
        logger.info("Deleted %s %s", self.entity_name.lower(), doc_id)
        return f"{self.entity_name} deleted successfully"
