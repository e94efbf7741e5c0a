"""
Shared schema pieces.

Entities travel as camelCase JSON (``eventId``, ``speakerIds``) to
match the document field names, while Python code uses snake_case
attributes.  ``CamelModel`` wires that mapping through pydantic
aliases; responses are serialised by alias, and request bodies are
accepted under either name.

Timestamps use ``UtcDatetime``: values are converted to UTC on input
(naive values are taken to be UTC) and written as fixed‑width
``YYYY-MM-DDTHH:MM:SS.ffffffZ`` strings, so the store's string
ordering matches chronological order.
"""

from datetime import datetime, timezone
from typing import Annotated, List

from pydantic import AfterValidator, BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

UTC_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_utc(value: datetime) -> str:
    return to_utc(value).strftime(UTC_FORMAT)


UtcDatetime = Annotated[
    datetime,
    AfterValidator(to_utc),
    PlainSerializer(format_utc, return_type=str, when_used="json"),
]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> dict:
        """Fields explicitly provided by the client, keyed by their JSON names."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class ValidationErrorResponse(BaseModel):
    errors: List[str]
