"""
Error types shared by the store, the services and the HTTP layer.

Services raise these exceptions; ``main.create_app`` registers
handlers that turn them into JSON responses.  Each error carries the
HTTP status it maps to so the handlers stay generic.
"""

from typing import Iterable, List


class ConferenceError(Exception):
    """Base class for errors reported to API clients."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ConferenceError):
    """One or more payload fields are missing or invalid."""

    status_code = 400

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors: List[str] = list(errors)
        super().__init__("; ".join(self.errors))


class NotFoundError(ConferenceError):
    """The requested entity, or an entity it references, does not exist."""

    status_code = 404


class InvalidReferenceError(ConferenceError):
    """A payload references ids that could not be resolved."""

    status_code = 400


class StoreError(ConferenceError):
    """The document store failed to execute an operation."""

    status_code = 500
