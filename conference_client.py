"""Conference API client.

A small wrapper around the Conference API's REST surface built on the
``requests`` library.  It is meant for scripts and integrations that
need to read or seed conference data without dealing with URLs and
status codes.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list for
listings) and ``error`` is a dictionary with ``status_code`` and
``message``.  ``message`` is taken from the API's ``error`` field, or
the joined ``errors`` list for validation failures.

Example::

    api = ConferenceAPI(base_url="http://localhost:3002/api")
    event, error = api.create("events", {"title": "PyCon"})
    page, error = api.list_agenda_items(eventId=event["id"], limit=20)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]

# Resource names accepted by the generic CRUD helpers, mapped to their paths.
RESOURCES = {
    "events": "/events",
    "speakers": "/speakers",
    "sponsors": "/sponsors",
    "attendees": "/attendees",
    "agendaItems": "/agendaItems",
}


class ConferenceAPI:
    """Client for interacting with the Conference API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL including the API prefix, e.g.
                ``http://localhost:3002/api``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request and decode the JSON response."""
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = _error_message(exc.response) if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _path(resource: str) -> str:
        try:
            return RESOURCES[resource]
        except KeyError:
            raise ValueError(f"Unknown resource: {resource}") from None

    # ------------------------------------------------------------------
    # Generic CRUD
    # ------------------------------------------------------------------
    def list(self, resource: str) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """List all documents of ``resource``.

        For ``agendaItems`` this returns the items of the first page
        only; use :meth:`list_agenda_items` for paging.
        """
        data, error = self._request("GET", self._path(resource))
        if error:
            return [], error
        if isinstance(data, dict):
            return data.get("items", []), None
        return data or [], None

    def get(self, resource: str, doc_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", f"{self._path(resource)}/{doc_id}")

    def create(self, resource: str, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("POST", self._path(resource), json_body=payload)

    def update(
        self, resource: str, doc_id: str, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("PUT", f"{self._path(resource)}/{doc_id}", json_body=payload)

    def delete(self, resource: str, doc_id: str) -> Tuple[bool, Optional[ApiError]]:
        data, error = self._request("DELETE", f"{self._path(resource)}/{doc_id}")
        if error:
            return False, error
        return True, None

    # ------------------------------------------------------------------
    # Agenda and attendee views
    # ------------------------------------------------------------------
    def list_agenda_items(self, **params: Any) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Fetch one page of agenda items.

        Keyword arguments are passed as query parameters: ``eventId``,
        ``page``, ``limit``, ``sortBy`` and ``sortOrder``.  Returns the
        ``{"items": [...], "pagination": {...}}`` object.
        """
        query = {key: value for key, value in params.items() if value is not None}
        return self._request("GET", RESOURCES["agendaItems"], params=query)

    def list_event_attendees(self, event_id: str) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        data, error = self._request("GET", f"{RESOURCES['attendees']}/event/{event_id}")
        if error:
            return [], error
        return data or [], None


def _error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        if body.get("error"):
            return str(body["error"])
        if body.get("errors"):
            return "; ".join(str(item) for item in body["errors"])
    return str(body)
