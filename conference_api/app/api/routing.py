"""
Route class enforcing the per‑request timeout.

Entity routers are created with ``APIRouter(route_class=TimeoutRoute)``.
The endpoint (including every store call it awaits) runs under
``asyncio.wait_for``; when ``settings.request_timeout_seconds`` elapses
the pending work is cancelled and the client receives a 504.
"""

import asyncio
import logging
from typing import Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute

logger = logging.getLogger(__name__)


class TimeoutRoute(APIRoute):
    def get_route_handler(self) -> Callable:
        handler = super().get_route_handler()

        async def timed_handler(request: Request) -> Response:
            timeout = request.app.state.settings.request_timeout_seconds
            if timeout <= 0:
                return await handler(request)
            try:
                return await asyncio.wait_for(handler(request), timeout=timeout)
            except asyncio.TimeoutError:
                logger.error("%s %s timed out after %ss", request.method, request.url.path, timeout)
                return JSONResponse(
                    status_code=status.HTTP_504_GATEWAY_TIMEOUT,
                    content={"error": "Request timed out"},
                )

        return timed_handler
