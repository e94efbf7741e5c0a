"""
Main entrypoint for the Conference API.

This module assembles the FastAPI application: it configures logging,
creates the process‑wide document store, registers the error handlers
and includes the entity routers.  ``create_app`` builds and configures
the app, which is then instantiated at module import time as ``app``
so it can be served directly, e.g.::

    uvicorn conference_api.app.main:app --reload

Error responses use two shapes: ``{"error": "..."}`` for a single
problem and ``{"errors": [...]}`` for payload and query validation
failures.

CORS is enabled for the origins listed in ``settings.cors_origins``
(any origin by default) so browser front ends can call the API.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import DocumentStore, get_database_path
from .core.exceptions import ConferenceError, StoreError, ValidationError
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)

_VERBS = {"GET": "fetch", "POST": "create", "PUT": "update", "DELETE": "delete"}


def _failure_message(request: Request) -> str:
    """Describe a failed operation, e.g. ``Failed to fetch agenda items``."""
    route = request.scope.get("route")
    tags = getattr(route, "tags", None)
    verb = _VERBS.get(request.method)
    if tags and verb:
        return f"Failed to {verb} {tags[0]}"
    return "Failed to process request"


def _format_request_errors(exc: RequestValidationError) -> List[str]:
    messages = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(location)
        messages.append(f"{field}: {error.get('msg')}" if field else str(error.get("msg")))
    return messages


def register_exception_handlers(app: FastAPI, app_settings: Settings) -> None:
    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"errors": exc.errors})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": _format_request_errors(exc)},
        )

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError) -> JSONResponse:
        message = _failure_message(request)
        logger.error("%s: %s %s", message, request.method, request.url.path, exc_info=exc)
        content = {"error": message}
        if app_settings.debug:
            content["details"] = exc.message
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(ConferenceError)
    async def handle_conference_error(request: Request, exc: ConferenceError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def create_app(settings: Optional[Settings] = None, store: Optional[DocumentStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the environment‑derived defaults.
    store : Optional[DocumentStore]
        An existing document store.  When omitted a store is created
        for ``settings.database_url``.  The store is opened on startup
        (a no‑op if it is already open) and closed on shutdown.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = settings or default_settings
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    document_store = store or DocumentStore(get_database_path(app_settings.database_url))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        document_store.init()
        try:
            yield
        finally:
            document_store.close()

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.store = document_store

    register_exception_handlers(app, app_settings)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method, request.url.path, response.status_code, elapsed_ms,
        )
        return response

    # Outermost middleware; answers preflight requests itself.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin.strip() for origin in app_settings.cors_origins.split(",") if origin.strip()],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root() -> str:
        return "Backend server is running!"

    @app.get("/health")
    async def health(request: Request) -> dict:
        await request.app.state.store.ping()
        return {"ok": True}

    app.include_router(v1_router, prefix=app_settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it via ``conference_api.app.main:app``.
app = create_app()
