"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
API starts with a local SQLite document store and console logging
when nothing is configured.  Tests construct their own ``Settings``
instance and pass it to ``create_app`` instead of relying on the
module‑level ``settings`` object.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Conference API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional log file; when empty only the console handler is attached.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path of the SQLite file backing the document store.  Relative paths
    # are resolved against the project root by ``core.db``; ``:memory:``
    # keeps everything in process memory.
    database_url: str = os.getenv("DATABASE_URL", "conference.db")

    # Common prefix for all entity routes (``/api/events`` etc.).
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # Requests running longer than this are aborted with a 504.  Set to
    # ``0`` to disable the timeout.
    request_timeout_seconds: float = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "30"))

    # Comma separated list of origins allowed to call the API from a
    # browser; "*" allows any origin.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3002"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class creation time, environment variables should
# be set before importing this module.
settings = Settings()
