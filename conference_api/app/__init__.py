"""
Application package for the Conference API.

The code is organised in layers: ``api`` holds the FastAPI routers,
``services`` the per‑entity business logic and validators,
``schemas`` the pydantic payload models and ``core`` the settings,
logging, error types and the document store client.
"""

from .main import app  # noqa: F401
