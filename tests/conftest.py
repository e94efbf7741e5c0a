"""Pytest configuration and shared fixtures."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from conference_api.app.core.config import Settings
from conference_api.app.core.db import DocumentStore
from conference_api.app.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(database_url=str(tmp_path / "conference.db"), request_timeout_seconds=10)


@pytest.fixture
def store(settings: Settings):
    document_store = DocumentStore(settings.database_url)
    document_store.init()
    yield document_store
    document_store.close()


@pytest.fixture
def api_client(settings: Settings, store: DocumentStore):
    app = create_app(settings=settings, store=store)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def run():
    """Run a coroutine to completion on a fresh event loop."""
    return asyncio.run
