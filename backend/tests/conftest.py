"""
Notes Backend - Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the test suite.
How:   Every test that touches storage gets its own SQLite database file
       (aiosqlite driver) under pytest's tmp_path, with the notes table
       already created.

Fixture Hierarchy:
    test_settings   Settings pointing at a per-test SQLite file
    engine          AsyncEngine with the schema created, disposed afterwards
    note_service    NoteService bound to `engine`
    test_app        create_app(test_settings) with the schema created
    test_client     HTTPX AsyncClient talking to `test_app` over ASGI
"""

import os

# Point the default settings at SQLite BEFORE any notesapi import:
# notesapi.main builds a module-level app from them.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from notesapi.config import Settings
from notesapi.database import build_engine, create_schema, dispose_engine
from notesapi.main import create_app
from notesapi.services.note_service import NoteService


@pytest.fixture
def test_settings(tmp_path):
    """Settings for one test, backed by a fresh SQLite file."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'notes.db'}",
        log_level="WARNING",
        notes_prefix="/notes",
    )


@pytest_asyncio.fixture
async def engine(test_settings):
    engine = build_engine(test_settings)
    await create_schema(engine)
    yield engine
    await dispose_engine(engine)


@pytest.fixture
def note_service(engine):
    return NoteService(engine)


@pytest_asyncio.fixture
async def test_app(test_settings):
    """
    Application under test.

    ASGITransport does not run the lifespan, so the schema is created here.
    """
    app = create_app(test_settings)
    await create_schema(app.state.engine)
    yield app
    await dispose_engine(app.state.engine)


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    Usage:
        async def test_list(test_client):
            response = await test_client.get("/notes/")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def sample_note():
    """A valid note body."""
    return {
        "title": "Groceries",
        "text": "Milk, eggs, bread",
        "datetime": "2023-01-01T00:00:00Z",
    }
