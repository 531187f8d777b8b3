"""
Notes Backend - Application Shell Tests
=======================================

What:  Health check, request ID middleware, settings validation and
       create_app() wiring.
"""

import pytest
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncEngine

from notesapi import __version__
from notesapi.config import Settings
from notesapi.main import create_app
from notesapi.services.note_service import NoteService


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_connected(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["version"] == __version__
        assert body["uptime_seconds"] >= 0

    @pytest.mark.asyncio
    async def test_health_unreachable_database(self, tmp_path):
        from httpx import ASGITransport, AsyncClient

        settings = Settings(
            database_url=f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'notes.db'}",
            log_level="WARNING",
        )
        app = create_app(settings)
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/health")
        await app.state.engine.dispose()

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"
        assert response.json()["database"] == "disconnected"


class TestRequestID:

    @pytest.mark.asyncio
    async def test_generated_when_absent(self, test_client):
        response = await test_client.get("/notes/")

        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_client_value_echoed(self, test_client):
        response = await test_client.get("/notes/", headers={"X-Request-ID": "trace-42"})

        assert response.headers["X-Request-ID"] == "trace-42"


class TestSettings:

    def test_log_level_upper_cased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="verbose")

    def test_notes_prefix_trailing_slash_stripped(self):
        assert Settings(notes_prefix="/api/notes/").notes_prefix == "/api/notes"

    @pytest.mark.parametrize("prefix", ["/", "", "notes"])
    def test_invalid_notes_prefix_rejected(self, prefix):
        with pytest.raises(ValidationError):
            Settings(notes_prefix=prefix)

    def test_cors_origins_list(self):
        s = Settings(cors_origins="http://a.test, http://b.test,")
        assert s.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_access_log_skip_paths_list(self):
        assert Settings().access_log_skip_paths_list == ["/health"]
        s = Settings(access_log_skip_paths=" /health, /docs ,")
        assert s.access_log_skip_paths_list == ["/health", "/docs"]

    def test_sqlite_detection(self):
        assert Settings(database_url="sqlite+aiosqlite:///./x.db").is_sqlite
        assert not Settings(database_url="postgresql+asyncpg://u:p@h/db").is_sqlite


class TestCreateApp:

    @pytest.mark.asyncio
    async def test_state_wired(self, test_app):
        assert isinstance(test_app.state.engine, AsyncEngine)
        assert isinstance(test_app.state.note_service, NoteService)

    @pytest.mark.asyncio
    async def test_custom_prefix(self, tmp_path):
        from httpx import ASGITransport, AsyncClient

        from notesapi.database import create_schema

        settings = Settings(
            database_url=f"sqlite+aiosqlite:///{tmp_path / 'notes.db'}",
            notes_prefix="/api/notes",
            log_level="WARNING",
        )
        app = create_app(settings)
        await create_schema(app.state.engine)
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/notes/")
        await app.state.engine.dispose()

        assert response.status_code == 200
        assert response.json() == []
