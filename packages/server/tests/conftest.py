"""
Shared fixtures: a fresh app per test on a temporary-file SQLite database.
"""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.config import Settings
from app.core.database import init_db
from app.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'tracker.db'}",
        upload_dir="uploads",
        file_root=str(tmp_path),
        log_format="text",
    )


@pytest.fixture
async def app(settings):
    application = create_app(settings)
    # ASGITransport does not run lifespan events, so bootstrap the schema here.
    await init_db(application.state.engine)
    yield application
    await application.state.engine.dispose()


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def session(app):
    async with app.state.session_factory() as s:
        yield s


@pytest.fixture
async def project(client: AsyncClient) -> dict:
    response = await client.post(
        "/projects", json={"name": "Apollo", "description": "Moon landing"}
    )
    assert response.status_code == 201
    return response.json()
