"""
Schema bootstrap and configuration tests.
"""

from __future__ import annotations

import pytest
from sqlalchemy import inspect, text

from app.core.config import Settings
from app.core.database import create_engine, init_db
from app.main import create_app


@pytest.mark.asyncio
async def test_init_db_creates_tables(tmp_path):
    engine = create_engine(Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'a.db'}"))
    assert await init_db(engine) is True

    async with engine.connect() as conn:
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
    await engine.dispose()
    assert {"projects", "tasks", "files"} <= set(tables)


@pytest.mark.asyncio
async def test_init_db_is_idempotent(tmp_path):
    engine = create_engine(Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'b.db'}"))
    assert await init_db(engine) is True
    async with engine.begin() as conn:
        await conn.execute(text("INSERT INTO projects (name, description) VALUES ('kept', 'd')"))

    assert await init_db(engine) is True
    async with engine.connect() as conn:
        row = (await conn.execute(text("SELECT name, status FROM projects"))).one()
    await engine.dispose()
    assert tuple(row) == ("kept", "new")


@pytest.mark.asyncio
async def test_init_db_failure_is_logged_not_raised(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'no' / 'such' / 'dir.db'}"
    engine = create_engine(Settings(database_url=url))
    assert await init_db(engine) is False
    await engine.dispose()


@pytest.mark.asyncio
async def test_sqlite_foreign_keys_enforced(tmp_path):
    engine = create_engine(Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'c.db'}"))
    async with engine.connect() as conn:
        enabled = (await conn.execute(text("PRAGMA foreign_keys"))).scalar_one()
    await engine.dispose()
    assert enabled == 1


@pytest.mark.asyncio
async def test_lifespan_bootstraps_schema(tmp_path):
    app = create_app(
        Settings(
            database_url=f"sqlite+aiosqlite:///{tmp_path / 'd.db'}",
            file_root=str(tmp_path),
        )
    )
    async with app.router.lifespan_context(app):
        async with app.state.engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
    assert {"projects", "tasks", "files"} <= set(tables)


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in ("TRACKER_PORT", "TRACKER_UPLOAD_DIR", "TRACKER_DATABASE_URL"):
            monkeypatch.delenv(var, raising=False)
        s = Settings(_env_file=None)
        assert s.port == 5000
        assert s.upload_dir == "uploads"
        assert s.database_url.startswith("postgresql+asyncpg://")

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("TRACKER_PORT", "8080")
        monkeypatch.setenv("TRACKER_UPLOAD_DIR", "/srv/files")
        s = Settings(_env_file=None)
        assert s.port == 8080
        assert s.upload_dir == "/srv/files"
