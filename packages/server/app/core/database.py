"""
Database engine, session management and schema bootstrap.

The engine (and its connection pool) is owned by the application instance
and lives on ``app.state``; request handlers receive a fresh session per
request through :func:`get_session`.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator

import structlog
from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

from app.core.config import Settings

log = structlog.get_logger()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured database URL."""
    engine = create_async_engine(
        settings.database_url,
        echo=settings.debug,
        future=True,
    )
    # SQLite only enforces REFERENCES / ON DELETE CASCADE when asked to.
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def init_db(engine: AsyncEngine) -> bool:
    """Create projects, tasks and files tables if they do not exist yet.

    Failures are logged and swallowed so the server keeps serving; the
    return value tells the caller whether the schema is in place.
    """
    # Import for side effects: registers the tables on SQLModel.metadata.
    import app.models  # noqa: F401

    try:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
    except Exception as exc:
        log.error("schema.init_failed", error=str(exc))
        return False

    log.info("schema.ready", tables=sorted(SQLModel.metadata.tables))
    return True


async def check_connection(engine: AsyncEngine) -> bool:
    """Round-trip a trivial query to confirm the store is reachable."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as exc:
        log.warning("database.unreachable", error=str(exc))
        return False
    return True


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
