"""Shared FastAPI dependencies."""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_session
from app.services.file_store import FileStore
from app.services.repository import TrackerRepository


def get_repository(session: AsyncSession = Depends(get_session)) -> TrackerRepository:
    return TrackerRepository(session)


def get_file_store(request: Request) -> FileStore:
    return request.app.state.file_store
