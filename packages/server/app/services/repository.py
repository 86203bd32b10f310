"""
Query layer: one parameterized statement per tracker operation.

Handles:
- Project listing (newest first) and creation
- Task listing, creation and done-toggling
- Completion percentage from a single aggregate query
- File attachment metadata

The repository owns no connection of its own; it works on the session it is
constructed with. Store failures surface as ``StoreError`` subclasses carrying
the terse message the HTTP layer returns to clients.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

import structlog
from sqlalchemy import case, func, not_, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.core.errors import NotFoundError, ReferentialIntegrityError, StoreError
from app.models.file import FileAttachment
from app.models.project import Project
from app.models.task import Task
from tracker_shared.schemas.projects import completion_percentage

log = structlog.get_logger()


class TrackerRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    @asynccontextmanager
    async def _guard(self, message: str) -> AsyncIterator[None]:
        """Translate driver/ORM failures into the domain error taxonomy."""
        try:
            yield
        except IntegrityError as exc:
            await self.session.rollback()
            log.error("store.integrity_violation", error=str(exc.orig))
            raise ReferentialIntegrityError(message) from exc
        except (SQLAlchemyError, OverflowError) as exc:
            await self.session.rollback()
            log.error("store.query_failed", error=str(exc))
            raise StoreError(message) from exc

    # -----------------------------------------------------------------------
    # Projects
    # -----------------------------------------------------------------------

    async def list_projects(self) -> list[Project]:
        async with self._guard("Server Error"):
            result = await self.session.execute(
                select(Project).order_by(Project.created_at.desc(), Project.id.desc())
            )
            return list(result.scalars().all())

    async def create_project(
        self, name: str, description: str, status: Optional[str] = None
    ) -> Project:
        project = Project(name=name, description=description)
        if status:
            project.status = status

        async with self._guard("Server Error"):
            self.session.add(project)
            await self.session.commit()
            await self.session.refresh(project)

        log.info("project.created", project_id=project.id)
        return project

    # -----------------------------------------------------------------------
    # Tasks
    # -----------------------------------------------------------------------

    async def list_tasks(self, project_id: int) -> list[Task]:
        async with self._guard("Error fetching tasks"):
            result = await self.session.execute(
                select(Task).where(Task.project_id == project_id).order_by(Task.id)
            )
            return list(result.scalars().all())

    async def create_task(self, project_id: int, title: str) -> Task:
        # No existence check: the foreign key rejects unknown projects.
        task = Task(title=title, project_id=project_id, done=False)

        async with self._guard("Error adding task"):
            self.session.add(task)
            await self.session.commit()
            await self.session.refresh(task)

        log.info("task.created", task_id=task.id, project_id=project_id)
        return task

    async def toggle_task(self, task_id: int) -> Optional[Task]:
        """Flip ``done`` in place; returns None when no such task exists."""
        stmt = (
            update(Task)
            .where(Task.id == task_id)
            .values(done=not_(Task.done))
            .returning(Task)
            .execution_options(synchronize_session=False, populate_existing=True)
        )
        async with self._guard("Error toggling task"):
            result = await self.session.execute(stmt)
            task = result.scalars().first()
            await self.session.commit()

        if task is not None:
            log.info("task.toggled", task_id=task.id, done=task.done)
        return task

    async def completion(self, project_id: int) -> int:
        """Percentage of done tasks, from one aggregate over a single snapshot."""
        stmt = select(
            func.count(Task.id),
            func.coalesce(func.sum(case((Task.done, 1), else_=0)), 0),
        ).where(Task.project_id == project_id)

        async with self._guard("Error calculating completion"):
            result = await self.session.execute(stmt)
            total, done = result.one()

        return completion_percentage(int(total), int(done))

    # -----------------------------------------------------------------------
    # Files
    # -----------------------------------------------------------------------

    async def list_files(self, project_id: int) -> list[dict]:
        async with self._guard("Error fetching files"):
            result = await self.session.execute(
                select(FileAttachment.id, FileAttachment.filename)
                .where(FileAttachment.project_id == project_id)
                .order_by(FileAttachment.id)
            )
            return [{"id": row.id, "filename": row.filename} for row in result]

    async def get_file(self, file_id: int) -> FileAttachment:
        async with self._guard("Error viewing file"):
            attachment = await self.session.get(FileAttachment, file_id)
        if attachment is None:
            raise NotFoundError("File not found")
        return attachment

    async def create_file(self, project_id: int, filename: str, filepath: str) -> FileAttachment:
        attachment = FileAttachment(filename=filename, filepath=filepath, project_id=project_id)

        async with self._guard("Upload error"):
            self.session.add(attachment)
            await self.session.commit()
            await self.session.refresh(attachment)

        log.info("file.recorded", file_id=attachment.id, project_id=project_id)
        return attachment
