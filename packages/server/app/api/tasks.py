"""
Task endpoints: per-project listing and creation, done toggling.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_repository
from app.core.errors import NotFoundError
from app.services.repository import TrackerRepository
from tracker_shared.schemas.common import ErrorBody
from tracker_shared.schemas.tasks import TaskCreate, TaskRead

router = APIRouter()


@router.get("/projects/{project_id}/tasks", response_model=List[TaskRead])
async def list_tasks(
    project_id: int,
    repo: TrackerRepository = Depends(get_repository),
):
    return await repo.list_tasks(project_id)


@router.post(
    "/projects/{project_id}/tasks",
    response_model=TaskRead,
    status_code=201,
    responses={400: {"model": ErrorBody}},
)
async def create_task(
    project_id: int,
    task_in: TaskCreate,
    repo: TrackerRepository = Depends(get_repository),
):
    """Add a task to a project. Unknown projects fail at the foreign key (500)."""
    return await repo.create_task(project_id, task_in.title)


@router.put("/tasks/{task_id}", response_model=TaskRead)
async def toggle_task(
    task_id: int,
    repo: TrackerRepository = Depends(get_repository),
):
    """Flip a task between done and not done."""
    task = await repo.toggle_task(task_id)
    if task is None:
        raise NotFoundError("Task not found")
    return task
