"""
Project endpoints: listing, creation and completion percentage.

Projects are never updated or deleted over HTTP; deleting one directly in the
store cascades to its tasks and files.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_repository
from app.services.repository import TrackerRepository
from tracker_shared.schemas.common import ErrorBody
from tracker_shared.schemas.projects import CompletionRead, ProjectCreate, ProjectRead

router = APIRouter()


@router.get("", response_model=List[ProjectRead])
async def list_projects(repo: TrackerRepository = Depends(get_repository)):
    """List all projects, newest first."""
    return await repo.list_projects()


@router.post(
    "",
    response_model=ProjectRead,
    status_code=201,
    responses={400: {"model": ErrorBody}},
)
async def create_project(
    project_in: ProjectCreate,
    repo: TrackerRepository = Depends(get_repository),
):
    """Create a project. ``status`` defaults to ``new`` when omitted."""
    return await repo.create_project(
        name=project_in.name,
        description=project_in.description,
        status=project_in.status,
    )


@router.get("/{project_id}/completion", response_model=CompletionRead)
async def project_completion(
    project_id: int,
    repo: TrackerRepository = Depends(get_repository),
):
    percentage = await repo.completion(project_id)
    return CompletionRead(percentage=percentage)
