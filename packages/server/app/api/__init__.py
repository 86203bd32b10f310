"""
HTTP routers

Paths are mounted at the application root (no version prefix).
"""

from fastapi import APIRouter

from . import files, projects, tasks

router = APIRouter()

router.include_router(projects.router, prefix="/projects", tags=["Projects"])
router.include_router(tasks.router, tags=["Tasks"])
router.include_router(files.router, tags=["Files"])
