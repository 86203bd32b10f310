"""
File attachment endpoints: multipart upload, listing and raw viewing.

The upload writes bytes to disk first and records metadata second. The two
steps are not atomic: if the insert fails the stored file stays behind.
"""

from __future__ import annotations

from typing import List

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import FileResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from app.api.deps import get_file_store, get_repository
from app.core.errors import StoreError, UploadError
from app.services.file_store import FileStore
from app.services.repository import TrackerRepository
from tracker_shared.schemas.files import FileSummary

router = APIRouter()
log = structlog.get_logger()


@router.post("/projects/{project_id}/upload", status_code=201, response_class=PlainTextResponse)
async def upload_file(
    project_id: int,
    request: Request,
    repo: TrackerRepository = Depends(get_repository),
    store: FileStore = Depends(get_file_store),
):
    """Attach the multipart ``file`` part to a project."""
    form = await request.form()
    file = form.get("file")
    # A plain text field named "file" or a part without a filename is not an upload.
    if not isinstance(file, UploadFile) or not file.filename:
        raise UploadError("No file uploaded")

    try:
        filepath = await run_in_threadpool(store.save, file.file, file.filename)
    except OSError as exc:
        raise StoreError("Upload error") from exc
    finally:
        await file.close()

    try:
        await repo.create_file(project_id, file.filename, filepath)
    except StoreError:
        log.warning("upload.orphaned_file", filepath=filepath, project_id=project_id)
        raise

    return PlainTextResponse("File uploaded", status_code=201)


@router.get("/projects/{project_id}/files", response_model=List[FileSummary])
async def list_files(
    project_id: int,
    repo: TrackerRepository = Depends(get_repository),
):
    return await repo.list_files(project_id)


@router.get("/files/{file_id}/view", response_class=FileResponse)
async def view_file(
    file_id: int,
    repo: TrackerRepository = Depends(get_repository),
    store: FileStore = Depends(get_file_store),
):
    """Stream the stored bytes inline under the original filename."""
    attachment = await repo.get_file(file_id)
    path = store.open_path(attachment.filepath)
    return FileResponse(
        path,
        filename=attachment.filename,
        content_disposition_type="inline",
    )
