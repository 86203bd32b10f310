"""
Filesystem storage for uploaded project files.

Stored names are ``<epoch-ms>-<original basename>`` under the upload
directory. The returned path is relative to the file root so it can be kept
in the ``files`` table and resolved again when the file is viewed.
"""

from __future__ import annotations

import shutil
import time
from pathlib import Path
from typing import BinaryIO

import structlog

from app.core.config import Settings
from app.core.errors import FileContentMissingError, UploadError

log = structlog.get_logger()


class FileStore:
    def __init__(self, upload_dir: str | Path, file_root: str | Path = "."):
        self.file_root = Path(file_root).resolve()
        self.upload_dir = Path(upload_dir)

    @classmethod
    def from_settings(cls, settings: Settings) -> "FileStore":
        return cls(settings.upload_dir, settings.file_root)

    @property
    def upload_path(self) -> Path:
        return self.resolve(self.upload_dir)

    def ensure_upload_dir(self) -> Path:
        path = self.upload_path
        path.mkdir(parents=True, exist_ok=True)
        return path

    def save(self, stream: BinaryIO, original_name: str) -> str:
        """Copy ``stream`` to a new, never-before-used file; return its stored path."""
        basename = Path(original_name).name
        if not basename:
            raise UploadError("No file uploaded")

        target_dir = self.ensure_upload_dir()
        stamp = time.time_ns() // 1_000_000
        while True:
            stored_name = f"{stamp}-{basename}"
            try:
                # "xb" fails instead of overwriting when two uploads share a millisecond.
                with open(target_dir / stored_name, "xb") as out:
                    shutil.copyfileobj(stream, out)
                break
            except FileExistsError:
                stamp += 1

        stored = (self.upload_dir / stored_name).as_posix()
        log.info("upload.stored", filename=basename, filepath=stored)
        return stored

    def resolve(self, filepath: str | Path) -> Path:
        path = Path(filepath)
        if not path.is_absolute():
            path = self.file_root / path
        return path

    def open_path(self, filepath: str) -> Path:
        """Absolute path of stored content, which must still be on disk."""
        path = self.resolve(filepath)
        if not path.is_file():
            log.error("file.content_missing", filepath=filepath)
            raise FileContentMissingError("Error viewing file")
        return path
