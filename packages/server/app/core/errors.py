"""
Domain error taxonomy and its mapping to HTTP responses.

Handlers and services raise these; :func:`register_error_handlers` turns them
into responses at a single boundary. Client-facing messages are deliberately
terse plain text, except validation failures which carry ``{"error": ...}``.
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse, PlainTextResponse, Response

log = structlog.get_logger()


class TrackerError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code: int = 500
    default_message: str = "Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self) -> Response:
        return PlainTextResponse(self.message, status_code=self.status_code)


class ValidationError(TrackerError):
    """A required request field is missing or empty."""

    status_code = 400
    default_message = "Invalid request"

    def to_response(self) -> Response:
        return JSONResponse({"error": self.message}, status_code=self.status_code)


class UploadError(TrackerError):
    status_code = 400
    default_message = "No file uploaded"


class NotFoundError(TrackerError):
    status_code = 404
    default_message = "Not found"


class StoreError(TrackerError):
    """Any failure talking to the relational store."""

    status_code = 500


class ReferentialIntegrityError(StoreError):
    """Insert referenced a row that does not exist."""


class FileContentMissingError(StoreError):
    """Metadata row exists but the stored file is gone from disk."""


def _format_validation_errors(exc: RequestValidationError) -> str:
    fields = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "path", "query")]
        fields.append(".".join(loc) or "body")
    return f"Invalid or missing fields: {', '.join(sorted(set(fields)))}"


async def _handle_tracker_error(request: Request, exc: TrackerError) -> Response:
    level = log.error if exc.status_code >= 500 else log.warning
    level(
        "request.failed",
        error_type=type(exc).__name__,
        status=exc.status_code,
        message=exc.message,
        cause=repr(exc.__cause__) if exc.__cause__ else None,
    )
    return exc.to_response()


async def _handle_request_validation(request: Request, exc: RequestValidationError) -> Response:
    return await _handle_tracker_error(request, ValidationError(_format_validation_errors(exc)))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TrackerError, _handle_tracker_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
