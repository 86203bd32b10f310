"""
Project Tracker API Server

Entry point for the FastAPI application.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from app.api import router as api_router
from app.core.config import Settings, get_settings
from app.core.database import check_connection, create_engine, create_session_factory, init_db
from app.core.errors import register_error_handlers
from app.core.logging import configure_logging
from app.core.middleware import RequestLoggingMiddleware
from app.services.file_store import FileStore

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    log.info("Project tracker starting", port=settings.port)
    await init_db(app.state.engine)
    yield
    log.info("Project tracker shutting down")
    await app.state.engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title="Project Tracker",
        description="Projects, tasks, file attachments and completion tracking.",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # The connection pool belongs to this app instance, not to the module.
    app.state.settings = settings
    app.state.engine = create_engine(settings)
    app.state.session_factory = create_session_factory(app.state.engine)
    app.state.file_store = FileStore.from_settings(settings)

    # Middleware: the last one added runs outermost
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(api_router)

    # Uploaded files are also reachable read-only by their stored name.
    app.mount(
        "/uploads",
        StaticFiles(directory=app.state.file_store.ensure_upload_dir()),
        name="uploads",
    )

    @app.get("/", response_class=PlainTextResponse, tags=["System"])
    async def root():
        """Liveness marker."""
        return "Backend is live and running!"

    @app.get("/health", tags=["System"])
    async def health_check():
        """Health check endpoint for liveness probes."""
        return {"status": "ok"}

    @app.get("/ready", tags=["System"])
    async def readiness_check(request: Request):
        """Readiness check: the store must answer a trivial query."""
        if await check_connection(request.app.state.engine):
            return {"status": "ready"}
        return JSONResponse({"status": "unavailable"}, status_code=503)

    return app


def run() -> None:
    """CLI entry point: serve the app with uvicorn on the configured port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
