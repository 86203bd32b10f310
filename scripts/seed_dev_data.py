#!/usr/bin/env python3
"""Seed a development database with sample projects and tasks.

Usage:
    python scripts/seed_dev_data.py

Uses TRACKER_DATABASE_URL (or the default local PostgreSQL URL). Tables are
created first if they do not exist yet.
"""

import asyncio

from app.core.config import get_settings
from app.core.database import create_engine, create_session_factory, init_db
from app.services.repository import TrackerRepository

PROJECTS = [
    (
        "API Server",
        "Backend for the tracker",
        [
            ("Set up CI pipeline", True),
            ("Add health check endpoint", True),
            ("Design API schema", True),
            ("Add rate limiting", False),
        ],
    ),
    (
        "Documentation Site",
        "User and operator docs",
        [
            ("Write contribution guide", False),
            ("Document upload limits", True),
            ("Publish quickstart", False),
        ],
    ),
    ("Product Launch", "Go-to-market checklist", []),
]


async def seed():
    engine = create_engine(get_settings())
    if not await init_db(engine):
        await engine.dispose()
        raise SystemExit("Schema bootstrap failed; see log output.")

    session_factory = create_session_factory(engine)
    task_count = 0
    async with session_factory() as session:
        repo = TrackerRepository(session)
        for name, description, tasks in PROJECTS:
            project = await repo.create_project(name=name, description=description)
            for title, done in tasks:
                task = await repo.create_task(project.id, title)
                if done:
                    await repo.toggle_task(task.id)
                task_count += 1

    await engine.dispose()
    print(f"Seeded {len(PROJECTS)} projects with {task_count} tasks.")


if __name__ == "__main__":
    asyncio.run(seed())
