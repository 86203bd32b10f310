"""Task model."""

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from .base import AUTOINCREMENT_TABLE_ARGS, IntIdMixin


class Task(IntIdMixin, SQLModel, table=True):
    __tablename__ = "tasks"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    title: str = Field(nullable=False)
    done: bool = Field(
        default=False,
        nullable=False,
        sa_column_kwargs={"server_default": sa.false()},
    )
    project_id: int = Field(foreign_key="projects.id", ondelete="CASCADE", nullable=False, index=True)
