"""Project model."""

from typing import Optional

from sqlmodel import Field, SQLModel

from tracker_shared.schemas.common import DEFAULT_PROJECT_STATUS

from .base import AUTOINCREMENT_TABLE_ARGS, CreatedAtMixin, IntIdMixin


class Project(IntIdMixin, CreatedAtMixin, SQLModel, table=True):
    __tablename__ = "projects"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    name: str = Field(nullable=False)
    description: Optional[str] = None
    status: str = Field(
        default=DEFAULT_PROJECT_STATUS,
        nullable=False,
        sa_column_kwargs={"server_default": DEFAULT_PROJECT_STATUS},
    )
