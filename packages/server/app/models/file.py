"""File attachment model (metadata for an uploaded file on disk)."""

from sqlmodel import Field, SQLModel

from .base import AUTOINCREMENT_TABLE_ARGS, IntIdMixin


class FileAttachment(IntIdMixin, SQLModel, table=True):
    __tablename__ = "files"
    __table_args__ = AUTOINCREMENT_TABLE_ARGS

    filename: str = Field(nullable=False)
    filepath: str = Field(nullable=False)
    project_id: int = Field(foreign_key="projects.id", ondelete="CASCADE", nullable=False, index=True)
