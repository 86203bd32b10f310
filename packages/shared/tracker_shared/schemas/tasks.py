"""Task-related Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TaskCreate(BaseModel):
    title: str = Field(min_length=1)


class TaskRead(BaseModel):
    id: int
    title: str
    done: bool
    project_id: int

    model_config = {"from_attributes": True}
