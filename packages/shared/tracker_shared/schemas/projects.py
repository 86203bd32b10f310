from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .common import DEFAULT_PROJECT_STATUS


class ProjectCreate(BaseModel):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    status: Optional[str] = None

    @field_validator("status")
    @classmethod
    def _blank_status_is_default(cls, value: Optional[str]) -> Optional[str]:
        return value or None


class ProjectRead(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    status: str = DEFAULT_PROJECT_STATUS
    created_at: datetime

    model_config = {"from_attributes": True}


class CompletionRead(BaseModel):
    percentage: int = Field(ge=0, le=100)


def completion_percentage(total: int, done: int) -> int:
    """Share of done tasks as a whole percentage.

    Rules:
    - A project without tasks is 0% complete.
    - Otherwise 100 * done / total, rounded half-up.

    Integer arithmetic keeps x.5 boundaries exact (1 of 8 done is 13, not 12).
    """
    if total <= 0:
        return 0
    done = max(0, min(done, total))
    return (200 * done + total) // (2 * total)
