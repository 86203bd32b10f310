"""File attachment schemas.

Listings expose only ``id`` and ``filename``; the on-disk ``filepath`` stays
server-side and is only used to stream content.
"""

from pydantic import BaseModel


class FileSummary(BaseModel):
    id: int
    filename: str

    model_config = {"from_attributes": True}
