from pydantic import BaseModel


DEFAULT_PROJECT_STATUS = "new"


class ErrorBody(BaseModel):
    """Body of a 400 validation response."""

    error: str
