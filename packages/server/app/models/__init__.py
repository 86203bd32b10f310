# SQLModel definitions, imported here to ensure metadata is populated before create_all.
from .base import CreatedAtMixin, IntIdMixin  # noqa: F401
from .project import Project  # noqa: F401
from .task import Task  # noqa: F401
from .file import FileAttachment  # noqa: F401
