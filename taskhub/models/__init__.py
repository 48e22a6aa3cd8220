"""Import models for Alembic autogeneration."""
from .task import TASK_STATUSES, Task

__all__ = ["Task", "TASK_STATUSES"]
