"""Schema exports."""
from .task import TaskCreate, TaskRead, TaskStatus, TaskUpdate

__all__ = [
    "TaskCreate",
    "TaskRead",
    "TaskStatus",
    "TaskUpdate",
]
