from .base import TaskRepository
from .tasks import SQLTaskRepository

__all__ = ["SQLTaskRepository", "TaskRepository"]
