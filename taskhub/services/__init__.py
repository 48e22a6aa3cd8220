from .tasks import TaskService

__all__ = ["TaskService"]
