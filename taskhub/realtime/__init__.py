from .broadcaster import EventPublisher, TaskBroadcaster

TASK_CREATED = "taskCreated"
TASK_UPDATED = "taskUpdated"
TASK_DELETED = "taskDeleted"

__all__ = [
    "EventPublisher",
    "TaskBroadcaster",
    "TASK_CREATED",
    "TASK_UPDATED",
    "TASK_DELETED",
]
