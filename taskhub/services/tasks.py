"""Task CRUD with real-time change notifications."""
from __future__ import annotations

from typing import Any

import structlog

from taskhub.errors import TaskNotFoundError
from taskhub.realtime import TASK_CREATED, TASK_DELETED, TASK_UPDATED, EventPublisher
from taskhub.repositories.base import TaskRepository
from taskhub.schemas.task import TaskCreate, TaskRead, TaskStatus, TaskUpdate

logger = structlog.get_logger(__name__)


class TaskService:
    """Runs each task operation against the repository and announces the result.

    Mutations follow the same sequence: read the row to confirm it exists,
    perform the committed write, then publish the resulting row. A missing
    row raises :class:`TaskNotFoundError` before any write is attempted.
    Publishing happens strictly after the write and cannot fail the
    operation.
    """

    def __init__(self, repository: TaskRepository, publisher: EventPublisher) -> None:
        self.repository = repository
        self.publisher = publisher

    async def create(self, data: TaskCreate) -> TaskRead:
        fields = data.model_dump()
        fields["status"] = TaskStatus.PENDING.value
        task = TaskRead.model_validate(await self.repository.create(fields))
        logger.info("task.created", task_id=task.id)
        await self._publish(TASK_CREATED, task)
        return task

    async def list(self) -> list[TaskRead]:
        rows = await self.repository.list()
        return [TaskRead.model_validate(row) for row in rows or []]

    async def get(self, task_id: int) -> TaskRead:
        row = await self.repository.get(task_id)
        if row is None:
            raise TaskNotFoundError(task_id)
        return TaskRead.model_validate(row)

    async def update(self, task_id: int, data: TaskUpdate) -> TaskRead:
        await self.get(task_id)
        row = await self.repository.update(task_id, data.changes())
        if row is None:
            raise TaskNotFoundError(task_id)
        task = TaskRead.model_validate(row)
        logger.info("task.updated", task_id=task.id, status=task.status.value)
        await self._publish(TASK_UPDATED, task)
        return task

    async def delete(self, task_id: int) -> TaskRead:
        await self.get(task_id)
        row = await self.repository.delete(task_id)
        if row is None:
            raise TaskNotFoundError(task_id)
        task = TaskRead.model_validate(row)
        logger.info("task.deleted", task_id=task.id)
        await self._publish(TASK_DELETED, task)
        return task

    async def _publish(self, event: str, task: TaskRead) -> None:
        payload: dict[str, Any] = task.model_dump(mode="json")
        try:
            await self.publisher.publish(event, payload)
        except Exception:
            logger.exception("task.publish_failed", event_name=event, task_id=task.id)
