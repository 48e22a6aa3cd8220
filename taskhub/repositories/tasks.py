"""SQLAlchemy implementation of the task repository."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.clock import utcnow
from taskhub.models.task import Task


class SQLTaskRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, fields: dict[str, Any]) -> Task:
        now = utcnow()
        db_task = Task(**fields, created_at=now, updated_at=now)
        self.session.add(db_task)
        await self.session.commit()
        await self.session.refresh(db_task)
        return db_task

    async def list(self) -> Sequence[Task]:
        result = await self.session.execute(select(Task).order_by(Task.id))
        return result.scalars().all()

    async def get(self, task_id: int) -> Task | None:
        return await self.session.get(Task, task_id)

    async def update(self, task_id: int, fields: dict[str, Any]) -> Task | None:
        db_task = await self.session.get(Task, task_id)
        if db_task is None:
            return None
        for name, value in fields.items():
            setattr(db_task, name, value)
        db_task.updated_at = utcnow()
        await self.session.commit()
        await self.session.refresh(db_task)
        return db_task

    async def delete(self, task_id: int) -> Task | None:
        db_task = await self.session.get(Task, task_id)
        if db_task is None:
            return None
        await self.session.delete(db_task)
        await self.session.commit()
        return db_task
