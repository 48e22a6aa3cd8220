"""FastAPI dependencies shared by the routers."""
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.db.session import get_session
from taskhub.realtime import EventPublisher
from taskhub.repositories import SQLTaskRepository, TaskRepository
from taskhub.services.tasks import TaskService


def get_publisher(request: Request) -> EventPublisher:
    return request.app.state.broadcaster


def get_task_repository(session: AsyncSession = Depends(get_session)) -> TaskRepository:
    return SQLTaskRepository(session)


def get_task_service(
    repository: TaskRepository = Depends(get_task_repository),
    publisher: EventPublisher = Depends(get_publisher),
) -> TaskService:
    return TaskService(repository, publisher)
