"""Task CRUD endpoints."""
from fastapi import APIRouter, Depends, status

from taskhub.api.deps import get_task_service
from taskhub.schemas.task import TaskCreate, TaskRead, TaskUpdate
from taskhub.services.tasks import TaskService

router = APIRouter()


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
async def create_task(task: TaskCreate, service: TaskService = Depends(get_task_service)) -> TaskRead:
    return await service.create(task)


@router.get("", response_model=list[TaskRead])
async def list_tasks(service: TaskService = Depends(get_task_service)) -> list[TaskRead]:
    return await service.list()


@router.get("/{task_id}", response_model=TaskRead)
async def get_task(task_id: int, service: TaskService = Depends(get_task_service)) -> TaskRead:
    return await service.get(task_id)


@router.put("/{task_id}", response_model=TaskRead)
async def update_task(
    task_id: int, changes: TaskUpdate, service: TaskService = Depends(get_task_service)
) -> TaskRead:
    return await service.update(task_id, changes)


@router.delete("/{task_id}", response_model=TaskRead)
async def delete_task(task_id: int, service: TaskService = Depends(get_task_service)) -> TaskRead:
    return await service.delete(task_id)
