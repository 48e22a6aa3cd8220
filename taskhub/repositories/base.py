"""Storage port for tasks."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol


class TaskRepository(Protocol):
    """CRUD by primary key over the task table.

    Rows are returned as objects exposing the task columns as attributes.
    A miss is ``None``; mutations are committed before they return.
    """

    async def create(self, fields: dict[str, Any]) -> Any: ...

    async def list(self) -> Sequence[Any] | None: ...

    async def get(self, task_id: int) -> Any | None: ...

    async def update(self, task_id: int, fields: dict[str, Any]) -> Any | None: ...

    async def delete(self, task_id: int) -> Any | None: ...
