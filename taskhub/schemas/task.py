"""Pydantic schemas for task requests and responses."""
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class TaskCreate(BaseModel):
    """Body of ``POST /tasks``.

    Keys other than ``title`` and ``description`` (``status`` included) are
    dropped; new tasks always start as pending.
    """

    title: str = Field(min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)


class TaskUpdate(BaseModel):
    """Body of ``PUT /tasks/{id}``. Only the keys present in the body are applied."""

    title: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    status: TaskStatus | None = None

    @field_validator("title", "status")
    @classmethod
    def reject_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("may be omitted but not set to null")
        return value

    def changes(self) -> dict:
        fields = self.model_dump(exclude_unset=True)
        if "status" in fields:
            fields["status"] = TaskStatus(fields["status"]).value
        return fields


class TaskRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None
    status: TaskStatus
    created_at: datetime
    updated_at: datetime
