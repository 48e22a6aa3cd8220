"""SQLAlchemy model for tracked tasks."""
from sqlalchemy import Column, DateTime, Enum, Integer, String

from taskhub.clock import utcnow
from taskhub.db.session import Base
from taskhub.schemas.task import TaskStatus

TASK_STATUSES = tuple(status.value for status in TaskStatus)


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(100), nullable=False)
    description = Column(String(500), nullable=True)
    status = Column(Enum(*TASK_STATUSES, name="task_status"), nullable=False, default=TaskStatus.PENDING.value)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<Task id={self.id} status={self.status}>"
