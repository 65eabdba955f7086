from datetime import datetime
from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from eventmanagement.models.account import NullAccount
from eventmanagement.models.orm.base import Base
from eventmanagement.models.task import Task, TaskStatus


class TaskORM(Base):
    """ORM for a task that belongs to an event."""

    __tablename__ = "event_task"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text)
    status: Mapped[int] = mapped_column(Integer)
    created_by: Mapped[int] = mapped_column(Integer)
    created_at: Mapped[datetime] = mapped_column(DateTime)
    event_id: Mapped[int] = mapped_column(
        ForeignKey("event.id", ondelete="CASCADE"), index=True, init=False
    )

    event: Mapped["EventORM"] = relationship(back_populates="tasks", default=None) # type: ignore

    @classmethod
    def from_task(cls, task: Task):
        """Builds a row for `task`, keeping its id when it already has one."""
        task_orm = cls(
            title=task.title,
            description=task.description,
            status=int(task.status),
            created_by=task.created_by.id,
            created_at=task.created_at,
        )
        if task.id != 0:
            task_orm.id = task.id
        return task_orm

    def update_from_task(self, task: Task):
        self.title = task.title
        self.description = task.description
        self.status = int(task.status)
        self.created_by = task.created_by.id

    def to_task(self) -> Task:
        return Task(
            id=self.id,
            title=self.title,
            description=self.description,
            status=TaskStatus(self.status),
            created_by=NullAccount(self.created_by),
            created_at=self.created_at,
        )
