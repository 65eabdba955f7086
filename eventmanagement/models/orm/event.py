from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from eventmanagement.models.account import NullAccount
from eventmanagement.models.event import Event
from eventmanagement.models.money import Money
from eventmanagement.models.orm.base import Base
from eventmanagement.models.orm.calendar import CalendarORM
from eventmanagement.models.orm.media import MediaORM
from eventmanagement.models.orm.task import TaskORM

# Money values are stored as their exact decimal text
MONEY = String(64)


class EventORM(Base):
    """ORM for an event. Enums are stored as their integer values."""

    __tablename__ = "event"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    type: Mapped[int] = mapped_column(Integer)
    name: Mapped[str] = mapped_column(String(255), index=True)
    description: Mapped[str] = mapped_column(Text)
    start: Mapped[datetime] = mapped_column(DateTime)
    end: Mapped[datetime] = mapped_column(DateTime)
    costs: Mapped[str] = mapped_column(MONEY)
    budget: Mapped[str] = mapped_column(MONEY)
    earnings: Mapped[str] = mapped_column(MONEY)
    progress: Mapped[int] = mapped_column(Integer)
    progress_type: Mapped[int] = mapped_column(Integer)
    created_at: Mapped[datetime] = mapped_column(DateTime, index=True)
    created_by: Mapped[int] = mapped_column(Integer)
    calendar_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("calendar.id"), init=False, nullable=True
    )

    calendar: Mapped[Optional[CalendarORM]] = relationship(default=None)
    tasks: Mapped[List[TaskORM]] = relationship(
        back_populates="event",
        cascade="all, delete-orphan",
        order_by=TaskORM.id,
        default_factory=list,
    )
    media: Mapped[List[MediaORM]] = relationship(
        back_populates="event",
        cascade="all, delete-orphan",
        order_by=MediaORM.id,
        default_factory=list,
    )

    @classmethod
    def from_event(cls, event: Event, tasks: Optional[List[TaskORM]] = None):
        """Builds the row for `event`. `tasks` replaces the task rows built from the event."""
        if tasks is None:
            tasks = [TaskORM.from_task(task) for task in event.get_tasks().values()]

        return cls(
            type=int(event.type),
            name=event.name,
            description=event.description,
            start=event.start,
            end=event.end,
            costs=str(event.costs.value),
            budget=str(event.budget.value),
            earnings=str(event.earnings.value),
            progress=event.progress,
            progress_type=int(event.progress_type),
            created_at=event.created_at,
            created_by=event.created_by.id,
            calendar=CalendarORM.from_calendar(event.calendar),
            tasks=tasks,
            media=[MediaORM.from_media(media) for media in event.get_media()],
        )

    def to_event(self) -> Event:
        event = Event(self.name, created_at=self.created_at)
        event.id = self.id
        event.type = self.type
        event.description = self.description
        event.start = self.start
        event.end = self.end
        event.costs = Money(Decimal(self.costs))
        event.budget = Money(Decimal(self.budget))
        event.earnings = Money(Decimal(self.earnings))
        event.progress = self.progress
        event.progress_type = self.progress_type
        event.created_by = NullAccount(self.created_by)

        if self.calendar is not None:
            event.calendar = self.calendar.to_calendar()

        for task in self.tasks:
            event.add_task(task.to_task())

        for media in self.media:
            event.add_media(media.to_media())

        return event
