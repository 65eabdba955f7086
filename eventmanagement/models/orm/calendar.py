from datetime import datetime
from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from eventmanagement.models.calendar import Calendar
from eventmanagement.models.orm.base import Base


class CalendarORM(Base):
    """ORM for the calendar owned by an event."""

    __tablename__ = "calendar"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    name: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime)

    @classmethod
    def from_calendar(cls, calendar: Calendar):
        return cls(
            name=calendar.name,
            description=calendar.description,
            created_at=calendar.created_at,
        )

    def to_calendar(self) -> Calendar:
        return Calendar(
            id=self.id,
            name=self.name,
            description=self.description,
            created_at=self.created_at,
        )
