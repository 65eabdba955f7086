from .base import Base
from .calendar import CalendarORM
from .event import EventORM
from .media import MediaORM
from .task import TaskORM

__all__ = ["Base", "CalendarORM", "EventORM", "MediaORM", "TaskORM"]
