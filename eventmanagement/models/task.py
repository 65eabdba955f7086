from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum

from eventmanagement.models.account import Account, NullAccount


class TaskStatus(IntEnum):
    OPEN = 1
    WORKING = 2
    SUSPENDED = 3
    CANCELED = 4
    DONE = 5


@dataclass
class Task:
    """A unit of work that belongs to an event.

    An `id` of 0 means the task has not been persisted yet.
    """

    id: int = 0
    title: str = ""
    description: str = ""
    status: TaskStatus = TaskStatus.OPEN
    created_by: Account = field(default_factory=NullAccount)
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def is_done(self) -> bool:
        return self.status == TaskStatus.DONE
