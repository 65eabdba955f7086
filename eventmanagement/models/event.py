import logging
from datetime import datetime
from typing import Dict, List, Optional

from dateutil.relativedelta import relativedelta

from eventmanagement.exceptions import InvalidEnumValue
from eventmanagement.models.account import Account, NullAccount
from eventmanagement.models.calendar import Calendar
from eventmanagement.models.event_type import EventType, ProgressType
from eventmanagement.models.media import Media
from eventmanagement.models.money import Money
from eventmanagement.models.task import Task
from eventmanagement.services.progress import effective_progress

logger = logging.getLogger(__name__)


class Event:
    """A scheduled happening (course, fair, seminar, ...) with tasks, media and financials.

    Tasks that already have an id are stored under that id, so adding a task
    with a known id replaces the previous one. Tasks without an id (id 0) are
    stored under negative keys (-1, -2, ...) which can never clash with
    persisted ids.

    The `progress` value is stored as given. `effective_progress` computes the
    value implied by `progress_type` without touching `progress`.
    """

    def __init__(self, name: str = "", created_at: Optional[datetime] = None):
        now = datetime.now()

        self.id: int = 0
        self.name: str = name
        self.description: str = ""
        self.start: datetime = now
        self.end: datetime = now + relativedelta(months=1)
        self.calendar: Calendar = Calendar()
        self.costs: Money = Money()
        self.budget: Money = Money()
        self.earnings: Money = Money()
        self.progress: int = 0
        self.created_by: Account = NullAccount()

        self._type = EventType.DEFAULT
        self._progress_type = ProgressType.MANUAL
        self._created_at = created_at or now
        self._tasks: Dict[int, Task] = {}
        self._next_pending_key = -1
        self._media: List[Media] = []

    @property
    def type(self) -> EventType:
        return self._type

    @type.setter
    def type(self, value: int):
        if not EventType.is_valid_value(value):
            raise InvalidEnumValue(value, EventType.__name__)
        self._type = EventType(value)

    @property
    def progress_type(self) -> ProgressType:
        return self._progress_type

    @progress_type.setter
    def progress_type(self, value: int):
        if not ProgressType.is_valid_value(value):
            raise InvalidEnumValue(value, ProgressType.__name__)
        self._progress_type = ProgressType(value)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def add_task(self, task: Task):
        if task.id != 0:
            self._tasks[task.id] = task
        else:
            self._tasks[self._next_pending_key] = task
            self._next_pending_key -= 1

    def remove_task(self, task_id: int) -> bool:
        if task_id in self._tasks:
            del self._tasks[task_id]
            return True
        return False

    def get_task(self, task_id: int) -> Task:
        """Returns the task stored under `task_id`, or an empty `Task` (id 0) if there is none."""
        return self._tasks.get(task_id) or Task()

    def get_tasks(self) -> Dict[int, Task]:
        return self._tasks

    def count_tasks(self) -> int:
        return len(self._tasks)

    def rekey_tasks(self):
        """Moves tasks that were added without an id under the id they have now."""
        tasks = list(self._tasks.values())
        self._tasks = {}
        self._next_pending_key = -1
        for task in tasks:
            self.add_task(task)
        logger.debug(f"Re-keyed {len(tasks)} tasks for event {self.id}")

    def add_media(self, media: Media):
        self._media.append(media)

    def get_media(self) -> List[Media]:
        return self._media

    def effective_progress(self, now: Optional[datetime] = None) -> int:
        return effective_progress(self, now)

    def __str__(self) -> str:
        return (
            f"Event {self.id}: {self.name} ({self.type.name}, "
            f"{self.start:%Y-%m-%d} - {self.end:%Y-%m-%d})"
        )
