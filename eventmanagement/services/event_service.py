import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from eventmanagement.models.event import Event
from eventmanagement.models.orm import EventORM, TaskORM
from eventmanagement.models.task import Task
from eventmanagement.utils.logging.metrics import MetricsLogger

logger = logging.getLogger(__name__)


class EventService:
    """Loads and stores events.

    The caller owns the session and is responsible for committing it.
    """

    def __init__(self, metrics_logger: MetricsLogger):
        self.metrics_logger = metrics_logger

    def create(self, session: Session, event: Event) -> int:
        """Inserts `event` with its calendar, tasks and media and returns the new id.

        Tasks that already have an id keep it: an existing row with that id is
        updated and moved to this event, otherwise a row is inserted under that id.
        New ids are written back to the event, its calendar, media and the tasks
        that had none.
        """
        with self.metrics_logger.instrumenter("EventService.create") as instrumenter:
            tasks = list(event.get_tasks().values())
            task_orms = [self._task_row(session, task) for task in tasks]
            event_orm = EventORM.from_event(event, tasks=task_orms)
            session.add(event_orm)
            try:
                session.flush()
            except SQLAlchemyError:
                logger.exception(f"Failed to create event '{event.name}'")
                raise

            event.id = event_orm.id
            event.calendar.id = event_orm.calendar.id

            for task, task_orm in zip(tasks, task_orms):
                if task.id == 0:
                    task.id = task_orm.id
            event.rekey_tasks()

            for media, media_orm in zip(event.get_media(), event_orm.media):
                media.id = media_orm.id

            instrumenter.add_metric("tasks", event.count_tasks())
            logger.info(f"Created event {event.id} '{event.name}'")
            return event.id

    def _task_row(self, session: Session, task: Task) -> TaskORM:
        if task.id != 0:
            task_orm = session.get(TaskORM, task.id)
            if task_orm is not None:
                logger.debug(f"Linking existing task {task.id}")
                task_orm.update_from_task(task)
                return task_orm
        return TaskORM.from_task(task)

    def get(self, session: Session, event_id: int) -> Optional[Event]:
        with self.metrics_logger.instrumenter("EventService.get"):
            event_orm = session.get(EventORM, event_id)
            if event_orm is None:
                logger.warning(f"Event {event_id} not found")
                return None

            logger.info(f"Loaded event {event_id}")
            return event_orm.to_event()

    def get_newest(self, session: Session, count: int) -> List[Event]:
        """Returns up to `count` events, most recently created first."""
        if count <= 0:
            return []

        with self.metrics_logger.instrumenter("EventService.get_newest"):
            stmt = (
                select(EventORM)
                .order_by(EventORM.created_at.desc(), EventORM.id.desc())
                .limit(count)
            )
            events = [event_orm.to_event() for event_orm in session.execute(stmt).scalars()]
            logger.info(f"Loaded {len(events)} newest events")
            return events
