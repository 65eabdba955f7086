"""Derives the progress of an event from its progress type.

The stored `Event.progress` value is never modified here. Every function in
this module is pure: the result only depends on the arguments.
"""
import math
from datetime import datetime
from typing import Callable, Dict, Iterable, Optional

from eventmanagement.models.event_type import ProgressType
from eventmanagement.models.task import Task


def linear(elapsed: float) -> float:
    return elapsed


def exponential(elapsed: float) -> float:
    """Slow start, fast finish. Passes through (0, 0) and (1, 1)."""
    return (10 ** elapsed - 1) / 9


def logarithmic(elapsed: float) -> float:
    """Fast start, slow finish. Passes through (0, 0) and (1, 1)."""
    return math.log10(1 + 9 * elapsed)


CURVES: Dict[ProgressType, Callable[[float], float]] = {
    ProgressType.LINEAR: linear,
    ProgressType.EXPONENTIAL: exponential,
    ProgressType.LOG: logarithmic,
}


def elapsed_fraction(start: datetime, end: datetime, now: datetime) -> float:
    """Share of the time between start and end that has passed, in [0, 1].

    Returns 0 when the event has no positive duration.
    """
    duration = (end - start).total_seconds()
    if duration <= 0:
        return 0.0

    elapsed = (now - start).total_seconds() / duration
    return min(max(elapsed, 0.0), 1.0)


def task_progress(tasks: Iterable[Task]) -> int:
    tasks = list(tasks)
    if not tasks:
        return 0

    done = sum(1 for task in tasks if task.is_done)
    return round(100 * done / len(tasks))


def derive_progress(
    progress_type: ProgressType,
    start: datetime,
    end: datetime,
    now: datetime,
    tasks: Iterable[Task],
    stored: int,
) -> int:
    if progress_type == ProgressType.MANUAL:
        return stored

    if progress_type == ProgressType.TASKS:
        return task_progress(tasks)

    curve = CURVES[ProgressType(progress_type)]
    value = 100 * curve(elapsed_fraction(start, end, now))
    return round(min(max(value, 0.0), 100.0))


def effective_progress(event, now: Optional[datetime] = None) -> int:
    """Progress of `event` as implied by its progress type at `now`."""
    return derive_progress(
        event.progress_type,
        event.start,
        event.end,
        now or datetime.now(),
        event.get_tasks().values(),
        event.progress,
    )
