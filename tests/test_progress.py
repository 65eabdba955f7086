import unittest
from datetime import datetime, timedelta

from eventmanagement.models.event import Event
from eventmanagement.models.event_type import ProgressType
from eventmanagement.models.task import Task, TaskStatus
from eventmanagement.services.progress import (
    derive_progress,
    effective_progress,
    elapsed_fraction,
    exponential,
    logarithmic,
)

START = datetime(2000, 5, 5)
END = datetime(2000, 5, 15)
MIDDLE = START + (END - START) / 2


def make_event(progress_type: ProgressType) -> Event:
    event = Event("Progress")
    event.start = START
    event.end = END
    event.progress_type = progress_type
    return event


class TestElapsedFraction(unittest.TestCase):

    def test_bounds(self):
        self.assertEqual(elapsed_fraction(START, END, START), 0.0)
        self.assertEqual(elapsed_fraction(START, END, END), 1.0)
        self.assertAlmostEqual(elapsed_fraction(START, END, MIDDLE), 0.5)

    def test_clamped(self):
        self.assertEqual(elapsed_fraction(START, END, START - timedelta(days=3)), 0.0)
        self.assertEqual(elapsed_fraction(START, END, END + timedelta(days=3)), 1.0)

    def test_no_duration(self):
        self.assertEqual(elapsed_fraction(START, START, END), 0.0)
        self.assertEqual(elapsed_fraction(END, START, END), 0.0)


class TestCurves(unittest.TestCase):

    def test_curves_pass_through_corners(self):
        for curve in (exponential, logarithmic):
            self.assertAlmostEqual(curve(0.0), 0.0)
            self.assertAlmostEqual(curve(1.0), 1.0)

    def test_curves_are_increasing(self):
        for curve in (exponential, logarithmic):
            values = [curve(step / 10) for step in range(11)]
            self.assertEqual(values, sorted(values))

    def test_curves_around_linear(self):
        self.assertLess(exponential(0.5), 0.5)
        self.assertGreater(logarithmic(0.5), 0.5)


class TestDeriveProgress(unittest.TestCase):

    def test_manual_returns_stored(self):
        event = make_event(ProgressType.MANUAL)
        event.progress = 42
        self.assertEqual(effective_progress(event, END), 42)
        self.assertEqual(event.effective_progress(START), 42)

    def test_linear(self):
        event = make_event(ProgressType.LINEAR)
        self.assertEqual(event.effective_progress(START), 0)
        self.assertEqual(event.effective_progress(MIDDLE), 50)
        self.assertEqual(event.effective_progress(END), 100)
        self.assertEqual(event.effective_progress(START - timedelta(days=1)), 0)
        self.assertEqual(event.effective_progress(END + timedelta(days=1)), 100)

    def test_linear_without_duration(self):
        event = make_event(ProgressType.LINEAR)
        event.end = START
        self.assertEqual(event.effective_progress(END), 0)

    def test_exponential_and_log(self):
        exp_event = make_event(ProgressType.EXPONENTIAL)
        log_event = make_event(ProgressType.LOG)

        for event in (exp_event, log_event):
            self.assertEqual(event.effective_progress(START), 0)
            self.assertEqual(event.effective_progress(END), 100)

        self.assertLess(exp_event.effective_progress(MIDDLE), 50)
        self.assertGreater(log_event.effective_progress(MIDDLE), 50)

    def test_tasks(self):
        event = make_event(ProgressType.TASKS)
        tasks = [Task(title=f"Task {i}") for i in range(4)]
        for task in tasks:
            event.add_task(task)

        self.assertEqual(event.effective_progress(), 0)

        tasks[0].status = TaskStatus.DONE
        self.assertEqual(event.effective_progress(), 25)

        for task in tasks:
            task.status = TaskStatus.DONE
        self.assertEqual(event.effective_progress(), 100)

    def test_tasks_without_tasks(self):
        event = make_event(ProgressType.TASKS)
        self.assertEqual(event.effective_progress(), 0)

    def test_canceled_tasks_are_not_done(self):
        event = make_event(ProgressType.TASKS)
        event.add_task(Task(status=TaskStatus.CANCELED))
        event.add_task(Task(status=TaskStatus.DONE))
        self.assertEqual(event.effective_progress(), 50)

    def test_stored_progress_is_not_changed(self):
        event = make_event(ProgressType.LINEAR)
        event.progress = 11
        event.effective_progress(END)
        self.assertEqual(event.progress, 11)

    def test_derive_progress_is_pure(self):
        tasks = [Task(status=TaskStatus.DONE), Task()]
        first = derive_progress(ProgressType.TASKS, START, END, MIDDLE, tasks, 0)
        second = derive_progress(ProgressType.TASKS, START, END, MIDDLE, tasks, 0)
        self.assertEqual(first, 50)
        self.assertEqual(first, second)


if __name__ == '__main__':
    unittest.main()
