import unittest
from datetime import datetime, timedelta
from decimal import Decimal

from eventmanagement.models.account import Account, NullAccount
from eventmanagement.models.event import Event
from eventmanagement.models.event_type import EventType, ProgressType
from eventmanagement.models.media import Media
from eventmanagement.models.money import Money
from eventmanagement.models.task import Task


class TestEventDefaults(unittest.TestCase):

    def test_defaults(self):
        before = datetime.now()
        event = Event("Summer fair")
        after = datetime.now()

        self.assertEqual(event.id, 0)
        self.assertEqual(event.name, "Summer fair")
        self.assertEqual(event.description, "")
        self.assertEqual(event.type, EventType.DEFAULT)
        self.assertEqual(event.progress, 0)
        self.assertEqual(event.progress_type, ProgressType.MANUAL)
        self.assertTrue(before <= event.created_at <= after)
        self.assertTrue(before <= event.start <= after)
        self.assertGreater(event.end, event.start + timedelta(days=27))
        self.assertLess(event.end, event.start + timedelta(days=32))
        self.assertEqual(event.costs, Money())
        self.assertEqual(event.budget.value, Decimal("0"))
        self.assertEqual(event.calendar.id, 0)
        self.assertIsInstance(event.created_by, NullAccount)
        self.assertEqual(event.created_by.id, 0)
        self.assertEqual(event.count_tasks(), 0)
        self.assertEqual(event.get_media(), [])

    def test_created_at_is_read_only(self):
        event = Event()
        with self.assertRaises(AttributeError):
            event.created_at = datetime(2000, 1, 1)

    def test_end_before_start_is_accepted(self):
        event = Event()
        event.start = datetime(2005, 5, 5)
        event.end = datetime(2000, 5, 5)
        self.assertLess(event.end, event.start)

    def test_progress_is_not_range_checked(self):
        event = Event()
        event.progress = 150
        self.assertEqual(event.progress, 150)

    def test_created_by_accepts_account(self):
        event = Event()
        event.created_by = Account(id=3, name="admin")
        self.assertEqual(event.created_by.name, "admin")

    def test_str(self):
        event = Event("Launch party")
        event.id = 4
        event.type = EventType.LAUNCH
        event.start = datetime(2020, 1, 2)
        event.end = datetime(2020, 1, 3)
        self.assertEqual(str(event), "Event 4: Launch party (LAUNCH, 2020-01-02 - 2020-01-03)")


class TestEventTasks(unittest.TestCase):

    def setUp(self):
        self.event = Event()

    def test_upsert_by_id(self):
        self.event.add_task(Task(id=7, title="First"))
        self.event.add_task(Task(id=7, title="Second"))

        self.assertEqual(self.event.count_tasks(), 1)
        self.assertEqual(self.event.get_task(7).title, "Second")
        self.assertEqual(list(self.event.get_tasks().keys()), [7])

    def test_tasks_without_id_are_appended(self):
        first = Task(title="First")
        second = Task(title="Second")
        self.event.add_task(first)
        self.event.add_task(second)

        self.assertEqual(self.event.count_tasks(), 2)
        self.assertEqual(list(self.event.get_tasks().values()), [first, second])
        self.assertEqual(self.event.get_task(1).id, 0)

    def test_auto_keys_do_not_collide_with_ids(self):
        self.event.add_task(Task(title="Pending"))
        self.event.add_task(Task(id=1, title="Stored"))
        self.event.add_task(Task(title="Pending too"))

        self.assertEqual(self.event.count_tasks(), 3)
        self.assertEqual(self.event.get_task(1).title, "Stored")

    def test_missing_task_returns_default(self):
        task = self.event.get_task(999)
        self.assertEqual(task.id, 0)
        self.assertEqual(task.title, "")

    def test_remove_task(self):
        self.event.add_task(Task(id=3, title="Remove me"))
        self.event.add_task(Task(id=4, title="Keep me"))

        self.assertTrue(self.event.remove_task(3))
        self.assertEqual(self.event.count_tasks(), 1)
        self.assertEqual(self.event.get_task(3).id, 0)

    def test_remove_missing_task(self):
        self.event.add_task(Task(id=4))
        self.assertFalse(self.event.remove_task(3))
        self.assertEqual(self.event.count_tasks(), 1)

    def test_rekey_tasks(self):
        first = Task(title="First")
        second = Task(id=9, title="Second")
        self.event.add_task(first)
        self.event.add_task(second)

        first.id = 10
        self.event.rekey_tasks()

        self.assertEqual(self.event.count_tasks(), 2)
        self.assertIs(self.event.get_task(10), first)
        self.assertIs(self.event.get_task(9), second)
        self.assertEqual(list(self.event.get_tasks().keys()), [10, 9])

    def test_rekey_tasks_keeps_pending(self):
        self.event.add_task(Task(title="Still pending"))
        self.event.rekey_tasks()
        self.assertEqual(list(self.event.get_tasks().keys()), [-1])


class TestEventMedia(unittest.TestCase):

    def test_add_media_appends_duplicates(self):
        event = Event()
        media = Media(name="Poster")
        for _ in range(3):
            event.add_media(media)

        self.assertEqual(len(event.get_media()), 3)
        self.assertTrue(all(item is media for item in event.get_media()))

    def test_media_keeps_order(self):
        event = Event()
        event.add_media(Media(name="First"))
        event.add_media(Media(name="Second"))
        self.assertEqual([media.name for media in event.get_media()], ["First", "Second"])


class TestMoney(unittest.TestCase):

    def test_from_string(self):
        money = Money.from_string(" 1.23 ")
        self.assertEqual(money.value, Decimal("1.23"))
        self.assertEqual(money.get_amount(), "1.23")
        self.assertEqual(money.get_amount(4), "1.2300")
        self.assertEqual(str(money), "1.23")

    def test_equality_ignores_trailing_zeros(self):
        self.assertEqual(Money(Decimal("1.23")), Money(Decimal("1.2300")))


if __name__ == '__main__':
    unittest.main()
