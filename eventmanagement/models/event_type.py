from enum import IntEnum


class ClosedEnum(IntEnum):
    """Integer coded enumeration that can validate raw values."""

    @classmethod
    def is_valid_value(cls, value) -> bool:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return any(value == member.value for member in cls)


class EventType(ClosedEnum):
    """Kind of event. The integer values are persisted."""

    DEFAULT = 0
    COURSE = 1
    EVENT = 2
    FAIR = 3
    CONGRESS = 4
    DEMO = 5
    CONFERENCE = 6
    SEMINAR = 7
    MEETING = 8
    TRADESHOW = 9
    LAUNCH = 10
    CELEBRATION = 11


class ProgressType(ClosedEnum):
    """How the progress of an event is interpreted."""

    MANUAL = 0
    LINEAR = 1
    EXPONENTIAL = 2
    LOG = 3
    TASKS = 4
