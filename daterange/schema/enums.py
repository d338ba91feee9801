"""
Core enumeration types for date range generation.
"""

from enum import Enum, IntEnum


class Weekday(IntEnum):
    """ISO weekday numbers (same numbering as ``date.isoweekday()``)."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    def previous(self) -> "Weekday":
        """Weekday immediately before this one (Monday wraps to Sunday)."""
        return Weekday(7 if self == Weekday.MONDAY else self - 1)


class RangeKind(Enum):
    """Shapes of generated ranges."""

    DAYS = "DAYS"
    WEEK = "WEEK"
    MONTH_EXACT = "MONTH_EXACT"
    MONTH_EXTENDED = "MONTH_EXTENDED"


class TimeUnit(Enum):
    """Granularity of an offset magnitude."""

    DAYS = "days"
    WEEKS = "weeks"

    def days(self) -> int:
        return 7 if self is TimeUnit.WEEKS else 1
