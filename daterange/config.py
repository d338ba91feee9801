"""
Module-level defaults used when a generator call leaves an option unset.
"""

from datetime import datetime
from typing import Callable

from daterange.schema.enums import Weekday
from daterange.utils.validation import validate_ref_weekday

Clock = Callable[[], datetime]

DEFAULT_START_OFFSET = 0
DEFAULT_END_OFFSET = 0
DEFAULT_DAYS_COUNT = 1

_DEFAULT_CLOCK: Clock = datetime.now
_DEFAULT_WEEKDAY = Weekday.MONDAY


def get_default_clock() -> Clock:
    """Return the callable that supplies the reference date when none is given."""
    return _DEFAULT_CLOCK


def set_default_clock(clock: Clock) -> None:
    """Set the clock used for the default reference date."""
    global _DEFAULT_CLOCK
    if not callable(clock):
        raise TypeError(f"clock must be callable, got {clock!r}")
    _DEFAULT_CLOCK = clock


def get_default_weekday() -> Weekday:
    """Return the default alignment weekday."""
    return _DEFAULT_WEEKDAY


def set_default_weekday(weekday: int) -> None:
    """Set the default alignment weekday for week and extended month ranges."""
    global _DEFAULT_WEEKDAY
    validate_ref_weekday(weekday)
    _DEFAULT_WEEKDAY = Weekday(int(weekday))


def reset_defaults() -> None:
    """Restore the clock and weekday defaults."""
    global _DEFAULT_CLOCK, _DEFAULT_WEEKDAY
    _DEFAULT_CLOCK = datetime.now
    _DEFAULT_WEEKDAY = Weekday.MONDAY
