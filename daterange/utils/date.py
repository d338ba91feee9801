"""Calendar-day helpers.

A calendar day is a ``datetime`` at local midnight. Whatever ``tzinfo`` the
source value carried is kept, and all arithmetic is wall-clock arithmetic, so
a day stays at midnight across DST transitions.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, time
from typing import Union

import numpy as np
import pandas as pd
from dateutil.relativedelta import relativedelta

DateLike = Union[date, datetime, pd.Timestamp, np.datetime64]


def start_of_day(dt: datetime) -> datetime:
    """Return ``dt`` truncated to midnight."""
    return dt.replace(hour=0, minute=0, second=0, microsecond=0, fold=0)


def to_calendar_day(date_like: DateLike) -> datetime:
    """
    Convert a date-like value to a calendar day (midnight ``datetime``).
    Accepts ``date``, ``datetime``, ``pandas.Timestamp`` and ``numpy.datetime64``.
    """
    if date_like is pd.NaT:
        raise ValueError("NaT does not represent a calendar day")
    if isinstance(date_like, pd.Timestamp):
        return start_of_day(date_like.to_pydatetime(warn=False))
    if isinstance(date_like, datetime):
        return start_of_day(date_like)
    if isinstance(date_like, date):
        return datetime.combine(date_like, time.min)
    if isinstance(date_like, np.datetime64):
        if np.isnat(date_like):
            raise ValueError("NaT does not represent a calendar day")
        return start_of_day(pd.Timestamp(date_like).to_pydatetime(warn=False))
    raise TypeError(f"Unsupported type for calendar day: {type(date_like)}")


def to_reference_instant(date_like: DateLike) -> datetime:
    """Like ``to_calendar_day`` but keeps the time of day."""
    if date_like is pd.NaT:
        raise ValueError("NaT does not represent a calendar day")
    if isinstance(date_like, pd.Timestamp):
        return date_like.to_pydatetime(warn=False)
    if isinstance(date_like, datetime):
        return date_like
    if isinstance(date_like, np.datetime64) and not np.isnat(date_like):
        return pd.Timestamp(date_like).to_pydatetime(warn=False)
    return to_calendar_day(date_like)


def add_days(day: datetime, days: int) -> datetime:
    """Shift a calendar day by a signed number of days.

    Raises ``OverflowError`` if the result falls outside ``date.min``..``date.max``.
    """
    return day + relativedelta(days=days)


def start_of_month(dt: datetime) -> datetime:
    """First calendar day of the month containing ``dt``."""
    return start_of_day(dt).replace(day=1)


def end_of_month(dt: datetime) -> datetime:
    """Last calendar day of the month containing ``dt``."""
    return start_of_month(dt).replace(day=days_in_month(dt))


def add_months(dt: datetime, months: int) -> datetime:
    """First calendar day of the month ``months`` away from ``dt``'s month."""
    try:
        return start_of_month(dt) + relativedelta(months=months)
    except ValueError as exc:
        raise OverflowError(f"{dt} shifted by {months} months is out of range") from exc


def days_in_month(dt: datetime) -> int:
    return calendar.monthrange(dt.year, dt.month)[1]


def weekday(dt: datetime) -> int:
    """ISO weekday number, 1=Monday .. 7=Sunday."""
    return dt.isoweekday()


def is_next_day(earlier: datetime, later: datetime) -> bool:
    """True if ``later`` falls on the calendar day right after ``earlier``."""
    return (later.date() - earlier.date()).days == 1
