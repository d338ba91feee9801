"""Boundary offsets for generated ranges."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Sequence, Union

from daterange.errors import InvalidParameterError
from daterange.schema.enums import TimeUnit
from daterange.utils.date import add_days
from daterange.utils.validation import validate_time_unit

logger = logging.getLogger(__name__)


def apply_offset(
    days: Sequence[datetime],
    start_offset: int = 0,
    end_offset: int = 0,
    time_unit: Union[TimeUnit, str] = TimeUnit.DAYS,
) -> Sequence[datetime]:
    """
    Extend or truncate a run of consecutive calendar days at each boundary.

    A positive ``start_offset`` prepends days before the first day and a
    negative one drops days from the front; ``end_offset`` works the same way
    at the back. Offsets are counted in ``time_unit`` (a week is seven days).

    Args:
        days: Consecutive calendar days, earliest first
        start_offset: Signed offset applied at the start of the range
        end_offset: Signed offset applied at the end of the range
        time_unit: Unit the offsets are expressed in

    Returns:
        The input sequence itself when both offsets are zero, otherwise a new list
    """
    validate_time_unit(time_unit)
    if not start_offset and not end_offset:
        return days
    if not days:
        raise InvalidParameterError(
            "days", days, "a non-empty sequence of calendar days"
        )

    unit_days = TimeUnit(time_unit).days()
    start_days = start_offset * unit_days
    end_days = end_offset * unit_days

    removed = max(-start_days, 0) + max(-end_days, 0)
    if removed >= len(days):
        raise InvalidParameterError(
            "start_offset/end_offset",
            (start_offset, end_offset),
            f"offsets removing fewer than {len(days)} days",
            "Negative offsets cannot remove every day of the range.",
        )

    adjusted: List[datetime] = list(days)

    if start_days > 0:
        first = adjusted[0]
        adjusted[:0] = [add_days(first, -n) for n in range(start_days, 0, -1)]
    elif start_days < 0:
        del adjusted[:-start_days]

    if end_days > 0:
        last = adjusted[-1]
        adjusted.extend(add_days(last, n) for n in range(1, end_days + 1))
    elif end_days < 0:
        del adjusted[end_days:]

    logger.debug(
        "Applied offsets start=%s end=%s (%s): %s -> %s days",
        start_offset,
        end_offset,
        TimeUnit(time_unit).value,
        len(days),
        len(adjusted),
    )
    return adjusted
