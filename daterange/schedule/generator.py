"""
Range generation algorithms.

Each generator turns ``RangeParameters`` into the ordered list of calendar
days of the range, offsets included.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Dict, List, Sequence

from daterange.errors import InvalidParameterError
from daterange.schema.enums import RangeKind, Weekday
from daterange.utils.date import (
    add_days,
    end_of_month,
    start_of_day,
    start_of_month,
    weekday,
)

from .core import GeneratedRange, RangeParameters
from .offset import apply_offset

logger = logging.getLogger(__name__)


def _consecutive_days(first_day: datetime, count: int) -> List[datetime]:
    return [add_days(first_day, n) for n in range(count)]


def _rewind_to_weekday(day: datetime, target: int) -> datetime:
    """Step back one day at a time until ``day`` falls on ``target``."""
    while weekday(day) != target:
        day = add_days(day, -1)
    return day


def _with_offsets(days: List[datetime], params: RangeParameters) -> Sequence[datetime]:
    if params.start_offset or params.end_offset:
        return apply_offset(days, params.start_offset, params.end_offset)
    return days


def generate_days(params: RangeParameters) -> Sequence[datetime]:
    """``days_count`` consecutive days starting on the reference day."""
    first_day = start_of_day(params.ref_date)
    return _with_offsets(_consecutive_days(first_day, params.days_count), params)


def generate_week(params: RangeParameters) -> Sequence[datetime]:
    """Seven days starting on the reference weekday on or before the reference day."""
    first_day = _rewind_to_weekday(start_of_day(params.ref_date), params.ref_weekday)
    return _with_offsets(_consecutive_days(first_day, 7), params)


def generate_month_exact(params: RangeParameters) -> Sequence[datetime]:
    """Every day of the reference date's month."""
    first_day = start_of_month(params.ref_date)
    last_day = end_of_month(params.ref_date)
    days = _consecutive_days(first_day, last_day.day)
    return _with_offsets(days, params)


def generate_month_extended(params: RangeParameters) -> Sequence[datetime]:
    """
    The reference date's month widened to whole weeks.

    Starts on the reference weekday on or before the 1st and ends on the day
    before the reference weekday on or after the last day of the month.
    """
    last_weekday = Weekday(params.ref_weekday).previous()

    first_day = _rewind_to_weekday(start_of_month(params.ref_date), params.ref_weekday)
    last_day = end_of_month(params.ref_date)
    while weekday(last_day) != last_weekday:
        last_day = add_days(last_day, 1)

    count = (last_day.date() - first_day.date()).days + 1
    return _with_offsets(_consecutive_days(first_day, count), params)


_GENERATORS: Dict[RangeKind, Callable[[RangeParameters], Sequence[datetime]]] = {
    RangeKind.DAYS: generate_days,
    RangeKind.WEEK: generate_week,
    RangeKind.MONTH_EXACT: generate_month_exact,
    RangeKind.MONTH_EXTENDED: generate_month_extended,
}


def generate(params: RangeParameters) -> GeneratedRange:
    """Build the range described by ``params``."""
    try:
        generator = _GENERATORS[params.range_kind]
    except KeyError as exc:
        raise NotImplementedError(
            f"Range kind not implemented: {params.range_kind}"
        ) from exc

    try:
        days = generator(params)
    except OverflowError as exc:
        raise InvalidParameterError(
            "ref_date",
            params.ref_date,
            "a date whose range lies between date.min and date.max",
            "The range or its offsets would step outside the supported calendar.",
        ) from exc

    logger.debug(
        "Generated %s range from %s: %s days (%s to %s)",
        params.range_kind.value,
        params.ref_date,
        len(days),
        days[0],
        days[-1],
    )
    return GeneratedRange(parameters=params, days=tuple(days))
