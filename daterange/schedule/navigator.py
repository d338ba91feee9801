"""
Derivation of the adjacent (next or previous) range of the same shape.
"""

from dataclasses import replace
from datetime import datetime

from daterange.errors import InvalidParameterError
from daterange.schema.enums import RangeKind
from daterange.utils.date import add_days, add_months, start_of_day

from .core import RangeParameters


def _shifted_ref_date(params: RangeParameters, direction: int) -> datetime:
    kind = params.range_kind
    if kind == RangeKind.DAYS:
        return add_days(start_of_day(params.ref_date), direction * params.days_count)
    elif kind == RangeKind.WEEK:
        return add_days(start_of_day(params.ref_date), direction * 7)
    elif kind in (RangeKind.MONTH_EXACT, RangeKind.MONTH_EXTENDED):
        return add_months(params.ref_date, direction)
    else:
        raise NotImplementedError(f"Range kind not implemented: {kind}")


def _shifted(params: RangeParameters, direction: int) -> RangeParameters:
    try:
        ref_date = _shifted_ref_date(params, direction)
    except OverflowError as exc:
        raise InvalidParameterError(
            "ref_date",
            params.ref_date,
            "a date with an adjacent range between date.min and date.max",
            "There is no range beyond the supported calendar.",
        ) from exc
    return replace(params, ref_date=ref_date)


def next_parameters(params: RangeParameters) -> RangeParameters:
    """Parameters of the range right after the one described by ``params``."""
    return _shifted(params, 1)


def previous_parameters(params: RangeParameters) -> RangeParameters:
    """Parameters of the range right before the one described by ``params``."""
    return _shifted(params, -1)
