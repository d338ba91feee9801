"""
DateRange: fluent holder of the most recently generated range.

A ``DateRange`` starts empty. Each ``get_*`` call builds a complete, immutable
``GeneratedRange`` and only then swaps it in, so a call that fails validation
leaves the previous range untouched.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Dict, FrozenSet, Iterator, List, Mapping, Optional, Union

import pandas as pd

from daterange import config
from daterange.errors import (
    EmptyDateRangeError,
    InvalidDateRangeError,
    InvalidParameterError,
    MissingArgumentError,
    UninitializedAccessError,
)
from daterange.schedule.core import GeneratedRange, RangeParameters
from daterange.schedule.generator import generate
from daterange.schedule.navigator import next_parameters, previous_parameters
from daterange.schema.enums import RangeKind, Weekday
from daterange.utils.date import to_reference_instant
from daterange.utils.validation import (
    is_valid_offset,
    is_valid_ref_date,
    is_valid_weekday,
    validate_days_count,
    validate_end_offset,
    validate_options,
    validate_ref_date,
    validate_ref_weekday,
    validate_start_offset,
)

logger = logging.getLogger(__name__)

_VALIDATORS = {
    "ref_date": validate_ref_date,
    "ref_weekday": validate_ref_weekday,
    "start_offset": validate_start_offset,
    "end_offset": validate_end_offset,
    "days_count": validate_days_count,
}

_ALLOWED_OPTIONS: Dict[RangeKind, FrozenSet[str]] = {
    RangeKind.DAYS: frozenset({"ref_date", "start_offset", "end_offset", "days_count"}),
    RangeKind.WEEK: frozenset({"ref_date", "ref_weekday", "start_offset", "end_offset"}),
    RangeKind.MONTH_EXACT: frozenset({"ref_date", "start_offset", "end_offset"}),
    RangeKind.MONTH_EXTENDED: frozenset(
        {"ref_date", "ref_weekday", "start_offset", "end_offset"}
    ),
}


def _collect_options(
    kind: RangeKind, options: Optional[Mapping[str, Any]], kwargs: Dict[str, Any]
) -> Dict[str, Any]:
    """Merge the options mapping and keyword options, validating supplied fields."""
    merged: Dict[str, Any] = {}
    if options is not None:
        validate_options(options)
        merged.update(options)
    merged.update(kwargs)

    allowed = _ALLOWED_OPTIONS[kind]
    for name, value in merged.items():
        if name not in allowed:
            raise InvalidParameterError(
                name,
                value,
                f"one of {sorted(allowed)}",
                f"'{name}' is not an option of {kind.value} ranges.",
            )
        if value is not None:
            _VALIDATORS[name](value)

    return {name: value for name, value in merged.items() if value is not None}


def _build_parameters(kind: RangeKind, supplied: Dict[str, Any]) -> RangeParameters:
    """Fill unset options with the configured defaults."""
    ref_date = supplied.get("ref_date")
    if ref_date is None:
        ref_date = config.get_default_clock()()
    ref_weekday = supplied.get("ref_weekday", config.get_default_weekday())
    return RangeParameters(
        range_kind=kind,
        ref_date=to_reference_instant(ref_date),
        ref_weekday=Weekday(int(ref_weekday)),
        start_offset=int(supplied.get("start_offset", config.DEFAULT_START_OFFSET)),
        end_offset=int(supplied.get("end_offset", config.DEFAULT_END_OFFSET)),
        days_count=int(supplied.get("days_count", config.DEFAULT_DAYS_COUNT)),
    )


class DateRange:
    """Generates week, month and day-count ranges around a reference date.

    Example:
        >>> week = DateRange().get_week(ref_date=date(2023, 1, 10), ref_weekday=7)
        >>> week.days[0].date()
        datetime.date(2023, 1, 8)
        >>> DateRange().get_next(week).days[0].date()
        datetime.date(2023, 1, 15)
    """

    def __init__(self, *args, **kwargs):
        if args or kwargs:
            passed: Any = args[0] if len(args) == 1 and not kwargs else (args or kwargs)
            raise InvalidParameterError(
                "parameter passed to DateRange instance",
                passed,
                "no parameters",
                "Option parameters should be specified within DateRange methods.",
            )
        self._range: Optional[GeneratedRange] = None

    # ------------------------------------------------------------------ state

    def _generated(self, attribute: str) -> GeneratedRange:
        if self._range is None:
            raise UninitializedAccessError(attribute)
        return self._range

    @property
    def is_initialized(self) -> bool:
        return self._range is not None

    @property
    def range(self) -> GeneratedRange:
        """The current range as an immutable value."""
        return self._generated("range")

    @property
    def range_kind(self) -> RangeKind:
        return self._generated("range_kind").range_kind

    @property
    def ref_date(self) -> datetime:
        return self._generated("ref_date").ref_date

    @property
    def ref_weekday(self) -> Weekday:
        return self._generated("ref_weekday").ref_weekday

    @property
    def start_offset(self) -> int:
        return self._generated("start_offset").start_offset

    @property
    def end_offset(self) -> int:
        return self._generated("end_offset").end_offset

    @property
    def days_count(self) -> int:
        return self._generated("days_count").days_count

    @property
    def days(self) -> List[datetime]:
        return list(self._generated("days").days)

    date_times = days

    @property
    def is_next(self) -> bool:
        return self._generated("is_next").is_next

    @property
    def is_previous(self) -> bool:
        return self._generated("is_previous").is_previous

    def __len__(self) -> int:
        return len(self._generated("days"))

    def __iter__(self) -> Iterator[datetime]:
        return iter(self._generated("days"))

    def __repr__(self) -> str:
        if self._range is None:
            return "DateRange(<empty>)"
        return (
            f"DateRange({self._range.range_kind.value}, "
            f"{self._range.first_day.date()} to {self._range.last_day.date()}, "
            f"{len(self._range)} days)"
        )

    # -------------------------------------------------------------- validation

    @staticmethod
    def is_valid_ref_date(ref_date: Any) -> bool:
        return is_valid_ref_date(ref_date)

    @staticmethod
    def is_valid_ref_weekday(weekday: Any) -> bool:
        return is_valid_weekday(weekday)

    @staticmethod
    def is_valid_offset(offset: Any) -> bool:
        return is_valid_offset(offset)

    # -------------------------------------------------------------- conversion

    def to_datetimes(self) -> List[datetime]:
        return self.days

    def to_dates(self) -> List[date]:
        return list(self._generated("days").dates())

    def to_index(self) -> pd.DatetimeIndex:
        """Days as a ``pandas.DatetimeIndex`` (named after the range kind)."""
        generated = self._generated("days")
        return pd.DatetimeIndex(
            [pd.Timestamp(day) for day in generated.days],
            name=generated.range_kind.value.lower(),
        )

    # -------------------------------------------------------------- generators

    def _generate(
        self, kind: RangeKind, options: Optional[Mapping[str, Any]], kwargs: Dict[str, Any]
    ) -> "DateRange":
        params = _build_parameters(kind, _collect_options(kind, options, kwargs))
        self._range = generate(params)
        return self

    def get_days(self, options: Optional[Mapping[str, Any]] = None, **kwargs) -> "DateRange":
        """
        Generate ``days_count`` consecutive days starting on ``ref_date``.

        Options: ``ref_date``, ``days_count`` (default 1), ``start_offset``,
        ``end_offset``.
        """
        return self._generate(RangeKind.DAYS, options, kwargs)

    def get_week(self, options: Optional[Mapping[str, Any]] = None, **kwargs) -> "DateRange":
        """
        Generate the 7-day week containing ``ref_date`` that starts on ``ref_weekday``.

        Options: ``ref_date``, ``ref_weekday`` (default Monday), ``start_offset``,
        ``end_offset``.
        """
        return self._generate(RangeKind.WEEK, options, kwargs)

    def get_month_exact(
        self, options: Optional[Mapping[str, Any]] = None, **kwargs
    ) -> "DateRange":
        """
        Generate every day of ``ref_date``'s month.

        Options: ``ref_date``, ``start_offset``, ``end_offset``.
        """
        return self._generate(RangeKind.MONTH_EXACT, options, kwargs)

    def get_month_extended(
        self, options: Optional[Mapping[str, Any]] = None, **kwargs
    ) -> "DateRange":
        """
        Generate ``ref_date``'s month widened to whole weeks starting on ``ref_weekday``.

        Options: ``ref_date``, ``ref_weekday`` (default Monday), ``start_offset``,
        ``end_offset``.
        """
        return self._generate(RangeKind.MONTH_EXTENDED, options, kwargs)

    # -------------------------------------------------------------- navigation

    @staticmethod
    def _source_range(date_range: Any, method: str) -> GeneratedRange:
        if date_range is None:
            raise MissingArgumentError("date_range", f"DateRange.{method}()")
        if isinstance(date_range, GeneratedRange):
            return date_range
        if not isinstance(date_range, DateRange):
            raise InvalidDateRangeError(date_range)
        if date_range._range is None:
            raise EmptyDateRangeError(f"{method} method")
        return date_range._range

    def get_next(self, date_range: Union["DateRange", GeneratedRange, None] = None) -> "DateRange":
        """Generate the range right after ``date_range``, with the same shape and options."""
        source = self._source_range(date_range, "get_next")
        params = next_parameters(source.parameters)
        logger.debug("Next %s range from %s", params.range_kind.value, params.ref_date)
        self._range = generate(params).with_provenance(is_next=True)
        return self

    def get_previous(
        self, date_range: Union["DateRange", GeneratedRange, None] = None
    ) -> "DateRange":
        """Generate the range right before ``date_range``, with the same shape and options."""
        source = self._source_range(date_range, "get_previous")
        params = previous_parameters(source.parameters)
        logger.debug("Previous %s range from %s", params.range_kind.value, params.ref_date)
        self._range = generate(params).with_provenance(is_previous=True)
        return self
