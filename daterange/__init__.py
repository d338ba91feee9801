"""Calendar date ranges.

This package builds week, month and day-count ranges of calendar days around a
reference date, with configurable week alignment, boundary offsets and
next/previous navigation.

Key modules:
- range: the fluent DateRange holder
- schedule: range parameters, generation algorithms, offsets and navigation
- utils: calendar-day arithmetic and option validation
- config: default clock and weekday
"""

__version__ = "1.0.0"

from daterange.errors import (
    DateRangeError,
    EmptyDateRangeError,
    InvalidDateRangeError,
    InvalidParameterError,
    MissingArgumentError,
    UninitializedAccessError,
)
from daterange.range import DateRange
from daterange.schedule import GeneratedRange, RangeParameters, apply_offset
from daterange.schema import RangeKind, TimeUnit, Weekday
from daterange.utils.validation import (
    is_valid_days_count,
    is_valid_offset,
    is_valid_ref_date,
    is_valid_time_unit,
    is_valid_weekday,
)

is_valid_ref_weekday = is_valid_weekday

__all__ = [
    "__version__",
    "DateRange",
    "GeneratedRange",
    "RangeParameters",
    "RangeKind",
    "TimeUnit",
    "Weekday",
    "apply_offset",
    "is_valid_days_count",
    "is_valid_offset",
    "is_valid_ref_date",
    "is_valid_ref_weekday",
    "is_valid_time_unit",
    "is_valid_weekday",
    "DateRangeError",
    "EmptyDateRangeError",
    "InvalidDateRangeError",
    "InvalidParameterError",
    "MissingArgumentError",
    "UninitializedAccessError",
]
