"""
Predicates and assertions for generator options.

The ``is_valid_*`` predicates never raise. The ``validate_*`` functions raise
``InvalidParameterError`` with the parameter name, the offending value, the
expected shape and a hint.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any

import numpy as np
import pandas as pd

from daterange.errors import InvalidParameterError
from daterange.schema.enums import TimeUnit


def _is_integer(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))


def is_valid_ref_date(value: Any) -> bool:
    """True for ``date``/``datetime``/``Timestamp``/``datetime64`` values that are not NaT."""
    if value is pd.NaT:
        return False
    if isinstance(value, date):
        return True
    if isinstance(value, np.datetime64):
        return not np.isnat(value)
    return False


def is_valid_weekday(value: Any) -> bool:
    return _is_integer(value) and 1 <= value <= 7


def is_valid_offset(value: Any) -> bool:
    return _is_integer(value) and value >= 0


def is_valid_days_count(value: Any) -> bool:
    return _is_integer(value) and value >= 1


def is_valid_time_unit(value: Any) -> bool:
    if isinstance(value, TimeUnit):
        return True
    return isinstance(value, str) and value in {unit.value for unit in TimeUnit}


def is_options_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def validate_ref_date(value: Any) -> None:
    if not is_valid_ref_date(value):
        raise InvalidParameterError(
            "ref_date",
            value,
            "a date, datetime, pandas.Timestamp or numpy.datetime64 (not NaT)",
            "Strings are not parsed; convert them with date.fromisoformat first.",
        )


def validate_ref_weekday(value: Any) -> None:
    if not is_valid_weekday(value):
        raise InvalidParameterError(
            "ref_weekday",
            value,
            "an integer from 1 (Monday) to 7 (Sunday)",
            "Use the Weekday enum, e.g. Weekday.MONDAY.",
        )


def _validate_offset(name: str, value: Any) -> None:
    if not is_valid_offset(value):
        raise InvalidParameterError(
            name,
            value,
            "a non-negative integer",
            "Offsets are magnitudes in days; use 0 for no offset.",
        )


def validate_start_offset(value: Any) -> None:
    _validate_offset("start_offset", value)


def validate_end_offset(value: Any) -> None:
    _validate_offset("end_offset", value)


def validate_days_count(value: Any) -> None:
    if not is_valid_days_count(value):
        raise InvalidParameterError(
            "days_count", value, "a positive integer", "A range has at least one day."
        )


def validate_time_unit(value: Any) -> None:
    if not is_valid_time_unit(value):
        raise InvalidParameterError(
            "time_unit",
            value,
            f"one of {[unit.value for unit in TimeUnit]}",
        )


def validate_options(value: Any) -> None:
    """Check that an options argument is a mapping (not a list, primitive or None)."""
    if not is_options_mapping(value):
        raise InvalidParameterError(
            "options",
            value,
            "a mapping of option names to values",
            "Pass options as a dict or as keyword arguments.",
        )
