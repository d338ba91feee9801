"""Exceptions raised by date range generation and navigation."""

from __future__ import annotations

from typing import Any


class DateRangeError(Exception):
    """Base class for all daterange errors."""


class MissingArgumentError(DateRangeError, TypeError):
    """Raised when a required argument is omitted."""

    def __init__(self, argument: str, method: str):
        self.argument = argument
        self.method = method
        super().__init__(f"Missing required argument '{argument}' in {method}.")


class InvalidParameterError(DateRangeError, ValueError):
    """Raised when a parameter does not have the expected shape."""

    def __init__(self, parameter: str, value: Any, expected: str, hint: str = ""):
        self.parameter = parameter
        self.value = value
        self.expected = expected
        self.hint = hint
        message = f"Invalid {parameter}: got {value!r}, expected {expected}."
        if hint:
            message = f"{message} {hint}"
        super().__init__(message)


class InvalidDateRangeError(DateRangeError, TypeError):
    """Raised when a navigator receives something other than a date range."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"Expected a DateRange or GeneratedRange, got {value!r} "
            f"({type(value).__name__})."
        )


class EmptyDateRangeError(DateRangeError, ValueError):
    """Raised when a navigator receives a DateRange with no generated range."""

    def __init__(self, method: str):
        self.method = method
        super().__init__(
            f"Cannot use {method} on an empty DateRange. "
            "Generate a range first with get_days, get_week, get_month_exact "
            "or get_month_extended."
        )


class UninitializedAccessError(DateRangeError, RuntimeError):
    """Raised when a DateRange attribute is read before any range was generated."""

    def __init__(self, attribute: str):
        self.attribute = attribute
        super().__init__(
            f"You try to access {attribute} before it has been initialized. "
            "Call one of the get_* methods to generate the range first."
        )
