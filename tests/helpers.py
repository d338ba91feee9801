"""Shared assertions and sample values for the test suite."""

from datetime import date


def consecutive(days) -> bool:
    return all((b.date() - a.date()).days == 1 for a, b in zip(days, days[1:]))


def at_midnight(days) -> bool:
    return all(
        (d.hour, d.minute, d.second, d.microsecond) == (0, 0, 0, 0) for d in days
    )


# Values that are neither dates nor integers
NON_DATE_VALUES = [
    None,
    float("nan"),
    float("inf"),
    [],
    {},
    {"a": 1, "b": "foo"},
    1,
    2.5,
    -1,
    [1, 2, 3],
    "test",
    "2021-12-25",
    True,
    False,
]

SAMPLE_DATES = [
    date(2020, 1, 17),
    date(2020, 2, 29),
    date(2021, 2, 1),
    date(2022, 12, 31),
    date(2023, 1, 10),
    date(2024, 7, 4),
]
