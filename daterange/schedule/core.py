"""
Core data structures for range generation.
"""

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Iterator, Tuple

from daterange.schema.enums import RangeKind, Weekday
from daterange.utils.date import is_next_day


@dataclass(frozen=True)
class RangeParameters:
    """Configuration a range was generated from."""

    range_kind: RangeKind
    ref_date: datetime
    ref_weekday: Weekday = Weekday.MONDAY
    start_offset: int = 0
    end_offset: int = 0
    days_count: int = 1


@dataclass(frozen=True)
class GeneratedRange:
    """An immutable generated range: its parameters, its days and its provenance."""

    parameters: RangeParameters
    days: Tuple[datetime, ...]
    is_next: bool = False
    is_previous: bool = False

    def __post_init__(self):
        if not self.days:
            raise ValueError("A generated range must contain at least one day")
        for earlier, later in zip(self.days, self.days[1:]):
            if not is_next_day(earlier, later):
                raise ValueError(
                    f"Range days must be consecutive, got {earlier} followed by {later}"
                )

    def with_provenance(self, is_next: bool = False, is_previous: bool = False):
        return replace(self, is_next=is_next, is_previous=is_previous)

    @property
    def range_kind(self) -> RangeKind:
        return self.parameters.range_kind

    @property
    def ref_date(self) -> datetime:
        return self.parameters.ref_date

    @property
    def ref_weekday(self) -> Weekday:
        return self.parameters.ref_weekday

    @property
    def start_offset(self) -> int:
        return self.parameters.start_offset

    @property
    def end_offset(self) -> int:
        return self.parameters.end_offset

    @property
    def days_count(self) -> int:
        return self.parameters.days_count

    @property
    def first_day(self) -> datetime:
        return self.days[0]

    @property
    def last_day(self) -> datetime:
        return self.days[-1]

    def dates(self) -> Tuple[date, ...]:
        """Days as plain ``datetime.date`` values."""
        return tuple(day.date() for day in self.days)

    def __len__(self) -> int:
        return len(self.days)

    def __iter__(self) -> Iterator[datetime]:
        return iter(self.days)
