"""
Domain models for dates, time ranges and per-day schedules.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Tuple

from pendulum import Date

TIME_FORMAT = "%H:%M"

WEEKDAY_NAMES = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


def parse_time(value: str) -> time:
    """Parse an 'HH:MM' string into a time object."""
    return datetime.strptime(value, TIME_FORMAT).time()


def weekday_index(key) -> int:
    """
    Normalise a weekday key to 0 (Monday) .. 6 (Sunday).

    Accepts integers, digit strings and English weekday names.
    """
    if isinstance(key, str):
        lowered = key.strip().lower()
        if lowered in WEEKDAY_NAMES:
            return WEEKDAY_NAMES.index(lowered)
        if not lowered.isdigit():
            raise ValueError(f"Unknown weekday: {key!r}")
        key = int(lowered)

    if isinstance(key, bool) or not isinstance(key, int) or not 0 <= key <= 6:
        raise ValueError(f"Weekday must be between 0 and 6, got {key!r}")
    return key


@dataclass(frozen=True)
class TimeRange:
    """
    One contiguous working interval within a day.

    Invariant: start must be before end.
    """
    start: time
    end: time

    def __post_init__(self):
        if self.start >= self.end:
            raise ValueError(f"Start time {self.start} must be before end time {self.end}")

    @classmethod
    def from_strings(cls, start: str, end: str) -> "TimeRange":
        """Build a range from two 'HH:MM' strings."""
        return cls(start=parse_time(start), end=parse_time(end))

    def duration_minutes(self) -> int:
        """Return the duration in minutes."""
        start_minutes = self.start.hour * 60 + self.start.minute
        end_minutes = self.end.hour * 60 + self.end.minute
        return end_minutes - start_minutes

    def overlaps(self, other: "TimeRange") -> bool:
        """Check if this range overlaps with another."""
        return self.start < other.end and self.end > other.start

    def to_dict(self) -> Dict[str, str]:
        return {
            "start": self.start.strftime(TIME_FORMAT),
            "end": self.end.strftime(TIME_FORMAT),
        }

    def __str__(self) -> str:
        return f"{self.start.strftime(TIME_FORMAT)} - {self.end.strftime(TIME_FORMAT)}"


@dataclass(frozen=True)
class DateRange:
    """
    Inclusive range of calendar dates.

    Invariant: start must not be after end.
    """
    start: Date
    end: Date

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"Start date {self.start} must not be after end date {self.end}")

    def days(self) -> Iterator[Date]:
        """Yield every date from start to end, ascending, without gaps."""
        current = self.start
        while current <= self.end:
            yield current
            current = current.add(days=1)

    def __str__(self) -> str:
        return f"{self.start.isoformat()} .. {self.end.isoformat()}"


@dataclass(frozen=True)
class DaySchedule:
    """
    Resolved working time ranges for a single calendar date.

    Invariant: time_ranges is non-empty.
    """
    day: Date
    time_ranges: Tuple[TimeRange, ...]

    def __post_init__(self):
        if not self.time_ranges:
            raise ValueError(f"Day schedule for {self.day} must contain at least one time range")

    def to_dict(self) -> Dict[str, object]:
        return {
            "day": self.day.isoformat(),
            "timeRanges": [time_range.to_dict() for time_range in self.time_ranges],
        }


@dataclass(frozen=True)
class WeeklyTemplate:
    """
    Recurring weekly work pattern of an employee.

    Maps weekday (0=Monday, 6=Sunday) to the time ranges worked on that day.
    Weekdays without an entry are days off.
    """
    ranges: Mapping[int, Tuple[TimeRange, ...]] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, mapping: Mapping[object, Iterable[TimeRange]]) -> "WeeklyTemplate":
        """Build a template from weekday keys (index, digit string or name)."""
        ranges: Dict[int, Tuple[TimeRange, ...]] = {}
        for key, day_ranges in mapping.items():
            ranges[weekday_index(key)] = tuple(day_ranges)
        return cls(ranges=ranges)

    def ranges_for(self, day: date) -> Tuple[TimeRange, ...]:
        """Return the template ranges for the weekday of the given date."""
        return tuple(self.ranges.get(day.weekday(), ()))

    def working_weekdays(self) -> List[int]:
        return sorted(weekday for weekday, day_ranges in self.ranges.items() if day_ranges)


@dataclass(frozen=True)
class HolidaySet:
    """Calendar-wide set of non-working dates."""
    dates: FrozenSet[date] = frozenset()

    @classmethod
    def of(cls, dates: Iterable[date]) -> "HolidaySet":
        return cls(dates=frozenset(dates))

    def contains(self, day: date) -> bool:
        return day in self.dates

    def __contains__(self, day: object) -> bool:
        return day in self.dates

    def __iter__(self) -> Iterator[date]:
        return iter(sorted(self.dates))

    def __len__(self) -> int:
        return len(self.dates)


@dataclass(frozen=True)
class FieldError:
    """A single validation problem tied to a request field."""
    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class ScheduleRequest:
    """Validated schedule request, with the template fetched while validating."""
    employee_id: int
    date_range: DateRange
    template: WeeklyTemplate
