"""
Wire records shared by the schedule store adapters.

Store payloads are validated with Pydantic before they are turned into
domain objects, so a corrupt record never reaches the resolver.
"""

from datetime import date
from typing import Dict, List

import pendulum
from pendulum import Date
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..domain.models import HolidaySet, TimeRange, WeeklyTemplate, parse_time, weekday_index


class TimeRangeRecord(BaseModel):
    """A working interval as stored: two 'HH:MM' strings."""
    start: str
    end: str

    @field_validator("start", "end")
    @classmethod
    def validate_time(cls, value: str) -> str:
        """Ensure the value is an 'HH:MM' time."""
        parse_time(value)
        return value

    @model_validator(mode="after")
    def validate_order(self) -> "TimeRangeRecord":
        """Ensure the interval opens before it closes."""
        if parse_time(self.end) <= parse_time(self.start):
            raise ValueError(f"end {self.end} must be later than start {self.start}")
        return self

    def to_domain(self) -> TimeRange:
        return TimeRange.from_strings(self.start, self.end)


class EmployeeRecord(BaseModel):
    """An employee with a weekly template keyed by weekday name or index."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    weekly_template: Dict[str, List[TimeRangeRecord]] = Field(default_factory=dict, alias="weeklyTemplate")

    @field_validator("weekly_template")
    @classmethod
    def validate_weekdays(cls, value: Dict[str, List[TimeRangeRecord]]) -> Dict[str, List[TimeRangeRecord]]:
        """Ensure weekday keys are known and not repeated under different spellings."""
        seen: set[int] = set()
        for key in value:
            index = weekday_index(key)
            if index in seen:
                raise ValueError(f"Weekday {key!r} is defined more than once")
            seen.add(index)
        return value

    def to_template(self) -> WeeklyTemplate:
        return WeeklyTemplate.from_mapping(
            {key: [record.to_domain() for record in records] for key, records in self.weekly_template.items()}
        )


class HolidaysRecord(BaseModel):
    """A list of calendar-wide holidays."""
    holidays: List[date] = Field(default_factory=list)

    def to_holiday_set(self, start: Date, end: Date) -> HolidaySet:
        """Keep the holidays within [start, end] as pendulum dates."""
        return HolidaySet.of(
            pendulum.date(day.year, day.month, day.day)
            for day in self.holidays
            if start <= day <= end
        )


class ScheduleDataRecord(HolidaysRecord):
    """Contents of a schedule data file: employees by id plus holidays."""
    employees: Dict[int, EmployeeRecord] = Field(default_factory=dict)
