"""
Shared fixtures: stub collaborators and the reference employees.
"""

from typing import Dict, Iterable

import pendulum
import pytest

from employee_schedule.domain.exceptions import EmployeeNotFoundError, ScheduleStoreError
from employee_schedule.domain.models import HolidaySet, TimeRange, WeeklyTemplate

WORKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday")

# (employee id, ranges worked on every weekday)
EMPLOYEES = [
    pytest.param(
        1,
        [{"start": "10:00", "end": "13:00"}, {"start": "14:00", "end": "19:00"}],
        id="Employee who works from the late morning",
    ),
    pytest.param(
        2,
        [{"start": "09:00", "end": "12:00"}, {"start": "13:00", "end": "18:00"}],
        id="Employee who works from the early morning",
    ),
]


def workweek_template(ranges: Iterable[Dict[str, str]]) -> WeeklyTemplate:
    """Same ranges Monday to Friday, weekends off."""
    day_ranges = [TimeRange.from_strings(r["start"], r["end"]) for r in ranges]
    return WeeklyTemplate.from_mapping({day: day_ranges for day in WORKDAYS})


class StubTemplateStore:
    """Minimal stub matching TemplateStoreProtocol."""

    def __init__(self, templates: Dict[int, WeeklyTemplate], fail: bool = False):
        self._templates = templates
        self._fail = fail
        self.calls = []

    def weekly_template(self, employee_id):
        self.calls.append(employee_id)
        if self._fail:
            raise ScheduleStoreError("template store unreachable")
        if employee_id not in self._templates:
            raise EmployeeNotFoundError(employee_id)
        return self._templates[employee_id]


class StubHolidaySource:
    """Minimal stub matching HolidaySourceProtocol."""

    def __init__(self, holidays=(), fail: bool = False):
        self._holidays = HolidaySet.of(holidays)
        self._fail = fail
        self.calls = []

    def holidays_between(self, start, end):
        self.calls.append((start.isoformat(), end.isoformat()))
        if self._fail:
            raise ScheduleStoreError("holiday source unreachable")
        return self._holidays


@pytest.fixture
def template_store():
    return StubTemplateStore(
        {
            1: workweek_template(EMPLOYEES[0].values[1]),
            2: workweek_template(EMPLOYEES[1].values[1]),
        }
    )


@pytest.fixture
def holiday_source():
    return StubHolidaySource([pendulum.date(2021, 2, 23)])
