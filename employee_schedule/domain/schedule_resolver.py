"""
Core business logic for resolving an employee's schedule over a date range.

Pure domain logic: the template store is the only collaborator and is reached
through a protocol, so the resolver itself performs no I/O.
"""

import logging
from typing import List, Optional, Protocol, Sequence

from .calendar import CalendarClassifier
from .exceptions import TemplateIntegrityError
from .models import DateRange, DaySchedule, TimeRange, WeeklyTemplate

logger = logging.getLogger(__name__)


class TemplateStoreProtocol(Protocol):
    """Read access to employees' weekly templates."""

    def weekly_template(self, employee_id: int) -> WeeklyTemplate:
        """
        Return the weekly template of an employee.

        Raises EmployeeNotFoundError for unknown employees and
        ScheduleStoreError when the store cannot be reached.
        """


class ScheduleResolver:
    """
    Builds the per-day schedule of an employee.

    Algorithm:
    1. Walk every date of the range, ascending, one day at a time
    2. Drop days the calendar classifier marks as non-working
    3. Look up the template ranges for the date's weekday
    4. Drop days whose template entry is empty
    5. Emit the remaining days with the template ranges in declared order
    """

    def __init__(self, template_store: TemplateStoreProtocol, classifier: CalendarClassifier):
        self.template_store = template_store
        self.classifier = classifier

    def resolve(
        self,
        employee_id: int,
        date_range: DateRange,
        template: Optional[WeeklyTemplate] = None,
    ) -> List[DaySchedule]:
        """
        Resolve the schedule for an employee over an inclusive date range.

        Args:
            employee_id: Identifier of the employee
            date_range: Inclusive range of dates to resolve
            template: Template already fetched for the employee; looked up in
                the store when omitted

        Returns:
            DaySchedule entries in ascending date order. Excluded days are
            absent, never present with an empty range list.

        Raises:
            EmployeeNotFoundError: If the store does not know the employee
            TemplateIntegrityError: If the template ranges are unordered or overlap
        """
        if template is None:
            template = self.template_store.weekly_template(employee_id)

        schedule: List[DaySchedule] = []

        for day in date_range.days():
            reason = self.classifier.non_working_reason(day)
            if reason is not None:
                logger.debug("Employee %s: %s excluded (%s)", employee_id, day, reason)
                continue

            time_ranges = template.ranges_for(day)
            if not time_ranges:
                logger.debug("Employee %s: %s has no template entry", employee_id, day)
                continue

            _check_ranges(employee_id, day.weekday(), time_ranges)
            schedule.append(DaySchedule(day=day, time_ranges=time_ranges))

        return schedule


def _check_ranges(employee_id: int, weekday: int, time_ranges: Sequence[TimeRange]) -> None:
    """Ensure ranges are ordered by start and do not overlap."""
    for previous, current in zip(time_ranges, time_ranges[1:]):
        if current.start < previous.start:
            raise TemplateIntegrityError(
                f"Template of employee {employee_id} has unordered ranges on weekday "
                f"{weekday}: {previous} before {current}"
            )
        if current.overlaps(previous):
            raise TemplateIntegrityError(
                f"Template of employee {employee_id} has overlapping ranges on weekday "
                f"{weekday}: {previous} and {current}"
            )
