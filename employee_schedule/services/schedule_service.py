"""
Application service for answering employee schedule requests.

The service validates the raw request, fetches the holiday set for the
validated range, and delegates the per-day resolution to the domain-level
``ScheduleResolver``. Collaborators are reached through simple protocols so
the JSON-file store, the HTTP store or test stubs can be plugged in.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Protocol

from pendulum import Date

from ..domain.calendar import DEFAULT_WEEKEND_DAYS, CalendarClassifier
from ..domain.models import DateRange, DaySchedule, FieldError, HolidaySet, WeeklyTemplate
from ..domain.schedule_resolver import ScheduleResolver, TemplateStoreProtocol
from ..domain.validator import RequestValidator

logger = logging.getLogger(__name__)


class HolidaySourceProtocol(Protocol):
    """Protocol describing the holiday lookup needed by the service."""

    def holidays_between(self, start: Date, end: Date) -> HolidaySet:
        """Return the holidays falling within [start, end]."""


@dataclass(frozen=True)
class ScheduleResponse:
    """Either a resolved schedule or the validation errors, never both."""
    schedule: Optional[List[DaySchedule]] = None
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_payload(self) -> Dict[str, Any]:
        """Return the transport-ready payload."""
        if self.errors:
            return {"errors": [error.to_dict() for error in self.errors]}
        return {"schedule": [day.to_dict() for day in self.schedule or []]}


class EmployeeScheduleService:
    """
    Orchestrates validation, holiday retrieval and schedule resolution.

    The service holds no per-request state; one instance can serve
    concurrent requests as long as its collaborators allow concurrent reads.
    """

    def __init__(
        self,
        template_store: TemplateStoreProtocol,
        holiday_source: HolidaySourceProtocol,
        weekend_days: Iterable[int] = DEFAULT_WEEKEND_DAYS,
    ) -> None:
        self._template_store = template_store
        self._holiday_source = holiday_source
        self._weekend_days = tuple(weekend_days)
        self._validator = RequestValidator(template_store)

    def get_schedule(self, employee_id, start_date_raw: Optional[str], end_date_raw: Optional[str]) -> ScheduleResponse:
        """
        Validate a raw request and resolve the schedule.

        Store failures raise ScheduleStoreError; they are not turned into
        validation errors.
        """
        result = self._validator.validate(employee_id, start_date_raw, end_date_raw)

        if not result.is_valid:
            logger.info(
                "Rejected schedule request for employee %r: %s",
                employee_id,
                ", ".join(f"{error.field}: {error.message}" for error in result.errors),
            )
            return ScheduleResponse(errors=result.errors)

        request = result.request
        schedule = self.resolve(request.employee_id, request.date_range, template=request.template)

        logger.info(
            "Resolved %d working day(s) for employee %s over %s",
            len(schedule),
            request.employee_id,
            request.date_range,
        )
        return ScheduleResponse(schedule=schedule)

    def resolve(
        self,
        employee_id: int,
        date_range: DateRange,
        template: Optional[WeeklyTemplate] = None,
    ) -> List[DaySchedule]:
        """Resolve the schedule for an already validated request."""
        holidays = self.holidays(date_range)
        classifier = CalendarClassifier(holidays=holidays, weekend_days=self._weekend_days)
        resolver = ScheduleResolver(template_store=self._template_store, classifier=classifier)
        return resolver.resolve(employee_id, date_range, template=template)

    def holidays(self, date_range: DateRange) -> HolidaySet:
        """Fetch the holidays within a date range."""
        holidays = self._holiday_source.holidays_between(date_range.start, date_range.end)
        # Sources may return a superset; keep only the requested range.
        return HolidaySet.of(day for day in holidays if date_range.start <= day <= date_range.end)
