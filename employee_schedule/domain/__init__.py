"""
Domain layer - Pure business logic without external dependencies.
"""

from .calendar import CalendarClassifier
from .models import (
    DateRange,
    DaySchedule,
    FieldError,
    HolidaySet,
    ScheduleRequest,
    TimeRange,
    WeeklyTemplate,
)
from .schedule_resolver import ScheduleResolver, TemplateStoreProtocol
from .validator import RequestValidator, ValidationResult

__all__ = [
    "CalendarClassifier",
    "DateRange",
    "DaySchedule",
    "FieldError",
    "HolidaySet",
    "RequestValidator",
    "ScheduleRequest",
    "ScheduleResolver",
    "TemplateStoreProtocol",
    "TimeRange",
    "ValidationResult",
    "WeeklyTemplate",
]
