"""
Working-day classification: weekends and calendar-wide holidays.
"""

from datetime import date
from typing import Iterable, Optional

from .models import HolidaySet

DEFAULT_WEEKEND_DAYS = (5, 6)  # Saturday, Sunday

WEEKEND = "weekend"
HOLIDAY = "holiday"


class CalendarClassifier:
    """
    Decides whether a date is a working day.

    A date is a non-working day if its weekday is one of the weekend days
    (0=Monday, 6=Sunday) or if it is in the holiday set. The classifier holds
    no state besides what it is constructed with.
    """

    def __init__(
        self,
        holidays: Optional[HolidaySet] = None,
        weekend_days: Iterable[int] = DEFAULT_WEEKEND_DAYS,
    ):
        self.holidays = holidays if holidays is not None else HolidaySet()
        self.weekend_days = frozenset(weekend_days)

        invalid_days = sorted(day for day in self.weekend_days if day not in range(7))
        if invalid_days:
            raise ValueError(f"Weekend days must be between 0 and 6, got {invalid_days}")

    def is_weekend(self, day: date) -> bool:
        return day.weekday() in self.weekend_days

    def is_holiday(self, day: date) -> bool:
        return self.holidays.contains(day)

    def is_working_day(self, day: date) -> bool:
        """Check if a given date is neither a weekend day nor a holiday."""
        return self.non_working_reason(day) is None

    def non_working_reason(self, day: date) -> Optional[str]:
        """
        Explain why a date is not worked.

        Returns "weekend", "holiday" or None for working days. A weekend that
        is also a holiday is reported as a weekend.
        """
        if self.is_weekend(day):
            return WEEKEND
        if self.is_holiday(day):
            return HOLIDAY
        return None
