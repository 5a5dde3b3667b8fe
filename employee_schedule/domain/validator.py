"""
Validation of raw schedule requests.

Every problem found is collected into a list of FieldError entries; the
validator never stops at the first one.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import pendulum
from pendulum import Date

from .exceptions import EmployeeNotFoundError
from .models import DateRange, FieldError, ScheduleRequest, WeeklyTemplate
from .schedule_resolver import TemplateStoreProtocol

DATE_FORMAT = "YYYY-MM-DD"

INVALID_DATE = "invalid date"
START_AFTER_END = "start after end"
UNKNOWN_EMPLOYEE = "unknown employee"
INVALID_EMPLOYEE_ID = "invalid employee id"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a request: either a request or a list of errors."""
    request: Optional[ScheduleRequest] = None
    errors: List[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.request is not None and not self.errors


def parse_date(raw: Optional[str]) -> Optional[Date]:
    """Parse a 'YYYY-MM-DD' string. Returns None if it is not a real date."""
    if not isinstance(raw, str):
        return None
    try:
        return pendulum.from_format(raw.strip(), DATE_FORMAT).date()
    except ValueError:
        return None


def parse_employee_id(raw) -> Optional[int]:
    """Accept positive integers and ASCII digit strings."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if raw > 0 else None
    if isinstance(raw, str):
        stripped = raw.strip()
        if not (stripped.isascii() and stripped.isdecimal()):
            return None
        value = int(stripped)
        return value if value > 0 else None
    return None


class RequestValidator:
    """
    Validates raw employee schedule requests.

    Employee existence is delegated to the template store. Store failures
    (ScheduleStoreError) are not validation problems and propagate.
    """

    def __init__(self, template_store: TemplateStoreProtocol):
        self.template_store = template_store

    def validate(self, employee_id, start_date_raw: Optional[str], end_date_raw: Optional[str]) -> ValidationResult:
        errors: List[FieldError] = []

        template = None
        parsed_id = parse_employee_id(employee_id)
        if parsed_id is None:
            errors.append(FieldError("employeeId", INVALID_EMPLOYEE_ID))
        else:
            template = self._lookup_template(parsed_id)
            if template is None:
                errors.append(FieldError("employeeId", UNKNOWN_EMPLOYEE))

        start = parse_date(start_date_raw)
        if start is None:
            errors.append(FieldError("startDate", INVALID_DATE))

        end = parse_date(end_date_raw)
        if end is None:
            errors.append(FieldError("endDate", INVALID_DATE))

        if start is not None and end is not None and start > end:
            errors.append(FieldError("range", START_AFTER_END))

        if errors:
            return ValidationResult(errors=errors)

        return ValidationResult(
            request=ScheduleRequest(
                employee_id=parsed_id,
                date_range=DateRange(start=start, end=end),
                template=template,
            )
        )

    def _lookup_template(self, employee_id: int) -> Optional[WeeklyTemplate]:
        try:
            return self.template_store.weekly_template(employee_id)
        except EmployeeNotFoundError:
            return None
