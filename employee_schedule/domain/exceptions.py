"""
Domain-specific exception hierarchy for the employee schedule service.
"""


class ScheduleError(Exception):
    """Base class for all application-level errors."""


class EmployeeNotFoundError(ScheduleError):
    """Raised when a template store has no record for an employee."""

    def __init__(self, employee_id: int) -> None:
        self.employee_id = employee_id
        super().__init__(f"Unknown employee: {employee_id}")


class ScheduleStoreError(ScheduleError):
    """Raised when templates or holidays cannot be fetched."""


class TemplateIntegrityError(ScheduleStoreError):
    """Raised when a store hands out template data that breaks schedule invariants."""
