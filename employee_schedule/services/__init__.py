"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .schedule_service import EmployeeScheduleService, HolidaySourceProtocol, ScheduleResponse

__all__ = ["EmployeeScheduleService", "HolidaySourceProtocol", "ScheduleResponse"]
