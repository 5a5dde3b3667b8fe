"""API contract schemas for the employee schedule endpoint."""

from pydantic import BaseModel, ConfigDict, Field


class TimeRangeSchema(BaseModel):
    """One working interval."""

    start: str = Field(description="Start time, HH:MM")
    end: str = Field(description="End time, HH:MM")


class DayScheduleSchema(BaseModel):
    """Working intervals of one calendar day."""

    model_config = ConfigDict(populate_by_name=True)

    day: str = Field(description="Date, YYYY-MM-DD")
    time_ranges: list[TimeRangeSchema] = Field(alias="timeRanges", description="Ordered working intervals")


class ScheduleResponseSchema(BaseModel):
    """Response for GET /employee-schedule."""

    schedule: list[DayScheduleSchema] = Field(description="Working days in ascending date order")


class FieldErrorSchema(BaseModel):
    """A single request validation problem."""

    field: str = Field(description="Request field: employeeId | startDate | endDate | range")
    message: str = Field(description="Human-readable reason")


class ErrorsResponseSchema(BaseModel):
    """Response for a rejected schedule request."""

    errors: list[FieldErrorSchema] = Field(description="All problems found in the request")
