"""Employee schedule HTTP API.

Thin FastAPI binding over EmployeeScheduleService: query parameters go in
untouched, the service payload comes out as JSON.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, FastAPI, Query, Request, status
from fastapi.responses import JSONResponse

from employee_schedule import __version__
from employee_schedule.api.schemas import ErrorsResponseSchema, ScheduleResponseSchema
from employee_schedule.config import AppConfig, build_service
from employee_schedule.domain.exceptions import EmployeeNotFoundError, ScheduleError, ScheduleStoreError
from employee_schedule.domain.validator import UNKNOWN_EMPLOYEE
from employee_schedule.services.schedule_service import EmployeeScheduleService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["schedule"])


def get_schedule_service(request: Request) -> EmployeeScheduleService:
    """FastAPI dependency returning the service bound to the application."""
    return request.app.state.schedule_service


@router.get(
    "/employee-schedule",
    response_model=ScheduleResponseSchema,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorsResponseSchema}},
)
def get_employee_schedule(
    employee_id: str | None = Query(default=None, alias="employeeId"),
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    service: EmployeeScheduleService = Depends(get_schedule_service),
):
    """Return the working schedule of an employee per day.

    Weekends and holidays are absent from the schedule. Invalid input yields
    400 with every problem listed under "errors".
    """
    response = service.get_schedule(employee_id, start_date, end_date)

    if not response.ok:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=response.to_payload())

    return response.to_payload()


@router.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


async def _store_error_handler(request: Request, exc: ScheduleStoreError) -> JSONResponse:
    logger.error("Schedule store failure on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Schedule data is temporarily unavailable"},
    )


async def _employee_not_found_handler(request: Request, exc: EmployeeNotFoundError) -> JSONResponse:
    logger.info("Employee %s disappeared from the store on %s", exc.employee_id, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": [{"field": "employeeId", "message": UNKNOWN_EMPLOYEE}]},
    )


async def _schedule_error_handler(request: Request, exc: ScheduleError) -> JSONResponse:
    logger.error("Schedule failure on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Schedule data is temporarily unavailable"},
    )


def create_app(
    service: EmployeeScheduleService | None = None,
    config: AppConfig | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        service: Ready-made service; built from config when omitted
        config: Application config; defaults are used when omitted

    Returns:
        Configured FastAPI application
    """
    if service is None:
        service = build_service(config or AppConfig())

    app = FastAPI(title="Employee Schedule", version=__version__)
    app.state.schedule_service = service
    app.include_router(router)
    app.add_exception_handler(ScheduleStoreError, _store_error_handler)
    app.add_exception_handler(EmployeeNotFoundError, _employee_not_found_handler)
    app.add_exception_handler(ScheduleError, _schedule_error_handler)
    return app
