"""
HTTP client for a remote employee directory serving templates and holidays.
"""

import logging
from typing import Any, Dict, Optional

import requests
from pendulum import Date
from pydantic import ValidationError

from ..domain.exceptions import EmployeeNotFoundError, ScheduleStoreError, TemplateIntegrityError
from ..domain.models import HolidaySet, WeeklyTemplate
from .records import EmployeeRecord, HolidaysRecord

logger = logging.getLogger(__name__)


class HttpScheduleStore:
    """
    Client for the employee directory API.

    Endpoints used:
        GET {base_url}/employees/{id}/template -> {"name": ..., "weeklyTemplate": {...}}
        GET {base_url}/holidays?from=YYYY-MM-DD&to=YYYY-MM-DD -> {"holidays": [...]}
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the directory client.

        Args:
            base_url: Root URL of the directory API
            timeout_seconds: Per-request timeout
            session: Optional requests session (a new one is created otherwise)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()
        self.headers = {"Accept": "application/json"}

    def weekly_template(self, employee_id: int) -> WeeklyTemplate:
        """
        Fetch the weekly template of an employee.

        Raises:
            EmployeeNotFoundError: If the directory answers 404
            ScheduleStoreError: If the request fails
            TemplateIntegrityError: If the payload is not a valid template
        """
        url = f"{self.base_url}/employees/{employee_id}/template"
        data = self._get_json(url, not_found=EmployeeNotFoundError(employee_id))

        try:
            record = EmployeeRecord.model_validate(data)
        except ValidationError as e:
            raise TemplateIntegrityError(f"Invalid template for employee {employee_id}:\n{e}") from e

        return record.to_template()

    def holidays_between(self, start: Date, end: Date) -> HolidaySet:
        """Fetch the holidays within [start, end]."""
        url = f"{self.base_url}/holidays"
        data = self._get_json(url, params={"from": start.isoformat(), "to": end.isoformat()})

        try:
            record = HolidaysRecord.model_validate(data)
        except ValidationError as e:
            raise ScheduleStoreError(f"Invalid holiday payload:\n{e}") from e

        return record.to_holiday_set(start, end)

    def _get_json(
        self,
        url: str,
        params: Optional[Dict[str, str]] = None,
        not_found: Optional[Exception] = None,
    ) -> Any:
        logger.debug("GET %s params=%s", url, params)

        try:
            response = self.session.get(url, headers=self.headers, params=params, timeout=self.timeout_seconds)
        except requests.exceptions.RequestException as e:
            logger.warning("Employee directory unreachable: %s", e)
            raise ScheduleStoreError(f"Failed to reach employee directory: {e}") from e

        if response.status_code == 404 and not_found is not None:
            raise not_found

        try:
            response.raise_for_status()
            return response.json()
        except requests.exceptions.HTTPError as e:
            logger.warning("Employee directory returned an error: %s", e)
            raise ScheduleStoreError(f"Employee directory request failed: {e}") from e
        except ValueError as e:
            raise ScheduleStoreError(f"Employee directory returned invalid JSON: {e}") from e
