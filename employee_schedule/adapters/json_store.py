"""
Schedule store backed by a local JSON data file.
"""

import json
import logging
from pathlib import Path
from typing import List

from pendulum import Date
from pydantic import ValidationError

from ..domain.exceptions import EmployeeNotFoundError, ScheduleStoreError, TemplateIntegrityError
from ..domain.models import HolidaySet, WeeklyTemplate
from .records import ScheduleDataRecord

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = Path(__file__).parent / "sample_schedule_data.json"


class JsonScheduleStore:
    """
    Serves weekly templates and holidays from a JSON file.

    File format:
    {
        "employees": {
            "1": {
                "name": "...",
                "weeklyTemplate": {"monday": [{"start": "10:00", "end": "13:00"}], ...}
            }
        },
        "holidays": ["2021-02-23", ...]
    }

    The file is read once, when the store is created. Without an explicit
    path the bundled sample data is used.
    """

    def __init__(self, data_file: Path | None = None):
        self.data_file = Path(data_file) if data_file else DEFAULT_DATA_FILE
        self._data = self._load_schedule_data()

    def _load_schedule_data(self) -> ScheduleDataRecord:
        """Load and validate the data file."""
        try:
            with open(self.data_file, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except OSError as e:
            raise ScheduleStoreError(f"Cannot read schedule data file {self.data_file}: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise TemplateIntegrityError(f"Invalid JSON in {self.data_file}: {e}") from e

        try:
            data = ScheduleDataRecord.model_validate(raw)
        except ValidationError as e:
            raise TemplateIntegrityError(f"Invalid schedule data in {self.data_file}:\n{e}") from e

        logger.debug(
            "Loaded %d employee(s) and %d holiday(s) from %s",
            len(data.employees),
            len(data.holidays),
            self.data_file,
        )
        return data

    def employee_ids(self) -> List[int]:
        return sorted(self._data.employees)

    def weekly_template(self, employee_id: int) -> WeeklyTemplate:
        """Return the weekly template of an employee."""
        record = self._data.employees.get(employee_id)
        if record is None:
            raise EmployeeNotFoundError(employee_id)
        return record.to_template()

    def holidays_between(self, start: Date, end: Date) -> HolidaySet:
        """Return the holidays within [start, end]."""
        return self._data.to_holiday_set(start, end)
