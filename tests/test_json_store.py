"""
Tests for the JSON-file schedule store.
"""

import json

import pendulum
import pytest

from employee_schedule.adapters.json_store import JsonScheduleStore
from employee_schedule.domain.exceptions import EmployeeNotFoundError, ScheduleStoreError, TemplateIntegrityError
from employee_schedule.domain.models import TimeRange


def _write(tmp_path, data):
    path = tmp_path / "schedule_data.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestBundledSampleData:
    """The bundled data carries the two reference employees."""

    def test_reference_employees(self):
        store = JsonScheduleStore()

        assert store.employee_ids() == [1, 2]

    def test_employee_one_template(self):
        template = JsonScheduleStore().weekly_template(1)

        assert template.ranges_for(pendulum.date(2021, 1, 11)) == (
            TimeRange.from_strings("10:00", "13:00"),
            TimeRange.from_strings("14:00", "19:00"),
        )
        assert template.working_weekdays() == [0, 1, 2, 3, 4]

    def test_holiday_between(self):
        holidays = JsonScheduleStore().holidays_between(pendulum.date(2021, 2, 1), pendulum.date(2021, 2, 28))

        assert [day.isoformat() for day in holidays] == ["2021-02-23"]

    def test_unknown_employee(self):
        with pytest.raises(EmployeeNotFoundError) as exc_info:
            JsonScheduleStore().weekly_template(99)

        assert exc_info.value.employee_id == 99


class TestCustomDataFile:
    """Tests for loading a user-provided data file."""

    def test_weekday_indices_are_accepted(self, tmp_path):
        path = _write(tmp_path, {
            "employees": {"5": {"weeklyTemplate": {"6": [{"start": "08:00", "end": "12:00"}]}}},
            "holidays": [],
        })

        template = JsonScheduleStore(path).weekly_template(5)

        assert template.working_weekdays() == [6]

    def test_missing_file_raises_store_error(self, tmp_path):
        with pytest.raises(ScheduleStoreError, match="Cannot read"):
            JsonScheduleStore(tmp_path / "missing.json")

    def test_invalid_json_raises_integrity_error(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(TemplateIntegrityError):
            JsonScheduleStore(path)

    def test_non_utf8_file_raises_integrity_error(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b"\xff\xfe\x00")

        with pytest.raises(TemplateIntegrityError, match="Invalid JSON"):
            JsonScheduleStore(path)

    @pytest.mark.parametrize(
        "template",
        [
            {"monday": [{"start": "13:00", "end": "10:00"}]},
            {"monday": [{"start": "25:00", "end": "26:00"}]},
            {"funday": [{"start": "09:00", "end": "10:00"}]},
            {"monday": [], "0": []},
        ],
        ids=["end before start", "invalid time", "unknown weekday", "weekday twice"],
    )
    def test_corrupt_template_raises_integrity_error(self, tmp_path, template):
        path = _write(tmp_path, {"employees": {"1": {"weeklyTemplate": template}}})

        with pytest.raises(TemplateIntegrityError):
            JsonScheduleStore(path)

    def test_invalid_holiday_raises_integrity_error(self, tmp_path):
        path = _write(tmp_path, {"employees": {}, "holidays": ["2021-02-30"]})

        with pytest.raises(TemplateIntegrityError):
            JsonScheduleStore(path)
