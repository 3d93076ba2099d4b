"""
Tests for Schedule Module

Tests loading and validation of the contribution schedule file.
"""

from decimal import Decimal
from pathlib import Path

import pytest
import yaml

from payroll.exceptions import ScheduleError
from payroll.schedule import SCHEDULE, load_schedule


@pytest.fixture
def schedule_data(schedule_file: Path) -> dict:
    """Load the raw bundled schedule."""
    with open(schedule_file) as f:
        return yaml.safe_load(f)


def write_schedule(path: Path, data: dict) -> Path:
    schedule_path = path / "schedule.yaml"
    with open(schedule_path, "w") as f:
        yaml.safe_dump(data, f)
    return schedule_path


class TestLoadSchedule:
    """Tests for load_schedule."""

    def test_bundled_schedule(self):
        """Test the module-level schedule holds exact decimals."""
        assert SCHEDULE.sss.rate == Decimal("0.045")
        assert SCHEDULE.sss.credit_ceiling == Decimal("25000.00")
        assert SCHEDULE.philhealth.employee_share_divisor == Decimal("2")
        assert SCHEDULE.pagibig.salary_ceiling == Decimal("5000.00")
        assert len(SCHEDULE.brackets) == 6

    def test_reload_matches(self, schedule_file):
        assert load_schedule(schedule_file) == SCHEDULE

    def test_missing_file(self, tmp_path):
        with pytest.raises(ScheduleError, match="Cannot read schedule"):
            load_schedule(tmp_path / "missing.yaml")

    def test_missing_rate(self, tmp_path, schedule_data):
        del schedule_data["sss"]["rate"]
        with pytest.raises(ScheduleError, match="'rate' in 'sss'"):
            load_schedule(write_schedule(tmp_path, schedule_data))

    def test_last_bracket_must_be_unbounded(self, tmp_path, schedule_data):
        schedule_data["withholding_tax"]["brackets"][-1]["upper_bound"] = "9999999.00"
        with pytest.raises(ScheduleError, match="no upper bound"):
            load_schedule(write_schedule(tmp_path, schedule_data))

    def test_only_last_bracket_unbounded(self, tmp_path, schedule_data):
        schedule_data["withholding_tax"]["brackets"][2]["upper_bound"] = None
        with pytest.raises(ScheduleError, match="Only the last"):
            load_schedule(write_schedule(tmp_path, schedule_data))

    def test_brackets_must_increase(self, tmp_path, schedule_data):
        brackets = schedule_data["withholding_tax"]["brackets"]
        brackets[1]["upper_bound"] = brackets[0]["upper_bound"]
        with pytest.raises(ScheduleError, match="strictly increasing"):
            load_schedule(write_schedule(tmp_path, schedule_data))
