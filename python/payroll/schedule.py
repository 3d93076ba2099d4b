"""
Contribution Schedule Module

Loads the statutory rates and withholding tax table from schedule.yaml.
The schedule is read once at import time and shared as immutable data.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ScheduleError

logger = logging.getLogger(__name__)

SCHEDULE_FILE = Path(__file__).parent / "schedule.yaml"


@dataclass(frozen=True)
class TaxBracket:
    """One row of the monthly withholding tax table."""

    upper_bound: Decimal | None  # None = no upper limit
    fixed_tax: Decimal
    rate: Decimal
    floor: Decimal

    @property
    def is_unbounded(self) -> bool:
        return self.upper_bound is None

    def contains(self, taxable_income: Decimal) -> bool:
        """Whether taxable income does not exceed this row's upper bound."""
        return self.is_unbounded or taxable_income <= self.upper_bound

    def as_tuple(self) -> tuple[Decimal, Decimal, Decimal]:
        return self.fixed_tax, self.rate, self.floor

    def describe(self) -> str:
        """Short label like '20% over 20,833.00'."""
        rate_percent = f"{(self.rate * 100).normalize():f}%"
        if self.fixed_tax:
            return f"{self.fixed_tax:,.2f} + {rate_percent} over {self.floor:,.2f}"
        return f"{rate_percent} over {self.floor:,.2f}"


@dataclass(frozen=True)
class SSSRates:
    credit_offset: Decimal
    credit_step: Decimal
    credit_ceiling: Decimal
    minimum_credit: Decimal
    minimum_contribution: Decimal
    rate: Decimal


@dataclass(frozen=True)
class PhilHealthRates:
    floor_salary: Decimal
    floor_premium: Decimal
    ceiling_salary: Decimal
    ceiling_premium: Decimal
    rate: Decimal
    employee_share_divisor: Decimal


@dataclass(frozen=True)
class PagIBIGRates:
    salary_ceiling: Decimal
    low_salary_threshold: Decimal
    low_rate: Decimal
    rate: Decimal


@dataclass(frozen=True)
class Schedule:
    """Complete set of rates for one tax year."""

    sss: SSSRates
    philhealth: PhilHealthRates
    pagibig: PagIBIGRates
    brackets: tuple[TaxBracket, ...]


def _decimals(section: dict[str, Any], name: str, keys: list[str]) -> dict[str, Decimal]:
    values = {}
    for key in keys:
        if key not in section:
            raise ScheduleError(f"Missing '{key}' in '{name}' schedule")
        values[key] = Decimal(str(section[key]))
    return values


def _load_brackets(rows: list[dict[str, Any]]) -> tuple[TaxBracket, ...]:
    brackets = []
    for row in rows:
        upper = row.get("upper_bound")
        values = _decimals(row, "withholding_tax", ["fixed_tax", "rate", "floor"])
        brackets.append(TaxBracket(
            upper_bound=None if upper is None else Decimal(str(upper)),
            **values
        ))

    if not brackets or not brackets[-1].is_unbounded:
        raise ScheduleError("Last withholding tax bracket must have no upper bound")

    bounded = [b.upper_bound for b in brackets[:-1]]
    if None in bounded:
        raise ScheduleError("Only the last withholding tax bracket may be unbounded")
    if any(lower >= upper for lower, upper in zip(bounded, bounded[1:])):
        raise ScheduleError("Withholding tax brackets must be strictly increasing")

    return tuple(brackets)


def load_schedule(path: Path = SCHEDULE_FILE) -> Schedule:
    """Load and validate the schedule file.

    Raises:
        ScheduleError: If the file is missing or malformed
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ScheduleError(f"Cannot read schedule {path}: {e}") from e

    schedule = Schedule(
        sss=SSSRates(**_decimals(data.get("sss", {}), "sss", [
            "credit_offset", "credit_step", "credit_ceiling",
            "minimum_credit", "minimum_contribution", "rate",
        ])),
        philhealth=PhilHealthRates(**_decimals(data.get("philhealth", {}), "philhealth", [
            "floor_salary", "floor_premium", "ceiling_salary",
            "ceiling_premium", "rate", "employee_share_divisor",
        ])),
        pagibig=PagIBIGRates(**_decimals(data.get("pagibig", {}), "pagibig", [
            "salary_ceiling", "low_salary_threshold", "low_rate", "rate",
        ])),
        brackets=_load_brackets(data.get("withholding_tax", {}).get("brackets", [])),
    )
    logger.debug(f"Loaded schedule from {path} with {len(schedule.brackets)} tax brackets")
    return schedule


SCHEDULE = load_schedule()
