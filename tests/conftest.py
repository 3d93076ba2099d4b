"""
Pytest configuration and fixtures for payroll deduction tests.
"""

from decimal import Decimal
from pathlib import Path

import pytest

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def schedule_file() -> Path:
    """Return the bundled schedule path."""
    return PROJECT_ROOT / "python" / "payroll" / "schedule.yaml"


@pytest.fixture
def salary_range() -> list[Decimal]:
    """Salaries from 0 to 1,000,000 with boundary values mixed in."""
    salaries = [Decimal(n) * 250 for n in range(0, 401)]
    salaries += [
        Decimal("1499.99"), Decimal("1500.00"), Decimal("1500.01"),
        Decimal("2999.99"), Decimal("3249.99"), Decimal("3250.00"),
        Decimal("9999.99"), Decimal("10000.00"), Decimal("10000.01"),
        Decimal("24749.99"), Decimal("24750.00"), Decimal("79999.99"),
        Decimal("80000.00"), Decimal("80000.01"), Decimal("1000000.00"),
    ]
    return sorted(salaries)


@pytest.fixture
def sample_payroll() -> dict:
    """Expected figures for a PHP 20,000.00 monthly salary."""
    return {
        "gross_salary": Decimal("20000.00"),
        "sss_contribution": Decimal("900.00"),
        "philhealth_contribution": Decimal("400.00"),
        "pagibig_contribution": Decimal("100.00"),
        "total_contributions": Decimal("1400.00"),
        "taxable_income": Decimal("18600.00"),
        "income_tax": Decimal("0.00"),
        "net_pay_after_tax": Decimal("20000.00"),
        "total_deductions": Decimal("1400.00"),
        "net_salary": Decimal("18600.00"),
    }
