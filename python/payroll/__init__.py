"""
Payroll Deductions Module

Handles Philippine monthly statutory contributions (SSS, PhilHealth,
Pag-IBIG), compensation withholding tax and net pay.
"""

from .contributions import (
    sss_monthly_salary_credit,
    sss_contribution,
    philhealth_contribution,
    pagibig_contribution,
)
from .exceptions import (
    PayrollError,
    InvalidSalaryError,
    ScheduleError,
)
from .money import parse_salary, round2, format_amount
from .pipeline import PayrollComputation, compute_payroll
from .report import format_report
from .schedule import SCHEDULE, TaxBracket
from .withholding import (
    WITHHOLDING_TAX_TABLE,
    select_bracket,
    resolve_bracket,
)

__all__ = [
    # Contributions
    "sss_monthly_salary_credit",
    "sss_contribution",
    "philhealth_contribution",
    "pagibig_contribution",
    # Withholding Tax
    "WITHHOLDING_TAX_TABLE",
    "TaxBracket",
    "select_bracket",
    "resolve_bracket",
    # Pipeline
    "PayrollComputation",
    "compute_payroll",
    "format_report",
    # Helpers
    "SCHEDULE",
    "parse_salary",
    "round2",
    "format_amount",
    # Errors
    "PayrollError",
    "InvalidSalaryError",
    "ScheduleError",
]
