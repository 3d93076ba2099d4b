"""
Payroll Report Formatter Module

Formats a payroll computation for console display.
"""

from .money import format_amount
from .pipeline import PayrollComputation

LABEL_WIDTH = 26
CURRENCY = "PHP"


def format_line(label: str, amount) -> str:
    """Format one 'label  PHP 0.00' line."""
    return f"{label:<{LABEL_WIDTH}} {CURRENCY} {format_amount(amount)}"


def format_report(result: PayrollComputation) -> str:
    """Format the full deduction report.

    Args:
        result: Computed payroll figures

    Returns:
        Multi-line report text
    """
    lines = [
        "Monthly Contributions",
        format_line("SSS", result.sss_contribution),
        format_line("PhilHealth", result.philhealth_contribution),
        format_line("Pag-IBIG", result.pagibig_contribution),
        format_line("Total Contributions", result.total_contributions),
        "",
        "Tax Computation",
        format_line("Income Tax", result.income_tax),
        format_line("Net Pay After Tax", result.net_pay_after_tax),
        "",
        format_line("Total Deductions", result.total_deductions),
        format_line("Net Pay After Deductions", result.net_salary),
    ]

    return "\n".join(lines)
