"""
Payroll Exceptions Module

Errors raised before or while computing payroll deductions.
"""


class PayrollError(Exception):
    """Base error for the payroll package."""


class InvalidSalaryError(PayrollError, ValueError):
    """Salary input that cannot enter the computation."""

    def __init__(self, value: object, reason: str = "not a valid amount"):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid salary {value!r}: {reason}")


class ScheduleError(PayrollError):
    """Malformed contribution or withholding schedule."""
