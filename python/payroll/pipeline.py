"""
Payroll Pipeline Module

Chains the statutory contributions and withholding tax into the monthly
deduction figures.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, localcontext

from .contributions import (
    pagibig_contribution,
    philhealth_contribution,
    sss_contribution,
)
from .money import check_salary, format_amount, precision_for, round2, to_decimal
from .schedule import TaxBracket
from .withholding import select_bracket

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayrollComputation:
    """Monthly payroll deduction result."""

    gross_salary: Decimal

    # Contributions, unrounded
    sss_contribution: Decimal
    philhealth_contribution: Decimal
    pagibig_contribution: Decimal
    total_contributions: Decimal

    # Tax
    taxable_income: Decimal
    bracket: TaxBracket
    income_tax: Decimal
    net_pay_after_tax: Decimal

    # Take home
    total_deductions: Decimal
    net_salary: Decimal

    def to_dict(self) -> dict:
        return {
            "gross_salary": format_amount(self.gross_salary),
            "sss_contribution": format_amount(self.sss_contribution),
            "philhealth_contribution": format_amount(self.philhealth_contribution),
            "pagibig_contribution": format_amount(self.pagibig_contribution),
            "total_contributions": format_amount(self.total_contributions),
            "taxable_income": format_amount(self.taxable_income),
            "tax_bracket": self.bracket.describe(),
            "income_tax": format_amount(self.income_tax),
            "net_pay_after_tax": format_amount(self.net_pay_after_tax),
            "total_deductions": format_amount(self.total_deductions),
            "net_salary": format_amount(self.net_salary),
        }


def compute_payroll(gross_salary: Decimal | int | str) -> PayrollComputation:
    """Compute monthly contributions, withholding tax and net pay.

    The contribution total is rounded before it is subtracted from gross
    salary; the individual contributions are not. Arithmetic runs with
    enough precision to keep every digit of the salary.

    Args:
        gross_salary: Gross monthly salary

    Returns:
        PayrollComputation with every reported figure

    Raises:
        InvalidSalaryError: If the salary is not a number, negative or
            not finite
    """
    gross_salary = check_salary(to_decimal(gross_salary))

    with localcontext() as ctx:
        ctx.prec = precision_for(gross_salary)

        # Step 1: Taxable income
        sss = sss_contribution(gross_salary)
        philhealth = philhealth_contribution(gross_salary)
        pagibig = pagibig_contribution(gross_salary)
        total_contributions = round2(sss + philhealth + pagibig)
        taxable_income = gross_salary - total_contributions

        # Step 2: Withholding tax
        bracket = select_bracket(taxable_income)
        fixed_tax, rate, floor = bracket.as_tuple()
        income_tax = round2(fixed_tax + (taxable_income - floor) * rate)
        net_pay_after_tax = round2(gross_salary - income_tax)

        # Step 3: Take home pay
        total_deductions = round2(total_contributions + income_tax)
        net_salary = round2(gross_salary - total_deductions)

    logger.debug(
        f"Payroll for {gross_salary}: contributions={total_contributions}, "
        f"taxable={taxable_income}, tax={income_tax}, net={net_salary}"
    )

    return PayrollComputation(
        gross_salary=gross_salary,
        sss_contribution=sss,
        philhealth_contribution=philhealth,
        pagibig_contribution=pagibig,
        total_contributions=total_contributions,
        taxable_income=taxable_income,
        bracket=bracket,
        income_tax=income_tax,
        net_pay_after_tax=net_pay_after_tax,
        total_deductions=total_deductions,
        net_salary=net_salary,
    )
