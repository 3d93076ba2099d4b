"""
Payroll API Routes

Provides the monthly deduction computation endpoint.
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from payroll import InvalidSalaryError, compute_payroll, format_amount, parse_salary
from payroll.withholding import WITHHOLDING_TAX_TABLE

router = APIRouter(prefix="/payroll", tags=["payroll"])


class PayrollRequest(BaseModel):
    """Gross monthly salary to compute deductions for."""

    gross_salary: str = Field(..., examples=["35000", "25000.50"])


class TaxBracketInfo(BaseModel):
    """Withholding tax bracket applied."""

    index: int
    upper_bound: str | None  # None = no upper limit
    fixed_tax: str
    rate: str
    floor: str
    description: str


class PayrollResponse(BaseModel):
    """Computed monthly payroll figures, two decimal places."""

    gross_salary: str
    sss_contribution: str
    philhealth_contribution: str
    pagibig_contribution: str
    total_contributions: str
    taxable_income: str
    income_tax: str
    net_pay_after_tax: str
    total_deductions: str
    net_salary: str
    bracket: TaxBracketInfo


@router.post("/compute", response_model=PayrollResponse)
async def compute(request: PayrollRequest) -> PayrollResponse:
    """Compute contributions, withholding tax and net pay.

    Args:
        request: Salary input

    Returns:
        PayrollResponse with every reported figure
    """
    try:
        salary = parse_salary(request.gross_salary)
    except InvalidSalaryError as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = compute_payroll(salary)
    bracket = result.bracket
    figures = result.to_dict()
    figures.pop("tax_bracket")

    return PayrollResponse(
        **figures,
        bracket=TaxBracketInfo(
            index=WITHHOLDING_TAX_TABLE.index(bracket),
            upper_bound=None if bracket.is_unbounded else format_amount(bracket.upper_bound),
            fixed_tax=format_amount(bracket.fixed_tax),
            rate=str(bracket.rate),
            floor=format_amount(bracket.floor),
            description=bracket.describe(),
        ),
    )
