"""
Statutory Contributions Module

Employee share of monthly SSS, PhilHealth and Pag-IBIG contributions.
Results are left unrounded; the pipeline rounds their sum.
"""

from decimal import Decimal, ROUND_FLOOR

from .schedule import SCHEDULE


def sss_monthly_salary_credit(salary: Decimal) -> Decimal:
    """Compute the SSS monthly salary credit (MSC).

    MSC = (salary + 250) // 500 * 500, capped at PHP 25,000.00.

    Args:
        salary: Gross monthly salary

    Returns:
        Monthly salary credit
    """
    rates = SCHEDULE.sss
    steps = ((salary + rates.credit_offset) / rates.credit_step).to_integral_value(
        rounding=ROUND_FLOOR
    )
    return min(rates.credit_ceiling, steps * rates.credit_step)


def sss_contribution(salary: Decimal) -> Decimal:
    """Compute the employee SSS contribution.

    4.5% of the monthly salary credit, or a fixed PHP 135.00 when the
    credit is below PHP 3,250.00.

    Args:
        salary: Gross monthly salary

    Returns:
        SSS contribution
    """
    rates = SCHEDULE.sss
    msc = sss_monthly_salary_credit(salary)
    if msc < rates.minimum_credit:
        return rates.minimum_contribution
    return msc * rates.rate


def philhealth_contribution(salary: Decimal) -> Decimal:
    """Compute the employee PhilHealth premium.

    4% of salary, with PHP 400.00 at or below PHP 10,000.00 and PHP
    3,200.00 at or above PHP 80,000.00. The premium is split evenly with
    the employer.

    Args:
        salary: Gross monthly salary

    Returns:
        Employee half of the PhilHealth premium
    """
    rates = SCHEDULE.philhealth
    if salary <= rates.floor_salary:
        premium = rates.floor_premium
    elif salary >= rates.ceiling_salary:
        premium = rates.ceiling_premium
    else:
        premium = salary * rates.rate

    return premium / rates.employee_share_divisor


def pagibig_contribution(salary: Decimal) -> Decimal:
    """Compute the employee Pag-IBIG contribution.

    Salary is capped at PHP 5,000.00; 1% applies up to PHP 1,500.00,
    2% above.

    Args:
        salary: Gross monthly salary

    Returns:
        Pag-IBIG contribution
    """
    rates = SCHEDULE.pagibig
    salary = min(salary, rates.salary_ceiling)

    rate = rates.rate
    if salary <= rates.low_salary_threshold:
        rate = rates.low_rate

    return salary * rate
