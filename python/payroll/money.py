"""
Money Helpers Module

Exact decimal conversion, rounding and formatting for peso amounts.
"""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, getcontext, localcontext

from .exceptions import InvalidSalaryError

CENTS = Decimal("0.01")

# Headroom for rate products and bracket offsets beyond the amount digits
GUARD_DIGITS = 8

# Currency markers accepted in front of an amount
_CURRENCY_PREFIX = re.compile(r"^(PHP|₱)\s*", re.IGNORECASE)


def to_decimal(value: Decimal | int | str) -> Decimal:
    """Convert a value to Decimal without passing through float."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        raise TypeError("float amounts are not accepted; pass a str or Decimal")
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise InvalidSalaryError(value) from None


def precision_for(amount: Decimal) -> int:
    """Context precision that holds the amount exactly to centavos."""
    if not amount.is_finite():
        return getcontext().prec
    integer_digits = max(amount.adjusted() + 1, 1)
    fraction_digits = max(-amount.as_tuple().exponent, 2)
    return max(getcontext().prec, integer_digits + fraction_digits + GUARD_DIGITS)


def round2(amount: Decimal) -> Decimal:
    """Round to centavos, half away from zero."""
    with localcontext() as ctx:
        ctx.prec = precision_for(amount)
        return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_amount(amount: Decimal) -> str:
    """Render an amount with exactly two fractional digits."""
    return f"{round2(amount):f}"


def parse_salary(text: str) -> Decimal:
    """Parse a gross monthly salary entered as text.

    Args:
        text: Amount string, optionally prefixed with PHP or ₱ and
            using comma thousand separators

    Returns:
        Salary as Decimal

    Raises:
        InvalidSalaryError: If the text is empty, not a number, not
            finite, or negative
    """
    if text is None or not text.strip():
        raise InvalidSalaryError(text, "no amount given")

    cleaned = _CURRENCY_PREFIX.sub("", text.strip()).replace(",", "")

    try:
        salary = Decimal(cleaned)
    except InvalidOperation:
        raise InvalidSalaryError(text) from None

    return check_salary(salary, original=text)


def check_salary(salary: Decimal, original: object = None) -> Decimal:
    """Reject salaries outside the domain of the contribution formulas."""
    shown = salary if original is None else original
    if not salary.is_finite():
        raise InvalidSalaryError(shown, "amount must be finite")
    if salary < 0:
        raise InvalidSalaryError(shown, "amount must not be negative")
    return salary
