"""
Withholding Tax Module

Monthly compensation withholding tax bracket lookup.
"""

from decimal import Decimal

from .exceptions import ScheduleError
from .schedule import SCHEDULE, TaxBracket

# Ordered by upper bound; the last row has no upper bound
WITHHOLDING_TAX_TABLE: tuple[TaxBracket, ...] = SCHEDULE.brackets


def select_bracket(
    taxable_income: Decimal,
    table: tuple[TaxBracket, ...] = WITHHOLDING_TAX_TABLE
) -> TaxBracket:
    """Find the first bracket whose upper bound covers the income.

    An income equal to an upper bound stays in that bracket.

    Args:
        taxable_income: Monthly taxable income
        table: Bracket rows ordered by upper bound

    Returns:
        Matching TaxBracket
    """
    for bracket in table:
        if bracket.contains(taxable_income):
            return bracket

    raise ScheduleError(f"No withholding tax bracket covers {taxable_income}")


def resolve_bracket(taxable_income: Decimal) -> tuple[Decimal, Decimal, Decimal]:
    """Get (fixed tax, rate, bracket floor) for a taxable income."""
    return select_bracket(taxable_income).as_tuple()


def bracket_index(taxable_income: Decimal) -> int:
    """Zero-based position of the matching bracket in the table."""
    return WITHHOLDING_TAX_TABLE.index(select_bracket(taxable_income))
