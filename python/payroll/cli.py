"""
Payroll CLI Module

Command line entry point: reads a gross monthly salary and prints the
deduction report.
"""

import json
import logging
import os
import sys

from .exceptions import InvalidSalaryError
from .money import parse_salary
from .pipeline import compute_payroll
from .report import format_report

PROMPT = "Enter total monthly salary: PHP "


def configure_logging(verbose: bool = False) -> None:
    """Set up logging from PAYROLL_LOG_LEVEL or the verbose flag."""
    level = "DEBUG" if verbose else os.getenv("PAYROLL_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Compute monthly SSS, PhilHealth, Pag-IBIG and withholding tax"
    )
    parser.add_argument("salary", nargs="?", help="Gross monthly salary (prompted if omitted)")
    parser.add_argument("--json", action="store_true", help="Print figures as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    text = args.salary
    if text is None:
        print(PROMPT, end="", flush=True)
        text = sys.stdin.readline()
        print()

    try:
        salary = parse_salary(text)
    except InvalidSalaryError as e:
        print(e, file=sys.stderr)
        return 1

    result = compute_payroll(salary)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_report(result))

    return 0


if __name__ == "__main__":
    sys.exit(main())
