"""
FastAPI Backend for Payroll Deductions

Provides REST API endpoints for the payroll calculator.
"""

from .main import app

__all__ = ["app"]
