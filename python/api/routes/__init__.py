"""
API Routes Package

Contains all route modules for the payroll API.
"""

from .payroll import router as payroll_router

__all__ = [
    "payroll_router",
]
