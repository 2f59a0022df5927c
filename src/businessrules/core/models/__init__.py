"""
Core domain models package for the business rule engine.

This package provides the value returned by a failing rule.
"""

from .error import BusinessRuleError

__all__ = [
    "BusinessRuleError",
]
