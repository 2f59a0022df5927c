"""
Validation package for the business rule engine.

This package provides schema validation for serialized business rule
exceptions.
"""

from .schema import ValidationResult, validate_exception_payload

__all__ = [
    "ValidationResult",
    "validate_exception_payload",
]
