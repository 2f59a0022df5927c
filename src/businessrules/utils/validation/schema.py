"""
Schema Validation Components for the business rule engine

This module provides JSON schema-based validation of serialized
BusinessRuleException payloads. It is used when a payload produced by
BusinessRuleException.to_dict() travels through a transport and has to be
turned back into an exception on the other side.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from jsonschema import Draft7Validator

from ...core.constants import EXCEPTION_PAYLOAD_SCHEMA


@dataclass
class ValidationResult:
    """
    Container for schema validation results.

    Attributes:
        is_valid (bool): Whether the validation passed successfully
        errors (List[str]): List of validation error messages
        warnings (List[str]): List of validation warning messages
        context (Optional[Dict[str, Any]]): Additional context about the validation
    """

    is_valid: bool
    errors: List[str]
    warnings: List[str]
    context: Optional[Dict[str, Any]] = None


_validator = Draft7Validator(EXCEPTION_PAYLOAD_SCHEMA)


def validate_exception_payload(payload: Any) -> ValidationResult:
    """
    Validate a serialized exception payload against its schema.

    Every schema violation is reported, ordered by its location in the payload.

    Args:
        payload: Candidate payload, normally a dictionary

    Returns:
        ValidationResult containing validation details and any errors

    Example:
        >>> result = validate_exception_payload({"id": "x"})
        >>> result.is_valid
        False
    """
    errors = [
        f"{'/'.join(str(part) for part in error.path) or '<root>'}: {error.message}"
        for error in sorted(_validator.iter_errors(payload), key=lambda e: list(map(str, e.path)))
    ]

    return ValidationResult(
        is_valid=len(errors) == 0,
        errors=errors,
        warnings=[],
        context={"schema": EXCEPTION_PAYLOAD_SCHEMA["title"]},
    )
