"""
Custom exceptions for the business rule engine.

This module defines the two error channels of the engine. A validation failure
is normally returned as a BusinessRuleError value; it only becomes a raised
BusinessRuleException when a caller asks for fail-fast behaviour. Programming
mistakes (an unknown mode, a malformed accessor, a malformed rule list) are
always raised immediately as ConfigurationError subclasses.
"""

import json
from types import MappingProxyType
from typing import Any, Dict, Mapping

from ..utils.validation.schema import validate_exception_payload


class ConfigurationError(Exception):
    """
    Raised when rules or their evaluation are wired incorrectly.

    This exception is never a validation outcome. It signals that the code
    declaring or invoking rules is wrong and must be fixed.

    Examples:
        * Checking with a mode that is not CREATE or UPDATE
        * Composite rule accessor that is neither callable nor a field name
        * Rule list that is not a list or tuple
    """

    def __str__(self) -> str:
        """Format configuration error message."""
        return f"Configuration Error: {super().__str__()}"


class InvalidModeError(ConfigurationError, ValueError):
    """
    Raised when a mode outside the valid set is supplied.

    Examples:
        * Rule declared with an unknown mode name
        * Rule checked under RuleMode.ANY
    """


class InvalidAccessorError(ConfigurationError, TypeError):
    """
    Raised when a composite rule is built with an unusable accessor.

    Examples:
        * Accessor is None
        * Accessor is a number or another non-callable object
    """


class InvalidArgumentError(ConfigurationError, ValueError):
    """
    Raised when the evaluation helper receives arguments it cannot work with.

    Examples:
        * Missing mode or entity
        * Rules supplied as something other than a list or tuple
        * Rule list holding None entries
    """


class BusinessRuleException(Exception):
    """
    Raised when a validation failure is escalated.

    Instances are immutable snapshots of a BusinessRuleError taken at the moment
    of escalation. The data mapping is copied with every value converted to a
    string, so nothing done to the originating error afterwards shows up here.

    Attributes:
        id (str): Identifier of the originating error
        error_time (str): Locale formatted capture time
        error_code (str): Machine readable failure code
        description (str): Human readable failure description
        data (Mapping[str, str]): Read-only copy of the error data
    """

    def __init__(
        self,
        id: str,
        error_time: str,
        error_code: str,
        description: str,
        data: Mapping[str, Any],
    ):
        frozen = MappingProxyType({str(key): str(value) for key, value in data.items()})
        super().__init__(f"[{error_time}] [{id}] [{error_code}] {description} - {dict(frozen)}")
        self._id = str(id)
        self._error_time = str(error_time)
        self._error_code = str(error_code)
        self._description = str(description)
        self._data = frozen

    @property
    def id(self) -> str:
        return self._id

    @property
    def error_time(self) -> str:
        return self._error_time

    @property
    def error_code(self) -> str:
        return self._error_code

    @property
    def description(self) -> str:
        return self._description

    @property
    def data(self) -> Mapping[str, str]:
        return self._data

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the snapshot to its serialized shape.

        Returns:
            Dict[str, Any]: Payload with id, data, errorCode, errorTime and
            description keys
        """
        return {
            "id": self._id,
            "data": dict(self._data),
            "errorCode": self._error_code,
            "errorTime": self._error_time,
            "description": self._description,
        }

    def to_json(self) -> str:
        """Serialize the snapshot to a JSON string."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "BusinessRuleException":
        """
        Rebuild a snapshot from its serialized shape.

        Args:
            payload: Dictionary produced by to_dict()

        Returns:
            BusinessRuleException: Equivalent snapshot

        Raises:
            InvalidArgumentError: If the payload does not match the snapshot schema
        """
        result = validate_exception_payload(payload)
        if not result.is_valid:
            raise InvalidArgumentError(
                f"Malformed business rule exception payload: {'; '.join(result.errors)}"
            )
        return cls(
            id=payload["id"],
            error_time=payload["errorTime"],
            error_code=payload["errorCode"],
            description=payload["description"],
            data=payload["data"],
        )

    def __str__(self) -> str:
        """Format the snapshot as its JSON payload."""
        return self.to_json()

    def __reduce__(self):
        return (
            type(self),
            (self._id, self._error_time, self._error_code, self._description, dict(self._data)),
        )
