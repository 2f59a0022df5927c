"""
Validation failure value returned by business rules.

A BusinessRuleError is created by a failing rule, in one constructor call, and
is frozen from then on. It is handed back to the caller as a plain value; the
caller decides whether to inspect it or to escalate it into a
BusinessRuleException.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Generic, Mapping, TypeVar

from ..constants import ERROR_TIME_FORMAT
from ..exceptions import BusinessRuleException

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class BusinessRuleError(Generic[T]):
    """
    A single validation failure for an entity of type T.

    Equality is identity: two failures with the same code are still distinct
    occurrences, told apart by their id.

    Attributes:
        error_code (str): Machine readable failure code
        description (str): Human readable failure description
        data (Mapping[str, Any]): Read-only, insertion ordered details attached
            by the failing rule
        id (str): Unique identifier, assigned at construction
    """

    error_code: str
    description: str
    data: Mapping[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=lambda: str(uuid.uuid4()), init=False)

    def __post_init__(self):
        """Copy and freeze the data mapping."""
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    def to_exception(self) -> BusinessRuleException:
        """
        Snapshot this failure into a raisable exception.

        The capture time is taken now, and data values are converted to strings.

        Returns:
            BusinessRuleException: Independent snapshot of this failure
        """
        return BusinessRuleException(
            id=self.id,
            error_time=datetime.now().strftime(ERROR_TIME_FORMAT),
            error_code=self.error_code,
            description=self.description,
            data=self.data,
        )
