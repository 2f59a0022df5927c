"""
Enumerations for business rule evaluation.

This module defines the execution modes that gate which rules run during a
validation pass, and the policies composite rules follow when their accessor
yields no value.

- RuleMode: The context of a validation pass (creation or update), plus the
  ANY wildcard used when declaring a rule
- NonePolicy: What a composite rule does with a None extracted value
"""

from enum import Enum
from typing import Any, Tuple

from .exceptions import InvalidModeError


class RuleMode(Enum):
    """
    Execution mode of a validation pass.

    CREATE and UPDATE are the concrete modes a check runs under. ANY is only
    meaningful when declaring a rule: it matches every concrete mode.
    """

    ANY = "ANY"  # Wildcard, rule runs in every mode
    CREATE = "CREATE"  # Entity is being created
    UPDATE = "UPDATE"  # Entity is being updated

    @classmethod
    def parse(cls, value: Any) -> "RuleMode":
        """
        Convert a member or its string value into a RuleMode.

        Args:
            value: A RuleMode member or one of "ANY", "CREATE", "UPDATE"

        Returns:
            RuleMode: The matching member

        Raises:
            InvalidModeError: If the value names no mode
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidModeError(
                f"Invalid mode supplied: {value!r}. "
                f"Valid modes are {[mode.value for mode in cls]}."
            ) from None


# Modes a check can actually be executed under
EXECUTION_MODES: Tuple[RuleMode, ...] = (RuleMode.CREATE, RuleMode.UPDATE)


class NonePolicy(Enum):
    """
    Behaviour of a composite rule when its accessor returns None.

    FORWARD hands the None value to the nested evaluation, whose precondition
    rejects it. SKIP treats the missing value as a vacuous success.
    """

    FORWARD = "forward"
    SKIP = "skip"
