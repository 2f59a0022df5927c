"""
Evaluation of ordered rule lists.

This module runs rules against an entity for a given mode. Rules are visited
in declaration order and evaluation stops at the first failure, which is
returned as a value. apply_business_rules() is the fail-fast variant that
raises the failure instead.

Broken arguments (missing mode or entity, a rule list that is not a list or
tuple) are programming errors and raise InvalidArgumentError straight away.
"""

import logging
from typing import Any, Optional, Sequence, TypeVar

from ..enums import RuleMode
from ..exceptions import InvalidArgumentError
from ..models import BusinessRuleError
from .base import BusinessRuleProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T")


def ensure_rule_list(rules: Any, owner: str) -> None:
    """
    Validate that rules is a well-formed ordered sequence.

    Args:
        rules: Candidate rule list
        owner: Name of the caller, used in the error message

    Raises:
        InvalidArgumentError: If rules is not a list or tuple, or holds an entry
            that is not a business rule
    """
    if not isinstance(rules, (list, tuple)):
        raise InvalidArgumentError(
            f"{owner} failed: business rules must be a list or tuple. Got: {rules!r}"
        )
    if any(rule is None for rule in rules):
        raise InvalidArgumentError(f"{owner} failed: business rules must not contain None")
    invalid = [rule for rule in rules if not isinstance(rule, BusinessRuleProtocol)]
    if invalid:
        raise InvalidArgumentError(
            f"{owner} failed: business rules must implement is_executable, "
            f"is_applicable and check. Got: {invalid!r}"
        )


def check(
    mode: RuleMode, entity: T, rules: Sequence[BusinessRuleProtocol[T]]
) -> Optional[BusinessRuleError[T]]:
    """
    Check an entity against an ordered list of rules.

    Rules that are not executable for the mode, or not applicable to the
    entity, are skipped. The first failure ends the evaluation.

    Args:
        mode: Mode of the validation pass
        entity: Entity to check
        rules: Rules to run, in order

    Returns:
        Optional[BusinessRuleError[T]]: The first failure, or None if every rule passes

    Raises:
        InvalidArgumentError: If mode, entity or rules are not properly defined

    Example:
        >>> rule = StringPropertyRequiredRule(RuleMode.ANY, "name")
        >>> check(RuleMode.CREATE, {"name": "Ada"}, [rule]) is None
        True
    """
    if not isinstance(mode, RuleMode) or entity is None:
        raise InvalidArgumentError(
            "check failed: (mode, item, business_rules) must be properly defined. "
            f"Got: ({mode!r}, {entity!r}, {rules!r})"
        )
    ensure_rule_list(rules, "check")

    for rule in rules:
        if not rule.is_executable(mode) or not rule.is_applicable(entity):
            logger.debug(f"Skipping {rule!r} for mode {mode.value}")
            continue

        error = rule.check(mode, entity)
        if error is not None:
            logger.debug(f"{rule!r} failed with {error.error_code} [{error.id}]")
            return error

    return None


def check_one(
    mode: RuleMode, entity: T, rule: BusinessRuleProtocol[T]
) -> Optional[BusinessRuleError[T]]:
    """Check an entity against a single rule."""
    return check(mode, entity, [rule])


def apply_business_rules(
    mode: RuleMode, entity: T, rules: Sequence[BusinessRuleProtocol[T]]
) -> None:
    """
    Check an entity and raise the first failure.

    Args:
        mode: Mode of the validation pass
        entity: Entity to check
        rules: Rules to run, in order

    Returns:
        None: When every rule passes

    Raises:
        BusinessRuleException: Snapshot of the first failure
        InvalidArgumentError: If mode, entity or rules are not properly defined
    """
    error = check(mode, entity, rules)

    if error is not None:
        logger.info(
            f"Business rule {error.error_code} failed for {type(entity).__name__} "
            f"on {mode.value} [{error.id}]"
        )
        raise error.to_exception()

    return None
