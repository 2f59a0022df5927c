"""
Composite rules delegating to values extracted from an entity.

A composite rule owns an accessor and a list of nested rules. It extracts a
value (or a collection of values) from the outer entity and runs the nested
rules against it with the evaluation helper. Composites are always executable
and applicable: the nested rules make those decisions for the extracted value.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Generic, Optional, Tuple, TypeVar

from ..enums import NonePolicy, RuleMode
from ..exceptions import InvalidArgumentError
from ..models import BusinessRuleError
from . import helper
from .accessors import Accessor, make_getter
from .base import BusinessRuleProtocol

logger = logging.getLogger(__name__)

E = TypeVar("E")
V = TypeVar("V")


class _CompositeRule(Generic[E, V]):
    """Accessor and nested rules shared by the composite rules."""

    default_none_policy: NonePolicy = NonePolicy.FORWARD

    def __init__(
        self,
        accessor: Accessor,
        *business_rules: Optional[BusinessRuleProtocol[V]],
        none_policy: Optional[NonePolicy] = None,
    ):
        """
        Initialize a composite rule.

        Args:
            accessor: Callable taking the outer entity, or the name of one of its fields
            *business_rules: Nested rules, in order; None entries are dropped
            none_policy: What to do when the accessor yields None

        Raises:
            InvalidAccessorError: If accessor is neither callable nor a string
            InvalidArgumentError: If a nested rule is not a business rule, or
                none_policy is not a NonePolicy
        """
        owner = f"{type(self).__name__} creation"
        self._get = make_getter(accessor, type(self).__name__)
        self._accessor = accessor
        self._business_rules: Tuple[BusinessRuleProtocol[V], ...] = tuple(
            rule for rule in business_rules if rule is not None
        )
        helper.ensure_rule_list(self._business_rules, owner)

        try:
            self._none_policy = NonePolicy(none_policy or self.default_none_policy)
        except ValueError:
            raise InvalidArgumentError(
                f"{owner} failed: invalid none policy {none_policy!r}. "
                f"Valid policies are {[policy.value for policy in NonePolicy]}"
            ) from None

    @property
    def business_rules(self) -> Tuple[BusinessRuleProtocol[V], ...]:
        return self._business_rules

    @property
    def none_policy(self) -> NonePolicy:
        return self._none_policy

    def is_executable(self, mode: RuleMode) -> bool:
        return True

    def is_applicable(self, entity: E) -> bool:
        return True

    def __repr__(self) -> str:
        accessor = self._accessor if isinstance(self._accessor, str) else getattr(
            self._accessor, "__name__", repr(self._accessor)
        )
        return f"{type(self).__name__}({accessor!r}, rules={len(self._business_rules)})"


class BusinessRulesForItem(_CompositeRule[E, V]):
    """
    Runs nested rules against a single value extracted from the entity.

    By default a None value is forwarded to the nested evaluation, which
    rejects it with InvalidArgumentError. Pass none_policy=NonePolicy.SKIP to
    treat a missing value as a success instead.

    Example:
        >>> rule = BusinessRulesForItem(
        ...     "profile", StringPropertyRequiredRule(RuleMode.ANY, "code")
        ... )
        >>> rule.check(RuleMode.CREATE, {"profile": {"code": "AB123"}}) is None
        True
    """

    default_none_policy = NonePolicy.FORWARD

    def check(self, mode: RuleMode, entity: E) -> Optional[BusinessRuleError[E]]:
        value = self._get(entity)

        if value is None and self._none_policy is NonePolicy.SKIP:
            logger.debug(f"{self!r} extracted None, skipping nested rules")
            return None

        return helper.check(mode, value, self._business_rules)


class BusinessRulesForItems(_CompositeRule[E, V]):
    """
    Runs nested rules against every element of a collection extracted from the entity.

    Elements are checked in iteration order and the first failing element ends
    the evaluation; its failure is the only one reported. By default a None
    collection is a success. Pass none_policy=NonePolicy.FORWARD to hand it to
    the nested evaluation instead, which rejects it.

    Strings and mappings are refused as collections, since iterating them
    yields characters or keys.
    """

    default_none_policy = NonePolicy.SKIP

    def check(self, mode: RuleMode, entity: E) -> Optional[BusinessRuleError[E]]:
        items = self._get(entity)

        if items is None:
            if self._none_policy is NonePolicy.SKIP:
                logger.debug(f"{self!r} extracted None, nothing to check")
                return None
            return helper.check(mode, items, self._business_rules)

        if isinstance(items, (str, bytes, Mapping)) or not isinstance(items, Iterable):
            raise InvalidArgumentError(
                f"{type(self).__name__} check failed: accessor must return a collection. "
                f"Got: {type(items).__name__}"
            )

        for index, item in enumerate(items):
            error = helper.check(mode, item, self._business_rules)
            if error is not None:
                logger.debug(f"{self!r} element {index} failed with {error.error_code}")
                return error

        return None
