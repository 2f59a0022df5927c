"""
Rule-holding base classes for domain services.

A holder binds an ordered, immutable list of rules to one entity type and
offers fail-fast creation and update checks. Two wiring styles are available:

- BusinessRuleControl: the rules come from get_business_rules(), called once
  when the holder is created
- BusinessRuleService: the rules are declared as the default_business_rules
  class attribute

Both behave identically once built.
"""

from typing import Generic, Sequence, Tuple, TypeVar

from .enums import RuleMode
from .rules.base import BusinessRuleProtocol
from .rules.helper import apply_business_rules, ensure_rule_list

T = TypeVar("T")


class BusinessRuleHolder(Generic[T]):
    """
    Base class owning the rules checked for an entity type.

    Subclasses provide the rules through _declare_business_rules(). The
    declared sequence is frozen into a tuple when the holder is created.
    """

    def __init__(self):
        rules = self._declare_business_rules()
        ensure_rule_list(rules, f"{type(self).__name__} creation")
        self._business_rules: Tuple[BusinessRuleProtocol[T], ...] = tuple(rules)

    def _declare_business_rules(self) -> Sequence[BusinessRuleProtocol[T]]:
        return ()

    @property
    def business_rules(self) -> Tuple[BusinessRuleProtocol[T], ...]:
        return self._business_rules

    def check_for_creation(self, item: T) -> None:
        """
        Check an entity about to be created.

        Raises:
            BusinessRuleException: If a rule fails
        """
        apply_business_rules(RuleMode.CREATE, item, self._business_rules)

    def check_for_update(self, item: T) -> None:
        """
        Check an entity about to be updated.

        Raises:
            BusinessRuleException: If a rule fails
        """
        apply_business_rules(RuleMode.UPDATE, item, self._business_rules)


class BusinessRuleControl(BusinessRuleHolder[T]):
    """
    Holder whose rules are built by a factory method.

    Override get_business_rules() to return the rules. It is called exactly
    once, from __init__, so subclasses that override __init__ must call
    super().__init__().
    """

    def _declare_business_rules(self) -> Sequence[BusinessRuleProtocol[T]]:
        return self.get_business_rules()

    def get_business_rules(self) -> Sequence[BusinessRuleProtocol[T]]:
        """Build the rules of this holder. No rules by default."""
        return ()


class BusinessRuleService(BusinessRuleHolder[T]):
    """
    Holder whose rules are declared on the class.

    Example:
        >>> class UserService(BusinessRuleService):
        ...     default_business_rules = (
        ...         StringPropertyRequiredRule(RuleMode.ANY, "name"),
        ...     )
    """

    default_business_rules: Sequence[BusinessRuleProtocol[T]] = ()

    def _declare_business_rules(self) -> Sequence[BusinessRuleProtocol[T]]:
        return type(self).default_business_rules
