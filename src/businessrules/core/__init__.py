"""Core rule evaluation functionality."""

from .enums import EXECUTION_MODES, NonePolicy, RuleMode
from .exceptions import (
    BusinessRuleException,
    ConfigurationError,
    InvalidAccessorError,
    InvalidArgumentError,
    InvalidModeError,
)
from .models import BusinessRuleError
from .rules import (
    BusinessRule,
    BusinessRuleProtocol,
    BusinessRulesForItem,
    BusinessRulesForItems,
    apply_business_rules,
    check,
    check_one,
)
from .holders import BusinessRuleControl, BusinessRuleHolder, BusinessRuleService

__all__ = [
    "EXECUTION_MODES",
    "BusinessRule",
    "BusinessRuleControl",
    "BusinessRuleError",
    "BusinessRuleException",
    "BusinessRuleHolder",
    "BusinessRuleProtocol",
    "BusinessRuleService",
    "BusinessRulesForItem",
    "BusinessRulesForItems",
    "ConfigurationError",
    "InvalidAccessorError",
    "InvalidArgumentError",
    "InvalidModeError",
    "NonePolicy",
    "RuleMode",
    "apply_business_rules",
    "check",
    "check_one",
]
