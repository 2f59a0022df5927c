"""
businessrules - Composable, mode-aware business rule evaluation

This package lets domain code declare independent rules, compose them, and
evaluate them against an entity on creation or update. It includes:

- A rule base class dispatching on the validation mode
- An evaluation helper with first-failure short-circuiting
- Composite rules reaching into nested values and collections
- Holder base classes offering fail-fast creation and update checks
- Ready-made required and format rules

A failing check returns a BusinessRuleError; fail-fast entry points raise it
as a BusinessRuleException.
"""

__version__ = "0.1.0"
__author__ = "businessrules Team"

# Version compatibility check
import sys

if sys.version_info < (3, 10):
    raise RuntimeError("businessrules requires Python 3.10 or higher")

# Import commonly used components for easier access
from .core import (
    EXECUTION_MODES,
    BusinessRule,
    BusinessRuleControl,
    BusinessRuleError,
    BusinessRuleException,
    BusinessRuleProtocol,
    BusinessRuleService,
    BusinessRulesForItem,
    BusinessRulesForItems,
    ConfigurationError,
    InvalidAccessorError,
    InvalidArgumentError,
    InvalidModeError,
    NonePolicy,
    RuleMode,
    apply_business_rules,
    check,
    check_one,
)
from .rules import ObjectPropertyRequiredRule, StringFormatRule, StringPropertyRequiredRule

__all__ = [
    "EXECUTION_MODES",
    "BusinessRule",
    "BusinessRuleControl",
    "BusinessRuleError",
    "BusinessRuleException",
    "BusinessRuleProtocol",
    "BusinessRuleService",
    "BusinessRulesForItem",
    "BusinessRulesForItems",
    "ConfigurationError",
    "InvalidAccessorError",
    "InvalidArgumentError",
    "InvalidModeError",
    "NonePolicy",
    "ObjectPropertyRequiredRule",
    "RuleMode",
    "StringFormatRule",
    "StringPropertyRequiredRule",
    "apply_business_rules",
    "check",
    "check_one",
]
