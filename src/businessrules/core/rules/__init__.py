"""
Rule contract, evaluation helper and composite rules.
"""

from .base import BusinessRule, BusinessRuleProtocol
from .composite import BusinessRulesForItem, BusinessRulesForItems
from .helper import apply_business_rules, check, check_one

__all__ = [
    "BusinessRule",
    "BusinessRuleProtocol",
    "BusinessRulesForItem",
    "BusinessRulesForItems",
    "apply_business_rules",
    "check",
    "check_one",
]
