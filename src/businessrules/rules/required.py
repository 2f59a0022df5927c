"""
Rules requiring a property to be set.

- StringPropertyRequiredRule: the property must be a non-empty value
- ObjectPropertyRequiredRule: the property must not be None

Both behave the same on creation and update.
"""

from collections.abc import Sized
from numbers import Number
from typing import Optional, TypeVar

from ..core.constants import (
    OBJECT_REQUIRED_ERROR_CODE,
    PROPERTY_KEY,
    PROPERTY_REQUIRED_DESCRIPTION,
    STRING_REQUIRED_ERROR_CODE,
)
from ..core.enums import RuleMode
from ..core.models import BusinessRuleError
from ..core.rules.accessors import read_field
from ..core.rules.base import BusinessRule

T = TypeVar("T")


class StringPropertyRequiredRule(BusinessRule[T]):
    """
    Rule for validating required string properties.

    Fails when the property is missing, None or empty. Numbers and booleans
    have no content of their own and count as empty, so a string property
    holding 5 or True fails as well.

    Attributes:
        property (str): Name of the checked property
    """

    def __init__(self, mode: RuleMode, property: str):
        super().__init__(mode)
        self.property = property

    def check_for_creation(self, entity: T) -> Optional[BusinessRuleError[T]]:
        value = read_field(entity, self.property)

        if (
            value is None
            or isinstance(value, Number)
            or (isinstance(value, Sized) and len(value) == 0)
        ):
            return BusinessRuleError(
                STRING_REQUIRED_ERROR_CODE,
                PROPERTY_REQUIRED_DESCRIPTION,
                {PROPERTY_KEY: self.property},
            )
        return None

    def check_for_update(self, entity: T) -> Optional[BusinessRuleError[T]]:
        return self.check_for_creation(entity)


class ObjectPropertyRequiredRule(BusinessRule[T]):
    """
    Rule for validating required object properties.

    Fails only when the property is missing or None; falsy values such as 0
    or an empty list are accepted.

    Attributes:
        property (str): Name of the checked property
    """

    def __init__(self, mode: RuleMode, property: str):
        super().__init__(mode)
        self.property = property

    def check_for_creation(self, entity: T) -> Optional[BusinessRuleError[T]]:
        if read_field(entity, self.property) is None:
            return BusinessRuleError(
                OBJECT_REQUIRED_ERROR_CODE,
                PROPERTY_REQUIRED_DESCRIPTION,
                {PROPERTY_KEY: self.property},
            )
        return None

    def check_for_update(self, entity: T) -> Optional[BusinessRuleError[T]]:
        return self.check_for_creation(entity)
