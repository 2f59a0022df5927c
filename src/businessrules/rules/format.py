"""Rule checking a string property against a regular expression."""

import re
from typing import Optional, Pattern, TypeVar, Union

from ..core.constants import PROPERTY_KEY, STRING_FORMAT_ERROR_CODE, WRONG_FORMAT_DESCRIPTION
from ..core.enums import RuleMode
from ..core.models import BusinessRuleError
from ..core.rules.accessors import read_field
from ..core.rules.base import BusinessRule

T = TypeVar("T")


class StringFormatRule(BusinessRule[T]):
    """
    Rule for regex pattern matching on an optional property.

    The pattern may match anywhere in the value; anchor it with ^ and $ to
    require a full match. Entities without the property are not checked.

    Attributes:
        property (str): Name of the checked property
        pattern (Pattern): Compiled regular expression
    """

    def __init__(self, mode: RuleMode, property: str, pattern: Union[str, Pattern]):
        super().__init__(mode)
        self.property = property
        self.pattern = re.compile(pattern)

    def is_applicable(self, entity: T) -> bool:
        return read_field(entity, self.property) is not None

    def check_for_creation(self, entity: T) -> Optional[BusinessRuleError[T]]:
        value = read_field(entity, self.property)

        if value is not None and not self.pattern.search(str(value)):
            return BusinessRuleError(
                STRING_FORMAT_ERROR_CODE,
                WRONG_FORMAT_DESCRIPTION,
                {PROPERTY_KEY: self.property},
            )
        return None

    def check_for_update(self, entity: T) -> Optional[BusinessRuleError[T]]:
        return self.check_for_creation(entity)
