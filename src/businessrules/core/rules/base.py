"""
Base rule components for the business rule engine.

This module defines the capability every rule exposes to the evaluation helper
and the abstract base most leaf rules extend. The base fixes how a mode is
routed to a mode-specific check; subclasses only say what a creation check and
an update check do.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, Protocol, TypeVar, runtime_checkable

from ..enums import EXECUTION_MODES, RuleMode
from ..exceptions import InvalidModeError
from ..models import BusinessRuleError

T = TypeVar("T")


@runtime_checkable
class BusinessRuleProtocol(Protocol[T]):
    """Protocol defining the interface the evaluation helper relies on."""

    def is_executable(self, mode: RuleMode) -> bool:
        """Tell whether the rule runs under the given mode."""
        ...

    def is_applicable(self, entity: T) -> bool:
        """Tell whether the rule has anything to check on the entity."""
        ...

    def check(self, mode: RuleMode, entity: T) -> Optional[BusinessRuleError[T]]:
        """Check the entity, returning the failure if there is one."""
        ...


class BusinessRule(ABC, Generic[T]):
    """
    Base class for rules that behave differently on creation and update.

    A rule is declared with a mode. ANY makes it run on every pass, CREATE or
    UPDATE restricts it to passes of that mode. check() routes a pass to
    check_for_creation() or check_for_update(); subclasses implement those two
    and leave check() alone.

    Attributes:
        mode (RuleMode): Mode the rule was declared with
    """

    def __init__(self, mode: RuleMode = RuleMode.ANY):
        """
        Initialize a rule.

        Args:
            mode: Mode the rule runs under, ANY by default

        Raises:
            InvalidModeError: If mode is not a RuleMode or a mode name
        """
        self._mode = RuleMode.parse(mode)

    @property
    def mode(self) -> RuleMode:
        return self._mode

    def is_executable(self, mode: RuleMode) -> bool:
        """
        Tell whether the rule runs under the given mode.

        Args:
            mode: Mode of the current validation pass

        Returns:
            bool: True if the rule was declared with ANY or with this mode
        """
        return self._mode is RuleMode.ANY or self._mode == mode

    def is_applicable(self, entity: T) -> bool:
        """
        Tell whether the rule has anything to check on the entity.

        Rules checking optional data override this to skip entities where the
        check would be vacuous.
        """
        return True

    def check(self, mode: RuleMode, entity: T) -> Optional[BusinessRuleError[T]]:
        """
        Check the entity under a concrete mode.

        Args:
            mode: CREATE or UPDATE
            entity: Entity to check

        Returns:
            Optional[BusinessRuleError[T]]: The failure, or None if the entity passes

        Raises:
            InvalidModeError: If mode is anything other than CREATE or UPDATE
        """
        if mode is RuleMode.CREATE:
            return self.check_for_creation(entity)
        if mode is RuleMode.UPDATE:
            return self.check_for_update(entity)

        raise InvalidModeError(
            f"{type(self).__name__} check failed: Invalid mode supplied: {mode!r}. "
            f"Valid modes are {[valid.value for valid in EXECUTION_MODES]}."
        )

    def validate(self, entity: T) -> Optional[BusinessRuleError[T]]:
        """Check the entity under the rule's own declared mode."""
        return self.check(self._mode, entity)

    @abstractmethod
    def check_for_creation(self, entity: T) -> Optional[BusinessRuleError[T]]:
        """Check an entity that is being created."""

    @abstractmethod
    def check_for_update(self, entity: T) -> Optional[BusinessRuleError[T]]:
        """Check an entity that is being updated."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mode={self._mode.value})"
