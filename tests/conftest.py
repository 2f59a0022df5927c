"""Shared test fixtures."""

from typing import Any, List, Optional, Tuple

import pytest

from businessrules import BusinessRuleError, RuleMode, StringPropertyRequiredRule


class FakeEntity:
    """Entity exposing a single attribute named property."""

    def __init__(self, value: Any = None):
        self.property = value


class RecordingRule:
    """Rule double returning a fixed outcome and recording every call."""

    def __init__(
        self,
        error: Optional[BusinessRuleError] = None,
        executable: bool = True,
        applicable: bool = True,
    ):
        self.error = error
        self.executable = executable
        self.applicable = applicable
        self.calls: List[Tuple[RuleMode, Any]] = []
        self.applicability_calls: List[Any] = []

    def is_executable(self, mode: RuleMode) -> bool:
        return self.executable

    def is_applicable(self, entity: Any) -> bool:
        self.applicability_calls.append(entity)
        return self.applicable

    def check(self, mode: RuleMode, entity: Any) -> Optional[BusinessRuleError]:
        self.calls.append((mode, entity))
        return self.error


@pytest.fixture
def fake_entity():
    """Fixture providing the FakeEntity class."""
    return FakeEntity


@pytest.fixture
def recording_rule():
    """Fixture providing a factory of instrumented rule doubles."""
    return RecordingRule


@pytest.fixture
def required_rule() -> StringPropertyRequiredRule:
    """Fixture providing a required string rule on the attribute named property."""
    return StringPropertyRequiredRule(RuleMode.ANY, "property")


@pytest.fixture
def sample_error() -> BusinessRuleError:
    """Fixture providing a failure carrying data."""
    return BusinessRuleError(
        "test.errors.sample", "sample failure", {"PROPERTY": "name", "LIMIT": 5}
    )
