"""
Tests for composite rules delegating to nested values and collections.
"""

import pytest

from businessrules.core.enums import NonePolicy, RuleMode
from businessrules.core.exceptions import InvalidAccessorError, InvalidArgumentError
from businessrules.core.models import BusinessRuleError
from businessrules.core.rules import BusinessRulesForItem, BusinessRulesForItems


class Holder:
    """Entity holding a nested entity and a collection of them."""

    def __init__(self, mock=None, mocks=None):
        self.mock = mock
        self.mocks = mocks

    def get_mock(self):
        return self.mock

    @staticmethod
    def static_get_mocks(holder):
        return holder.mocks


# BusinessRulesForItem


def test_item_accessor_as_field_name(fake_entity, required_rule):
    """Test reaching the nested entity by attribute name."""
    rule = BusinessRulesForItem("mock", required_rule)

    assert rule.check(RuleMode.CREATE, Holder(mock=fake_entity("test"))) is None
    assert rule.check(RuleMode.CREATE, Holder(mock=fake_entity())) is not None


def test_item_accessor_as_mapping_key(required_rule):
    """Test reaching the nested entity by mapping key."""
    rule = BusinessRulesForItem("profile", required_rule)

    assert rule.check(RuleMode.UPDATE, {"profile": {"property": "x"}}) is None


def test_item_accessor_as_function(fake_entity, required_rule):
    """Test reaching the nested entity with unbound and static functions."""
    holder = Holder(mock=fake_entity("test"))

    assert BusinessRulesForItem(Holder.get_mock, required_rule).check(RuleMode.CREATE, holder) is None
    assert BusinessRulesForItem(lambda h: h.mock, required_rule).check(RuleMode.CREATE, holder) is None


def test_item_returns_nested_error_unchanged(recording_rule):
    """Test that the nested failure is returned as is."""
    error = BusinessRuleError("test.nested", "nested failure")
    nested = recording_rule(error=error)
    inner = object()

    result = BusinessRulesForItem(lambda _: inner, nested).check(RuleMode.UPDATE, "outer")

    assert result is error
    assert nested.calls == [(RuleMode.UPDATE, inner)]


def test_item_forwards_none_by_default(required_rule):
    """Test that a None value reaches the nested evaluation, which refuses it."""
    rule = BusinessRulesForItem("profile", required_rule)

    assert rule.none_policy is NonePolicy.FORWARD
    with pytest.raises(InvalidArgumentError):
        rule.check(RuleMode.CREATE, {"profile": None})


def test_item_skip_policy(required_rule):
    """Test that a None value can be treated as a success."""
    rule = BusinessRulesForItem("profile", required_rule, none_policy=NonePolicy.SKIP)

    assert rule.check(RuleMode.CREATE, {"profile": None}) is None
    assert rule.check(RuleMode.CREATE, {}) is None


def test_item_is_always_executable_and_applicable(required_rule):
    """Test default executability and applicability."""
    rule = BusinessRulesForItem("mock", required_rule)

    assert rule.is_executable(RuleMode.CREATE)
    assert rule.is_executable(RuleMode.UPDATE)
    assert rule.is_applicable(Holder())


# BusinessRulesForItems


def test_items_all_valid(fake_entity, required_rule):
    """Test a collection where every element passes."""
    holder = Holder(mocks=[fake_entity("A"), fake_entity("B")])

    assert BusinessRulesForItems("mocks", required_rule).check(RuleMode.CREATE, holder) is None
    assert BusinessRulesForItems(Holder.static_get_mocks, required_rule).check(RuleMode.CREATE, holder) is None


def test_items_accepts_any_iterable(fake_entity, required_rule):
    """Test tuples and generators as collections."""
    rule = BusinessRulesForItems(lambda h: (m for m in h.mocks), required_rule)

    assert rule.check(RuleMode.CREATE, Holder(mocks=(fake_entity("A"),))) is None


def test_items_fail_if_any_element_fails(fake_entity, required_rule):
    """Test that one failing element fails the collection."""
    holder = Holder(mocks=[fake_entity(), fake_entity("B")])

    assert BusinessRulesForItems("mocks", required_rule).check(RuleMode.CREATE, holder) is not None


def test_items_report_first_failing_element_only():
    """Test short-circuiting across elements."""
    first_error = BusinessRuleError("test.invalid1", "first invalid")

    class ElementRule:
        def __init__(self):
            self.seen = []

        def is_executable(self, mode):
            return True

        def is_applicable(self, entity):
            return True

        def check(self, mode, entity):
            self.seen.append(entity)
            if entity == "invalid1":
                return first_error
            if entity == "invalid2":
                return BusinessRuleError("test.invalid2", "second invalid")
            return None

    nested = ElementRule()
    rule = BusinessRulesForItems(lambda _: ["valid", "invalid1", "invalid2"], nested)

    assert rule.check(RuleMode.CREATE, "outer") is first_error
    assert nested.seen == ["valid", "invalid1"]


def test_items_none_collection_passes(recording_rule):
    """Test that a missing collection is a vacuous success."""
    nested = recording_rule(error=BusinessRuleError("test.never", "never returned"))
    rule = BusinessRulesForItems("mocks", nested)

    assert rule.none_policy is NonePolicy.SKIP
    assert rule.check(RuleMode.CREATE, Holder()) is None
    assert rule.check(RuleMode.CREATE, {}) is None
    assert nested.calls == []


def test_items_forward_policy(required_rule):
    """Test forwarding a missing collection to the nested evaluation."""
    rule = BusinessRulesForItems("mocks", required_rule, none_policy=NonePolicy.FORWARD)

    with pytest.raises(InvalidArgumentError):
        rule.check(RuleMode.CREATE, Holder())


def test_items_empty_collection_passes(required_rule):
    """Test that an empty collection has nothing to fail."""
    assert BusinessRulesForItems("mocks", required_rule).check(RuleMode.CREATE, Holder(mocks=[])) is None


@pytest.mark.parametrize("value", ["text", b"bytes", {"key": "value"}, 42])
def test_items_reject_non_collections(value, required_rule):
    """Test that strings, mappings and scalars are not treated as collections."""
    with pytest.raises(InvalidArgumentError, match="accessor must return a collection"):
        BusinessRulesForItems("mocks", required_rule).check(RuleMode.CREATE, Holder(mocks=value))


def test_items_none_element_is_refused(fake_entity, required_rule):
    """Test that a None element breaks the nested evaluation precondition."""
    holder = Holder(mocks=[fake_entity("A"), None])

    with pytest.raises(InvalidArgumentError):
        BusinessRulesForItems("mocks", required_rule).check(RuleMode.CREATE, holder)


# Shared construction behaviour


@pytest.mark.parametrize("composite", [BusinessRulesForItem, BusinessRulesForItems])
@pytest.mark.parametrize("accessor", [None, 42, ["mock"]])
def test_invalid_accessor_is_rejected_at_construction(composite, accessor, required_rule):
    """Test that unusable accessors raise before any check runs."""
    with pytest.raises(InvalidAccessorError, match="creation failed"):
        composite(accessor, required_rule)


@pytest.mark.parametrize("composite", [BusinessRulesForItem, BusinessRulesForItems])
def test_accepts_any_number_of_rules(composite, required_rule):
    """Test construction with zero or more nested rules, dropping None entries."""
    other = type(required_rule)(RuleMode.ANY, "property")

    assert composite("mock").business_rules == ()
    assert composite("mock", None).business_rules == ()
    assert composite("mock", required_rule).business_rules == (required_rule,)
    assert composite("mock", required_rule, None, other).business_rules == (required_rule, other)


@pytest.mark.parametrize("composite", [BusinessRulesForItem, BusinessRulesForItems])
def test_non_rule_nested_entries_are_rejected_at_construction(composite, required_rule):
    """Test that nested entries without the rule methods raise before any check runs."""
    with pytest.raises(InvalidArgumentError, match=f"{composite.__name__} creation failed"):
        composite("mock", required_rule, 42)


@pytest.mark.parametrize("composite", [BusinessRulesForItem, BusinessRulesForItems])
def test_unknown_none_policy_is_rejected_at_construction(composite, required_rule):
    """Test that a none policy outside NonePolicy raises a configuration error."""
    with pytest.raises(InvalidArgumentError, match="invalid none policy 'bogus'"):
        composite("mock", required_rule, none_policy="bogus")


def test_none_policy_accepts_its_value(required_rule):
    """Test that a none policy can be given by value."""
    rule = BusinessRulesForItem("mock", required_rule, none_policy="skip")

    assert rule.none_policy is NonePolicy.SKIP


@pytest.mark.parametrize("composite", [BusinessRulesForItem, BusinessRulesForItems])
def test_nested_rules_follow_the_mode(composite, recording_rule):
    """Test that nested rules are filtered by the outer mode."""
    nested = recording_rule(executable=False, error=BusinessRuleError("test.never", "never"))
    rule = composite(lambda _: ["x"] if composite is BusinessRulesForItems else "x", nested)

    assert rule.check(RuleMode.UPDATE, "outer") is None
    assert nested.calls == []
