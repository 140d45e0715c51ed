"""Tests for the optional-style access API shared by every wrapper."""

from __future__ import annotations

import pytest

from picotypes import (
    ContractViolationError,
    IntegerPicoType,
    LongPicoType,
    MissingValueError,
    StringPicoType,
)
from picotypes.core.optional import OptionalAccess


class Quantity(IntegerPicoType):
    pass


class OtherQuantity(IntegerPicoType):
    pass


class Sequence(LongPicoType):
    pass


class Label(StringPicoType):
    pass


class Box(OptionalAccess[int]):
    """Minimal implementation outside the wrapper hierarchy."""

    def __init__(self, value):
        self._v = value

    @property
    def value(self):
        return self._v


@pytest.fixture
def present() -> Quantity:
    return Quantity(42)


@pytest.fixture
def empty() -> Quantity:
    return Quantity(None)


class TestPresence:
    def test_is_present(self, present, empty):
        assert present.is_present()
        assert not empty.is_present()

    def test_is_empty(self, present, empty):
        assert empty.is_empty()
        assert not present.is_empty()

    def test_falsy_values_are_present(self):
        assert Quantity(0).is_present()
        assert Label("").is_present()

    def test_plain_implementation(self):
        assert Box(1).is_present()
        assert Box(None).is_empty()


class TestIfPresent:
    def test_invokes_action_with_value(self, present):
        seen = []
        present.if_present(seen.append)
        assert seen == [42]

    def test_skips_action_when_empty(self, empty):
        empty.if_present(lambda v: pytest.fail("must not be called"))

    def test_none_action_when_empty_is_noop(self, empty):
        empty.if_present(None)

    def test_none_action_when_present_raises(self, present):
        with pytest.raises(ContractViolationError, match="action"):
            present.if_present(None)


class TestIfPresentOrElse:
    def test_present_runs_action_only(self, present):
        calls = []
        present.if_present_or_else(
            lambda v: calls.append(("action", v)),
            lambda: calls.append(("empty", None)),
        )
        assert calls == [("action", 42)]

    def test_empty_runs_empty_action_only(self, empty):
        calls = []
        empty.if_present_or_else(
            lambda v: calls.append(("action", v)),
            lambda: calls.append(("empty", None)),
        )
        assert calls == [("empty", None)]

    def test_unused_branch_may_be_none(self, present, empty):
        present.if_present_or_else(lambda v: None, None)
        empty.if_present_or_else(None, lambda: None)

    def test_missing_branch_raises(self, present, empty):
        with pytest.raises(ContractViolationError, match="empty_action"):
            empty.if_present_or_else(lambda v: None, None)
        with pytest.raises(ContractViolationError, match="action"):
            present.if_present_or_else(None, lambda: None)


class TestOr:
    def test_present_returns_self(self, present):
        replacement = Quantity(7)
        assert present.or_(lambda: replacement) is present

    def test_present_never_calls_supplier(self, present):
        present.or_(lambda: pytest.fail("must not be called"))

    def test_empty_returns_supplied(self, empty):
        replacement = Quantity(7)
        assert empty.or_(lambda: replacement) is replacement

    def test_supplier_may_return_same_kind(self, empty):
        other = OtherQuantity(7)
        assert empty.or_(lambda: other) is other

    def test_supplier_returning_none_raises(self, empty):
        with pytest.raises(ContractViolationError, match="returned None"):
            empty.or_(lambda: None)

    def test_none_supplier_raises(self, empty):
        with pytest.raises(ContractViolationError, match="supplier"):
            empty.or_(None)

    def test_supplier_returning_other_kind_raises(self, empty):
        with pytest.raises(ContractViolationError, match="cannot stand in"):
            empty.or_(lambda: Sequence(7))

    def test_supplier_returning_raw_value_raises(self, empty):
        with pytest.raises(ContractViolationError):
            empty.or_(lambda: 7)


class TestStream:
    def test_present_yields_value(self, present):
        assert list(present.stream()) == [42]

    def test_empty_yields_nothing(self, empty):
        assert list(empty.stream()) == []

    def test_each_call_is_a_fresh_iterator(self, present):
        first = present.stream()
        assert list(first) == [42]
        assert list(first) == []
        assert list(present.stream()) == [42]


class TestOrElse:
    def test_present_returns_value(self, present):
        assert present.or_else(1) == 42

    def test_empty_returns_fallback(self, empty):
        assert empty.or_else(1) == 1

    def test_fallback_may_be_none(self, empty):
        assert empty.or_else(None) is None


class TestOrElseGet:
    def test_present_returns_value(self, present):
        assert present.or_else_get(lambda: pytest.fail("must not be called")) == 42

    def test_empty_returns_supplied(self, empty):
        assert empty.or_else_get(lambda: 3) == 3

    def test_supplier_returning_none_raises(self, empty):
        with pytest.raises(ContractViolationError):
            empty.or_else_get(lambda: None)

    def test_none_supplier_raises(self, empty):
        with pytest.raises(ContractViolationError):
            empty.or_else_get(None)


class TestOrElseThrow:
    def test_present_returns_value(self, present):
        assert present.or_else_throw() == 42

    def test_empty_raises_missing_value(self, empty):
        with pytest.raises(MissingValueError, match="No value present"):
            empty.or_else_throw()

    def test_missing_value_is_a_lookup_error(self, empty):
        with pytest.raises(LookupError):
            empty.or_else_throw()

    def test_custom_exception(self, empty):
        with pytest.raises(RuntimeError, match="no quantity"):
            empty.or_else_throw(lambda: RuntimeError("no quantity"))

    def test_custom_exception_class_as_supplier(self, empty):
        with pytest.raises(KeyError):
            empty.or_else_throw(KeyError)

    def test_supplier_not_called_when_present(self, present):
        assert present.or_else_throw(lambda: pytest.fail("must not be called")) == 42

    def test_explicit_none_supplier_raises(self, empty):
        with pytest.raises(ContractViolationError, match="exception_supplier"):
            empty.or_else_throw(None)

    def test_supplier_returning_non_exception_raises(self, empty):
        with pytest.raises(ContractViolationError, match="not an exception"):
            empty.or_else_throw(lambda: "oops")

    def test_plain_implementation(self):
        assert Box(5).or_else_throw() == 5
        with pytest.raises(MissingValueError):
            Box(None).or_else_throw()
