"""Optional-style access shared by every wrapper.

Callers never test ``value is None`` themselves; they go through these
methods, which only read the slot.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Iterator, TypeVar

from .errors import ContractViolationError, MissingValueError

T = TypeVar("T")

_OMITTED: Any = object()


class OptionalAccess(ABC, Generic[T]):
    """Mixin providing the null-safe API over a single ``value``."""

    __slots__ = ()

    @property
    @abstractmethod
    def value(self) -> T | None:
        """Current value, possibly ``None``."""

    def _accepts_alternative(self, other: OptionalAccess[Any]) -> bool:
        """Whether ``or_`` may hand back *other* in place of ``self``."""
        return True

    def is_present(self) -> bool:
        return self.value is not None

    def is_empty(self) -> bool:
        return self.value is None

    def if_present(self, action: Callable[[T], Any] | None) -> None:
        """Call *action* with the value if one is present.

        Raises:
            ContractViolationError: a value is present and *action* is None.
        """
        value = self.value
        if value is not None:
            _require(action, "action")(value)

    def if_present_or_else(
        self,
        action: Callable[[T], Any] | None,
        empty_action: Callable[[], Any] | None,
    ) -> None:
        """Call *action* with the value, or *empty_action* when empty.

        Only the branch that runs must be provided.
        """
        value = self.value
        if value is not None:
            _require(action, "action")(value)
        else:
            _require(empty_action, "empty_action")()

    def or_(
        self, supplier: Callable[[], OptionalAccess[T]] | None
    ) -> OptionalAccess[T]:
        """Return ``self`` if present, otherwise the wrapper *supplier* builds.

        Raises:
            ContractViolationError: empty and *supplier* is None, returns
                None, or returns something that is not a compatible wrapper.
        """
        if self.is_present():
            return self
        result = _require(supplier, "supplier")()
        if result is None:
            raise ContractViolationError("supplier returned None")
        if not isinstance(result, OptionalAccess) or not self._accepts_alternative(
            result
        ):
            raise ContractViolationError(
                f"supplier returned {type(result).__name__}, "
                f"which cannot stand in for {type(self).__name__}"
            )
        return result

    def stream(self) -> Iterator[T]:
        """Iterate over the value, or over nothing when empty.

        Every call returns a new iterator.
        """
        value = self.value
        if value is not None:
            yield value

    def or_else(self, fallback: T | None) -> T | None:
        value = self.value
        return value if value is not None else fallback

    def or_else_get(self, supplier: Callable[[], T] | None) -> T:
        """Return the value, or what *supplier* produces when empty."""
        value = self.value
        if value is not None:
            return value
        result = _require(supplier, "supplier")()
        if result is None:
            raise ContractViolationError("supplier returned None")
        return result

    def or_else_throw(
        self, exception_supplier: Callable[[], BaseException] | None = _OMITTED
    ) -> T:
        """Return the value, or raise when empty.

        Without arguments an empty wrapper raises ``MissingValueError``.
        With *exception_supplier* the exception it builds is raised instead;
        it is never called when a value is present.
        """
        value = self.value
        if value is not None:
            return value
        if exception_supplier is _OMITTED:
            raise MissingValueError("No value present")
        exc = _require(exception_supplier, "exception_supplier")()
        if not isinstance(exc, BaseException):
            raise ContractViolationError(
                f"exception_supplier returned {type(exc).__name__}, "
                "not an exception"
            )
        raise exc


def _require(func: Callable[..., Any] | None, name: str) -> Callable[..., Any]:
    if func is None:
        raise ContractViolationError(f"{name} must not be None")
    return func
