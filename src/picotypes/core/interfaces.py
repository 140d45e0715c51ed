"""Protocol interfaces for the per-kind policies.

A wrapper family composes one policy of each role. Policies are stateless
and only ever see non-``None`` values; the wrapper base handles ``None``
before delegating.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IEqualityStrategy(Protocol):
    """Equivalence and hashing of two present values of one kind."""

    def equivalent(self, left: Any, right: Any) -> bool: ...

    def hash(self, value: Any) -> int: ...


@runtime_checkable
class IOrderingStrategy(Protocol):
    """Total order over present values of one kind.

    ``compare`` returns -1, 0 or 1, and 0 exactly when the kind's
    equality strategy reports the values equivalent.
    """

    def compare(self, left: Any, right: Any) -> int: ...


@runtime_checkable
class IDisplayStrategy(Protocol):
    """Human-readable rendering of a slot (``None`` included)."""

    def render(self, value: Any) -> str: ...
