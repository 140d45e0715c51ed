"""Value checks shared by the family ``_accept`` hooks."""

from __future__ import annotations

from typing import Any

from ..core.config import get_settings
from ..core.errors import InvalidValueError, InvalidValueTypeError


def strict_types() -> bool:
    return get_settings().strict_types


def require_type(owner: type, value: Any, expected: type | tuple[type, ...], label: str) -> Any:
    """Return *value* if it is an *expected* instance (``bool`` never counts as int)."""
    if isinstance(value, bool) and bool not in _as_tuple(expected):
        raise InvalidValueTypeError(owner.__name__, label, value)
    if not isinstance(value, expected):
        raise InvalidValueTypeError(owner.__name__, label, value)
    return value


def require_range(owner: type, value: int, lower: int, upper: int) -> int:
    if not lower <= value <= upper:
        raise InvalidValueError(
            f"{owner.__name__} value {value} is outside [{lower}, {upper}]"
        )
    return value


def _as_tuple(expected: type | tuple[type, ...]) -> tuple[type, ...]:
    return expected if isinstance(expected, tuple) else (expected,)
