"""Numeric wrapper families.

Integer kinds keep the fixed widths the values came from (32-bit integer,
64-bit long) and reject anything outside them; ``BigIntegerPicoType`` is
unbounded. ``DoublePicoType`` uses IEEE total order for both equality and
ordering, ``DecimalPicoType`` ignores scale.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from ..core.enums import ValueKind
from ..core.errors import InvalidValueError, InvalidValueTypeError
from ..core.pico_type import OrderedPicoType
from ..core.strategies import DECIMAL_EQUALITY, DECIMAL_ORDERING, FLOAT_TOTAL_ORDER
from ._checks import require_range, require_type, strict_types

INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1


class IntegerPicoType(OrderedPicoType[int], kind=ValueKind.INTEGER):
    """Abstract wrapper for 32-bit signed integers."""

    __slots__ = ()

    @classmethod
    def _accept(cls, value: Any) -> int:
        require_type(cls, value, int, "int")
        return require_range(cls, value, INT32_MIN, INT32_MAX)


class LongPicoType(OrderedPicoType[int], kind=ValueKind.LONG):
    """Abstract wrapper for 64-bit signed integers."""

    __slots__ = ()

    @classmethod
    def _accept(cls, value: Any) -> int:
        require_type(cls, value, int, "int")
        return require_range(cls, value, INT64_MIN, INT64_MAX)


class BigIntegerPicoType(OrderedPicoType[int], kind=ValueKind.BIG_INTEGER):
    """Abstract wrapper for arbitrary-size integers."""

    __slots__ = ()

    @classmethod
    def _accept(cls, value: Any) -> int:
        return require_type(cls, value, int, "int")


class DoublePicoType(OrderedPicoType[float], kind=ValueKind.DOUBLE):
    """Abstract wrapper for binary64 floats.

    ``NaN`` equals ``NaN`` and ``-0.0`` differs from ``0.0``; ordering
    follows the same rule, with NaN above ``inf``.
    """

    __slots__ = ()

    _equality = FLOAT_TOTAL_ORDER
    _ordering = FLOAT_TOTAL_ORDER

    @classmethod
    def _accept(cls, value: Any) -> float:
        require_type(cls, value, (float, int), "float")
        try:
            return float(value)
        except OverflowError as exc:
            raise InvalidValueError(
                f"{cls.__name__} value {value} is outside the binary64 range"
            ) from exc


class DecimalPicoType(OrderedPicoType[Decimal], kind=ValueKind.DECIMAL):
    """Abstract wrapper for finite decimals.

    ``Decimal("1.0")`` and ``Decimal("1.00")`` wrap to equal values with
    equal hashes; the stored value keeps the scale it was given.
    """

    __slots__ = ()

    _equality = DECIMAL_EQUALITY
    _ordering = DECIMAL_ORDERING

    @classmethod
    def _accept(cls, value: Any) -> Decimal:
        if not isinstance(value, Decimal):
            if strict_types() or isinstance(value, bool):
                raise InvalidValueTypeError(cls.__name__, "Decimal", value)
            if not isinstance(value, (int, float, str)):
                raise InvalidValueTypeError(cls.__name__, "Decimal, int, float or str", value)
            try:
                value = Decimal(str(value))
            except InvalidOperation as exc:
                raise InvalidValueError(
                    f"{cls.__name__} cannot parse {value!r} as a decimal"
                ) from exc
        if not value.is_finite():
            raise InvalidValueError(f"{cls.__name__} holds finite decimals, got {value}")
        return value
