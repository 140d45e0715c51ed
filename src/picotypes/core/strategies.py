"""Stateless equality, ordering and display policies, one per kind rule.

Module-level singletons are what families compose; the classes exist so the
policies can be tested and reused on their own.
"""

from __future__ import annotations

import hmac
import math
import sys
from decimal import Decimal
from typing import Any

from .config import get_settings


# ---------------------------------------------------------------------------
# Equality
# ---------------------------------------------------------------------------

class ExactEquality:
    """Discrete kinds: the value's own ``==`` and ``hash``."""

    def equivalent(self, left: Any, right: Any) -> bool:
        return bool(left == right)

    def hash(self, value: Any) -> int:
        return hash(value)


class DecimalEquality:
    """Numeric equality regardless of scale, so ``1.0`` equals ``1.00``."""

    def equivalent(self, left: Decimal, right: Decimal) -> bool:
        return left.compare(right) == 0

    def hash(self, value: Decimal) -> int:
        # Decimal hashes by numeric value, so scale never reaches the hash
        return hash(value)


class FloatTotalOrder:
    """IEEE 754 total order for binary64, used for equality and ordering.

    All NaNs are one value, greater than ``inf``; ``-0.0`` sorts before
    ``0.0`` and is not equal to it.
    """

    @staticmethod
    def _key(value: float) -> tuple[int, float, float]:
        if math.isnan(value):
            return (1, 0.0, 0.0)
        return (0, value, math.copysign(1.0, value))

    def equivalent(self, left: float, right: float) -> bool:
        return self._key(left) == self._key(right)

    def hash(self, value: float) -> int:
        # hash(nan) is identity-based, which would split equal NaN wrappers
        if math.isnan(value):
            return sys.hash_info.nan
        return hash(value)

    def compare(self, left: float, right: float) -> int:
        a, b = self._key(left), self._key(right)
        return (a > b) - (a < b)


class ConstantTimeEquality:
    """Secret bytes: comparison time does not depend on where bytes differ.

    Length is still observable, which ``hmac.compare_digest`` documents.
    """

    def equivalent(self, left: bytes, right: bytes) -> bool:
        return hmac.compare_digest(bytes(left), bytes(right))

    def hash(self, value: bytes) -> int:
        return hash(bytes(value))


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------

class NaturalOrdering:
    """The kind's own ``<``: numeric, ``False < True``, UUID by int.

    Strings compare by Unicode code point.
    """

    def compare(self, left: Any, right: Any) -> int:
        return (left > right) - (left < right)


class DecimalOrdering:
    def compare(self, left: Decimal, right: Decimal) -> int:
        return int(left.compare(right))


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------

class PlainDisplay:
    def render(self, value: Any) -> str:
        return str(value)


class MaskedDisplay:
    """Always the configured mask, so empty and populated look the same."""

    def render(self, value: Any) -> str:
        return get_settings().mask_token


EXACT_EQUALITY = ExactEquality()
DECIMAL_EQUALITY = DecimalEquality()
FLOAT_TOTAL_ORDER = FloatTotalOrder()
CONSTANT_TIME_EQUALITY = ConstantTimeEquality()

NATURAL_ORDERING = NaturalOrdering()
DECIMAL_ORDERING = DecimalOrdering()

PLAIN_DISPLAY = PlainDisplay()
MASKED_DISPLAY = MaskedDisplay()
