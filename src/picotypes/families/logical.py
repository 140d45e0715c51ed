"""Boolean wrapper family."""

from __future__ import annotations

from typing import Any

from ..core.enums import ValueKind
from ..core.pico_type import OrderedPicoType
from ._checks import require_type


class BooleanPicoType(OrderedPicoType[bool], kind=ValueKind.BOOLEAN):
    """Abstract wrapper for ``bool``. Orders ``False`` before ``True``.

    Truthy non-bool values are rejected in every mode; coercing ``"false"``
    to ``True`` is never what the caller meant.
    """

    __slots__ = ()

    @classmethod
    def _accept(cls, value: Any) -> bool:
        return require_type(cls, value, bool, "bool")
