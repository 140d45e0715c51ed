"""UUID wrapper family."""

from __future__ import annotations

import uuid
from typing import Any

from ..core.enums import ValueKind
from ..core.errors import InvalidValueError, InvalidValueTypeError
from ..core.pico_type import OrderedPicoType
from ._checks import strict_types


class UuidPicoType(OrderedPicoType[uuid.UUID], kind=ValueKind.UUID):
    """Abstract wrapper for ``uuid.UUID``, ordered by the 128-bit integer.

    When strict typing is off, canonical strings are parsed.
    """

    __slots__ = ()

    @classmethod
    def _accept(cls, value: Any) -> uuid.UUID:
        if isinstance(value, uuid.UUID):
            return value
        if strict_types() or not isinstance(value, str):
            raise InvalidValueTypeError(cls.__name__, "UUID", value)
        try:
            return uuid.UUID(value)
        except ValueError as exc:
            raise InvalidValueError(
                f"{cls.__name__} cannot parse {value!r} as a UUID"
            ) from exc
