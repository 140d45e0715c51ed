"""Password-like wrapper family for sensitive byte material.

See https://security.stackexchange.com/q/172576 for why secrets travel as
byte buffers rather than ``str``.
"""

from __future__ import annotations

from typing import Any

from ..core.enums import ValueKind
from ..core.errors import InvalidValueTypeError
from ..core.pico_type import PicoType
from ..core.strategies import CONSTANT_TIME_EQUALITY, MASKED_DISPLAY
from ._checks import strict_types


class PasswordPicoType(PicoType[bytearray], kind=ValueKind.PASSWORD):
    """Abstract wrapper for secret bytes.

    * The caller's buffer is copied on construction and never referenced.
    * ``value`` returns a new ``bytearray`` on every access, so callers may
      scrub or mutate it without touching the wrapper.
    * Equality is constant-time in content (CWE-208); there is no ordering.
    * ``str()`` shows the mask token whether the wrapper is empty or not.
    """

    __slots__ = ()

    _equality = CONSTANT_TIME_EQUALITY
    _display = MASKED_DISPLAY

    @classmethod
    def _accept(cls, value: Any) -> bytes:
        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value)
        if isinstance(value, str) and not strict_types():
            return value.encode("utf-8")
        raise InvalidValueTypeError(cls.__name__, "bytes-like", value)

    @property
    def value(self) -> bytearray | None:
        if self._value is None:
            return None
        return bytearray(self._value)
