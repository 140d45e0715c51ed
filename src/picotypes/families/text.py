"""String and URI wrapper families. Both order lexically by code point."""

from __future__ import annotations

from typing import Any
from urllib.parse import urlsplit

from ..core.enums import ValueKind
from ..core.errors import InvalidValueError, InvalidValueTypeError
from ..core.pico_type import OrderedPicoType
from ._checks import require_type, strict_types


class StringPicoType(OrderedPicoType[str], kind=ValueKind.STRING):
    """Abstract wrapper for ``str``."""

    __slots__ = ()

    @classmethod
    def _accept(cls, value: Any) -> str:
        return require_type(cls, value, str, "str")


class UriPicoType(OrderedPicoType[str], kind=ValueKind.URI):
    """Abstract wrapper for URI references, held as their text.

    The text must be splittable by ``urllib.parse.urlsplit``; no further
    normalisation happens, so ``http://a/`` and ``HTTP://a/`` stay distinct.
    When strict typing is off, parsed URLs (anything with ``geturl()``) are
    accepted and stored as text.
    """

    __slots__ = ()

    @classmethod
    def _accept(cls, value: Any) -> str:
        if not isinstance(value, str):
            geturl = getattr(value, "geturl", None)
            if strict_types() or not callable(geturl):
                raise InvalidValueTypeError(cls.__name__, "str", value)
            value = geturl()
        try:
            urlsplit(value)
        except ValueError as exc:
            raise InvalidValueError(
                f"{cls.__name__} cannot hold {value!r}: {exc}"
            ) from exc
        return value
