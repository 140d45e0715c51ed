"""Pydantic integration.

Wrappers are plain values on the wire: a model field typed ``UserId``
serializes to the wrapped UUID and validates back through ``UserId(...)``.
JSON only carries strings and numbers, so primitives are coerced per kind
before construction regardless of ``strict_types``.
"""

from __future__ import annotations

import uuid
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any, Callable

from pydantic_core import core_schema

from .core.enums import ValueKind
from .core.errors import PicoTypeError

if TYPE_CHECKING:
    from .core.pico_type import PicoType


def _to_decimal(value: Any) -> Any:
    if isinstance(value, (int, float, str)) and not isinstance(value, bool):
        try:
            return Decimal(str(value))
        except InvalidOperation as exc:
            raise ValueError(f"invalid decimal {value!r}") from exc
    return value


def _to_uuid(value: Any) -> Any:
    return uuid.UUID(value) if isinstance(value, str) else value


def _to_secret(value: Any) -> Any:
    return value.encode("utf-8") if isinstance(value, str) else value


_PRIMITIVE_PARSERS: dict[ValueKind, Callable[[Any], Any]] = {
    ValueKind.DECIMAL: _to_decimal,
    ValueKind.UUID: _to_uuid,
    ValueKind.PASSWORD: _to_secret,
}


def to_primitive(wrapper: PicoType[Any]) -> Any:
    """Value to write for *wrapper*; secrets are written as ``bytes``."""
    value = wrapper.value
    if isinstance(value, bytearray):
        return bytes(value)
    return value


def from_primitive(cls: type[PicoType[Any]], value: Any) -> PicoType[Any]:
    """Rebuild a *cls* wrapper from a deserialized primitive (or pass one through)."""
    if isinstance(value, cls):
        return value
    if value is not None:
        parser = _PRIMITIVE_PARSERS.get(getattr(cls, "kind", None))
        if parser is not None:
            value = parser(value)
    try:
        return cls(value)
    except PicoTypeError as exc:
        # pydantic only turns ValueError/AssertionError into ValidationError
        raise ValueError(str(exc)) from exc


def pico_type_schema(cls: type[PicoType[Any]]) -> core_schema.CoreSchema:
    return core_schema.no_info_plain_validator_function(
        lambda value: from_primitive(cls, value),
        serialization=core_schema.plain_serializer_function_ser_schema(to_primitive),
    )
