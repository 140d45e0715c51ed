"""Enumerations used across pico types."""

from enum import Enum


class ValueKind(str, Enum):
    """Underlying kind held by a wrapper family."""

    BOOLEAN = "boolean"
    INTEGER = "integer"  # 32-bit signed
    LONG = "long"  # 64-bit signed
    BIG_INTEGER = "big_integer"
    DOUBLE = "double"  # IEEE 754 binary64
    DECIMAL = "decimal"
    STRING = "string"
    URI = "uri"
    UUID = "uuid"
    PASSWORD = "password"

    @property
    def is_ordered(self) -> bool:
        return self is not ValueKind.PASSWORD

    @property
    def is_secret(self) -> bool:
        return self is ValueKind.PASSWORD


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"
