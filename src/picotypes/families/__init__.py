"""Concrete wrapper families, one per underlying kind.

Each family is abstract; subclass one to declare a named type.
"""

from .identifiers import UuidPicoType
from .logical import BooleanPicoType
from .numeric import (
    BigIntegerPicoType,
    DecimalPicoType,
    DoublePicoType,
    IntegerPicoType,
    LongPicoType,
)
from .secret import PasswordPicoType
from .text import StringPicoType, UriPicoType

__all__ = [
    "BigIntegerPicoType",
    "BooleanPicoType",
    "DecimalPicoType",
    "DoublePicoType",
    "IntegerPicoType",
    "LongPicoType",
    "PasswordPicoType",
    "StringPicoType",
    "UriPicoType",
    "UuidPicoType",
]
