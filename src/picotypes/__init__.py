"""Nominal single-value wrapper types ("pico types").

Subclass a family to give a primitive its own type::

    from picotypes import UuidPicoType

    class UserId(UuidPicoType):
        pass

    UserId(uuid4()).or_else_throw()
"""

from picotypes.core.errors import (
    ContractViolationError,
    DefinitionError,
    IncomparableTypesError,
    InvalidValueError,
    InvalidValueTypeError,
    MissingValueError,
    PicoTypeError,
)
from picotypes.core.optional import OptionalAccess
from picotypes.core.pico_type import OrderedPicoType, PicoType
from picotypes.families import (
    BigIntegerPicoType,
    BooleanPicoType,
    DecimalPicoType,
    DoublePicoType,
    IntegerPicoType,
    LongPicoType,
    PasswordPicoType,
    StringPicoType,
    UriPicoType,
    UuidPicoType,
)

__version__ = "0.1.0"

__all__ = [
    "BigIntegerPicoType",
    "BooleanPicoType",
    "ContractViolationError",
    "DecimalPicoType",
    "DefinitionError",
    "DoublePicoType",
    "IncomparableTypesError",
    "IntegerPicoType",
    "InvalidValueError",
    "InvalidValueTypeError",
    "LongPicoType",
    "MissingValueError",
    "OptionalAccess",
    "OrderedPicoType",
    "PasswordPicoType",
    "PicoType",
    "PicoTypeError",
    "StringPicoType",
    "UriPicoType",
    "UuidPicoType",
    "__version__",
]
