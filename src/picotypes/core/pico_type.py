"""Wrapper base classes.

``PicoType`` owns the single value slot and the equality, hashing and
display contract. ``OrderedPicoType`` adds a total order for every kind that
has one. Families (``picotypes.families``) pick the per-kind strategies;
application code subclasses a family to declare a named type::

    class UserId(UuidPicoType):
        pass

Design invariants
-----------------
1.  One slot, ``_value``, written once in ``__init__``; instances reject
    attribute writes afterwards.
2.  Equality is scoped to the exact runtime class: ``OrderId(5)`` never
    equals ``InvoiceId(5)``.
3.  Neither families nor application types may redefine equality, hashing
    or ordering. This is checked when the class is created.
4.  Families and intermediate bases are abstract; only application
    subclasses can be instantiated.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, TypeVar, final

from .enums import ValueKind
from .errors import DefinitionError, IncomparableTypesError, MissingValueError
from .interfaces import IDisplayStrategy, IEqualityStrategy, IOrderingStrategy
from .optional import OptionalAccess
from .strategies import EXACT_EQUALITY, NATURAL_ORDERING, PLAIN_DISPLAY

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Hash of an empty wrapper
NULL_HASH = 0

_SEALED = frozenset({
    "__eq__",
    "__ne__",
    "__hash__",
    "__setattr__",
    "__delattr__",
    "__lt__",
    "__le__",
    "__gt__",
    "__ge__",
    "compare_to",
})


def _check_definition(cls: type) -> None:
    """Reject subclasses that would break the single-slot value contract."""
    if cls.__module__ == __name__:
        return

    overridden = sorted(_SEALED.intersection(cls.__dict__))
    if overridden:
        raise DefinitionError(
            f"{cls.__name__} may not define {', '.join(overridden)}"
        )

    slots = cls.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    if tuple(slots):
        raise DefinitionError(
            f"{cls.__name__} may not declare slots {tuple(slots)}; "
            "a pico type holds exactly one value"
        )


class PicoType(OptionalAccess[T]):
    """Immutable nominal wrapper around one optional value."""

    __slots__ = ("_value",)

    kind: ClassVar[ValueKind]
    _abstract: ClassVar[bool] = True
    _equality: ClassVar[IEqualityStrategy] = EXACT_EQUALITY
    _display: ClassVar[IDisplayStrategy] = PLAIN_DISPLAY

    def __init_subclass__(cls, *, kind: ValueKind | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        _check_definition(cls)

        if kind is not None:
            if hasattr(cls, "kind"):
                raise DefinitionError(
                    f"{cls.__name__} cannot redeclare kind {kind.value}; "
                    f"it already holds {cls.kind.value}"
                )
            cls.kind = kind
            cls._abstract = True
        else:
            cls._abstract = not hasattr(cls, "kind")

        logger.debug(
            "Defined pico type %s (kind=%s, abstract=%s)",
            cls.__qualname__,
            cls.kind.value if hasattr(cls, "kind") else None,
            cls._abstract,
        )

    def __init__(self, value: T | None) -> None:
        cls = type(self)
        if cls._abstract:
            raise DefinitionError(
                f"{cls.__name__} is abstract; subclass it to declare a named type"
            )
        object.__setattr__(self, "_value", None if value is None else cls._accept(value))

    @classmethod
    def _accept(cls, value: Any) -> T:
        """Validate (and copy, for mutable kinds) a non-None value."""
        return value

    @property
    def value(self) -> T | None:
        return self._value

    def _accepts_alternative(self, other: OptionalAccess[Any]) -> bool:
        return isinstance(other, PicoType) and other.kind is self.kind

    # --- Object contract ---

    @final
    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, PicoType):
            return NotImplemented
        if type(self) is not type(other):
            return False
        mine, theirs = self._value, other._value
        if mine is None or theirs is None:
            return mine is None and theirs is None
        return self._equality.equivalent(mine, theirs)

    @final
    def __hash__(self) -> int:
        if self._value is None:
            return NULL_HASH
        return self._equality.hash(self._value)

    def __str__(self) -> str:
        return f"{type(self).__name__}{{value={self._display.render(self._value)}}}"

    def __repr__(self) -> str:
        return str(self)

    @final
    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @final
    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> PicoType[T]:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> PicoType[T]:
        return self

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._value,))

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        from ..serialization import pico_type_schema

        return pico_type_schema(cls)


class OrderedPicoType(PicoType[T]):
    """Wrapper whose kind has a total order.

    Ordering needs both values: an empty wrapper on either side raises
    ``MissingValueError`` instead of sorting first or last.
    """

    __slots__ = ()

    _ordering: ClassVar[IOrderingStrategy] = NATURAL_ORDERING

    @final
    def compare_to(self, other: OrderedPicoType[T] | None) -> int:
        """Return -1, 0 or 1 as ``self`` sorts before, with or after *other*.

        Raises:
            MissingValueError: *other* is None, or either value is missing.
            IncomparableTypesError: *other* is a different wrapper type.
        """
        if other is None:
            raise MissingValueError("Cannot compare value against None")
        if type(other) is not type(self):
            raise IncomparableTypesError(type(self), type(other))
        if self._value is None:
            raise MissingValueError(
                "Cannot compare missing value against another value"
            )
        if other._value is None:
            raise MissingValueError(
                "Cannot compare value against another missing value"
            )
        return self._ordering.compare(self._value, other._value)

    @final
    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.compare_to(other) < 0  # type: ignore[arg-type]

    @final
    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.compare_to(other) <= 0  # type: ignore[arg-type]

    @final
    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.compare_to(other) > 0  # type: ignore[arg-type]

    @final
    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.compare_to(other) >= 0  # type: ignore[arg-type]

