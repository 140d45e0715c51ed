"""Custom exception hierarchy for pico types.

Every error also derives from the builtin an ordinary caller would expect
(``LookupError`` for missing values, ``TypeError`` for misuse), so code that
does not know about this library still catches them.
"""


class PicoTypeError(Exception):
    """Base exception for all pico type errors."""


# --- Configuration ---
class ConfigError(PicoTypeError):
    """Invalid or unreadable configuration."""


# --- Access ---
class MissingValueError(PicoTypeError, LookupError):
    """A value was required but the wrapper is empty."""


class ContractViolationError(PicoTypeError, TypeError):
    """A required action or supplier was omitted or misbehaved."""


# --- Ordering ---
class IncomparableTypesError(PicoTypeError, TypeError):
    """Two wrappers of different declared types were ordered."""

    def __init__(self, left: type, right: type):
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot compare {left.__name__} against {right.__name__}"
        )


# --- Construction ---
class InvalidValueError(PicoTypeError, ValueError):
    """Value has the right type but is outside the kind's domain."""


class InvalidValueTypeError(PicoTypeError, TypeError):
    """Value has a type the wrapper family does not hold."""

    def __init__(self, family: str, expected: str, actual: object):
        self.family = family
        self.expected = expected
        self.actual = type(actual).__name__
        super().__init__(
            f"{family} holds {expected}, got {self.actual}"
        )


# --- Definition ---
class DefinitionError(PicoTypeError, TypeError):
    """A wrapper class breaks the structural rules of the library."""
