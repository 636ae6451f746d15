"""Runtime values and type specifications for Asteva.

This module defines the tagged values produced by the interpreter
(`Integer`, `Boolean`, `String` and `Void`), the declared type of a
variable or parameter (`TypeSpec`), and the structured error record
(`ErrorVal`) that describes a failed run.

Values are frozen dataclasses, so equality is structural and two values
of different variants never compare equal: `Integer(1) != Boolean(True)`.
"""

from __future__ import annotations

from dataclasses import dataclass

INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


@dataclass(frozen=True)
class TypeSpec:
    """Declared type of a variable, parameter or function result.

    `kind` is one of 'integer', 'boolean' or 'string', matching the type
    keywords of the language.
    """
    kind: str

    def __repr__(self) -> str:
        return self.kind

    # Convenience constructors
    @staticmethod
    def integer() -> 'TypeSpec':
        return TypeSpec('integer')

    @staticmethod
    def boolean() -> 'TypeSpec':
        return TypeSpec('boolean')

    @staticmethod
    def string() -> 'TypeSpec':
        return TypeSpec('string')


@dataclass
class ErrorVal:
    """Describes a failure: the error kind and a human readable message."""
    name: str
    message: str

    def __repr__(self) -> str:
        return f"Error(name={self.name!r}, message={self.message!r})"


@dataclass(frozen=True)
class Value:
    """Base class for all runtime values."""

    def as_bool(self) -> bool:
        # imported here to avoid a cycle: errors depends on ErrorVal above
        from .errors import TypeMismatch
        raise TypeMismatch(f"{type_name(self)} cannot be used as a condition")

    def render(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class Integer(Value):
    value: int

    def as_bool(self) -> bool:
        return self.value != 0

    def render(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Boolean(Value):
    value: bool

    def as_bool(self) -> bool:
        return self.value

    def render(self) -> str:
        return 'true' if self.value else 'false'


@dataclass(frozen=True)
class String(Value):
    value: str

    def render(self) -> str:
        return self.value


@dataclass(frozen=True)
class Void(Value):
    """Result of statements that do not produce a value."""

    def render(self) -> str:
        return 'void'


VOID = Void()


def type_name(value: Value) -> str:
    """Return the language-level name of a runtime value."""
    if isinstance(value, Integer):
        return 'integer'
    if isinstance(value, Boolean):
        return 'boolean'
    if isinstance(value, String):
        return 'string'
    if isinstance(value, Void):
        return 'void'
    return type(value).__name__


def in_int_range(n: int) -> bool:
    return INT_MIN <= n <= INT_MAX
