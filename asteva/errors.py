from typing import Any
from asteva.types import ErrorVal


class AstevaError(Exception):
    """Base exception for every failure raised while lexing, parsing or running."""
    def __init__(self, message: str):
        self.err = ErrorVal(type(self).__name__, message)
        super().__init__(f"{self.err.name}: {message}")

    @property
    def kind(self) -> str:
        return self.err.name

    @property
    def message(self) -> str:
        return self.err.message


class LexError(AstevaError):
    """Unrecognized character, unterminated string or bad integer literal."""


class ParseError(AstevaError):
    """Unexpected token or missing delimiter/clause."""


class UndefinedVariable(AstevaError):
    pass


class UndefinedFunction(AstevaError):
    pass


class TypeMismatch(AstevaError):
    """Operator or condition applied to a value kind it does not support."""


class DivisionByZero(AstevaError):
    pass


class ArityMismatch(AstevaError):
    pass


class IntegerOverflow(AstevaError):
    """Arithmetic result outside the signed 32-bit range."""


class UnsupportedConstruct(AstevaError):
    """The evaluator was handed a node type it has no rule for."""


class RecursionLimit(AstevaError):
    pass


class ReturnSignal(Exception):
    """Internal exception to handle return statements in functions."""
    def __init__(self, value: Any):
        super().__init__('return')
        self.value = value
