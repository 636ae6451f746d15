# Asteva language package
# This package provides a lexer, parser and tree-walking interpreter for the Asteva language.
from .interpreter import run_program, interpret, Interpreter, Outcome
from .errors import AstevaError
from .parser import parse_program
from .lexer import tokenize

__all__ = [
    'run_program',
    'interpret',
    'Interpreter',
    'Outcome',
    'AstevaError',
    'parse_program',
    'tokenize',
]
