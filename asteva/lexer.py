"""Lexer for the Asteva language.

Terminals are described by a small Lark grammar and matched by Lark's
basic lexer, used on its own through `Lark.lex`. The stream is lazy: a
`Lexer` pulls one terminal at a time from Lark and turns it into a
`Token`, classifying names against the keyword table and converting
literal text into Python values.

Operator and delimiter tokens use their own text as their type (`'=='`,
`';'`), keywords use the keyword (`'variable'`, `'loop'`), and the
remaining types are `IDENT`, `INT_LIT`, `BOOL_LIT`, `STRING_LIT` and
`EOF`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional

from lark import Lark
from lark.exceptions import UnexpectedCharacters

from .errors import LexError
from .types import in_int_range


@dataclass
class Token:
    type: str
    value: Any
    line: int
    column: int

    def describe(self) -> str:
        if self.type == 'EOF':
            return 'end of input'
        if self.type == 'STRING_LIT':
            return f'string "{self.value}"'
        if self.type == 'BOOL_LIT':
            return 'true' if self.value else 'false'
        return f"'{self.value}'"


KEYWORDS = {
    'variable', 'integer', 'boolean', 'string', 'loop', 'function',
    'return', 'if', 'else', 'print', 'call',
}

BOOLEAN_WORDS = {'true': True, 'false': False}

TYPE_KEYWORDS = ('integer', 'boolean', 'string')

BINARY_OPERATORS = (
    '+', '-', '*', '/', '%',
    '==', '!=', '<', '<=', '>', '>=',
    '&&', '||',
)


LEXER_GRAMMAR = r"""
    start: token*

    token: INT | NAME | STRING
         | EQUALS | NOT_EQUALS | LESS_EQUAL | GREATER_EQUAL | AND | OR
         | ASSIGN | PLUS | MINUS | STAR | SLASH | PERCENT
         | LESS | GREATER | BANG
         | LPAREN | RPAREN | LBRACE | RBRACE | COMMA | SEMICOLON

    INT: /[0-9]+/
    NAME: /[A-Za-z_]\w*/
    STRING: /"[^"]*"/

    EQUALS: "=="
    NOT_EQUALS: "!="
    LESS_EQUAL: "<="
    GREATER_EQUAL: ">="
    AND: "&&"
    OR: "||"
    ASSIGN: "="
    PLUS: "+"
    MINUS: "-"
    STAR: "*"
    SLASH: "/"
    PERCENT: "%"
    LESS: "<"
    GREATER: ">"
    BANG: "!"
    LPAREN: "("
    RPAREN: ")"
    LBRACE: "{"
    RBRACE: "}"
    COMMA: ","
    SEMICOLON: ";"

    // Comments
    LINE_COMMENT: /\/\/[^\n]*/
    %ignore LINE_COMMENT

    %import common.WS
    %ignore WS
"""


TERMINALS = Lark(
    LEXER_GRAMMAR,
    parser='lalr',
    lexer='basic',
)


class Lexer:
    """Produces tokens on demand from a source string.

    `next()` never backtracks. Once the input is exhausted it keeps
    returning the same EOF token.
    """
    def __init__(self, source: str):
        self.source = source
        self._stream: Iterator = TERMINALS.lex(source)
        self._eof: Optional[Token] = None

    def next(self) -> Token:
        if self._eof is not None:
            return self._eof
        try:
            raw = next(self._stream)
        except StopIteration:
            self._eof = self._eof_token()
            return self._eof
        except UnexpectedCharacters as e:
            raise LexError(self._describe_failure(e))
        return self._convert(raw)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next()
            yield token
            if token.type == 'EOF':
                return

    def _convert(self, raw) -> Token:
        text = str(raw)
        line, column = raw.line, raw.column
        if raw.type == 'INT':
            value = int(text)
            if not in_int_range(value):
                raise LexError(f"integer literal {text} out of range at {line}:{column}")
            return Token('INT_LIT', value, line, column)
        if raw.type == 'NAME':
            if text in BOOLEAN_WORDS:
                return Token('BOOL_LIT', BOOLEAN_WORDS[text], line, column)
            if text in KEYWORDS:
                return Token(text, text, line, column)
            return Token('IDENT', text, line, column)
        if raw.type == 'STRING':
            # quotes are dropped; contents are taken verbatim
            return Token('STRING_LIT', text[1:-1], line, column)
        return Token(text, text, line, column)

    def _eof_token(self) -> Token:
        line = self.source.count('\n') + 1
        column = len(self.source) - (self.source.rfind('\n') + 1) + 1
        return Token('EOF', None, line, column)

    @staticmethod
    def _describe_failure(e: UnexpectedCharacters) -> str:
        where = f"{e.line}:{e.column}"
        if e.char == '"':
            return f"unterminated string literal at {where}"
        if e.char in '&|':
            return f"expected '{e.char * 2}' at {where}, got a single '{e.char}'"
        return f"unexpected character {e.char!r} at {where}"


def tokenize(source: str) -> List[Token]:
    """Lex the whole source, returning every token including the final EOF."""
    return list(Lexer(source))
