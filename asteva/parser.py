"""Recursive-descent parser for the Asteva language.

The parser pulls tokens from a `Lexer` one at a time and keeps a single
token of lookahead. `Parser.parse` is the grammar entry point for both
the top level and nested blocks: it collects statements until the input
ends or a closing brace is seen, leaving the brace for `parse_block` to
consume.

Expressions have a single precedence tier. A term is parsed, then every
following binary operator folds in another term from left to right, so
`2 + 3 * 4` groups as `(2 + 3) * 4`.
"""

from __future__ import annotations

from typing import List, Union

from .ast import (
    Program, IntegerLiteral, BooleanLiteral, StringLiteral, Identifier,
    BinaryOp, UnaryOp, VariableDeclaration, Assignment, IfElse, Loop,
    Parameter, FunctionDeclaration, FunctionCall, ReturnStatement,
    PrintStatement, NoOp, Node,
)
from .errors import ParseError
from .lexer import Lexer, Token, BINARY_OPERATORS, TYPE_KEYWORDS
from .types import TypeSpec

TOKEN_NAMES = {
    'IDENT': 'identifier',
    'INT_LIT': 'integer literal',
    'BOOL_LIT': 'boolean literal',
    'STRING_LIT': 'string literal',
    'EOF': 'end of input',
}


def _expected_text(expected: Union[str, List[str]]) -> str:
    if isinstance(expected, list):
        return 'one of ' + ', '.join(_expected_text(e) for e in expected)
    return TOKEN_NAMES.get(expected, f"'{expected}'")


class Parser:
    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.current: Token = lexer.next()

    def peek(self) -> Token:
        return self.current

    def advance(self) -> Token:
        token = self.current
        if token.type != 'EOF':
            self.current = self.lexer.next()
        return token

    def match(self, expected: Union[str, List[str]]) -> bool:
        if isinstance(expected, list):
            return self.current.type in expected
        return self.current.type == expected

    def consume(self, expected: Union[str, List[str]], context: str = '') -> Token:
        if not self.match(expected):
            token = self.current
            where = f" {context}" if context else ''
            raise ParseError(
                f"expected {_expected_text(expected)}{where} at {token.line}:{token.column}, "
                f"got {token.describe()}"
            )
        return self.advance()

    def parse(self) -> List[Node]:
        statements: List[Node] = []
        while not self.match(['EOF', '}']):
            statements.append(self.parse_statement())
        return statements

    def parse_statement(self) -> Node:
        token = self.peek()
        kind = token.type
        if kind == 'variable':
            return self.parse_variable_declaration()
        if kind == 'function':
            return self.parse_function_declaration()
        if kind == 'return':
            return self.parse_return_statement()
        if kind == 'loop':
            return self.parse_loop()
        if kind == 'if':
            return self.parse_if_else()
        if kind == 'IDENT':
            return self.parse_assignment()
        if kind == 'print':
            return self.parse_print_statement()
        if kind == 'call':
            call = self.parse_call()
            self.consume(';', 'after function call')
            return call
        if kind == ';':
            self.advance()
            return NoOp()
        raise ParseError(f"unexpected token {token.describe()} at {token.line}:{token.column}")

    def parse_type_spec(self, context: str) -> TypeSpec:
        token = self.consume(list(TYPE_KEYWORDS), context)
        return TypeSpec(token.type)

    def parse_variable_declaration(self) -> VariableDeclaration:
        self.consume('variable')
        type_spec = self.parse_type_spec("after 'variable'")
        name_token = self.consume('IDENT', 'after variable type')
        self.consume('=', 'in variable declaration')
        value = self.parse_expression()
        self.consume(';', 'after variable declaration')
        return VariableDeclaration(name_token.value, type_spec, value)

    def parse_function_declaration(self) -> FunctionDeclaration:
        self.consume('function')
        return_type = self.parse_type_spec("as return type after 'function'")
        name_token = self.consume('IDENT', 'as function name')
        self.consume('(', 'after function name')
        params = self.parse_parameters()
        self.consume(')', 'after parameters')
        body = self.parse_block()
        return FunctionDeclaration(name_token.value, return_type, params, body)

    def parse_parameters(self) -> List[Parameter]:
        params: List[Parameter] = []
        if self.match(')'):
            return params
        while True:
            self.consume('variable', 'to start a parameter')
            type_spec = self.parse_type_spec('for parameter')
            name_token = self.consume('IDENT', 'as parameter name')
            params.append(Parameter(type_spec, name_token.value))
            if not self.match(','):
                break
            self.advance()
        return params

    def parse_block(self) -> List[Node]:
        self.consume('{', 'to open block')
        statements = self.parse()
        self.consume('}', 'to close block')
        return statements

    def parse_return_statement(self) -> ReturnStatement:
        self.consume('return')
        value = self.parse_expression()
        self.consume(';', 'after return value')
        return ReturnStatement(value)

    def parse_loop(self) -> Loop:
        self.consume('loop')
        self.consume('(', "after 'loop'")
        condition = self.parse_expression()
        self.consume(')', 'after loop condition')
        body = self.parse_block()
        return Loop(condition, body)

    def parse_if_else(self) -> IfElse:
        self.consume('if')
        self.consume('(', "after 'if'")
        condition = self.parse_expression()
        self.consume(')', 'after if condition')
        then_block = self.parse_block()
        else_block = None
        if self.match('else'):
            self.advance()
            else_block = self.parse_block()
        return IfElse(condition, then_block, else_block)

    def parse_assignment(self) -> Assignment:
        name_token = self.consume('IDENT')
        self.consume('=', 'after identifier')
        value = self.parse_expression()
        self.consume(';', 'after assignment')
        return Assignment(name_token.value, value)

    def parse_print_statement(self) -> PrintStatement:
        self.consume('print')
        value = self.parse_expression()
        self.consume(';', 'after print statement')
        return PrintStatement(value)

    def parse_call(self) -> FunctionCall:
        self.consume('call')
        name_token = self.consume('IDENT', "after 'call'")
        self.consume('(', 'after function name')
        args: List[Node] = []
        if not self.match(')'):
            args.append(self.parse_expression())
            while self.match(','):
                self.advance()
                args.append(self.parse_expression())
        self.consume(')', 'after arguments')
        return FunctionCall(name_token.value, args)

    # Expressions: one tier, left associative
    def parse_expression(self) -> Node:
        node = self.parse_term()
        while self.match(list(BINARY_OPERATORS)):
            op_token = self.advance()
            right = self.parse_term()
            node = BinaryOp(op_token.type, node, right)
        return node

    def parse_term(self) -> Node:
        token = self.peek()
        if token.type == 'INT_LIT':
            self.advance()
            return IntegerLiteral(token.value)
        if token.type == 'BOOL_LIT':
            self.advance()
            return BooleanLiteral(token.value)
        if token.type == 'STRING_LIT':
            self.advance()
            return StringLiteral(token.value)
        if token.type == 'IDENT':
            self.advance()
            return Identifier(token.value)
        if token.type == 'call':
            return self.parse_call()
        if token.type == '!':
            self.advance()
            return UnaryOp('!', self.parse_term())
        # Grouping
        if token.type == '(':
            self.advance()
            expr = self.parse_expression()
            self.consume(')', 'to close parenthesised expression')
            return expr
        raise ParseError(f"expected an expression at {token.line}:{token.column}, got {token.describe()}")


def parse_program(source: str) -> Program:
    """Parse Asteva source code into a Program AST.

    Lexical and syntax errors are raised as `LexError` / `ParseError`.
    """
    parser = Parser(Lexer(source))
    body = parser.parse()
    if not parser.match('EOF'):
        token = parser.peek()
        raise ParseError(f"unexpected token {token.describe()} at {token.line}:{token.column}")
    return Program(body)
