"""Abstract Syntax Tree (AST) definitions for the Asteva language.

The parser builds these nodes and the interpreter walks them. Every node
owns its children outright; blocks are plain lists of statement nodes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .types import TypeSpec


@dataclass
class Node:
    """Base class for all AST nodes."""
    pass


@dataclass
class Program(Node):
    body: List[Node]


@dataclass
class IntegerLiteral(Node):
    value: int


@dataclass
class BooleanLiteral(Node):
    value: bool


@dataclass
class StringLiteral(Node):
    value: str


@dataclass
class Identifier(Node):
    name: str


@dataclass
class BinaryOp(Node):
    op: str
    left: Node
    right: Node


@dataclass
class UnaryOp(Node):
    op: str
    operand: Node


@dataclass
class VariableDeclaration(Node):
    name: str
    type_spec: TypeSpec
    value: Node


@dataclass
class Assignment(Node):
    name: str
    value: Node


@dataclass
class IfElse(Node):
    condition: Node
    then_block: List[Node]
    else_block: Optional[List[Node]]


@dataclass
class Loop(Node):
    condition: Node
    body: List[Node]


@dataclass
class Parameter:
    type_spec: TypeSpec
    name: str


@dataclass
class FunctionDeclaration(Node):
    name: str
    return_type: TypeSpec
    params: List[Parameter]
    body: List[Node]


@dataclass
class FunctionCall(Node):
    name: str
    args: List[Node]


@dataclass
class ReturnStatement(Node):
    value: Node


@dataclass
class PrintStatement(Node):
    value: Node


@dataclass
class NoOp(Node):
    """Empty statement (a lone ';')."""
    pass
