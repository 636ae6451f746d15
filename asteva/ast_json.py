"""JSON serialization/deserialization for the Asteva AST.

This module converts between AST dataclasses and plain Python dict/list
structures suitable for JSON encoding. Blocks become lists, `TypeSpec`
becomes its kind string.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .ast import (
    Program,
    IntegerLiteral,
    BooleanLiteral,
    StringLiteral,
    Identifier,
    BinaryOp,
    UnaryOp,
    VariableDeclaration,
    Assignment,
    IfElse,
    Loop,
    Parameter,
    FunctionDeclaration,
    FunctionCall,
    ReturnStatement,
    PrintStatement,
    NoOp,
    Node,
)
from .errors import ParseError, UnsupportedConstruct
from .types import TypeSpec


def block_to_obj(block: Optional[List[Node]]) -> Optional[List[Any]]:
    if block is None:
        return None
    return [ast_to_obj(n) for n in block]


def block_from_obj(o: Optional[List[Any]]) -> Optional[List[Node]]:
    if o is None:
        return None
    if not isinstance(o, list):
        raise ParseError(f"malformed AST: expected a list of nodes, got {type(o).__name__}")
    return [ast_from_obj(x) for x in o]


def ast_to_obj(node: Any) -> Any:
    if isinstance(node, Program):
        return {"type": "Program", "body": block_to_obj(node.body)}
    if isinstance(node, IntegerLiteral):
        return {"type": "IntegerLiteral", "value": node.value}
    if isinstance(node, BooleanLiteral):
        return {"type": "BooleanLiteral", "value": node.value}
    if isinstance(node, StringLiteral):
        return {"type": "StringLiteral", "value": node.value}
    if isinstance(node, Identifier):
        return {"type": "Identifier", "name": node.name}
    if isinstance(node, BinaryOp):
        return {
            "type": "BinaryOp",
            "op": node.op,
            "left": ast_to_obj(node.left),
            "right": ast_to_obj(node.right),
        }
    if isinstance(node, UnaryOp):
        return {"type": "UnaryOp", "op": node.op, "operand": ast_to_obj(node.operand)}
    if isinstance(node, VariableDeclaration):
        return {
            "type": "VariableDeclaration",
            "name": node.name,
            "type_spec": node.type_spec.kind,
            "value": ast_to_obj(node.value),
        }
    if isinstance(node, Assignment):
        return {"type": "Assignment", "name": node.name, "value": ast_to_obj(node.value)}
    if isinstance(node, IfElse):
        return {
            "type": "IfElse",
            "condition": ast_to_obj(node.condition),
            "then_block": block_to_obj(node.then_block),
            "else_block": block_to_obj(node.else_block),
        }
    if isinstance(node, Loop):
        return {
            "type": "Loop",
            "condition": ast_to_obj(node.condition),
            "body": block_to_obj(node.body),
        }
    if isinstance(node, Parameter):
        return {"type": "Parameter", "type_spec": node.type_spec.kind, "name": node.name}
    if isinstance(node, FunctionDeclaration):
        return {
            "type": "FunctionDeclaration",
            "name": node.name,
            "return_type": node.return_type.kind,
            "params": [ast_to_obj(p) for p in node.params],
            "body": block_to_obj(node.body),
        }
    if isinstance(node, FunctionCall):
        return {"type": "FunctionCall", "name": node.name, "args": block_to_obj(node.args)}
    if isinstance(node, ReturnStatement):
        return {"type": "ReturnStatement", "value": ast_to_obj(node.value)}
    if isinstance(node, PrintStatement):
        return {"type": "PrintStatement", "value": ast_to_obj(node.value)}
    if isinstance(node, NoOp):
        return {"type": "NoOp"}
    raise UnsupportedConstruct(f"cannot serialize {type(node).__name__}")


def ast_from_obj(o: Dict[str, Any]) -> Any:
    if not isinstance(o, dict):
        raise ParseError(f"malformed AST: expected a node object, got {type(o).__name__}")
    try:
        return node_from_obj(o)
    except KeyError as e:
        raise ParseError(f"malformed AST: {o.get('type')} node is missing {e.args[0]!r}") from None


def node_from_obj(o: Dict[str, Any]) -> Any:
    t = o.get("type")
    if t == "Program":
        return Program(block_from_obj(o["body"]))
    if t == "IntegerLiteral":
        return IntegerLiteral(o["value"])
    if t == "BooleanLiteral":
        return BooleanLiteral(o["value"])
    if t == "StringLiteral":
        return StringLiteral(o["value"])
    if t == "Identifier":
        return Identifier(o["name"])
    if t == "BinaryOp":
        return BinaryOp(o["op"], ast_from_obj(o["left"]), ast_from_obj(o["right"]))
    if t == "UnaryOp":
        return UnaryOp(o["op"], ast_from_obj(o["operand"]))
    if t == "VariableDeclaration":
        return VariableDeclaration(o["name"], TypeSpec(o["type_spec"]), ast_from_obj(o["value"]))
    if t == "Assignment":
        return Assignment(o["name"], ast_from_obj(o["value"]))
    if t == "IfElse":
        return IfElse(
            ast_from_obj(o["condition"]),
            block_from_obj(o["then_block"]),
            block_from_obj(o.get("else_block")),
        )
    if t == "Loop":
        return Loop(ast_from_obj(o["condition"]), block_from_obj(o["body"]))
    if t == "Parameter":
        return Parameter(TypeSpec(o["type_spec"]), o["name"])
    if t == "FunctionDeclaration":
        return FunctionDeclaration(
            o["name"],
            TypeSpec(o["return_type"]),
            [ast_from_obj(p) for p in o["params"]],
            block_from_obj(o["body"]),
        )
    if t == "FunctionCall":
        return FunctionCall(o["name"], block_from_obj(o["args"]))
    if t == "ReturnStatement":
        return ReturnStatement(ast_from_obj(o["value"]))
    if t == "PrintStatement":
        return PrintStatement(ast_from_obj(o["value"]))
    if t == "NoOp":
        return NoOp()
    raise UnsupportedConstruct(f"unknown AST node type {t!r}")
