"""Tree-walking interpreter for the Asteva language.

`Interpreter.evaluate` walks AST nodes against an `Environment` and
returns a `Value` for every node, applying prints and bindings as it
goes. Statements that produce nothing evaluate to `Void`; a block
evaluates to the value of its last statement.

Function calls run in an isolated copy of the caller's environment, and
`return` leaves the enclosing function immediately. Failures are raised
as `AstevaError` subclasses; `interpret` turns them into an `Outcome`
for callers that want a result record instead of an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, TextIO

from .ast import (
    Program, IntegerLiteral, BooleanLiteral, StringLiteral, Identifier,
    BinaryOp, UnaryOp, VariableDeclaration, Assignment, IfElse, Loop,
    FunctionDeclaration, FunctionCall, ReturnStatement, PrintStatement,
    NoOp, Node,
)
from .environment import Environment, FunctionDefinition
from .errors import (
    AstevaError, ArityMismatch, DivisionByZero, IntegerOverflow,
    RecursionLimit, ReturnSignal, TypeMismatch, UnsupportedConstruct,
)
from .parser import parse_program
from .types import (
    Boolean, ErrorVal, Integer, String, Value, VOID, in_int_range, type_name,
)

DEFAULT_MAX_CALL_DEPTH = 100

ARITHMETIC_OPERATORS = ('+', '-', '*', '/', '%')
COMPARISON_OPERATORS = ('<', '<=', '>', '>=')
LOGICAL_OPERATORS = ('&&', '||')


class Interpreter:
    """Core interpreter that executes an Asteva AST."""
    def __init__(self, out: Optional[TextIO] = None, debug_level: int = 0,
                 debug_file: str = 'debug.txt', max_call_depth: int = DEFAULT_MAX_CALL_DEPTH):
        self.global_env = Environment()
        self.out = out
        self.debug_level = debug_level
        self.debug_file = debug_file
        self.debug_fp: Optional[TextIO] = None
        self.max_call_depth = max_call_depth

    def debug(self, msg: str):
        if self.debug_fp:
            self.debug_fp.write(msg + '\n')
            self.debug_fp.flush()

    # Public API
    def run(self, program: Program, env: Optional[Environment] = None) -> Value:
        if env is None:
            env = self.global_env
        if self.debug_level > 0:
            self.debug_fp = open(self.debug_file, 'w', encoding='utf-8')
        self.debug(f"run: {len(program.body)} top-level statements")
        try:
            try:
                result = self.execute_block(program.body, env)
            except ReturnSignal as r:
                # return at top level ends the program
                result = r.value
            self.debug(f"run: finished -> {result.render()}")
        except RecursionError:
            raise RecursionLimit('maximum nesting depth exceeded')
        finally:
            if self.debug_fp:
                self.debug_fp.close()
                self.debug_fp = None
        return result

    def execute_block(self, statements: List[Node], env: Environment) -> Value:
        result: Value = VOID
        for stmt in statements:
            result = self.evaluate(stmt, env)
        return result

    def evaluate(self, node: Node, env: Environment) -> Value:
        if self.debug_level >= 4:
            self.debug(f"eval {type(node).__name__}")
        if isinstance(node, IntegerLiteral):
            return Integer(node.value)
        if isinstance(node, BooleanLiteral):
            return Boolean(node.value)
        if isinstance(node, StringLiteral):
            return String(node.value)
        if isinstance(node, Identifier):
            return env.get(node.name)
        if isinstance(node, BinaryOp):
            # both sides are always evaluated, left first
            left = self.evaluate(node.left, env)
            right = self.evaluate(node.right, env)
            return self.apply_binary_op(node.op, left, right)
        if isinstance(node, UnaryOp):
            operand = self.evaluate(node.operand, env)
            return self.apply_unary_op(node.op, operand)
        if isinstance(node, VariableDeclaration):
            value = self.evaluate(node.value, env)
            env.declare(node.name, node.type_spec, value)
            if self.debug_level >= 2:
                self.debug(f"declare {node.name}: {node.type_spec!r} = {value.render()}")
            return value
        if isinstance(node, Assignment):
            value = self.evaluate(node.value, env)
            env.set(node.name, value)
            if self.debug_level >= 2:
                self.debug(f"assign {node.name} = {value.render()}")
            return value
        if isinstance(node, IfElse):
            cond = self.evaluate(node.condition, env)
            truthy = cond.as_bool()
            if self.debug_level >= 3:
                self.debug(f"if condition {cond.render()} -> {truthy}")
            if truthy:
                return self.execute_block(node.then_block, env)
            if node.else_block is not None:
                return self.execute_block(node.else_block, env)
            return VOID
        if isinstance(node, Loop):
            result: Value = VOID
            iteration = 0
            while self.evaluate(node.condition, env).as_bool():
                iteration += 1
                if self.debug_level >= 3:
                    self.debug(f"loop iteration {iteration}")
                result = self.execute_block(node.body, env)
            return result
        if isinstance(node, FunctionDeclaration):
            env.define_function(FunctionDefinition(node.name, node.return_type, node.params, node.body))
            if self.debug_level >= 2:
                self.debug(f"define function {node.name}")
            return VOID
        if isinstance(node, FunctionCall):
            args = [self.evaluate(arg, env) for arg in node.args]
            return self.call_function(node.name, args, env)
        if isinstance(node, ReturnStatement):
            raise ReturnSignal(self.evaluate(node.value, env))
        if isinstance(node, PrintStatement):
            value = self.evaluate(node.value, env)
            print(value.render(), file=self.out)
            return VOID
        if isinstance(node, NoOp):
            return VOID
        raise UnsupportedConstruct(f"no evaluation rule for {type(node).__name__}")

    def call_function(self, name: str, args: List[Value], env: Environment) -> Value:
        func = env.get_function(name)
        if len(args) != len(func.params):
            raise ArityMismatch(f"{name} expects {len(func.params)} arguments, got {len(args)}")
        if env.depth >= self.max_call_depth:
            raise RecursionLimit(f"call depth limit of {self.max_call_depth} exceeded calling {name}")
        call_env = env.derive(name)
        for param, arg in zip(func.params, args):
            call_env.declare(param.name, param.type_spec, arg)
        if self.debug_level >= 2:
            rendered = ', '.join(arg.render() for arg in args)
            self.debug(f"call {name}({rendered}) depth={call_env.depth}")
        try:
            return self.execute_block(func.body, call_env)
        except ReturnSignal as r:
            return r.value

    def apply_binary_op(self, op: str, a: Value, b: Value) -> Value:
        if op in ARITHMETIC_OPERATORS:
            if not (isinstance(a, Integer) and isinstance(b, Integer)):
                raise TypeMismatch(f'unsupported {op} for {type_name(a)} and {type_name(b)}')
            return Integer(self._arithmetic(op, a.value, b.value))
        if op in COMPARISON_OPERATORS:
            if not (isinstance(a, Integer) and isinstance(b, Integer)):
                raise TypeMismatch(f'comparison {op} not supported for {type_name(a)} and {type_name(b)}')
            x, y = a.value, b.value
            if op == '<': return Boolean(x < y)
            if op == '<=': return Boolean(x <= y)
            if op == '>': return Boolean(x > y)
            return Boolean(x >= y)
        if op in ('==', '!='):
            eq = a == b
            return Boolean(eq if op == '==' else not eq)
        if op in LOGICAL_OPERATORS:
            if not (isinstance(a, Boolean) and isinstance(b, Boolean)):
                raise TypeMismatch(f'{op} requires boolean operands, got {type_name(a)} and {type_name(b)}')
            if op == '&&':
                return Boolean(a.value and b.value)
            return Boolean(a.value or b.value)
        raise UnsupportedConstruct(f'unknown operator {op}')

    def apply_unary_op(self, op: str, operand: Value) -> Value:
        if op == '!':
            if not isinstance(operand, Boolean):
                raise TypeMismatch(f'! requires a boolean operand, got {type_name(operand)}')
            return Boolean(not operand.value)
        raise UnsupportedConstruct(f'unknown unary operator {op}')

    @staticmethod
    def _arithmetic(op: str, x: int, y: int) -> int:
        if op == '+':
            result = x + y
        elif op == '-':
            result = x - y
        elif op == '*':
            result = x * y
        else:
            if y == 0:
                raise DivisionByZero('division by zero' if op == '/' else 'modulo by zero')
            # truncate toward zero; the remainder takes the sign of the dividend
            quotient = abs(x) // abs(y)
            if (x < 0) != (y < 0):
                quotient = -quotient
            result = quotient if op == '/' else x - y * quotient
        if not in_int_range(result):
            raise IntegerOverflow(f'{x} {op} {y} overflows a 32-bit integer')
        return result


@dataclass
class Outcome:
    """Result of `interpret`: the final value, or the first error encountered."""
    value: Value = VOID
    error: Optional[ErrorVal] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def run_program(source: str, debug_level: int = 0) -> Value:
    """Convenience function to parse and run an Asteva program from a source string."""
    try:
        ast_program = parse_program(source)
    except RecursionError:
        raise RecursionLimit('maximum nesting depth exceeded while parsing')
    interpreter = Interpreter(debug_level=debug_level)
    return interpreter.run(ast_program)


def interpret(source: str, *, out: Optional[TextIO] = None, debug_level: int = 0,
              max_call_depth: int = DEFAULT_MAX_CALL_DEPTH) -> Outcome:
    """Lex, parse and run `source`, reporting the first failure as an `ErrorVal`.

    Language errors never escape this function. Output already printed
    before a failure stays printed.
    """
    try:
        ast_program = parse_program(source)
        interpreter = Interpreter(out=out, debug_level=debug_level, max_call_depth=max_call_depth)
        value = interpreter.run(ast_program)
    except RecursionError:
        return Outcome(error=ErrorVal('RecursionLimit', 'maximum nesting depth exceeded while parsing'))
    except AstevaError as e:
        return Outcome(error=e.err)
    return Outcome(value=value)
