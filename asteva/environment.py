from dataclasses import dataclass
from typing import Dict, List, Optional

from asteva.ast import Node, Parameter
from asteva.errors import UndefinedFunction, UndefinedVariable
from asteva.types import TypeSpec, Value


@dataclass
class FunctionDefinition:
    name: str
    return_type: TypeSpec
    params: List[Parameter]
    body: List[Node]

    def __repr__(self) -> str:
        return f"<function {self.name}>"


class Environment:
    """Variable bindings and function table consulted during evaluation.

    A call does not push a frame onto this environment. It evaluates in a
    derived copy (see `derive`), so bindings made by the callee are never
    seen by the caller.
    """
    def __init__(self):
        self.values: Dict[str, Value] = {}
        self.types: Dict[str, TypeSpec] = {}
        self.functions: Dict[str, FunctionDefinition] = {}
        self.current_function: Optional[str] = None
        self.depth = 0

    def get(self, name: str) -> Value:
        if name in self.values:
            return self.values[name]
        raise UndefinedVariable(f'undefined variable {name}')

    def declare(self, name: str, type_spec: TypeSpec, value: Value):
        self.values[name] = value
        self.types[name] = type_spec

    def set(self, name: str, value: Value):
        self.values[name] = value

    def define_function(self, definition: FunctionDefinition):
        self.functions[definition.name] = definition

    def get_function(self, name: str) -> FunctionDefinition:
        if name in self.functions:
            return self.functions[name]
        raise UndefinedFunction(f'undefined function {name}')

    def derive(self, function_name: str) -> 'Environment':
        """Return an isolated copy of this environment for a call to `function_name`."""
        env = Environment()
        # Values are immutable, so shallow copies are enough for isolation
        env.values = dict(self.values)
        env.types = dict(self.types)
        env.functions = dict(self.functions)
        env.current_function = function_name
        env.depth = self.depth + 1
        return env
