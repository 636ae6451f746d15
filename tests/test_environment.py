import pytest

from asteva.environment import Environment, FunctionDefinition
from asteva.errors import UndefinedFunction, UndefinedVariable
from asteva.types import Boolean, Integer, TypeSpec


def test_lookup_of_missing_name_fails():
    env = Environment()
    with pytest.raises(UndefinedVariable):
        env.get('ghost')


def test_declare_records_value_and_type():
    env = Environment()
    env.declare('flag', TypeSpec.boolean(), Boolean(True))
    assert env.get('flag') == Boolean(True)
    assert env.types['flag'] == TypeSpec.boolean()


def test_derive_copies_and_isolates():
    env = Environment()
    env.declare('x', TypeSpec.integer(), Integer(1))
    env.define_function(FunctionDefinition('f', TypeSpec.integer(), [], []))
    child = env.derive('f')
    assert child.get('x') == Integer(1)
    assert child.get_function('f').name == 'f'
    assert child.current_function == 'f'
    assert child.depth == 1
    child.set('x', Integer(2))
    child.declare('y', TypeSpec.integer(), Integer(3))
    child.define_function(FunctionDefinition('g', TypeSpec.integer(), [], []))
    assert env.get('x') == Integer(1)
    with pytest.raises(UndefinedVariable):
        env.get('y')
    with pytest.raises(UndefinedFunction):
        env.get_function('g')
    assert env.current_function is None
