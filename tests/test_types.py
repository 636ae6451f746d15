import pytest

from asteva.errors import TypeMismatch
from asteva.types import Boolean, Integer, String, VOID, Void


def test_cross_variant_values_are_unequal():
    assert Integer(1) != Boolean(True)
    assert Integer(0) != Boolean(False)
    assert String('1') != Integer(1)
    assert Void() == VOID


def test_as_bool():
    assert Boolean(True).as_bool() is True
    assert Integer(0).as_bool() is False
    assert Integer(-4).as_bool() is True
    with pytest.raises(TypeMismatch):
        String('x').as_bool()
    with pytest.raises(TypeMismatch):
        VOID.as_bool()


def test_render():
    assert [v.render() for v in (Integer(-12), Boolean(True), Boolean(False), String('a b'), VOID)] == [
        '-12', 'true', 'false', 'a b', 'void',
    ]
