import pytest

from asteva.ast import (
    Assignment, BinaryOp, BooleanLiteral, FunctionCall, FunctionDeclaration,
    Identifier, IfElse, IntegerLiteral, Loop, NoOp, Parameter, PrintStatement,
    ReturnStatement, StringLiteral, UnaryOp, VariableDeclaration,
)
from asteva.errors import LexError, ParseError
from asteva.parser import parse_program
from asteva.types import TypeSpec


def parse_one(source):
    program = parse_program(source)
    assert len(program.body) == 1
    return program.body[0]


def test_variable_declaration():
    node = parse_one('variable boolean ready = true;')
    assert node == VariableDeclaration('ready', TypeSpec.boolean(), BooleanLiteral(True))


def test_string_declaration():
    node = parse_one('variable string s = "hi";')
    assert node == VariableDeclaration('s', TypeSpec.string(), StringLiteral('hi'))


def test_expressions_are_flat_and_left_associative():
    node = parse_one('x = 2 + 3 * 4;')
    assert node == Assignment('x', BinaryOp('*', BinaryOp('+', IntegerLiteral(2), IntegerLiteral(3)), IntegerLiteral(4)))


def test_comparison_binds_like_arithmetic():
    node = parse_one('print 1 + 1 == 2;')
    assert node == PrintStatement(BinaryOp('==', BinaryOp('+', IntegerLiteral(1), IntegerLiteral(1)), IntegerLiteral(2)))


def test_parentheses_group():
    node = parse_one('print 2 + (3 * 4);')
    assert node.value == BinaryOp('+', IntegerLiteral(2), BinaryOp('*', IntegerLiteral(3), IntegerLiteral(4)))


def test_not_applies_to_one_term():
    node = parse_one('print !a && b;')
    assert node.value == BinaryOp('&&', UnaryOp('!', Identifier('a')), Identifier('b'))


def test_function_declaration_and_call():
    program = parse_program("""
        function integer add(variable integer a, variable integer b) {
            return a + b;
        }
        call add(1, call add(2, 3));
    """)
    decl, call = program.body
    assert decl == FunctionDeclaration(
        'add',
        TypeSpec.integer(),
        [Parameter(TypeSpec.integer(), 'a'), Parameter(TypeSpec.integer(), 'b')],
        [ReturnStatement(BinaryOp('+', Identifier('a'), Identifier('b')))],
    )
    assert call == FunctionCall('add', [IntegerLiteral(1), FunctionCall('add', [IntegerLiteral(2), IntegerLiteral(3)])])


def test_function_without_parameters():
    node = parse_one('function boolean yes() { return true; }')
    assert node.params == []
    assert node.body == [ReturnStatement(BooleanLiteral(True))]


def test_if_with_and_without_else():
    with_else = parse_one('if (x) { print 1; } else { print 0; }')
    assert with_else == IfElse(
        Identifier('x'),
        [PrintStatement(IntegerLiteral(1))],
        [PrintStatement(IntegerLiteral(0))],
    )
    without_else = parse_one('if (x) { }')
    assert without_else == IfElse(Identifier('x'), [], None)


def test_nested_blocks():
    node = parse_one('loop (i < 3) { if (i == 1) { print i; } i = i + 1; }')
    assert isinstance(node, Loop)
    assert len(node.body) == 2
    assert isinstance(node.body[0], IfElse)
    assert isinstance(node.body[1], Assignment)


def test_lone_semicolon_is_noop():
    assert parse_program(';;').body == [NoOp(), NoOp()]


def test_empty_program():
    assert parse_program('   \n').body == []


def test_missing_semicolon():
    with pytest.raises(ParseError, match="expected ';' after variable declaration at 1:23, got end of input"):
        parse_program('variable integer x = 1')


def test_missing_return_type():
    with pytest.raises(ParseError, match='as return type'):
        parse_program('function add() { return 1; }')


def test_missing_closing_brace():
    with pytest.raises(ParseError, match="expected '}' to close block"):
        parse_program('loop (true) { print 1;')


def test_missing_closing_paren():
    with pytest.raises(ParseError, match="expected '\\)' after if condition"):
        parse_program('if (x { print 1; }')


def test_stray_closing_brace_at_top_level():
    with pytest.raises(ParseError, match="unexpected token '}'"):
        parse_program('print 1; }')


def test_unexpected_leading_token():
    with pytest.raises(ParseError, match="unexpected token '\\+' at 1:1"):
        parse_program('+ 1;')


def test_identifier_needs_assignment():
    with pytest.raises(ParseError, match="expected '=' after identifier"):
        parse_program('x;')


def test_lex_errors_surface_through_parse():
    with pytest.raises(LexError):
        parse_program('variable integer x = 1 & 2;')
