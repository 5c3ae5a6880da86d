import dataclasses

import pytest

from viet.ast import (
    Program, AssignmentStatement, PrintStatement, IfStatement,
    BinaryExpression, NumberLiteral, StringLiteral, BooleanLiteral, Identifier,
)
from viet.errors import VietSyntaxError
from viet.lexer import tokenize
from viet.parser import Parser, parse, parse_program


def num(value):
    return NumberLiteral(float(value))


def only_expression(source):
    program = parse_program(f'in ({source})')
    assert len(program.statements) == 1
    return program.statements[0].value


def test_assignment_with_precedence():
    program = parse_program('gán a = 1 + 2 * 3')
    assert program == Program((
        AssignmentStatement(
            Identifier('a'),
            BinaryExpression(num(1), '+', BinaryExpression(num(2), '*', num(3))),
        ),
    ))


def test_binary_operators_are_left_associative():
    assert only_expression('1 - 2 - 3') == BinaryExpression(BinaryExpression(num(1), '-', num(2)), '-', num(3))
    assert only_expression('8 / 4 * 2') == BinaryExpression(BinaryExpression(num(8), '/', num(4)), '*', num(2))


def test_equality_binds_loosest():
    assert only_expression('1 + 1 == 2') == BinaryExpression(BinaryExpression(num(1), '+', num(1)), '==', num(2))


def test_grouping_overrides_precedence():
    assert only_expression('(1 + 2) * 3') == BinaryExpression(BinaryExpression(num(1), '+', num(2)), '*', num(3))


def test_unary_minus_desugars_and_recurses():
    assert only_expression('--x') == BinaryExpression(
        num(0), '-', BinaryExpression(num(0), '-', Identifier('x')),
    )


def test_literals():
    assert only_expression('"chào"') == StringLiteral('chào')
    assert only_expression('đúng') == BooleanLiteral(True)
    assert only_expression('sai') == BooleanLiteral(False)


def test_if_else():
    program = parse_program('nếu (a == 1) {\n  in ("một")\n} khác {\n  in ("khác")\n}\n')
    stmt = program.statements[0]
    assert isinstance(stmt, IfStatement)
    assert stmt.condition == BinaryExpression(Identifier('a'), '==', num(1))
    assert stmt.then_branch == (PrintStatement(StringLiteral('một')),)
    assert stmt.else_branch == (PrintStatement(StringLiteral('khác')),)


def test_if_without_else():
    stmt = parse_program('nếu (đúng) { }').statements[0]
    assert stmt.then_branch == ()
    assert stmt.else_branch is None


def test_newlines_separate_statements():
    program = parse_program('\n\ngán a = 1\n\nin (a)\n')
    assert [type(s) for s in program.statements] == [AssignmentStatement, PrintStatement]


def test_positions_recorded():
    stmt = parse_program('\n  in (a + b)').statements[0]
    assert (stmt.line, stmt.column) == (2, 3)
    assert (stmt.value.line, stmt.value.column) == (2, 9)


def test_nodes_are_immutable():
    stmt = parse_program('in (1)').statements[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        stmt.value = num(2)


def test_parse_accepts_token_list():
    source = 'gán a = 1\nin (a)'
    assert parse(tokenize(source)) == parse_program(source)


def test_token_list_must_end_with_eof():
    with pytest.raises(ValueError):
        Parser([])


@pytest.mark.parametrize('source, message, position', [
    ('in 5', "expected '(' after 'in', found number 5", (1, 4)),
    ('gán = 5', "expected variable name after 'gán', found '='", (1, 5)),
    ('gán a 5', "expected '=' after variable name 'a', found number 5", (1, 7)),
    ('in (1 +)', "expected expression, found ')'", (1, 8)),
    ('in (1', "expected ')' after value to print, found end of input", (1, 6)),
    ('nếu đúng { }', "expected '(' after 'nếu', found keyword 'đúng'", (1, 5)),
    ('nếu (đúng)\n{ }', "expected '{' to start block, found end of line", (1, 11)),
    ('a = 1', "unexpected identifier 'a' at start of statement", (1, 1)),
    ('lặp', "unexpected keyword 'lặp' at start of statement", (1, 1)),
])
def test_syntax_errors(source, message, position):
    with pytest.raises(VietSyntaxError) as excinfo:
        parse_program(source)
    assert excinfo.value.message == message
    assert (excinfo.value.line, excinfo.value.column) == position


def test_unterminated_block():
    with pytest.raises(VietSyntaxError) as excinfo:
        parse_program('nếu (đúng) {\n  in (1)\n')
    assert excinfo.value.message.startswith('unterminated block')
    assert excinfo.value.line == 3


def test_deeply_nested_parentheses():
    source = 'gán a = 1\nin (' + '(' * 1000 + '1' + ')' * 1000 + ')'
    with pytest.raises(VietSyntaxError) as excinfo:
        parse_program(source)
    assert excinfo.value.message == 'expression nested too deeply'
    assert (excinfo.value.line, excinfo.value.column) == (2, 1)
