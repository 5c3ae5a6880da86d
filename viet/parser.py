"""Recursive-descent parser for the Viet language.

The grammar, from loosest to tightest binding::

    program    := (NEWLINE | statement)* EOF
    statement  := assignStmt | printStmt | ifStmt
    assignStmt := 'gán' IDENTIFIER '=' expression
    printStmt  := 'in' '(' expression ')'
    ifStmt     := 'nếu' '(' expression ')' '{' block '}' ('khác' '{' block '}')?
    block      := (NEWLINE | statement)*
    expression := equality
    equality   := comparison (('==' | '!=') comparison)*
    comparison := term
    term       := factor (('+' | '-') factor)*
    factor     := unary (('*' | '/') unary)*
    unary      := '-' unary | primary
    primary    := NUMBER | STRING | BOOLEAN | IDENTIFIER | '(' expression ')'

Precedence comes from the layering of the rules: each rule parses its
operands with the next tighter rule. Binary operators are left-associative.
"""

from __future__ import annotations

from typing import List, Tuple

from lark import Token

from .ast import (
    Program, AssignmentStatement, PrintStatement, IfStatement,
    BinaryExpression, NumberLiteral, StringLiteral, BooleanLiteral, Identifier,
    Expression, Statement,
)
from .errors import VietSyntaxError
from .lexer import (
    tokenize, NUMBER, STRING, BOOLEAN, IDENTIFIER, NEWLINE, EOF,
    ASSIGN, IF, ELSE, PRINT, KEYWORDS,
)
from .values import TRUE_KEYWORD


def describe(token: Token) -> str:
    """Human-readable name of a token for error messages."""
    if token.type == EOF:
        return 'end of input'
    if token.type == NEWLINE:
        return 'end of line'
    if token.type == STRING:
        return f'string "{token.value}"'
    if token.type == NUMBER:
        return f'number {token.value}'
    if token.type == IDENTIFIER:
        return f"identifier '{token.value}'"
    if token.value in KEYWORDS:
        return f"keyword '{token.value}'"
    return f"'{token.value}'"


class Parser:
    def __init__(self, tokens: List[Token]):
        if not tokens or tokens[-1].type != EOF:
            raise ValueError('token list must end with an EOF token')
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> Token:
        return self.tokens[self.pos]

    def check(self, *types: str) -> bool:
        return self.peek().type in types

    def advance(self) -> Token:
        token = self.peek()
        if token.type != EOF:
            self.pos += 1
        return token

    def error(self, message: str, token: Token) -> VietSyntaxError:
        return VietSyntaxError(message, token.line, token.column)

    def consume(self, expected: str, message: str) -> Token:
        token = self.peek()
        if token.type != expected:
            raise self.error(f"{message}, found {describe(token)}", token)
        return self.advance()

    def parse_program(self) -> Program:
        statements: List[Statement] = []
        while not self.check(EOF):
            if self.check(NEWLINE):
                self.advance()
                continue
            start = self.peek()
            try:
                statements.append(self.parse_statement())
            except RecursionError:
                raise self.error('expression nested too deeply', start) from None
        return Program(tuple(statements))

    def parse_statement(self) -> Statement:
        token = self.peek()
        if token.type == ASSIGN:
            return self.parse_assignment()
        if token.type == PRINT:
            return self.parse_print()
        if token.type == IF:
            return self.parse_if()
        raise self.error(f"unexpected {describe(token)} at start of statement", token)

    def parse_assignment(self) -> AssignmentStatement:
        keyword = self.advance()
        name_token = self.consume(IDENTIFIER, "expected variable name after 'gán'")
        self.consume('=', f"expected '=' after variable name '{name_token.value}'")
        value = self.parse_expression()
        target = Identifier(name_token.value, name_token.line, name_token.column)
        return AssignmentStatement(target, value, keyword.line, keyword.column)

    def parse_print(self) -> PrintStatement:
        keyword = self.advance()
        self.consume('(', "expected '(' after 'in'")
        value = self.parse_expression()
        self.consume(')', "expected ')' after value to print")
        return PrintStatement(value, keyword.line, keyword.column)

    def parse_if(self) -> IfStatement:
        keyword = self.advance()
        self.consume('(', "expected '(' after 'nếu'")
        condition = self.parse_expression()
        self.consume(')', "expected ')' after condition")
        then_branch = self.parse_block()
        else_branch = None
        if self.check(ELSE):
            self.advance()
            else_branch = self.parse_block()
        return IfStatement(condition, then_branch, else_branch, keyword.line, keyword.column)

    def parse_block(self) -> Tuple[Statement, ...]:
        opening = self.consume('{', "expected '{' to start block")
        statements: List[Statement] = []
        while not self.check('}'):
            if self.check(EOF):
                raise self.error(
                    f"unterminated block: missing '}}' for '{{' at line {opening.line}, column {opening.column}",
                    self.peek(),
                )
            if self.check(NEWLINE):
                self.advance()
                continue
            statements.append(self.parse_statement())
        self.consume('}', "expected '}' to close block")
        return tuple(statements)

    # Expressions
    def parse_expression(self) -> Expression:
        return self.parse_equality()

    def parse_equality(self) -> Expression:
        node = self.parse_comparison()
        while self.check('==', '!='):
            op_token = self.advance()
            right = self.parse_comparison()
            node = BinaryExpression(node, op_token.value, right, op_token.line, op_token.column)
        return node

    def parse_comparison(self) -> Expression:
        # No relational operators exist yet; this layer sits between
        # equality and term so they can be added without reshaping the grammar.
        return self.parse_term()

    def parse_term(self) -> Expression:
        node = self.parse_factor()
        while self.check('+', '-'):
            op_token = self.advance()
            right = self.parse_factor()
            node = BinaryExpression(node, op_token.value, right, op_token.line, op_token.column)
        return node

    def parse_factor(self) -> Expression:
        node = self.parse_unary()
        while self.check('*', '/'):
            op_token = self.advance()
            right = self.parse_unary()
            node = BinaryExpression(node, op_token.value, right, op_token.line, op_token.column)
        return node

    def parse_unary(self) -> Expression:
        if self.check('-'):
            op_token = self.advance()
            operand = self.parse_unary()
            zero = NumberLiteral(0.0, op_token.line, op_token.column)
            return BinaryExpression(zero, '-', operand, op_token.line, op_token.column)
        return self.parse_primary()

    def parse_primary(self) -> Expression:
        token = self.peek()
        if token.type == NUMBER:
            self.advance()
            return NumberLiteral(float(token.value), token.line, token.column)
        if token.type == STRING:
            self.advance()
            return StringLiteral(token.value, token.line, token.column)
        if token.type == BOOLEAN:
            self.advance()
            return BooleanLiteral(token.value == TRUE_KEYWORD, token.line, token.column)
        if token.type == IDENTIFIER:
            self.advance()
            return Identifier(token.value, token.line, token.column)
        if token.type == '(':
            self.advance()
            expr = self.parse_expression()
            self.consume(')', "expected ')' after expression")
            return expr
        raise self.error(f"expected expression, found {describe(token)}", token)


def parse(tokens: List[Token]) -> Program:
    """Parse a token list produced by `tokenize` into a Program."""
    return Parser(tokens).parse_program()


def parse_program(source: str) -> Program:
    """Parse Viet source code into a Program AST."""
    return parse(tokenize(source))
