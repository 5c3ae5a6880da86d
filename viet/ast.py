"""Abstract Syntax Tree (AST) definitions for the Viet language.

The node classes form a closed set: the parser is their only producer and
the interpreter handles every variant. Nodes are frozen dataclasses and
statement sequences are tuples, so a tree cannot change once built. Each
node remembers the line and column of the token that introduced it; these
positions are excluded from equality.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class NumberLiteral:
    value: float
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)


@dataclass(frozen=True)
class StringLiteral:
    value: str
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)


@dataclass(frozen=True)
class BooleanLiteral:
    value: bool
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Identifier:
    name: str
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)


@dataclass(frozen=True)
class BinaryExpression:
    left: 'Expression'
    operator: str  # one of + - * / == !=
    right: 'Expression'
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)


@dataclass(frozen=True)
class AssignmentStatement:
    target: Identifier
    value: 'Expression'
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)


@dataclass(frozen=True)
class PrintStatement:
    value: 'Expression'
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)


@dataclass(frozen=True)
class IfStatement:
    condition: 'Expression'
    then_branch: Tuple['Statement', ...]
    else_branch: Optional[Tuple['Statement', ...]] = None
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Program:
    statements: Tuple['Statement', ...]


Expression = Union[NumberLiteral, StringLiteral, BooleanLiteral, Identifier, BinaryExpression]
Statement = Union[AssignmentStatement, PrintStatement, IfStatement]

BINARY_OPERATORS = ('+', '-', '*', '/', '==', '!=')
