"""Tree-walking interpreter for the Viet language.

The interpreter executes a `Program` produced by the parser against a
single root `Environment`, collecting every printed line. `run` ties the
pipeline together: tokenize, parse, then interpret in a fresh interpreter,
returning the output lines and a snapshot of the final bindings. The first
error aborts the run; partial output is discarded with the interpreter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, TextIO, Tuple

from .ast import (
    Program, AssignmentStatement, PrintStatement, IfStatement,
    BinaryExpression, NumberLiteral, StringLiteral, BooleanLiteral, Identifier,
    Expression, Statement,
)
from .environment import Environment
from .errors import VietRuntimeError
from .parser import parse_program
from .values import Value, is_number, is_truthy, to_display, type_name, values_equal


@dataclass
class RunResult:
    """Printed output lines and final variable bindings of a successful run."""
    output: List[str] = field(default_factory=list)
    bindings: Dict[str, Value] = field(default_factory=dict)


class Interpreter:
    """Core interpreter that executes a Viet AST."""
    def __init__(self, debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.global_env = Environment()
        self.output: List[str] = []
        self.debug_level = debug_level
        self.debug_file = debug_file
        self.debug_fp: Optional[TextIO] = None

    def debug(self, level: int, msg: str):
        if self.debug_level >= level and self.debug_fp:
            self.debug_fp.write(msg + '\n')
            self.debug_fp.flush()

    # Public API
    def interpret(self, program: Program) -> RunResult:
        if self.debug_level > 0:
            self.debug_fp = open(self.debug_file, 'w', encoding='utf-8')
        try:
            self.execute_block(program.statements, self.global_env)
        finally:
            if self.debug_fp:
                self.debug_fp.close()
                self.debug_fp = None
        return RunResult(list(self.output), self.global_env.snapshot())

    def execute_block(self, statements: Tuple[Statement, ...], env: Environment):
        for stmt in statements:
            try:
                self.execute(stmt, env)
            except RecursionError:
                raise VietRuntimeError('expression nested too deeply', stmt.line, stmt.column) from None

    def execute(self, node: Statement, env: Environment):
        self.debug(1, f"line {node.line}: {type(node).__name__}")
        if isinstance(node, AssignmentStatement):
            value = self.evaluate(node.value, env)
            env.define(node.target.name, value)
            self.debug(2, f"define {node.target.name}: {type_name(value)} = {to_display(value)}")
            return
        if isinstance(node, PrintStatement):
            text = to_display(self.evaluate(node.value, env))
            self.output.append(text)
            self.debug(2, f"print {text!r}")
            return
        if isinstance(node, IfStatement):
            cond = self.evaluate(node.condition, env)
            truthy = is_truthy(cond)
            self.debug(3, f"if condition {to_display(cond)} -> {truthy}")
            if truthy:
                self.execute_block(node.then_branch, env)
            elif node.else_branch is not None:
                self.execute_block(node.else_branch, env)
            return
        raise NotImplementedError(f"execute: unexpected node type {type(node).__name__}")

    def evaluate(self, node: Expression, env: Environment) -> Value:
        if isinstance(node, (NumberLiteral, StringLiteral, BooleanLiteral)):
            return node.value
        if isinstance(node, Identifier):
            try:
                return env.get(node.name)
            except VietRuntimeError as ex:
                raise ex.locate(node.line, node.column)
        if isinstance(node, BinaryExpression):
            return self.evaluate_binary(node, env)
        raise NotImplementedError(f"evaluate: unexpected node type {type(node).__name__}")

    def evaluate_binary(self, node: BinaryExpression, env: Environment) -> Value:
        # Walk the left spine iteratively so long left-associative chains
        # such as 1 + 1 + ... + 1 do not recurse once per operand.
        spine: List[BinaryExpression] = []
        expr: Expression = node
        while isinstance(expr, BinaryExpression):
            spine.append(expr)
            expr = expr.left
        left = self.evaluate(expr, env)
        for current in reversed(spine):
            right = self.evaluate(current.right, env)
            try:
                result = self.apply_binary_op(current.operator, left, right)
            except VietRuntimeError as ex:
                raise ex.locate(current.line, current.column)
            self.debug(3, f"{to_display(left)} {current.operator} {to_display(right)} -> {to_display(result)}")
            left = result
        return left

    def apply_binary_op(self, op: str, a: Value, b: Value) -> Value:
        if op == '+':
            if a is None or b is None:
                raise VietRuntimeError(f'unsupported operands for +: {type_name(a)} and {type_name(b)}')
            if is_number(a) and is_number(b):
                return a + b
            # Anything else concatenates display text
            return to_display(a) + to_display(b)
        if op in ('-', '*', '/'):
            if not (is_number(a) and is_number(b)):
                raise VietRuntimeError(
                    f'operands must be numbers for {op}, got {type_name(a)} and {type_name(b)}'
                )
            if op == '-':
                return a - b
            if op == '*':
                return a * b
            if b == 0.0:
                raise VietRuntimeError('division by zero')
            return a / b
        if op == '==':
            return values_equal(a, b)
        if op == '!=':
            return not values_equal(a, b)
        raise VietRuntimeError(f'unknown operator {op}')


def run(source: str, debug_level: int = 0) -> RunResult:
    """Lex, parse and evaluate Viet source in a fresh interpreter.

    Raises `VietSyntaxError` or `VietRuntimeError` on failure.
    """
    program = parse_program(source)
    interpreter = Interpreter(debug_level=debug_level)
    return interpreter.interpret(program)


def run_file(file_path: str, debug_level: int = 0) -> RunResult:
    """Read a UTF-8 Viet source file and run it."""
    with open(file_path, 'r', encoding='utf-8') as f:
        source = f.read()
    return run(source, debug_level=debug_level)
