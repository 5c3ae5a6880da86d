"""JSON serialization/deserialization for the Viet AST.

This module converts between Viet AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. Node positions are kept
so that errors raised while running a loaded AST still point at the
original source.
"""

from __future__ import annotations

from typing import Any, Dict

from .ast import (
    BINARY_OPERATORS,
    Program,
    AssignmentStatement,
    PrintStatement,
    IfStatement,
    BinaryExpression,
    NumberLiteral,
    StringLiteral,
    BooleanLiteral,
    Identifier,
)


def position(node: Any) -> Dict[str, int]:
    return {"line": node.line, "column": node.column}


def ast_to_obj(node: Any) -> Any:
    if node is None:
        return None
    if isinstance(node, Program):
        return {"type": "Program", "statements": [ast_to_obj(s) for s in node.statements]}
    if isinstance(node, AssignmentStatement):
        return {
            "type": "AssignmentStatement",
            "target": ast_to_obj(node.target),
            "value": ast_to_obj(node.value),
            **position(node),
        }
    if isinstance(node, PrintStatement):
        return {"type": "PrintStatement", "value": ast_to_obj(node.value), **position(node)}
    if isinstance(node, IfStatement):
        return {
            "type": "IfStatement",
            "condition": ast_to_obj(node.condition),
            "then_branch": [ast_to_obj(s) for s in node.then_branch],
            "else_branch": None if node.else_branch is None else [ast_to_obj(s) for s in node.else_branch],
            **position(node),
        }
    if isinstance(node, BinaryExpression):
        return {
            "type": "BinaryExpression",
            "left": ast_to_obj(node.left),
            "operator": node.operator,
            "right": ast_to_obj(node.right),
            **position(node),
        }
    if isinstance(node, NumberLiteral):
        return {"type": "NumberLiteral", "value": node.value, **position(node)}
    if isinstance(node, StringLiteral):
        return {"type": "StringLiteral", "value": node.value, **position(node)}
    if isinstance(node, BooleanLiteral):
        return {"type": "BooleanLiteral", "value": node.value, **position(node)}
    if isinstance(node, Identifier):
        return {"type": "Identifier", "name": node.name, **position(node)}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if obj is None:
        return None
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    line = obj.get("line", 0)
    column = obj.get("column", 0)
    if t == "Program":
        return Program(statements=tuple(ast_from_obj(s) for s in obj["statements"]))
    if t == "AssignmentStatement":
        return AssignmentStatement(
            target=ast_from_obj(obj["target"]),
            value=ast_from_obj(obj["value"]),
            line=line,
            column=column,
        )
    if t == "PrintStatement":
        return PrintStatement(value=ast_from_obj(obj["value"]), line=line, column=column)
    if t == "IfStatement":
        else_branch = obj.get("else_branch")
        return IfStatement(
            condition=ast_from_obj(obj["condition"]),
            then_branch=tuple(ast_from_obj(s) for s in obj["then_branch"]),
            else_branch=None if else_branch is None else tuple(ast_from_obj(s) for s in else_branch),
            line=line,
            column=column,
        )
    if t == "BinaryExpression":
        if obj["operator"] not in BINARY_OPERATORS:
            raise ValueError(f"Unknown binary operator: {obj['operator']}")
        return BinaryExpression(
            left=ast_from_obj(obj["left"]),
            operator=obj["operator"],
            right=ast_from_obj(obj["right"]),
            line=line,
            column=column,
        )
    if t == "NumberLiteral":
        return NumberLiteral(value=float(obj["value"]), line=line, column=column)
    if t == "StringLiteral":
        return StringLiteral(value=obj["value"], line=line, column=column)
    if t == "BooleanLiteral":
        return BooleanLiteral(value=bool(obj["value"]), line=line, column=column)
    if t == "Identifier":
        return Identifier(name=obj["name"], line=line, column=column)

    raise ValueError(f"Unknown AST node type: {t}")
