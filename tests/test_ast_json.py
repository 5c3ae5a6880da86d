import json

import pytest

from viet.ast import Identifier, NumberLiteral
from viet.ast_json import ast_to_obj, ast_from_obj
from viet.interpreter import Interpreter
from viet.parser import parse_program

SOURCE = '''gán a = -2
nếu (a != 2) {
    in ("âm: " + a)
} khác {
    in (đúng)
}
nếu (sai) { in (0) }
'''


def test_round_trip_through_json_text():
    program = parse_program(SOURCE)
    text = json.dumps(ast_to_obj(program), ensure_ascii=False)
    loaded = ast_from_obj(json.loads(text))
    assert loaded == program
    # positions survive too
    assert loaded.statements[1].line == 2
    assert loaded.statements[1].condition.column == program.statements[1].condition.column


def test_loaded_ast_runs():
    loaded = ast_from_obj(ast_to_obj(parse_program(SOURCE)))
    result = Interpreter().interpret(loaded)
    assert result.output == ['âm: -2']


def test_object_shape():
    obj = ast_to_obj(parse_program('in (x)'))
    assert obj == {
        'type': 'Program',
        'statements': [{
            'type': 'PrintStatement',
            'value': {'type': 'Identifier', 'name': 'x', 'line': 1, 'column': 5},
            'line': 1,
            'column': 1,
        }],
    }


def test_unknown_node_type():
    with pytest.raises(ValueError):
        ast_from_obj({'type': 'WhileStmt'})


def test_unsupported_object():
    with pytest.raises(TypeError):
        ast_to_obj(object())
    with pytest.raises(TypeError):
        ast_from_obj([1, 2])


def test_single_nodes():
    assert ast_from_obj(ast_to_obj(NumberLiteral(1.5))) == NumberLiteral(1.5)
    assert ast_from_obj(ast_to_obj(Identifier('tên'))) == Identifier('tên')


def test_unknown_operator_rejected():
    obj = ast_to_obj(parse_program('in (1 + 2)'))
    obj['statements'][0]['value']['operator'] = '%'
    with pytest.raises(ValueError):
        ast_from_obj(obj)
