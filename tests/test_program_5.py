from pathlib import Path
from viet.interpreter import run_file

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_5_numbers_and_equality():
    result = run_file(str(EXAMPLES / 'program_5.viet'))
    assert result.output == ['30', '7.5', '-7.5', 'sai', 'đúng']
    assert result.bindings['tổng'] == 30.0
