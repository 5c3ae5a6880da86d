from pathlib import Path
import pytest
from viet.__main__ import main

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_6_undefined_variable(capsys):
    # The run aborts at the first error and its partial output is discarded
    with pytest.raises(SystemExit) as excinfo:
        main([str(EXAMPLES / 'program_6.viet')])
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err.strip() == 'Error: RuntimeError at line 3, column 5: undefined variable b'
