from pathlib import Path
from viet.__main__ import main

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_4_if_else(capsys):
    """Test program 4: branching on equality.

    The condition of the first `nếu` holds so only the then-branch
    prints; the second `nếu` has no else-branch and a false condition,
    so it prints nothing. A number concatenated to text prints without
    a fractional part.
    """
    main([str(EXAMPLES / 'program_4.viet')])
    out_lines = capsys.readouterr().out.strip().split('\n')
    assert out_lines == ['vừa đủ tuổi', 'tuổi: 18']
