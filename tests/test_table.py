import io
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

from tiny.scanner import Token, TokenKind, tokenize  # noqa: E402
from tiny.table import render_lines, render_table, write_table  # noqa: E402


RULE = "+--------------------+---------------+"


def test_table_layout():
    table = render_table(tokenize("x := 10"))
    assert table == "\n".join(
        [
            RULE,
            "| Token Type         | Token Value   |",
            RULE,
            "| IDENTIFIER         | x             |",
            "| ASSIGN             | :=            |",
            "| NUMBER             | 10            |",
            RULE,
        ]
    ) + "\n"


def test_empty_sequence_still_has_header():
    assert render_lines([]) == [RULE, "| Token Type         | Token Value   |", RULE, RULE]


def test_long_value_is_not_truncated():
    line = render_lines([Token("averyveryverylongname", TokenKind.IDENTIFIER)])[3]
    assert "averyveryverylongname" in line
    assert line.startswith("| IDENTIFIER         | ")


def test_rows_have_fixed_width():
    for line in render_lines(tokenize("repeat x := x - 1 until x = 0")):
        assert len(line) == len(RULE)


def test_write_table_to_stream():
    out = io.StringIO()
    tokens = [Token(")", TokenKind.CLOSEDBRACKET)]
    write_table(tokens, out)
    assert out.getvalue() == render_table(tokens)
    assert "| CLOSEDBRACKET      | )             |" in out.getvalue()
