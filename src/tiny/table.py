"""Render a token sequence as a fixed-width two-column table."""

from __future__ import annotations

from typing import Iterable, List, TextIO

from .scanner import Token

KIND_WIDTH = 18
VALUE_WIDTH = 13

HEADER = ("Token Type", "Token Value")


def rule() -> str:
    return "+" + "-" * (KIND_WIDTH + 2) + "+" + "-" * (VALUE_WIDTH + 2) + "+"


def row(kind: str, value: str) -> str:
    return f"| {kind:<{KIND_WIDTH}} | {value:<{VALUE_WIDTH}} |"


def render_lines(tokens: Iterable[Token]) -> List[str]:
    lines = [rule(), row(*HEADER), rule()]
    for tok in tokens:
        lines.append(row(tok.kind.name, tok.value))
    lines.append(rule())
    return lines


def render_table(tokens: Iterable[Token]) -> str:
    return "\n".join(render_lines(tokens)) + "\n"


def write_table(tokens: Iterable[Token], out: TextIO) -> None:
    out.write(render_table(tokens))


__all__ = ["KIND_WIDTH", "VALUE_WIDTH", "render_table", "render_lines", "write_table"]
