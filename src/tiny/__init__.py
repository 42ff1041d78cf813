from .scanner import (
    CharStream,
    ScanError,
    Scanner,
    Token,
    TokenKind,
    describe_error,
    next_token,
    tokenize,
)
from .table import render_table, write_table

__all__ = [
    "CharStream",
    "ScanError",
    "Scanner",
    "Token",
    "TokenKind",
    "describe_error",
    "next_token",
    "tokenize",
    "render_table",
    "write_table",
]
