"""
TINY language scanner.

Tokenizes reserved words, identifiers, numbers and operators. Whitespace and
``{ ... }`` comments are skipped. Lexical errors are returned as ERROR tokens
so the caller decides whether to stop or keep scanning.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, List, Optional, TextIO, Tuple, Union


class TokenKind(Enum):
    SEMICOLON = auto()
    IF = auto()
    THEN = auto()
    END = auto()
    REPEAT = auto()
    UNTIL = auto()
    IDENTIFIER = auto()
    ASSIGN = auto()
    READ = auto()
    WRITE = auto()
    LESSTHAN = auto()
    EQUAL = auto()
    PLUS = auto()
    MINUS = auto()
    MULT = auto()
    DIV = auto()
    OPENBRACKET = auto()
    CLOSEDBRACKET = auto()
    NUMBER = auto()
    ERROR = auto()
    END_OF_INPUT = auto()


KEYWORDS = {
    "if": TokenKind.IF,
    "then": TokenKind.THEN,
    "end": TokenKind.END,
    "repeat": TokenKind.REPEAT,
    "until": TokenKind.UNTIL,
    "read": TokenKind.READ,
    "write": TokenKind.WRITE,
}

OPERATORS = {
    ";": TokenKind.SEMICOLON,
    ":=": TokenKind.ASSIGN,
    "<": TokenKind.LESSTHAN,
    "=": TokenKind.EQUAL,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.MULT,
    "/": TokenKind.DIV,
    "(": TokenKind.OPENBRACKET,
    ")": TokenKind.CLOSEDBRACKET,
}

UNCLOSED_COMMENT = "Unclosed comment"

# Returned by CharStream.get/peek at end of input; never a valid character.
EOF = ""

_WHITESPACE = frozenset(" \t\n\r\v\f")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_DIGITS = frozenset("0123456789")


def is_letter(ch: str) -> bool:
    return ch in _LETTERS


def is_digit(ch: str) -> bool:
    return ch in _DIGITS


def lookup(text: str) -> Optional[TokenKind]:
    """Exact-match lookup in the keyword table, then the operator table."""
    kind = KEYWORDS.get(text)
    if kind is None:
        kind = OPERATORS.get(text)
    return kind


@dataclass(frozen=True)
class Token:
    value: str
    kind: TokenKind


class CharStream:
    """Single-character cursor over TINY source with one character of lookahead."""

    def __init__(self, source: Union[str, TextIO]):
        if not isinstance(source, str):
            source = source.read()
        self.source = source
        self.length = len(source)
        self.pos = 0
        self.line = 1
        self.col = 1
        # Where the most recent token started
        self.mark_line = 1
        self.mark_col = 1

    def at_end(self) -> bool:
        return self.pos >= self.length

    def peek(self) -> str:
        if self.at_end():
            return EOF
        return self.source[self.pos]

    def get(self) -> str:
        if self.at_end():
            return EOF
        ch = self.source[self.pos]
        self.pos += 1
        if ch == "\n":
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        return ch

    def mark(self) -> None:
        self.mark_line = self.line
        self.mark_col = self.col


def next_token(stream: CharStream) -> Token:
    """Consume the next token from ``stream``.

    Exactly one token is returned per call. At end of input the token is
    ``Token("", END_OF_INPUT)``; a comment left open returns
    ``Token("Unclosed comment", ERROR)``.
    """
    # Skip whitespace and comments
    while True:
        ch = stream.peek()
        if ch == EOF:
            stream.mark()
            return Token(EOF, TokenKind.END_OF_INPUT)
        if ch in _WHITESPACE:
            stream.get()
            continue
        if ch == "{":
            stream.mark()
            stream.get()
            while True:
                ch = stream.get()
                if ch == EOF:
                    return Token(UNCLOSED_COMMENT, TokenKind.ERROR)
                if ch == "}":
                    break
            continue
        break

    stream.mark()
    first = stream.get()

    if is_letter(first):
        return _word(stream, first)
    if is_digit(first):
        return _number(stream, first)
    if first == ":" and stream.peek() == "=":
        stream.get()
        return Token(":=", TokenKind.ASSIGN)

    kind = lookup(first)
    if kind is None:
        return Token(first, TokenKind.ERROR)
    return Token(first, kind)


def _word(stream: CharStream, first: str) -> Token:
    buf = [first]
    while is_letter(stream.peek()):
        buf.append(stream.get())
    if is_digit(stream.peek()):
        # Identifiers are letters only; absorb the one offending digit.
        buf.append(stream.get())
        return Token("".join(buf), TokenKind.ERROR)
    text = "".join(buf)
    return Token(text, KEYWORDS.get(text, TokenKind.IDENTIFIER))


def _number(stream: CharStream, first: str) -> Token:
    buf = [first]
    while is_digit(stream.peek()):
        buf.append(stream.get())
    if is_letter(stream.peek()):
        buf.append(stream.get())
        return Token("".join(buf), TokenKind.ERROR)
    return Token("".join(buf), TokenKind.NUMBER)


def describe_error(token: Token) -> str:
    """Name the kind of lexical error an ERROR token stands for."""
    if token.value == UNCLOSED_COMMENT:
        return "unclosed comment"
    if is_letter(token.value[:1]):
        return "malformed identifier"
    if is_digit(token.value[:1]):
        return "malformed number"
    return "unknown symbol"


class ScanError(Exception):
    def __init__(
        self,
        token: Token,
        line: int,
        col: int,
        tokens: Optional[List[Token]] = None,
    ):
        self.token = token
        self.line = line
        self.col = col
        self.reason = describe_error(token)
        self.tokens = tokens if tokens is not None else []
        if token.value == UNCLOSED_COMMENT:
            msg = f"{self.reason} at {line}:{col}"
        else:
            msg = f"{self.reason} '{token.value}' at {line}:{col}"
        super().__init__(msg)


class Scanner:
    """Drives ``next_token`` over one source and collects the token sequence."""

    def __init__(self, source: Union[str, TextIO]):
        self.stream = CharStream(source)

    def next_token(self) -> Token:
        return next_token(self.stream)

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            if tok.kind is TokenKind.END_OF_INPUT:
                return
            yield tok

    def scan(self) -> List[Token]:
        """Collect tokens up to end of input, raising ScanError on the first error."""
        tokens: List[Token] = []
        for tok in self:
            if tok.kind is TokenKind.ERROR:
                raise ScanError(tok, self.stream.mark_line, self.stream.mark_col, tokens)
            tokens.append(tok)
        return tokens

    def scan_all(self) -> Tuple[List[Token], List[ScanError]]:
        """Scan the whole source, reporting every error instead of stopping."""
        tokens: List[Token] = []
        errors: List[ScanError] = []
        for tok in self:
            if tok.kind is TokenKind.ERROR:
                errors.append(
                    ScanError(tok, self.stream.mark_line, self.stream.mark_col, list(tokens))
                )
                continue
            tokens.append(tok)
        return tokens, errors


def tokenize(source: Union[str, TextIO]) -> List[Token]:
    return Scanner(source).scan()


__all__ = [
    "TokenKind",
    "Token",
    "KEYWORDS",
    "OPERATORS",
    "UNCLOSED_COMMENT",
    "EOF",
    "CharStream",
    "next_token",
    "lookup",
    "describe_error",
    "ScanError",
    "Scanner",
    "tokenize",
]
