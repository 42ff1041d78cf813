"""tinyscan: scan a TINY source file and print its token table."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .scanner import ScanError, Scanner, Token
from .table import render_table


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Scan TINY source into a token table")
    ap.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=Path("input.txt"),
        help="TINY source file (default: input.txt)",
    )
    ap.add_argument(
        "--out",
        type=Path,
        default=Path("output.txt"),
        help="File to write the token table to (default: output.txt)",
    )
    ap.add_argument(
        "--keep-going",
        action="store_true",
        help="Report every lexical error instead of stopping at the first one",
    )
    ap.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print progress or the table to the terminal",
    )
    args = ap.parse_args(argv)
    quiet = args.quiet

    try:
        log_step(f"reading {args.input}", quiet)
        # Undecodable bytes become U+FFFD: skipped inside comments, ERROR elsewhere.
        src = args.input.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        log_error(f"cannot open input file {args.input}: {e.strerror or e}")
        return 1

    log_step("scanning", quiet)
    scanner = Scanner(src)
    errors: List[ScanError] = []
    if args.keep_going:
        tokens, errors = scanner.scan_all()
    else:
        try:
            tokens = scanner.scan()
        except ScanError as e:
            tokens = e.tokens
            errors = [e]

    _emit(tokens, args.out, quiet)

    for err in errors:
        log_error(str(err))
    return 1 if errors else 0


def _emit(tokens: List[Token], out_path: Path, quiet: bool = False) -> None:
    table = render_table(tokens)
    if not quiet:
        print(table, end="")
    try:
        out_path.write_text(table, encoding="utf-8")
    except OSError as e:
        log_warning(f"cannot write output file {out_path}: {e.strerror or e}")
        return
    log_step(f"wrote {out_path}", quiet)


def log_step(msg: str, quiet: bool = False) -> None:
    if not quiet:
        print(f"[tinyscan] {msg}...")


def log_error(msg: str) -> None:
    print(f"[tinyscan:error] {msg}", file=sys.stderr)


def log_warning(msg: str) -> None:
    print(f"[tinyscan:warning] {msg}", file=sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())
