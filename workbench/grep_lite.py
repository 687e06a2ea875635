"""Print the lines of a file or of standard input that match a pattern."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Iterator
from typing import Pattern


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def process_lines(
    lines: Iterable[str], pattern: str | Pattern[str]
) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` for every line the pattern matches.

    Line numbers count from zero and line endings are removed.
    """
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    for number, raw in enumerate(lines):
        line = _strip_line_ending(raw)
        if regex.search(line):
            yield number, line


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grep-lite", description="searches for patterns"
    )
    parser.add_argument("--version", action="version", version="grep-lite 0.1")
    parser.add_argument("pattern", help="The pattern to search for")
    parser.add_argument("input", nargs="?", help="File to search")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line tool."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        regex = re.compile(args.pattern)
    except re.error as exc:
        parser.error(f"invalid pattern: {exc}")

    if args.input is None:
        matches = process_lines(sys.stdin, regex)
        for number, line in matches:
            print(f"{number}: {line}")
    else:
        with open(args.input, encoding="utf-8") as handle:
            for number, line in process_lines(handle, regex):
                print(f"{number}: {line}")
    return 0


if __name__ == "__main__":
    sys.exit(main())