"""Search a file for the lines that contain a query string."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

IGNORE_CASE_VARIABLE = "IGNORE_CASE"


def _ignore_case_requested() -> bool:
    return IGNORE_CASE_VARIABLE in os.environ


def _lines(contents: str) -> list[str]:
    """Split text into lines on "\\n", dropping a trailing "\\r" from each."""
    if not contents:
        return []
    parts = contents.split("\n")
    if contents.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


@dataclass(frozen=True)
class Config:
    """What to search for, where, and whether case matters."""

    query: str
    file_path: str
    ignore_case: bool = False

    @classmethod
    def from_args(cls, args: Sequence[str]) -> "Config":
        """Build from a full argument list whose first item is the program name."""
        if len(args) < 3:
            raise ValueError(
                "expected at least two arguments, e.g. IGNORE_CASE=1 grep body poem.txt"
            )
        return cls(args[1], args[2], _ignore_case_requested())

    @classmethod
    def build(cls, args: Iterable[str]) -> "Config":
        """Build from an argument iterable, skipping the program name."""
        items = iter(args)
        next(items, None)
        query = next(items, None)
        if query is None:
            raise ValueError("missing query string")
        file_path = next(items, None)
        if file_path is None:
            raise ValueError("missing file name")
        print(f"query: {query}")
        print(f"file: {file_path}")
        return cls(query, file_path, _ignore_case_requested())


def search_case_sensitive(query: str, contents: str) -> list[str]:
    """Return the lines of ``contents`` that contain ``query``."""
    return [line for line in _lines(contents) if query in line]


def search_case_insensitive(query: str, contents: str) -> list[str]:
    """Return the lines of ``contents`` that contain ``query``, ignoring case."""
    needle = query.lower()
    return [line for line in _lines(contents) if needle in line.lower()]


def run(config: Config) -> list[str]:
    """Search the configured file, print each matching line and return them."""
    with open(config.file_path, encoding="utf-8") as handle:
        contents = handle.read()
    search = search_case_insensitive if config.ignore_case else search_case_sensitive
    results = search(config.query, contents)
    for line in results:
        print(f"result:/{line}")
    return results


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point; ``argv`` excludes the program name."""
    arguments = list(sys.argv[1:] if argv is None else argv)
    program = sys.argv[0] if sys.argv else "grep"
    try:
        config = Config.build([program, *arguments])
    except ValueError as err:
        print(f"config build error:{err}", file=sys.stderr)
        return 1
    try:
        run(config)
    except (OSError, UnicodeDecodeError) as err:
        print(f"error reading file:{err}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())