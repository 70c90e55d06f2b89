"""Report lines that occur more than once in the input."""

import sys
from collections.abc import Iterable, Mapping, MutableMapping
from pathlib import Path
from typing import TextIO

_PROG = "dup"


def _strip_eol(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def count_lines(stream: Iterable[str], counts: MutableMapping[str, int]) -> None:
    """Add one to ``counts`` for every line read from ``stream``.

    A trailing newline, and a carriage return before it, are not part of
    the line.
    """
    for raw in stream:
        line = _strip_eol(raw)
        counts[line] = counts.get(line, 0) + 1


def count_split(data: str, counts: MutableMapping[str, int]) -> None:
    """Split ``data`` on newlines and count every piece, the last one included."""
    for line in data.split("\n"):
        counts[line] = counts.get(line, 0) + 1


def format_duplicates(counts: Mapping[str, int]) -> list[str]:
    """Return ``"<count>\\t<line>"`` for every line counted more than once."""
    return [f"{n}\t{line}" for line, n in counts.items() if n > 1]


def _report(counts: Mapping[str, int]) -> None:
    for entry in format_duplicates(counts):
        print(entry)


def main(argv: list[str] | None = None) -> int:
    """Count lines of the named files, or of standard input when none are named."""
    files = sys.argv[1:] if argv is None else argv
    counts: dict[str, int] = {}
    if not files:
        count_lines(sys.stdin, counts)
    else:
        for name in files:
            try:
                with open(
                    name, encoding="utf-8", errors="surrogateescape", newline="\n"
                ) as stream:
                    count_lines(stream, counts)
            except OSError as err:
                print(f"{_PROG}: {err}", file=sys.stderr)
    _report(counts)
    return 0


def main_read(argv: list[str] | None = None) -> int:
    """Read each named file whole and count the lines it splits into."""
    files = sys.argv[1:] if argv is None else argv
    counts: dict[str, int] = {}
    for name in files:
        try:
            data = Path(name).read_bytes()
        except OSError as err:
            print(f"{_PROG}: {err}", file=sys.stderr)
            continue
        count_split(data.decode("utf-8", errors="surrogateescape"), counts)
    _report(counts)
    return 0


def _stdin() -> TextIO:
    return sys.stdin


if __name__ == "__main__":
    sys.exit(main())