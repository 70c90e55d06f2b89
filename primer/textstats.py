"""Line de-duplication and Unicode character statistics."""

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

UTF_MAX = 4

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    "'": "\\'",
}


@dataclass
class CharCounts:
    """Counts of characters, of UTF-8 encoding lengths, and of invalid bytes."""

    counts: dict[str, int] = field(default_factory=dict)
    utflen: dict[int, int] = field(
        default_factory=lambda: {n: 0 for n in range(1, UTF_MAX + 1)}
    )
    invalid: int = 0


def dedup(lines: Iterable[str]) -> Iterator[str]:
    """Yield each distinct line the first time it appears."""
    seen: set[str] = set()
    for line in lines:
        if line not in seen:
            seen.add(line)
            yield line


def _sequence_length(lead: int) -> int:
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def _runes(data: bytes) -> Iterator[tuple[str | None, int]]:
    """Yield ``(character, size)``; an invalid byte comes as ``(None, 1)``."""
    i = 0
    while i < len(data):
        size = _sequence_length(data[i])
        ch = None
        if size:
            try:
                decoded = data[i : i + size].decode("utf-8")
            except UnicodeDecodeError:
                decoded = ""
            if len(decoded) == 1:
                ch = decoded
        if ch is None:
            yield None, 1
            i += 1
        else:
            yield ch, size
            i += size


def count_chars(data: bytes) -> CharCounts:
    """Count the characters of UTF-8 ``data`` and the lengths of their encodings."""
    result = CharCounts()
    for ch, size in _runes(data):
        if ch is None:
            result.invalid += 1
            continue
        result.counts[ch] = result.counts.get(ch, 0) + 1
        result.utflen[size] += 1
    return result


def _quote_rune(ch: str) -> str:
    if ch in _ESCAPES:
        return f"'{_ESCAPES[ch]}'"
    if ch.isprintable():
        return f"'{ch}'"
    cp = ord(ch)
    if cp < 0x20 or cp == 0x7F:
        return f"'\\x{cp:02x}'"
    if cp < 0x10000:
        return f"'\\u{cp:04x}'"
    return f"'\\U{cp:08x}'"


def format_char_counts(counts: CharCounts) -> str:
    """Render the counts as tab-separated tables."""
    parts = ["rune\tcount\n"]
    parts.extend(f"{_quote_rune(c)}\t{n}\n" for c, n in counts.counts.items())
    parts.append("\nlen\tcount\n")
    parts.extend(f"{i}\t{n}\n" for i, n in sorted(counts.utflen.items()))
    if counts.invalid > 0:
        parts.append(f"\n{counts.invalid} invalid UTF-8 characters\n")
    return "".join(parts)


def _strip_eol(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def main_dedup(argv: list[str] | None = None) -> int:
    """Print each distinct line of standard input once."""
    for line in dedup(_strip_eol(raw) for raw in sys.stdin):
        print(line)
    return 0


def main_charcount(argv: list[str] | None = None) -> int:
    """Print character statistics for standard input."""
    try:
        data = sys.stdin.buffer.read()
    except OSError as err:
        print(f"charcount: {err}", file=sys.stderr)
        return 1
    sys.stdout.write(format_char_counts(count_chars(data)))
    return 0


if __name__ == "__main__":
    sys.exit(main_charcount())