"""Small string helpers: base names, digit grouping, list formatting, digests."""

import hashlib
import sys
from collections.abc import Iterable


def _strip_eol(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def basename(s: str) -> str:
    """Remove directory components and a trailing ``.suffix``.

    ``a`` => ``a``, ``a.go`` => ``a``, ``a/b/c.go`` => ``c``,
    ``a/b.c.go`` => ``b.c``.
    """
    s = s[s.rfind("/") + 1 :]
    dot = s.rfind(".")
    if dot >= 0:
        s = s[:dot]
    return s


def comma(s: str) -> str:
    """Insert commas every three digits, counting from the right."""
    if len(s) <= 3:
        return s
    return comma(s[:-3]) + "," + s[-3:]


def ints_to_string(values: Iterable[int]) -> str:
    """Format integers as ``[1, 2, 3]``."""
    return "[" + ", ".join(str(v) for v in values) + "]"


def _as_bytes(data: str | bytes) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def digest_compare(a: str | bytes, b: str | bytes) -> tuple[str, str, bool]:
    """Return the SHA-256 hex digests of ``a`` and ``b`` and whether they match."""
    da = hashlib.sha256(_as_bytes(a)).digest()
    db = hashlib.sha256(_as_bytes(b)).digest()
    return da.hex(), db.hex(), da == db


def main_basename(argv: list[str] | None = None) -> int:
    """Print the base name of each file name read from standard input."""
    for line in sys.stdin:
        print(basename(_strip_eol(line)))
    return 0


def main_comma(argv: list[str] | None = None) -> int:
    """Print each argument with commas grouping its digits."""
    for arg in sys.argv[1:] if argv is None else argv:
        print(f"  {comma(arg)}")
    return 0


if __name__ == "__main__":
    sys.exit(main_comma())