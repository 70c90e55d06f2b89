"""Slice-style list algorithms: growth, filtering, reversal, sums, squares."""

import re
import sys
from collections.abc import Iterable, Iterator

_INT = re.compile(r"[+-]?[0-9]+")
_INT64_MIN, _INT64_MAX = -(1 << 63), (1 << 63) - 1


def _go_list(values: Iterable[object]) -> str:
    return "[" + " ".join(str(v) for v in values) + "]"


def grow_capacity(length: int, capacity: int, extra: int) -> int:
    """Return the capacity after appending ``extra`` items to a slice.

    The capacity is kept when the items fit; otherwise it grows to at least
    twice the old length, for amortized linear cost.
    """
    needed = length + extra
    if needed <= capacity:
        return capacity
    return max(needed, 2 * length)


def append_report(n: int) -> list[str]:
    """Show length, capacity and contents while appending ``0..n-1`` one by one."""
    lines = []
    items: list[int] = []
    capacity = 0
    for i in range(n):
        capacity = grow_capacity(len(items), capacity, 1)
        items.append(i)
        lines.append(f"{i}  cap={capacity}\t{_go_list(items)}")
    return lines


def nonempty(strings: Iterable[str]) -> list[str]:
    """Return only the non-empty strings, in order."""
    return [s for s in strings if s != ""]


def reverse(s: list) -> None:
    """Reverse the list in place."""
    s.reverse()


def rotate_left(s: list, n: int) -> None:
    """Rotate the list left by ``n`` places, in place, by three reversals."""
    if not 0 <= n <= len(s):
        raise IndexError(f"slice bounds out of range [:{n}] with length {len(s)}")
    head, tail = s[:n], s[n:]
    head.reverse()
    tail.reverse()
    s[:] = head + tail
    s.reverse()


def sum_ints(*args: int) -> int:
    """Return the sum of the arguments; zero when there are none."""
    total = 0
    for value in args:
        total += value
    return total


def squares() -> Iterator[int]:
    """Yield the square numbers 1, 4, 9, ... without end."""
    x = 0
    while True:
        x += 1
        yield x * x


def _quote(s: str) -> str:
    return '"' + s.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _parse_int(s: str) -> int:
    if not _INT.fullmatch(s):
        raise ValueError(f"strconv.ParseInt: parsing {_quote(s)}: invalid syntax")
    value = int(s)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"strconv.ParseInt: parsing {_quote(s)}: value out of range")
    return value


def main_rev(argv: list[str] | None = None) -> int:
    """Show reversal and rotation, then reverse each line of integers read."""
    a = [0, 1, 2, 3, 4, 5]
    reverse(a)
    print(_go_list(a))
    s = [0, 1, 2, 3, 4, 5]
    rotate_left(s, 2)
    print(_go_list(s))
    for line in sys.stdin:
        try:
            ints = [_parse_int(field) for field in line.split()]
        except ValueError as err:
            print(err, file=sys.stderr)
            continue
        reverse(ints)
        print(_go_list(ints))
    return 0


if __name__ == "__main__":
    sys.exit(main_rev())