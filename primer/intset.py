"""A set of small non-negative integers stored as a bit vector."""

from collections.abc import Iterable, Iterator
from itertools import zip_longest

_WORD = 64


def _split(x: int) -> tuple[int, int]:
    if x < 0:
        raise ValueError(f"negative value {x} in IntSet")
    return divmod(x, _WORD)


class IntSet:
    """A set of small non-negative integers; empty when created without values."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._words: list[int] = []
        for v in values:
            self.add(v)

    @property
    def words(self) -> tuple[int, ...]:
        """The 64-bit words of the bit vector, lowest first."""
        return tuple(self._words)

    def has(self, x: int) -> bool:
        """Report whether the set contains ``x``."""
        word, bit = _split(x)
        return word < len(self._words) and self._words[word] >> bit & 1 == 1

    def add(self, x: int) -> None:
        """Add ``x`` to the set."""
        word, bit = _split(x)
        if word >= len(self._words):
            self._words.extend([0] * (word + 1 - len(self._words)))
        self._words[word] |= 1 << bit

    def union_with(self, t: "IntSet") -> None:
        """Make this set the union of itself and ``t``."""
        self._words = [a | b for a, b in zip_longest(self._words, t._words, fillvalue=0)]

    def __contains__(self, x: object) -> bool:
        return isinstance(x, int) and x >= 0 and self.has(x)

    def __iter__(self) -> Iterator[int]:
        for i, word in enumerate(self._words):
            if word:
                for j in range(_WORD):
                    if word >> j & 1:
                        yield _WORD * i + j

    def __str__(self) -> str:
        return "{" + " ".join(str(v) for v in self) + "}"

    def __repr__(self) -> str:
        return f"IntSet({list(self)!r})"