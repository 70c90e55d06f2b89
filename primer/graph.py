"""Directed graphs as maps of sets, and topological sorting."""

import sys
from collections.abc import Iterable, Iterator, Mapping

# Computer science courses and their prerequisites.
PREREQS: dict[str, list[str]] = {
    "algorithms": ["data structures"],
    "calculus": ["linear algebra"],
    "compilers": [
        "data structures",
        "formal languages",
        "computer organization",
    ],
    "data structures": ["discrete math"],
    "databases": ["data structures"],
    "discrete math": ["intro to programming"],
    "formal languages": ["discrete math"],
    "networks": ["operating systems"],
    "operating systems": ["data structures", "computer organization"],
    "programming languages": ["data structures", "computer organization"],
}


class Graph:
    """A directed graph of string nodes."""

    def __init__(self) -> None:
        self._edges: dict[str, set[str]] = {}

    def add_edge(self, src: str, dst: str) -> None:
        """Add an edge from ``src`` to ``dst``."""
        self._edges.setdefault(src, set()).add(dst)

    def has_edge(self, src: str, dst: str) -> bool:
        """Report whether there is an edge from ``src`` to ``dst``."""
        return dst in self._edges.get(src, ())


def topo_sort(prereqs: Mapping[str, Iterable[str]]) -> list[str]:
    """Order the items so that each comes after all of its prerequisites.

    Keys are visited in sorted order and prerequisites in the order given.
    """
    order: list[str] = []
    seen: set[str] = set()
    pending: list[str] = []
    stack: list[Iterator[str]] = [iter(sorted(prereqs))]
    while stack:
        for item in stack[-1]:
            if item not in seen:
                seen.add(item)
                pending.append(item)
                stack.append(iter(prereqs.get(item, ())))
                break
        else:
            stack.pop()
            if pending:
                order.append(pending.pop())
    return order


def main_toposort(argv: list[str] | None = None) -> int:
    """Print the courses in an order that respects their prerequisites."""
    for i, course in enumerate(topo_sort(PREREQS), start=1):
        print(f"{i}:\t{course}")
    return 0


if __name__ == "__main__":
    sys.exit(main_toposort())