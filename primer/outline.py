"""Outlines of HTML document trees."""

import sys
from collections.abc import Callable, Iterator
from typing import IO, Optional, Union
from xml.dom import Node

import html5lib
import requests

Source = Union[str, bytes, bytearray, IO]
Visitor = Optional[Callable[[Node], None]]

_TEXT_TYPES = (Node.TEXT_NODE, Node.CDATA_SECTION_NODE, Node.COMMENT_NODE)


def _is_element(node: Node) -> bool:
    return node.nodeType == Node.ELEMENT_NODE


def _tag(node: Node) -> str:
    return node.localName or node.nodeName


def _data(node: Node) -> str:
    if node.nodeType in _TEXT_TYPES:
        return node.data
    if _is_element(node):
        return _tag(node)
    return node.nodeName


def _descendants(node: Node) -> Iterator[Node]:
    """Yield ``node`` and everything below it in document order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.childNodes))


def parse_html(source: Source) -> Node:
    """Parse an HTML document given as text, UTF-8 bytes, or a readable file."""
    if hasattr(source, "read"):
        source = source.read()
    if isinstance(source, (bytes, bytearray)):
        source = bytes(source).decode("utf-8", errors="replace")
    doc = html5lib.parse(source, treebuilder="dom")
    doc.normalize()
    return doc


def for_each_node(node: Node, pre: Visitor = None, post: Visitor = None) -> None:
    """Call ``pre`` before and ``post`` after the children of every node below ``node``.

    Both functions are optional.
    """
    if pre is not None:
        pre(node)
    stack = [(node, iter(node.childNodes))]
    while stack:
        current, children = stack[-1]
        child = next(children, None)
        if child is None:
            stack.pop()
            if post is not None:
                post(current)
            continue
        if pre is not None:
            pre(child)
        stack.append((child, iter(child.childNodes)))


def outline_paths(doc: Node) -> list[list[str]]:
    """Return, for each element in document order, the tags from the root down to it."""
    stack: list[str] = []
    paths: list[list[str]] = []

    def start(n: Node) -> None:
        if _is_element(n):
            stack.append(_tag(n))
            paths.append(list(stack))

    def end(n: Node) -> None:
        if _is_element(n):
            stack.pop()

    for_each_node(doc, start, end)
    return paths


def outline_tags(doc: Node) -> list[str]:
    """Return indented opening and closing tags for every element."""
    lines: list[str] = []
    depth = 0

    def start(n: Node) -> None:
        nonlocal depth
        if _is_element(n):
            lines.append(f"{' ' * (depth * 2)}<{_tag(n)}>")
            depth += 1

    def end(n: Node) -> None:
        nonlocal depth
        if _is_element(n):
            depth -= 1
            lines.append(f"{' ' * (depth * 2)}</{_tag(n)}>")

    for_each_node(doc, start, end)
    return lines


def main(argv: list[str] | None = None) -> int:
    """Print the element paths of the HTML document on standard input."""
    try:
        doc = parse_html(sys.stdin.buffer)
    except OSError as err:
        print(f"outline: {err}", file=sys.stderr)
        return 1
    for path in outline_paths(doc):
        print("[" + " ".join(path) + "]")
    return 0


def main_url(argv: list[str] | None = None) -> int:
    """Fetch each URL and print the indented tag outline of its document."""
    for url in sys.argv[1:] if argv is None else argv:
        try:
            with requests.get(url) as resp:
                doc = parse_html(resp.content)
        except requests.RequestException as err:
            print(err, file=sys.stderr)
            return 1
        for line in outline_tags(doc):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())