"""Titles of HTML documents."""

import sys
from collections.abc import Iterator
from xml.dom import Node

import requests

from .outline import _data, _descendants, _is_element, _tag, parse_html


def titles(doc: Node) -> Iterator[str]:
    """Yield the text of every non-empty ``<title>`` element."""
    for node in _descendants(doc):
        if _is_element(node) and _tag(node) == "title" and node.firstChild is not None:
            yield _data(node.firstChild)


def sole_title(doc: Node) -> str:
    """Return the text of the only non-empty title element.

    Raises ``ValueError`` when there is none or more than one.
    """
    result = ""
    for text in titles(doc):
        if result:
            raise ValueError("multiple title elements")
        result = text
    if not result:
        raise ValueError("no title element")
    return result


def title(url: str) -> str:
    """Fetch ``url`` and return the title of the HTML document there."""
    with requests.get(url) as resp:
        ct = resp.headers.get("Content-Type", "")
        if ct != "text/html" and not ct.startswith("text/html;"):
            raise ValueError(f"{url} has type {ct}, not text/html")
        doc = parse_html(resp.content)
    return sole_title(doc)


def main(argv: list[str] | None = None) -> int:
    """Print the title of the document at each URL."""
    for arg in sys.argv[1:] if argv is None else argv:
        try:
            print(title(arg))
        except (requests.RequestException, ValueError) as err:
            print(f"title: {err}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())