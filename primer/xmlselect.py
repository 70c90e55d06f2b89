"""Print the text of XML elements nested inside a given sequence of elements."""

import sys
import xml.sax
import xml.sax.handler
from collections.abc import Iterable, Iterator, Sequence
from typing import IO

_CHUNK = 65536


def contains_all(x: Sequence[str], y: Sequence[str]) -> bool:
    """Report whether ``x`` contains the elements of ``y``, in order."""
    remaining = iter(x)
    return all(name in remaining for name in y)


class _Handler(xml.sax.handler.ContentHandler):
    def __init__(self, names: list[str]) -> None:
        super().__init__()
        self._names = names
        self._stack: list[str] = []
        self._text: list[str] = []
        self._matches: list[tuple[tuple[str, ...], str]] = []

    def _flush(self) -> None:
        if not self._text:
            return
        text = "".join(self._text)
        self._text.clear()
        if contains_all(self._stack, self._names):
            self._matches.append((tuple(self._stack), text))

    def drain(self) -> list[tuple[tuple[str, ...], str]]:
        matches, self._matches = self._matches, []
        return matches

    def startElement(self, name, attrs):
        self._flush()
        self._stack.append(name.rpartition(":")[2])

    def endElement(self, name):
        self._flush()
        self._stack.pop()

    def characters(self, content):
        self._text.append(content)

    def endDocument(self):
        self._flush()


def select(
    stream: IO, names: Iterable[str]
) -> Iterator[tuple[tuple[str, ...], str]]:
    """Yield ``(element path, text)`` for character data under ``names`` in order.

    Raises ``xml.sax.SAXParseException`` on malformed XML.
    """
    handler = _Handler(list(names))
    parser = xml.sax.make_parser()
    parser.setContentHandler(handler)
    has_content = False
    while chunk := stream.read(_CHUNK):
        if chunk.strip():
            has_content = True
        parser.feed(chunk)
        yield from handler.drain()
    if has_content:
        parser.close()
        yield from handler.drain()


def main(argv: list[str] | None = None) -> int:
    """Print the selected text of the XML document on standard input."""
    names = sys.argv[1:] if argv is None else argv
    try:
        for path, text in select(sys.stdin.buffer, names):
            print(f"{' '.join(path)}: {text}")
    except xml.sax.SAXException as err:
        print(f"xmlselect: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())