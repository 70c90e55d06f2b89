"""A writer that counts the bytes written to it."""

import sys


class ByteCounter:
    """Counts bytes written; text is counted by its UTF-8 encoding."""

    def __init__(self) -> None:
        self.count = 0

    def write(self, data: str | bytes) -> int:
        """Count ``data`` and return its length in bytes."""
        size = len(data.encode("utf-8")) if isinstance(data, str) else len(data)
        self.count += size
        return size

    def writable(self) -> bool:
        return True

    def __int__(self) -> int:
        return self.count

    def __str__(self) -> str:
        return str(self.count)


def main(argv: list[str] | None = None) -> int:
    """Count the bytes of two writes."""
    c = ByteCounter()
    c.write(b"hello")
    print(c)
    c.count = 0
    name = "Dolly"
    print(f"hello, {name}", end="", file=c)
    print(c)
    return 0


if __name__ == "__main__":
    sys.exit(main())