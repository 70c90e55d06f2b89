"""A mapping from keys to lists of string values, as in URL query strings."""

import sys


class Values(dict):
    """Maps a string key to a list of values."""

    def get(self, key: str) -> str:  # type: ignore[override]
        """Return the first value for ``key``, or ``""`` if there is none."""
        values = super().get(key)
        return values[0] if values else ""

    def add(self, key: str, value: str) -> None:
        """Append ``value`` to the values of ``key``."""
        self.setdefault(key, []).append(value)


def main(argv: list[str] | None = None) -> int:
    """Show lookups in a small set of values."""
    m = Values({"lang": ["en"]})
    m.add("item", "1")
    m.add("item", "2")
    print(m.get("lang"))
    print(m.get("q"))
    print(m.get("item"))
    print("[" + " ".join(m["item"]) + "]")
    print(Values().get("item"))
    return 0


if __name__ == "__main__":
    sys.exit(main())