"""Movies encoded as JSON."""

import json
import sys
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


@dataclass
class Movie:
    """A film, its year of release, whether it is in colour, and its actors."""

    title: str
    year: int
    color: bool = False
    actors: list[str] | None = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this movie; ``color`` only when true."""
        obj: dict[str, Any] = {"Title": self.title, "released": self.year}
        if self.color:
            obj["color"] = True
        obj["Actors"] = None if self.actors is None else list(self.actors)
        return obj


MOVIES = [
    Movie("Casablanca", 1942, False, ["Humphrey Bogart", "Ingrid Bergman"]),
    Movie("Cool Hand Luke", 1967, True, ["Paul Newman"]),
    Movie("Bullitt", 1968, True, ["Steve McQueen", "Jacqueline Bisset"]),
]


def _html_safe(text: str) -> str:
    # These characters can only occur inside JSON strings.
    for ch, escaped in _HTML_ESCAPES.items():
        text = text.replace(ch, escaped)
    return text


def marshal(movies: Iterable[Movie], indent: int | str | None = None) -> str:
    """Encode the movies as a JSON array, compact or indented by ``indent``."""
    objects = [m.to_json() for m in movies]
    if indent is None:
        text = json.dumps(objects, ensure_ascii=False, separators=(",", ":"))
    else:
        text = json.dumps(objects, ensure_ascii=False, indent=indent)
    return _html_safe(text)


def _title_of(element: Any) -> str:
    if element is None:
        return ""
    if not isinstance(element, Mapping):
        raise ValueError(
            f"json: cannot unmarshal {type(element).__name__} into Go value of type struct"
        )
    if "Title" in element:
        value = element["Title"]
    else:
        value = next((v for k, v in element.items() if k.lower() == "title"), None)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(
            f"json: cannot unmarshal {type(value).__name__} into field Title of type string"
        )
    return value


def unmarshal_titles(data: str | bytes) -> list[str]:
    """Decode a JSON array of objects and return their titles.

    Raises ``ValueError`` if the data is not such an array.
    """
    decoded = json.loads(data)
    if decoded is None:
        return []
    if not isinstance(decoded, list):
        raise ValueError(
            f"json: cannot unmarshal {type(decoded).__name__} into Go value of type []struct"
        )
    return [_title_of(element) for element in decoded]


def main(argv: list[str] | None = None) -> int:
    """Print the movies as compact and indented JSON, then their titles."""
    print(marshal(MOVIES))
    data = marshal(MOVIES, "    ")
    print(data)
    titles = unmarshal_titles(data)
    print("[" + " ".join("{" + t + "}" for t in titles) + "]")
    return 0


if __name__ == "__main__":
    sys.exit(main())