"""Searching the GitHub issue tracker."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from urllib.parse import quote_plus

import requests

ISSUES_URL = "https://api.github.com/search/issues"

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


def _field(obj: Mapping[str, Any], name: str, default: Any) -> Any:
    """Look a key up exactly, then ignoring case; null counts as missing."""
    if name in obj:
        value = obj[name]
    else:
        lower = name.lower()
        value = next((v for k, v in obj.items() if k.lower() == lower), None)
    return default if value is None else value


def _object(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValueError(f"json: cannot unmarshal {type(value).__name__} into {what}")
    return value


def _parse_time(text: str) -> datetime:
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


@dataclass
class User:
    """A GitHub user."""

    login: str = ""
    html_url: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> User:
        data = _object(data, "User")
        return cls(
            login=str(_field(data, "login", "")),
            html_url=str(_field(data, "html_url", "")),
        )


@dataclass
class Issue:
    """One issue; ``body`` is in Markdown."""

    number: int = 0
    html_url: str = ""
    title: str = ""
    state: str = ""
    user: User | None = None
    created_at: datetime = _ZERO_TIME
    body: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Issue:
        data = _object(data, "Issue")
        user = _field(data, "user", None)
        created = _field(data, "created_at", None)
        return cls(
            number=int(_field(data, "number", 0)),
            html_url=str(_field(data, "html_url", "")),
            title=str(_field(data, "title", "")),
            state=str(_field(data, "state", "")),
            user=None if user is None else User.from_json(user),
            created_at=_ZERO_TIME if created is None else _parse_time(str(created)),
            body=str(_field(data, "body", "")),
        )


@dataclass
class IssuesSearchResult:
    """The total number of matches and the issues returned."""

    total_count: int = 0
    items: list[Issue] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Mapping[str, Any] | str | bytes) -> IssuesSearchResult:
        """Build a result from decoded JSON, or from JSON text."""
        if isinstance(data, (str, bytes, bytearray)):
            data = json.loads(data)
        data = _object(data, "IssuesSearchResult")
        items = _field(data, "items", [])
        if not isinstance(items, list):
            raise ValueError("json: cannot unmarshal items into []*Issue")
        return cls(
            total_count=int(_field(data, "total_count", 0)),
            items=[Issue.from_json(item) for item in items],
        )


def search_issues(terms: list[str]) -> IssuesSearchResult:
    """Query the issue tracker for the search terms.

    Raises ``requests.HTTPError`` if the query does not succeed and
    ``ValueError`` if the answer is not a valid result.
    """
    q = quote_plus(" ".join(terms))
    with requests.get(ISSUES_URL + "?q=" + q) as resp:
        if resp.status_code != 200:
            raise requests.HTTPError(
                f"search query failed: {resp.status_code} {resp.reason}",
                response=resp,
            )
        return IssuesSearchResult.from_json(resp.content)