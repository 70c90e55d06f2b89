"""Reports of GitHub issues as a table, as text and as HTML."""

import sys
from collections.abc import Callable
from datetime import datetime, timezone

import jinja2
import requests

from .github import Issue, IssuesSearchResult, search_issues

_RULE = "----------------------------------------"

_ISSUE_LIST = """
<h1>{{ total_count }} issues</h1>
<table>
<tr style='text-align: left'>
  <th>#</th>
  <th>State</th>
  <th>User</th>
  <th>Title</th>
</tr>
{% for item in items %}
<tr>
  <td><a href='{{ item.html_url }}'>{{ item.number }}</a></td>
  <td>{{ item.state }}</td>
  <td><a href='{{ item.user.html_url }}'>{{ item.user.login }}</a></td>
  <td><a href='{{ item.html_url }}'>{{ item.title }}</a></td>
</tr>
{% endfor %}
</table>
"""

_AUTOESCAPE = "<p>A: {{ a }}</p><p>B: {{ b | safe }}</p>"

_env = jinja2.Environment(autoescape=True, keep_trailing_newline=True)


def _login(item: Issue) -> str:
    return item.user.login if item.user is not None else ""


def format_table(result: IssuesSearchResult) -> str:
    """Return one line per issue: number, user and title, truncated to fit."""
    lines = [f"{result.total_count} issues:"]
    for item in result.items:
        lines.append(f"#{item.number:<5d} {_login(item)[:9]:>9} {item.title[:55]}")
    return "\n".join(lines) + "\n"


def days_ago(t: datetime, now: datetime | None = None) -> int:
    """Return the whole number of days from ``t`` to ``now`` (default: the present)."""
    if now is None:
        now = datetime.now(timezone.utc) if t.tzinfo is not None else datetime.now()
    return int((now - t).total_seconds() / 3600 / 24)


def render_report(result: IssuesSearchResult, now: datetime | None = None) -> str:
    """Return a text report giving number, user, title and age of each issue."""
    parts = [f"{result.total_count} issues:\n"]
    for item in result.items:
        parts.append(
            f"{_RULE}\n"
            f"Number: {item.number}\n"
            f"User:   {_login(item)}\n"
            f"Title:  {item.title[:64]}\n"
            f"Age:    {days_ago(item.created_at, now)} days\n"
        )
    return "".join(parts)


def render_html(result: IssuesSearchResult) -> str:
    """Return an HTML table of the issues, with their text escaped."""
    template = _env.from_string(_ISSUE_LIST)
    return template.render(total_count=result.total_count, items=result.items)


def autoescape_demo() -> str:
    """Render the same markup once as untrusted text and once as trusted HTML."""
    template = _env.from_string(_AUTOESCAPE)
    return template.render(a="<b>Hello!</b>", b="<b>Hello!</b>")


def _run(argv: list[str] | None, render: Callable[[IssuesSearchResult], str]) -> int:
    terms = sys.argv[1:] if argv is None else argv
    try:
        result = search_issues(terms)
    except (requests.RequestException, ValueError) as err:
        print(err, file=sys.stderr)
        return 1
    sys.stdout.write(render(result))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Print a table of the issues matching the search terms."""
    return _run(argv, format_table)


def main_report(argv: list[str] | None = None) -> int:
    """Print a text report of the issues matching the search terms."""
    return _run(argv, render_report)


def main_html(argv: list[str] | None = None) -> int:
    """Print an HTML table of the issues matching the search terms."""
    return _run(argv, render_html)


if __name__ == "__main__":
    sys.exit(main())