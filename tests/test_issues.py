from datetime import datetime, timedelta, timezone

import responses

from primer.github import ISSUES_URL, Issue, IssuesSearchResult, User
from primer.issues import (
    autoescape_demo,
    days_ago,
    format_table,
    main,
    render_html,
    render_report,
)

CREATED = datetime(2014, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def _issue(**kw):
    base = dict(
        number=5680,
        html_url="https://example.com/issues/5680",
        title="encoding/json: set key converter on en/decoder",
        state="open",
        user=User(login="eaigner", html_url="https://example.com/eaigner"),
        created_at=CREATED,
        body="",
    )
    base.update(kw)
    return Issue(**base)


def test_format_table_matches_source_output():
    result = IssuesSearchResult(total_count=13, items=[_issue()])
    assert format_table(result).splitlines() == [
        "13 issues:",
        "#5680    eaigner encoding/json: set key converter on en/decoder",
    ]


def test_format_table_truncates():
    title = "t" * 100
    item = _issue(title=title, user=User(login="abcdefghijkl"))
    line = format_table(IssuesSearchResult(1, [item])).splitlines()[1]
    fields = line.split(" ", 2)
    assert fields[1] == "abcdefghijkl"[:9]
    assert line.endswith(" " + title[:55])


def test_days_ago():
    assert days_ago(CREATED, CREATED + timedelta(days=10, hours=5)) == 10
    assert days_ago(CREATED, CREATED) == 0


def test_render_report():
    now = CREATED + timedelta(days=3)
    long_title = "x" * 80
    result = IssuesSearchResult(2, [_issue(), _issue(number=6050, title=long_title)])
    text = render_report(result, now)
    rule = "----------------------------------------"
    assert text == (
        "2 issues:\n"
        f"{rule}\n"
        "Number: 5680\n"
        "User:   eaigner\n"
        "Title:  encoding/json: set key converter on en/decoder\n"
        "Age:    3 days\n"
        f"{rule}\n"
        "Number: 6050\n"
        "User:   eaigner\n"
        f"Title:  {long_title[:64]}\n"
        "Age:    3 days\n"
    )


def test_render_html_escapes_text():
    result = IssuesSearchResult(1, [_issue(title="<script>x</script>")])
    html = render_html(result)
    assert html.startswith("\n<h1>1 issues</h1>\n<table>")
    assert "<script>" not in html
    assert "&lt;script&gt;x&lt;/script&gt;" in html
    assert "<td><a href='https://example.com/issues/5680'>5680</a></td>" in html
    assert "<td><a href='https://example.com/eaigner'>eaigner</a></td>" in html
    assert html.endswith("</table>\n")


def test_render_html_one_row_per_issue():
    result = IssuesSearchResult(3, [_issue(number=n) for n in (1, 2, 3)])
    assert render_html(result).count("<tr>") == 3


def test_autoescape_demo():
    assert autoescape_demo() == (
        "<p>A: &lt;b&gt;Hello!&lt;/b&gt;</p><p>B: <b>Hello!</b></p>"
    )


def test_main_prints_table(capsys):
    payload = {
        "total_count": 1,
        "items": [{"number": 42, "title": "a title", "user": {"login": "someone"}}],
    }
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, ISSUES_URL, json=payload)
        assert main(["json"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["1 issues:", "#42      someone a title"]


def test_main_reports_failure(capsys):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, ISSUES_URL, body="no", status=503)
        assert main(["json"]) == 1
    assert "search query failed" in capsys.readouterr().err