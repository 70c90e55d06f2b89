import io
import math
from urllib.parse import urlencode
from wsgiref.util import setup_testing_defaults

import pytest

from primer.evaluator import ExprError, parse
from primer.surface import (
    CELLS,
    HEIGHT,
    WIDTH,
    ZSCALE,
    corner,
    main,
    parse_and_check,
    plot_app,
    render_svg,
    sinc,
)

HEADER = (
    "<svg xmlns='http://www.w3.org/2000/svg' "
    "style='stroke: grey; fill: white; stroke-width: 0.7' "
    "width='600' height='320'>"
)


def _flat(x, y):
    return 0.0


def _call(query="", method="GET", body=b""):
    environ = {}
    setup_testing_defaults(environ)
    environ["PATH_INFO"] = "/plot"
    environ["QUERY_STRING"] = query
    environ["REQUEST_METHOD"] = method
    if body:
        environ["CONTENT_TYPE"] = "application/x-www-form-urlencoded"
        environ["CONTENT_LENGTH"] = str(len(body))
        environ["wsgi.input"] = io.BytesIO(body)
    captured = {}

    def start_response(status, headers, exc_info=None):
        captured["status"] = status
        captured["headers"] = dict(headers)

    data = b"".join(plot_app(environ, start_response))
    return captured["status"], captured["headers"], data.decode("utf-8")


def test_sinc_symmetry_and_origin():
    assert math.isnan(sinc(0.0, 0.0))
    assert sinc(3.0, 4.0) == sinc(4.0, 3.0) == sinc(-3.0, 4.0)


def test_corner_mirror_symmetry():
    sx1, sy1 = corner(_flat, 10, 70)
    sx2, sy2 = corner(_flat, 70, 10)
    assert sx1 + sx2 == pytest.approx(WIDTH)
    assert sy1 == sy2


def test_corner_height_shifts_by_zscale():
    _, low = corner(_flat, 20, 30)
    _, high = corner(lambda x, y: 1.0, 20, 30)
    assert low - high == pytest.approx(ZSCALE)


def test_corner_at_origin_is_nan_for_sinc():
    sx, sy = corner(sinc, CELLS // 2, CELLS // 2)
    assert sx == WIDTH / 2
    assert math.isnan(sy)


def test_render_structure():
    svg = render_svg(_flat)
    assert svg.startswith(HEADER)
    assert svg.endswith("</svg>\n")
    assert svg.count("<polygon") == CELLS * CELLS


def test_flat_surface_stays_on_canvas():
    svg = render_svg(_flat)
    for chunk in svg.split("points='")[1:]:
        for pair in chunk.split("'")[0].split():
            x, y = (float(v) for v in pair.split(","))
            assert 0 <= x <= WIDTH
            assert 0 <= y <= HEIGHT


def test_parse_and_check_accepts_known_variables():
    text = "sin(r) / r + x * y"
    assert parse_and_check(text) == parse(text)


@pytest.mark.parametrize(
    "text, want",
    [
        ("", "empty expression"),
        ("x + z", "undefined variable: z"),
        ("log(x)", 'unknown function "log"'),
    ],
)
def test_parse_and_check_errors(text, want):
    with pytest.raises(ExprError) as excinfo:
        parse_and_check(text)
    assert str(excinfo.value) == want


def test_plot_matches_direct_render():
    status, headers, body = _call(urlencode({"expr": "sin(r)/r"}))
    assert status.startswith("200")
    assert headers["Content-Type"] == "image/svg+xml"
    assert body == render_svg(sinc)


def test_plot_bad_expression():
    status, headers, body = _call(urlencode({"expr": "x + z"}))
    assert status.split()[0] == "400"
    assert body == "bad expr: undefined variable: z\n"


def test_plot_missing_expression():
    _, _, body = _call("")
    assert body == "bad expr: empty expression\n"


def test_plot_reads_posted_form():
    _, _, body = _call(method="POST", body=urlencode({"expr": "x +"}).encode())
    assert body == "bad expr: unexpected end of file\n"


def test_main_writes_svg(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith(HEADER)
    assert out.count("<polygon") == CELLS * CELLS
    assert "NaN" in out