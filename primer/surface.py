"""SVG renderings of 3-D surfaces, fixed or given as an expression."""

import math
import sys
from collections.abc import Callable, Iterable
from urllib.parse import parse_qsl
from wsgiref.simple_server import make_server

from .evaluator import Expr, ExprError, parse
from .tempconv import _format_g

WIDTH, HEIGHT = 600, 320  # canvas size in pixels
CELLS = 100  # number of grid cells
XYRANGE = 30.0  # axis ranges (-XYRANGE..+XYRANGE)
XYSCALE = WIDTH / 2 / XYRANGE  # pixels per x or y unit
ZSCALE = HEIGHT * 0.4  # pixels per z unit

_ANGLE = math.pi / 6
_SIN30, _COS30 = 0.5, math.sqrt(3.0 / 4.0)

_SVG_OPEN = (
    "<svg xmlns='http://www.w3.org/2000/svg' "
    "style='stroke: grey; fill: white; stroke-width: 0.7' "
    f"width='{WIDTH}' height='{HEIGHT}'>"
)

Surface = Callable[[float, float], float]


def sinc(x: float, y: float) -> float:
    """Return sin(r)/r for the distance r from the origin; NaN at the origin."""
    r = math.hypot(x, y)
    if r == 0:
        return math.nan
    return math.sin(r) / r


def _corner(
    f: Surface, i: int, j: int, sin_a: float, cos_a: float
) -> tuple[float, float]:
    x = XYRANGE * (i / CELLS - 0.5)
    y = XYRANGE * (j / CELLS - 0.5)
    z = f(x, y)
    sx = WIDTH / 2 + (x - y) * cos_a * XYSCALE
    sy = HEIGHT / 2 + (x + y) * sin_a * XYSCALE - z * ZSCALE
    return sx, sy


def corner(f: Surface, i: int, j: int) -> tuple[float, float]:
    """Project the corner of grid cell (i, j) isometrically onto the canvas."""
    return _corner(f, i, j, _SIN30, _COS30)


def _render(f: Surface, sin_a: float, cos_a: float) -> str:
    parts = [_SVG_OPEN]
    for i in range(CELLS):
        for j in range(CELLS):
            points = (
                _corner(f, i + 1, j, sin_a, cos_a),
                _corner(f, i, j, sin_a, cos_a),
                _corner(f, i, j + 1, sin_a, cos_a),
                _corner(f, i + 1, j + 1, sin_a, cos_a),
            )
            coords = " ".join(f"{_format_g(x)},{_format_g(y)}" for x, y in points)
            parts.append(f"<polygon points='{coords}'/>\n")
    parts.append("</svg>\n")
    return "".join(parts)


def render_svg(f: Surface) -> str:
    """Return an SVG document drawing the surface z = f(x, y)."""
    return _render(f, _SIN30, _COS30)


def parse_and_check(s: str) -> Expr:
    """Parse an expression that may use only the variables x, y and r."""
    if s == "":
        raise ExprError("empty expression")
    expr = parse(s)
    seen: set = set()
    expr.check(seen)
    for v in sorted(seen):
        if v not in ("x", "y", "r"):
            raise ExprError(f"undefined variable: {v}")
    return expr


def _form(environ: dict) -> dict[str, str]:
    pairs: list[tuple[str, str]] = []
    method = environ.get("REQUEST_METHOD", "GET").upper()
    ctype = environ.get("CONTENT_TYPE", "").split(";")[0].strip().lower()
    if method in ("POST", "PUT", "PATCH") and ctype == "application/x-www-form-urlencoded":
        try:
            length = int(environ.get("CONTENT_LENGTH") or 0)
        except ValueError:
            length = 0
        raw = environ["wsgi.input"].read(length) if length > 0 else b""
        pairs.extend(parse_qsl(raw.decode("utf-8", "replace"), keep_blank_values=True))
    pairs.extend(parse_qsl(environ.get("QUERY_STRING", ""), keep_blank_values=True))
    form: dict[str, str] = {}
    for key, value in pairs:
        form.setdefault(key, value)
    return form


def _plain(start_response: Callable, status: str, text: str) -> list[bytes]:
    body = text.encode("utf-8")
    start_response(
        status,
        [
            ("Content-Type", "text/plain; charset=utf-8"),
            ("X-Content-Type-Options", "nosniff"),
            ("Content-Length", str(len(body))),
        ],
    )
    return [body]


def plot_app(environ: dict, start_response: Callable) -> Iterable[bytes]:
    """WSGI handler drawing the surface given by the ``expr`` form value."""
    try:
        expr = parse_and_check(_form(environ).get("expr", ""))
    except ExprError as err:
        return _plain(start_response, "400 Bad Request", f"bad expr: {err}\n")

    def height(x: float, y: float) -> float:
        r = math.hypot(x, y)
        return expr.eval({"x": x, "y": y, "r": r})

    body = render_svg(height).encode("utf-8")
    start_response(
        "200 OK",
        [("Content-Type", "image/svg+xml"), ("Content-Length", str(len(body)))],
    )
    return [body]


def _routes(environ: dict, start_response: Callable) -> Iterable[bytes]:
    if environ.get("PATH_INFO", "") == "/plot":
        return plot_app(environ, start_response)
    return _plain(start_response, "404 Not Found", "404 page not found\n")


def main(argv: list[str] | None = None) -> int:
    """Write the SVG of sin(r)/r to standard output."""
    sys.stdout.write(_render(sinc, math.sin(_ANGLE), math.cos(_ANGLE)))
    return 0


def main_serve(argv: list[str] | None = None) -> int:
    """Serve plots of user expressions at ``/plot`` on localhost:8000."""
    try:
        with make_server("localhost", 8000, _routes) as server:
            server.serve_forever()
    except OSError as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())