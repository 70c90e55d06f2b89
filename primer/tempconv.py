"""Celsius and Fahrenheit temperatures and conversions between them."""

import argparse
import math
import re
import sys
from decimal import Decimal


def _format_g(x: float) -> str:
    """Format ``x`` with the fewest digits that read back exactly, %g style."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    if x == 0:
        return "-0" if math.copysign(1.0, x) < 0 else "0"
    sign = "-" if x < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(x))).as_tuple()
    point = len(digit_tuple) + exponent
    digits = "".join(map(str, digit_tuple)).lstrip("0")
    point -= len(digit_tuple) - len("".join(map(str, digit_tuple)).lstrip("0")) - 0
    # Leading zeros never occur in repr-derived digits except for values < 1,
    # where Decimal already reports them via the exponent.
    point = len(digit_tuple) + exponent - (len(digit_tuple) - len(digits))
    digits = digits.rstrip("0")
    exp = point - 1
    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        return f"{sign}{mantissa}e{exp:+03d}"
    if point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return f"{sign}{digits}{'0' * (point - len(digits))}"
    return f"{sign}{digits[:point]}.{digits[point:]}"


class _Temperature(float):
    _unit = ""

    def __str__(self) -> str:
        return f"{_format_g(self)}{self._unit}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self)!r})"

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        return float.__format__(self, spec)


class Celsius(_Temperature):
    """A temperature in degrees Celsius."""

    _unit = "°C"


class Fahrenheit(_Temperature):
    """A temperature in degrees Fahrenheit."""

    _unit = "°F"


ABSOLUTE_ZERO_C = Celsius(-273.15)
FREEZING_C = Celsius(0)
BOILING_C = Celsius(100)


def c_to_f(c: float) -> Fahrenheit:
    """Convert a Celsius temperature to Fahrenheit."""
    return Fahrenheit(c * 9 / 5 + 32)


def f_to_c(f: float) -> Celsius:
    """Convert a Fahrenheit temperature to Celsius."""
    return Celsius((f - 32) * 5 / 9)


_QUANTITY = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*(\S*)"
)


def _quote(s: str) -> str:
    return '"' + s.replace("\\", "\\\\").replace('"', '\\"') + '"'


def parse_celsius(s: str) -> Celsius:
    """Parse a quantity with a unit, such as ``"100C"`` or ``"212°F"``."""
    match = _QUANTITY.match(s)
    if match is None:
        raise ValueError(f"expected a number in {_quote(s)}")
    value, unit = float(match.group(1)), match.group(2)
    if not unit:
        raise ValueError("unexpected EOF")
    if unit in ("C", "°C"):
        return Celsius(value)
    if unit in ("F", "°F"):
        return f_to_c(Fahrenheit(value))
    raise ValueError(f"invalid temperature {_quote(s)}")


def boiling_report() -> str:
    """Describe the boiling point of water in both scales."""
    f = 212.0
    c = (f - 32) * 5 / 9
    return f"boiling point = {_format_g(f)}°F or {_format_g(c)}°C"


def ftoc_report() -> str:
    """Show the freezing and boiling points converted to Celsius."""
    return "\n".join(
        f"{_format_g(f)}°F = {_format_g((f - 32) * 5 / 9)}°C" for f in (32.0, 212.0)
    )


def _parse_float(s: str) -> float:
    if s != s.strip() or "_" in s:
        raise ValueError(f"invalid number {_quote(s)}")
    try:
        return float(s)
    except ValueError:
        raise ValueError(f"invalid number {_quote(s)}") from None


def main_cf(argv: list[str] | None = None) -> int:
    """Show each numeric argument as Fahrenheit and as Celsius, converted."""
    for arg in sys.argv[1:] if argv is None else argv:
        try:
            t = _parse_float(arg)
        except ValueError as err:
            print(f"cf: {err}", file=sys.stderr)
            return 1
        f, c = Fahrenheit(t), Celsius(t)
        print(f"{f} = {f_to_c(f)}, {c} = {c_to_f(c)}")
    return 0


def _celsius_arg(s: str) -> Celsius:
    try:
        return parse_celsius(s)
    except ValueError as err:
        raise argparse.ArgumentTypeError(str(err)) from None


def main_tempflag(argv: list[str] | None = None) -> int:
    """Print the temperature given by ``-temp``, in Celsius."""
    parser = argparse.ArgumentParser(prog="tempflag")
    parser.add_argument(
        "-temp",
        "--temp",
        type=_celsius_arg,
        default=Celsius(20.0),
        help="the temperature",
    )
    options = parser.parse_args(sys.argv[1:] if argv is None else argv)
    print(options.temp)
    return 0


if __name__ == "__main__":
    sys.exit(main_cf())