"""Arithmetic expressions: parsing, checking, evaluation and formatting."""

from __future__ import annotations

import enum
import math
import re
from collections.abc import Iterator, Mapping, MutableSet
from dataclasses import dataclass
from typing import Optional, Union

from .tempconv import _format_g

Env = Optional[Mapping[str, float]]

_UNARY_OPS = "+-"
_BINARY_OPS = "+-*/"
_NUM_PARAMS = {"pow": 2, "sin": 1, "sqrt": 1}

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
}


class ExprError(ValueError):
    """A malformed or ill-formed arithmetic expression."""


def _quote(s: str, q: str) -> str:
    out = [q]
    for ch in s:
        if ch == q:
            out.append("\\" + q)
        elif ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch.isprintable():
            out.append(ch)
        else:
            cp = ord(ch)
            if cp < 0x20 or cp == 0x7F:
                out.append(f"\\x{cp:02x}")
            elif cp < 0x10000:
                out.append(f"\\u{cp:04x}")
            else:
                out.append(f"\\U{cp:08x}")
    out.append(q)
    return "".join(out)


def _quote_rune(ch: str) -> str:
    return _quote(ch, "'")


def _quote_string(s: str) -> str:
    return _quote(s, '"')


def _is_odd_integer(y: float) -> bool:
    return math.isfinite(y) and y.is_integer() and abs(y) < 2.0**53 and int(y) % 2 == 1


def _divide(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _pow(x: float, y: float) -> float:
    try:
        return math.pow(x, y)
    except OverflowError:
        if x < 0 and _is_odd_integer(y):
            return -math.inf
        return math.inf
    except ValueError:
        if x == 0 and y < 0:
            if _is_odd_integer(y):
                return math.copysign(math.inf, x)
            return math.inf
        return math.nan


def _sin(x: float) -> float:
    try:
        return math.sin(x)
    except ValueError:
        return math.nan


def _sqrt(x: float) -> float:
    try:
        return math.sqrt(x)
    except ValueError:
        return math.nan


class Var(str):
    """A variable, such as ``x``."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Var({str.__repr__(self)})"

    def eval(self, env: Env = None) -> float:
        """Return the variable's value in ``env``; unbound variables are zero."""
        if env is None:
            return 0.0
        return float(env.get(self, 0.0))

    def check(self, vars: MutableSet[Var]) -> None:
        """Record the variable in ``vars``."""
        vars.add(self)


@dataclass(frozen=True)
class Literal:
    """A numeric constant, such as ``3.141``."""

    value: float

    def eval(self, env: Env = None) -> float:
        """Return the constant."""
        return float(self.value)

    def check(self, vars: MutableSet[Var]) -> None:
        """Reject a constant that is not a real number; literals hold no variables."""
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise ExprError(f"invalid literal {self.value!r}")


@dataclass(frozen=True)
class Unary:
    """A unary operator expression, such as ``-x``."""

    op: str
    x: Expr

    def eval(self, env: Env = None) -> float:
        """Apply the operator to the operand's value."""
        value = self.x.eval(env)
        if self.op == "+":
            return +value
        if self.op == "-":
            return -value
        raise ExprError(f"unsupported unary operator: {_quote_rune(self.op)}")

    def check(self, vars: MutableSet[Var]) -> None:
        """Reject unknown operators and check the operand."""
        if self.op not in _UNARY_OPS or len(self.op) != 1:
            raise ExprError(f"unexpected unary op {_quote_rune(self.op)}")
        self.x.check(vars)


@dataclass(frozen=True)
class Binary:
    """A binary operator expression, such as ``x+y``."""

    op: str
    x: Expr
    y: Expr

    def eval(self, env: Env = None) -> float:
        """Apply the operator to both operands' values."""
        if self.op == "+":
            return self.x.eval(env) + self.y.eval(env)
        if self.op == "-":
            return self.x.eval(env) - self.y.eval(env)
        if self.op == "*":
            return self.x.eval(env) * self.y.eval(env)
        if self.op == "/":
            return _divide(self.x.eval(env), self.y.eval(env))
        raise ExprError(f"unsupported binary operator: {_quote_rune(self.op)}")

    def check(self, vars: MutableSet[Var]) -> None:
        """Reject unknown operators and check both operands."""
        if self.op not in _BINARY_OPS or len(self.op) != 1:
            raise ExprError(f"unexpected binary op {_quote_rune(self.op)}")
        self.x.check(vars)
        self.y.check(vars)


@dataclass(frozen=True)
class Call:
    """A function call expression, such as ``sin(x)``."""

    fn: str
    args: tuple[Expr, ...] = ()

    def eval(self, env: Env = None) -> float:
        """Call the named function on the arguments' values."""
        if self.fn == "pow":
            return _pow(self.args[0].eval(env), self.args[1].eval(env))
        if self.fn == "sin":
            return _sin(self.args[0].eval(env))
        if self.fn == "sqrt":
            return _sqrt(self.args[0].eval(env))
        raise ExprError(f"unsupported function call: {self.fn}")

    def check(self, vars: MutableSet[Var]) -> None:
        """Reject unknown functions and wrong argument counts, then check arguments."""
        arity = _NUM_PARAMS.get(self.fn)
        if arity is None:
            raise ExprError(f"unknown function {_quote_string(self.fn)}")
        if len(self.args) != arity:
            raise ExprError(
                f"call to {self.fn} has {len(self.args)} args, want {arity}"
            )
        for arg in self.args:
            arg.check(vars)


Expr = Union[Var, Literal, Unary, Binary, Call]


# ---- lexer ----


class _Kind(enum.Enum):
    EOF = enum.auto()
    IDENT = enum.auto()
    NUMBER = enum.auto()
    CHAR = enum.auto()


_WHITESPACE = " \t\n\r"
_NUMBER = re.compile(
    r"0[xX][0-9a-fA-F_]*(?:\.[0-9a-fA-F_]*)?(?:[pP][+-]?[0-9_]*)?"
    r"|0[bBoO][0-9_]*"
    r"|[0-9][0-9_]*(?:\.[0-9_]*)?(?:[eE][+-]?[0-9_]*)?"
    r"|\.[0-9][0-9_]*(?:[eE][+-]?[0-9_]*)?"
)


def _is_ident_start(ch: str) -> bool:
    return ch == "_" or ch.isalpha()


def _is_ident_part(ch: str) -> bool:
    return ch == "_" or ch.isalpha() or ch.isdecimal()


def _tokenize(text: str) -> Iterator[tuple[_Kind, str]]:
    pos, n = 0, len(text)
    while True:
        while pos < n and text[pos] in _WHITESPACE:
            pos += 1
        if pos >= n:
            while True:
                yield _Kind.EOF, ""
        ch = text[pos]
        if _is_ident_start(ch):
            end = pos + 1
            while end < n and _is_ident_part(text[end]):
                end += 1
            yield _Kind.IDENT, text[pos:end]
            pos = end
        elif "0" <= ch <= "9" or (
            ch == "." and pos + 1 < n and "0" <= text[pos + 1] <= "9"
        ):
            match = _NUMBER.match(text, pos)
            assert match is not None
            yield _Kind.NUMBER, match.group()
            pos = match.end()
        else:
            yield _Kind.CHAR, ch
            pos += 1


def _parse_float(text: str) -> float:
    invalid = f"strconv.ParseFloat: parsing {_quote_string(text)}: invalid syntax"
    out_of_range = (
        f"strconv.ParseFloat: parsing {_quote_string(text)}: value out of range"
    )
    lowered = text.lower()
    try:
        if lowered.startswith("0x"):
            if "p" not in lowered:
                raise ExprError(invalid)
            value = float.fromhex(text.replace("_", ""))
        elif lowered.startswith(("0b", "0o")):
            raise ExprError(invalid)
        else:
            value = float(text)
    except OverflowError:
        raise ExprError(out_of_range) from None
    except ValueError as err:
        if isinstance(err, ExprError):
            raise
        raise ExprError(invalid) from None
    if math.isinf(value):
        raise ExprError(out_of_range)
    return value


def _precedence(kind: _Kind, text: str) -> int:
    if kind is not _Kind.CHAR:
        return 0
    if text in ("*", "/"):
        return 2
    if text in ("+", "-"):
        return 1
    return 0


class _Parser:
    def __init__(self, text: str) -> None:
        self._tokens = _tokenize(text)
        self.kind = _Kind.EOF
        self.text = ""
        self.next()

    def next(self) -> None:
        self.kind, self.text = next(self._tokens)

    def at(self, ch: str) -> bool:
        return self.kind is _Kind.CHAR and self.text == ch

    def describe(self) -> str:
        if self.kind is _Kind.EOF:
            return "end of file"
        if self.kind is _Kind.IDENT:
            return f"identifier {self.text}"
        if self.kind is _Kind.NUMBER:
            return f"number {self.text}"
        return _quote_rune(self.text)

    def expect_close(self) -> None:
        if not self.at(")"):
            raise ExprError(f"got {self.describe()}, want ')'")
        self.next()

    def expr(self) -> Expr:
        return self.binary(1)

    def binary(self, prec1: int) -> Expr:
        lhs = self.unary()
        prec = _precedence(self.kind, self.text)
        while prec >= prec1:
            while _precedence(self.kind, self.text) == prec:
                op = self.text
                self.next()
                rhs = self.binary(prec + 1)
                lhs = Binary(op, lhs, rhs)
            prec -= 1
        return lhs

    def unary(self) -> Expr:
        if self.at("+") or self.at("-"):
            op = self.text
            self.next()
            return Unary(op, self.unary())
        return self.primary()

    def primary(self) -> Expr:
        if self.kind is _Kind.IDENT:
            name = self.text
            self.next()
            if not self.at("("):
                return Var(name)
            self.next()
            args: list[Expr] = []
            if not self.at(")"):
                while True:
                    args.append(self.expr())
                    if not self.at(","):
                        break
                    self.next()
            self.expect_close()
            return Call(name, tuple(args))
        if self.kind is _Kind.NUMBER:
            value = _parse_float(self.text)
            self.next()
            return Literal(value)
        if self.at("("):
            self.next()
            e = self.expr()
            self.expect_close()
            return e
        raise ExprError(f"unexpected {self.describe()}")


def parse(text: str) -> Expr:
    """Parse ``text`` as an arithmetic expression.

    Numbers, variables, calls such as ``pow(x, 2)``, unary ``+``/``-``,
    binary ``+ - * /`` and parentheses are understood.
    """
    parser = _Parser(text)
    e = parser.expr()
    if parser.kind is not _Kind.EOF:
        raise ExprError(f"unexpected {parser.describe()}")
    return e


def format_expr(e: Expr) -> str:
    """Format an expression fully parenthesized."""
    if isinstance(e, Literal):
        return _format_g(e.value)
    if isinstance(e, Var):
        return str(e)
    if isinstance(e, Unary):
        return f"({e.op}{format_expr(e.x)})"
    if isinstance(e, Binary):
        return f"({format_expr(e.x)} {e.op} {format_expr(e.y)})"
    if isinstance(e, Call):
        return f"{e.fn}(" + ", ".join(format_expr(arg) for arg in e.args) + ")"
    raise TypeError(f"unknown Expr: {type(e).__name__}")