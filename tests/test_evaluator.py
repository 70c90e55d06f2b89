import math

import pytest

from primer.evaluator import (
    Binary,
    Call,
    ExprError,
    Literal,
    Unary,
    Var,
    format_expr,
    parse,
)


def _outcome(text, env):
    try:
        expr = parse(text)
        expr.check(set())
    except ExprError as err:
        return str(err)
    return f"{expr.eval(env):.6g}"


@pytest.mark.parametrize(
    "text, env, want",
    [
        ("x % 2", None, "unexpected '%'"),
        ("!true", None, "unexpected '!'"),
        ("log(10)", None, 'unknown function "log"'),
        ("sqrt(1, 2)", None, "call to sqrt has 2 args, want 1"),
        ("sqrt(A / pi)", {"A": 87616, "pi": math.pi}, "167"),
        ("pow(x, 3) + pow(y, 3)", {"x": 9, "y": 10}, "1729"),
        ("5 / 9 * (F - 32)", {"F": -40}, "-40"),
    ],
)
def test_coverage(text, env, want):
    assert _outcome(text, env) == want


@pytest.mark.parametrize(
    "text, env, want",
    [
        ("sqrt(A / pi)", {"A": 87616, "pi": math.pi}, "167"),
        ("pow(x, 3) + pow(y, 3)", {"x": 12, "y": 1}, "1729"),
        ("pow(x, 3) + pow(y, 3)", {"x": 9, "y": 10}, "1729"),
        ("5 / 9 * (F - 32)", {"F": -40}, "-40"),
        ("5 / 9 * (F - 32)", {"F": 32}, "0"),
        ("5 / 9 * (F - 32)", {"F": 212}, "100"),
        ("-1 + -x", {"x": 1}, "-2"),
        ("-1 - x", {"x": 1}, "-2"),
    ],
)
def test_eval(text, env, want):
    assert f"{parse(text).eval(env):.6g}" == want


@pytest.mark.parametrize(
    "text, want",
    [
        ("x % 2", "unexpected '%'"),
        ("math.Pi", "unexpected '.'"),
        ("!true", "unexpected '!'"),
        ('"hello"', "unexpected '\"'"),
        ("log(10)", 'unknown function "log"'),
        ("sqrt(1, 2)", "call to sqrt has 2 args, want 1"),
    ],
)
def test_errors(text, want):
    with pytest.raises(ExprError) as excinfo:
        parse(text).check(set())
    assert str(excinfo.value) == want


@pytest.mark.parametrize(
    "text, want",
    [
        ("-1 + -x", "((-1) + (-x))"),
        ("1 - 2 - 3", "((1 - 2) - 3)"),
        ("1 + 2 * 3", "(1 + (2 * 3))"),
        ("2 * 3 + 1", "((2 * 3) + 1)"),
        ("pow(x, 3) + pow(y, 3)", "(pow(x, 3) + pow(y, 3))"),
        ("sqrt(A / pi)", "sqrt((A / pi))"),
        ("3.141", "3.141"),
    ],
)
def test_format(text, want):
    assert format_expr(parse(text)) == want


def test_format_round_trip():
    text = "5 / 9 * (F - 32) + pow(-x, 2)"
    first = parse(text)
    assert parse(format_expr(first)) == first


def test_parse_builds_tree():
    assert parse("-x * 2") == Binary("*", Unary("-", Var("x")), Literal(2.0))
    assert parse("sin(x)") == Call("sin", (Var("x"),))


def test_check_collects_variables():
    vars_seen = set()
    parse("pow(x, 3) + pow(y, 3) * x").check(vars_seen)
    assert vars_seen == {"x", "y"}


def test_unbound_variable_is_zero():
    assert parse("x + 1").eval({}) == 1.0
    assert parse("x").eval(None) == 0.0


def test_division_by_zero():
    assert parse("1 / 0").eval() == math.inf
    assert parse("-1 / 0").eval() == -math.inf
    assert math.isnan(parse("0 / 0").eval())


def test_function_domain_edges():
    assert math.isnan(parse("sqrt(-1)").eval())
    assert parse("pow(0, -1)").eval() == math.inf
    assert parse("pow(10, 400)").eval() == math.inf


@pytest.mark.parametrize(
    "text, want",
    [
        ("sqrt(x", "got end of file, want ')'"),
        ("(1", "got end of file, want ')'"),
        ("", "unexpected end of file"),
        ("x +", "unexpected end of file"),
        ("x y", "unexpected identifier y"),
        ("2 3", "unexpected number 3"),
        ("pow(2,)", "unexpected ')'"),
        ("1e400", 'strconv.ParseFloat: parsing "1e400": value out of range'),
        ("0x10", 'strconv.ParseFloat: parsing "0x10": invalid syntax'),
        ("1e", 'strconv.ParseFloat: parsing "1e": invalid syntax'),
    ],
)
def test_parse_errors(text, want):
    with pytest.raises(ExprError) as excinfo:
        parse(text)
    assert str(excinfo.value) == want


def test_number_forms():
    assert parse(".5").eval() == 0.5
    assert parse("0x1p4").eval() == 16.0
    assert parse("1_000").eval() == 1000.0


def test_call_arity_and_unknown():
    with pytest.raises(ExprError, match=r"call to sin has 0 args, want 1"):
        parse("sin()").check(set())
    with pytest.raises(ExprError, match=r'unknown function "f"'):
        Call("f", ()).check(set())


def test_bad_operators_rejected_by_check():
    with pytest.raises(ExprError) as unary_err:
        Unary("!", Literal(1.0)).check(set())
    assert str(unary_err.value) == "unexpected unary op '!'"
    with pytest.raises(ExprError) as binary_err:
        Binary("%", Literal(1.0), Literal(2.0)).check(set())
    assert str(binary_err.value) == "unexpected binary op '%'"


def test_error_is_value_error():
    with pytest.raises(ValueError):
        parse("x % 2")