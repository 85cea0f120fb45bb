import math

import pytest

from jisp.errors import JispArityError, JispTypeError
from jisp.reader.parser import parse
from jisp.evaluation.evaluator import evaluate
from jisp.builtin.env_builtin import add, sub, div, lt


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(+ 7)", 7),
        ("(- 10 3 2)", 5),
        ("(- 5)", -5),
        ("(- -10 -5)", -5),
        ("(* 2 3 4)", 24),
        ("(* 1 2 3 4 5 6)", 720),
        ("(/ 12 3)", 4),
        ("(/ 1 2 2)", 0.25),
        ("(/ 7)", 7),
        ("(+ 1 2.5 3)", 6.5),
        ("(+ -1 5 -3)", 1),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
        ("(/ (* (+ 8 2) 5) (- 20 10))", 5),
        ("(* 2 pi)", 2 * math.pi),
        ("(< 1 2)", True),
        ("(< 2 1)", False),
        ("(<= 2 2)", True),
        ("(> 3 2)", True),
        ("(> 2 2)", False),
        ("(>= 2 2)", True),
        ("(>= 1 2)", False),
    ]
)
def test_arithmetic_and_comparison(env, source, expected):
    assert evaluate(parse(source), env) == expected


def test_comparisons_return_bools(env):
    assert evaluate(parse("(< 1 2)"), env) is True
    assert evaluate(parse("(> 1 2)"), env) is False


def test_division_by_zero_follows_ieee(env):
    assert evaluate(parse("(/ 1 0)"), env) == math.inf
    assert evaluate(parse("(/ -1 0)"), env) == -math.inf
    assert evaluate(parse("(/ 1 (- 0))"), env) == -math.inf
    assert math.isnan(evaluate(parse("(/ 0 0)"), env))
    assert evaluate(parse("(/ 1 0 2)"), env) == math.inf


@pytest.mark.parametrize(
    "source",
    ["(+)", "(-)", "(*)", "(/)", "(<)", "(< 1)", "(< 1 2 3)", "(>= 1 2 3)"],
)
def test_arity_errors(env, source):
    with pytest.raises(JispArityError):
        evaluate(parse(source), env)


@pytest.mark.parametrize(
    "source",
    ["(+ 1 (< 1 2))", "(- +)", "(* 2 (lambda (x) x))", "(< 1 (define y 2))", "(/ 1 -)"],
)
def test_type_errors(env, source):
    with pytest.raises(JispTypeError):
        evaluate(parse(source), env)


def test_builtins_accept_host_ints(env):
    assert add(env, [1, 2, 3]) == 6
    assert sub(env, [4]) == -4
    assert div(env, [1, 0]) == math.inf
    assert lt(env, [1, 2.5]) is True
