"""Built-in functions for the jisp global environment.

This module defines the arithmetic and comparison primitives, the `pi`
constant, and the process-wide global environment that `evaluate` uses
when no environment is given.

Every builtin takes the calling environment and a list of already evaluated
arguments, matching the calling convention used by the application engine.
"""
from __future__ import annotations

import math
from functools import reduce
from typing import Callable

from jisp import LispValue
from jisp.types.environment import Environment
from jisp.types.symbol import Symbol
from jisp.errors import JispTypeError, JispArityError


def _numbers(name: str, args: list[LispValue]) -> list[LispValue]:
    """Reject anything that is not an int or float; bools are not numbers here."""
    for arg in args:
        if isinstance(arg, bool) or not isinstance(arg, (int, float)):
            raise JispTypeError(f"All arguments to {name} must be numbers, got {arg!r}")
    return args


def _fold(name: str, op: Callable[[LispValue, LispValue], LispValue], args: list[LispValue]) -> LispValue:
    if not args:
        raise JispArityError(f"{name} requires at least 1 argument")
    return reduce(op, _numbers(name, args))


def _divide(x: float, y: float) -> float:
    """IEEE-754 division: x/0 is a signed infinity, 0/0 is nan."""
    if y == 0:
        if x == 0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)
    return x / y


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[LispValue]) -> LispValue:
    """Left-fold sum of all arguments."""
    return _fold("+", lambda x, y: x + y, expr)


def sub(env: Environment, expr: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if len(expr) == 1:
        return -_numbers("-", expr)[0]
    return _fold("-", lambda x, y: x - y, expr)


def mul(env: Environment, expr: list[LispValue]) -> LispValue:
    """Left-fold product of all arguments."""
    return _fold("*", lambda x, y: x * y, expr)


def div(env: Environment, expr: list[LispValue]) -> LispValue:
    """Divide left-to-right; a single argument is returned unchanged."""
    return _fold("/", _divide, expr)


# -------------------------------
# Comparison
# -------------------------------
def _compare(name: str, pyname: str, op: Callable[[LispValue, LispValue], bool]):
    def compare(env: Environment, expr: list[LispValue]) -> bool:
        if len(expr) != 2:
            raise JispArityError(f"{name} requires exactly 2 arguments, got {len(expr)}")
        x, y = _numbers(name, expr)
        return op(x, y)

    compare.__name__ = compare.__qualname__ = pyname
    compare.__doc__ = f"({name} x y) for exactly two numbers."
    return compare


lt = _compare("<", "lt", lambda x, y: x < y)
lte = _compare("<=", "lte", lambda x, y: x <= y)
gt = _compare(">", "gt", lambda x, y: x > y)
gte = _compare(">=", "gte", lambda x, y: x >= y)


def register(env: Environment) -> None:
    """Register all builtin functions and constants into the given environment."""
    env.update(
        {
            Symbol("+"): add,
            Symbol("-"): sub,
            Symbol("*"): mul,
            Symbol("/"): div,
            Symbol("<"): lt,
            Symbol("<="): lte,
            Symbol(">"): gt,
            Symbol(">="): gte,
            Symbol("pi"): math.pi,
        }
    )


def make_global_environment() -> Environment:
    """Return a fresh root environment holding the builtins."""
    env = Environment()
    register(env)
    return env


# Shared by every evaluate() call that does not pass its own environment.
GLOBAL_ENV = make_global_environment()
