"""Render parsed trees and runtime values back into jisp source text."""

from __future__ import annotations

import math

from jisp import LispValue
from jisp.types.symbol import Symbol
from jisp.types.unit import UnitType
from jisp.types.lambda_fn import Lambda


def format_number(n: int | float) -> str:
    if isinstance(n, float):
        if math.isnan(n):
            return "nan"
        if math.isinf(n):
            return "inf" if n > 0 else "-inf"
        if n.is_integer():
            return str(int(n))
    return repr(n)


def to_source(obj: LispValue) -> str:
    """Return the jisp text for a tree or value.

    Parsing the output of to_source on a tree of finite numbers, symbols and
    lists gives back an equal tree. nan and inf render as text that reads
    back as Symbols, since the reader only accepts decimal/exponent syntax.
    """
    if isinstance(obj, bool):
        return "#t" if obj else "#f"
    if isinstance(obj, (int, float)):
        return format_number(obj)
    if isinstance(obj, Symbol):
        return str(obj)
    if isinstance(obj, list):
        return "(" + " ".join(to_source(e) for e in obj) + ")"
    if isinstance(obj, Lambda):
        params = " ".join(str(p) for p in obj.formals)
        return f"(lambda ({params}) {to_source(obj.body)})"
    if isinstance(obj, UnitType):
        return repr(obj)
    if callable(obj):
        return f"#<builtin {getattr(obj, '__name__', repr(obj))}>"
    return repr(obj)
