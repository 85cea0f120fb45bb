"""Core evaluator for the jisp interpreter.

Plain tree recursion: symbols are looked up, lists headed by a special form
are handed to that form's handler, every other list is a function call.
"""

from __future__ import annotations

from jisp import Ast, LispValue
from jisp.errors import JispTypeError
from jisp.types.environment import Environment
from jisp.types.symbol import Symbol
from jisp.evaluation.apply import apply
from jisp.evaluation.special_forms import SPECIAL_FORMS
from jisp.builtin.env_builtin import GLOBAL_ENV


def evaluate(expr: Ast, env: Environment | None = None) -> LispValue:
    """Evaluate a parsed tree in `env`, defaulting to the global environment."""
    if env is None:
        env = GLOBAL_ENV

    match expr:
        case Symbol():
            return env.lookup(expr)
        case []:
            raise JispTypeError("Cannot evaluate an empty list")
        case [head, *tail_args]:
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate)
            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(fn, args, env, evaluate)
        case _:
            # Numbers and other host values are self-evaluating
            return expr
