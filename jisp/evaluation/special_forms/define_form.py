import logging

from jisp import EvaluatorFn
from jisp import Ast, LispValue
from jisp.errors import JispArityError, JispInvalidSymbol
from jisp.types.environment import Environment
from jisp.types.symbol import Symbol
from jisp.types.unit import Unit

logger = logging.getLogger(__name__)


def define_form(
    tail: list[Ast],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame only; an outer binding of the same name is shadowed, never changed.
    """
    if len(tail) != 2:
        raise JispArityError("define requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise JispInvalidSymbol(f"Cannot define {name!r} as a symbol")

    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    if env.outer is None:
        logger.debug("define %s at top level", name)
    return Unit
