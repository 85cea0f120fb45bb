from jisp.errors import JispArityError, JispTypeError
from jisp.types.lambda_fn import Lambda

from jisp import EvaluatorFn
from jisp import Ast, LispValue
from jisp.types.environment import Environment
from jisp.types.symbol import Symbol


def lambda_form(
    tail: list[Ast],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body): exactly one body form, use begin for more.
    if len(tail) != 2:
        raise JispArityError("lambda requires a parameter list and a single body expression")

    params, body = tail
    if not isinstance(params, list):
        raise JispTypeError(f"lambda parameter list must be a list, got {params!r}")
    for p in params:
        if not isinstance(p, Symbol):
            raise JispTypeError(f"lambda parameter must be a symbol, got {p!r}")

    return Lambda(list(params), body, env)
