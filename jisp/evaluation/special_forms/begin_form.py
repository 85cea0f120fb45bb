from jisp import EvaluatorFn
from jisp import Ast, LispValue
from jisp.types.environment import Environment
from jisp.types.unit import Unit


def begin_form(
    tail: list[Ast],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(begin e1 e2 ... en): evaluate in order and return the value of en."""
    result: LispValue = Unit
    for e in tail:
        result = evaluate_fn(e, env)
    return result
