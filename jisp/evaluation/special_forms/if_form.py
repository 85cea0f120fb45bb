from jisp import EvaluatorFn
from jisp import Ast, LispValue
from jisp.errors import JispArityError
from jisp.types.environment import Environment


def if_form(
    tail: list[Ast],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise JispArityError("if requires a test, a consequent and an alternate")

    test, consequent, alternate = tail
    # Only the selected branch is evaluated
    if evaluate_fn(test, env):
        return evaluate_fn(consequent, env)
    return evaluate_fn(alternate, env)
