"""Application engine for jisp.

Centralizes function application for the evaluator:
- Lambda values get a fresh child frame of their closure environment.
- Python callables registered in the environment are invoked as fn(env, args).
- Anything else is not applicable.
"""

import logging
from typing import Callable

from jisp import LispValue, EvaluatorFn
from jisp.types.environment import Environment
from jisp.types.lambda_fn import Lambda
from jisp.errors import JispTypeError

logger = logging.getLogger(__name__)


def apply_lambda(fn: Lambda, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a Lisp Lambda value to already evaluated arguments.

    The body is evaluated in a new frame whose parent is the environment
    captured when the lambda was created, not the caller's environment.
    """
    frame = fn.extend_env(args)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("apply %s to %r", fn, args)
    return evaluate_fn(fn.body, frame)


def apply(
    head: Lambda | Callable[[Environment, list[LispValue]], LispValue] | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a Python callable.

    - For Lambda, defer to apply_lambda.
    - For Python callables (builtins), invoke with the calling env and list of args.
    - Otherwise, raise JispTypeError.
    """
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn)
    elif callable(head):
        return head(env, args)
    else:
        raise JispTypeError(f"Cannot apply non-function {head!r}")
