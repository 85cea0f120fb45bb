from __future__ import annotations

import logging
import sys

from jisp import LispValue
from jisp.config import get_log_level, get_recursion_limit
from jisp.reader.parser import parse_all
from jisp.evaluation.evaluator import evaluate
from jisp.types.unit import Unit
from jisp.types.environment import Environment
from jisp.builtin.env_builtin import make_global_environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    A session for evaluating jisp source text.
    Keeps one environment across calls, so definitions persist between evals.
    """
    def __init__(self, env: Environment | None = None):
        level = get_log_level()
        if level is not None:
            logging.getLogger("jisp").setLevel(level)

        limit = get_recursion_limit()
        if limit is not None and limit > sys.getrecursionlimit():
            sys.setrecursionlimit(limit)

        self.env: Environment = env if env is not None else make_global_environment()

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level form in `code`; return the last value."""
        result: LispValue = Unit
        for expr in parse_all(code):
            logger.debug("eval %r", expr)
            result = evaluate(expr, self.env)
        return result
