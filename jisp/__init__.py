# Core type aliases for jisp's data model.
# Plain Python types represent both code and runtime values:
# - numbers are float (host ints are accepted when injected by an embedding program)
# - identifiers are Symbol
# - compound forms are list
#
# Naming guidance:
# - Ast:       use in reader/parser code to denote a parsed tree.
# - LispValue: use in evaluator/runtime code to denote an evaluated value.

import logging
from typing import Any, Callable

Ast = Any
LispValue = Any

# Evaluator function type: passed into special form handlers
EvaluatorFn = Callable[..., LispValue]

logging.getLogger(__name__).addHandler(logging.NullHandler())

from jisp.errors import (  # noqa: E402
    JispError,
    JispSyntaxError,
    JispUnboundSymbol,
    JispInvalidSymbol,
    JispTypeError,
    JispArityError,
)
from jisp.types.symbol import Symbol  # noqa: E402
from jisp.types.unit import Unit  # noqa: E402
from jisp.types.environment import Environment  # noqa: E402
from jisp.types.lambda_fn import Lambda  # noqa: E402
from jisp.reader.parser import tokenize, parse, parse_all  # noqa: E402
from jisp.builtin.env_builtin import GLOBAL_ENV, make_global_environment  # noqa: E402
from jisp.evaluation.evaluator import evaluate  # noqa: E402
from jisp.debug_utils.pprint import to_source  # noqa: E402
from jisp.interpreter import Interpreter  # noqa: E402

__all__ = [
    "Ast",
    "LispValue",
    "EvaluatorFn",
    "JispError",
    "JispSyntaxError",
    "JispUnboundSymbol",
    "JispInvalidSymbol",
    "JispTypeError",
    "JispArityError",
    "Symbol",
    "Unit",
    "Environment",
    "Lambda",
    "tokenize",
    "parse",
    "parse_all",
    "GLOBAL_ENV",
    "make_global_environment",
    "evaluate",
    "to_source",
    "Interpreter",
]
