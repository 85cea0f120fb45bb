"""Lambda function representation and argument binding for jisp."""

from __future__ import annotations

from jisp import Ast, LispValue
from jisp.types.environment import Environment
from jisp.types.symbol import Symbol
from jisp.errors import JispArityError


class Lambda:
    """A first-class lambda with formal parameters, body, and closure env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: Ast, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: Ast = body
        # Captured by reference, so later defines in the defining scope are visible
        self.env: Environment = env

    def __str__(self) -> str:
        from jisp.debug_utils.pprint import to_source
        return to_source(self)

    def __repr__(self) -> str:
        return f"<Lambda {self}>"

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values positionally to this lambda's formal
        parameters in a fresh child of the closure environment.

        Raises JispArityError when the argument count differs from the
        number of formals.
        """
        if len(args) != len(self.formals):
            raise JispArityError(
                f"{self} expects {len(self.formals)} argument(s), got {len(args)}"
            )
        frame = self.env.child()
        for name, value in zip(self.formals, args):
            frame.define(name, value)
        return frame
