"""Runtime environment for jisp.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Lookups that miss in a frame are delegated
up the chain; definitions always land in the frame they are made in, which is
what lets lambda parameters shadow outer bindings of the same name.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from jisp import LispValue
from jisp.errors import JispInvalidSymbol, JispUnboundSymbol
from jisp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def child(self) -> Environment:
        """Return a new, empty frame whose parent is this environment."""
        return Environment(outer=self)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, replacing any existing binding.

        Raises JispInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise JispInvalidSymbol(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises JispUnboundSymbol if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise JispUnboundSymbol(f"Unbound symbol: {name}")
        return env.vars[name]

    def update(self, mapping: Mapping[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, Symbol) and self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging, innermost frame first."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env = self
            while env is not None:
                frame = StringIO()
                env._write_vars(frame)
                chain.append(frame.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
