"""Identifiers of the jisp language.

A Symbol is what the reader produces for any token that is not a number:
variable names, operator names such as `+` or `<=`, and the special-form
keywords. Symbols compare equal by name only, never to plain strings, so a
parsed tree can be told apart from host text.
"""

from __future__ import annotations
import sys


class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        # Interned: the evaluator hashes these on every lookup and special-form check
        self.id: str = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Symbol({self.id!r})"

    def __str__(self) -> str:
        # Source text form, as written in a jisp program
        return self.id
