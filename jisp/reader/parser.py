"""
  jisp Reader: tokenizer, atom classifier and tree builder

- Emits Python primitives:

    - numbers -> float
    - symbols -> Symbol
    - lists   -> Python list

- Parentheses are always standalone tokens, whatever the spacing around them.
- No strings, comments or quoting: every other run of non-space characters is an atom.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Optional

from jisp import Ast
from jisp.errors import JispSyntaxError
from jisp.types.symbol import Symbol

logger = logging.getLogger(__name__)

LPAREN = "("
RPAREN = ")"

# Plain decimal/exponent syntax only. Python's float() would also accept
# "nan", "inf", "infinity" and digit underscores, which must stay symbols.
NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def tokenize(source: str) -> list[str]:
    """Split source text into tokens, isolating every parenthesis."""
    return source.replace(LPAREN, f" {LPAREN} ").replace(RPAREN, f" {RPAREN} ").split()


def atom(token: str) -> float | Symbol:
    """Classify a single non-parenthesis token as a number or a symbol."""
    if NUMBER_RE.fullmatch(token):
        return float(token)
    return Symbol(token)


class TokenStream:
    """Cursor over a token sequence, building one tree per parse_expr call."""

    def __init__(self, tokens: Iterable[str]):
        self.tokens: list[str] = list(tokens)
        self.pos = 0

    def peek(self) -> Optional[str]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Optional[str]:
        token = self.peek()
        if token is not None:
            self.pos += 1
        return token

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def remaining(self) -> list[str]:
        return self.tokens[self.pos:]

    def parse_expr(self) -> Ast:
        token = self.advance()
        if token is None:
            raise JispSyntaxError("Unexpected end of input")

        if token == LPAREN:
            items = []
            while self.peek() != RPAREN:
                # Exhaustion raises inside parse_expr
                items.append(self.parse_expr())
            self.advance()  # consume ")"
            return items

        if token == RPAREN:
            raise JispSyntaxError("Unexpected ')'")

        return atom(token)

    def parse_all(self) -> list[Ast]:
        exprs = []
        while not self.at_end():
            exprs.append(self.parse_expr())
        return exprs


def build_ast(tokens: list[str]) -> Ast:
    """Build one tree from the front of `tokens`, removing the tokens it used."""
    stream = TokenStream(tokens)
    try:
        return stream.parse_expr()
    finally:
        del tokens[:stream.pos]


def parse(source: str) -> Ast:
    """Parse exactly one expression from `source`.

    Tokens after the first complete expression are discarded; wrap several
    top-level forms in (begin ...) or use parse_all.
    """
    stream = TokenStream(tokenize(source))
    expr = stream.parse_expr()
    trailing = stream.remaining()
    if trailing:
        logger.debug("parse ignored %d trailing token(s): %r", len(trailing), trailing)
    return expr


def parse_all(source: str) -> list[Ast]:
    """Parse every top-level expression in `source`, in order."""
    return TokenStream(tokenize(source)).parse_all()
