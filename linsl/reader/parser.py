"""
  Linsl Parser

Recursive descent over a Tokenizer with one token of lookahead. Emits Python
values instead of Cons cells:

    - #t / #f   -> bool
    - numbers   -> float
    - symbols   -> Symbol
    - lists     -> SList (a list that remembers its source position)
    - 'x        -> (quote x)
    - `x        -> expanded here into (append (list ...) ...) calls, so the
                   evaluator never sees quasiquote, unquote or unquote-splicing
"""

from __future__ import annotations

import math
from typing import Iterator, Optional

from linsl import SExpression
from linsl.reader.tokenizer import Token, Tokenizer
from linsl.types.errors import LinslSyntaxError
from linsl.types.position import Position, SList
from linsl.types.symbol import Symbol

QUOTE = Symbol("quote")
LIST = Symbol("list")
APPEND = Symbol("append")
UNQUOTE = Symbol("unquote")
UNQUOTE_SPLICING = Symbol("unquote-splicing")


def parse_atom(lexeme: str) -> SExpression:
    if lexeme == "#t":
        return True
    if lexeme == "#f":
        return False
    if "_" in lexeme:
        return Symbol(lexeme)
    try:
        value = float(lexeme)
    except ValueError:
        return Symbol(lexeme)
    # "nan", "inf", "infinity" are valid Python floats but read as symbols here
    if math.isnan(value) or (math.isinf(value) and lexeme.lstrip("+-").isalpha()):
        return Symbol(lexeme)
    return value


class Parser:
    """Reads one expression at a time from a Tokenizer."""

    def __init__(self, tokenizer: Tokenizer):
        self.tokenizer = tokenizer

    def parse(self) -> Optional[SExpression]:
        """Parse the next complete expression; None when input is exhausted."""
        if self.tokenizer.peek() is None:
            return None
        return self.parse_expr(quasi=False)

    def parse_all(self) -> Iterator[SExpression]:
        while (expr := self.parse()) is not None:
            yield expr

    def _next(self, opener: Token | None = None) -> Token:
        tok = self.tokenizer.next_token()
        if tok is None:
            if opener is not None:
                raise LinslSyntaxError(
                    f"Unexpected end of input after '{opener.lexeme}'", opener.position
                )
            raise LinslSyntaxError("Unexpected end of input")
        return tok

    def parse_expr(self, quasi: bool) -> SExpression:
        """Parse one expression.

        Inside a quasiquoted form (`quasi`), unquotes are kept as
        (unquote x) / (unquote-splicing x) markers for `expand_quasiquote`.
        """
        tok = self._next()
        lexeme = tok.lexeme

        if lexeme == "(":
            return self._parse_list(tok, quasi)

        if lexeme == ")":
            raise LinslSyntaxError("Unexpected closing parenthesis", tok.position)

        if lexeme == "'":
            expr = self.parse_expr(quasi)
            return SList([QUOTE, expr], tok.position)

        if lexeme == "`":
            expr = self.parse_expr(quasi=True)
            return expand_quasiquote(expr, tok.position)

        if lexeme in (",", ",@"):
            expr = self.parse_expr(quasi=False)
            if quasi:
                head = UNQUOTE if lexeme == "," else UNQUOTE_SPLICING
                return SList([head, expr], tok.position)
            if lexeme == ",@":
                raise LinslSyntaxError(
                    "Unquote-splicing outside of a quasiquoted list", tok.position
                )
            return expr

        return parse_atom(lexeme)

    def _parse_list(self, opener: Token, quasi: bool) -> SList:
        items = SList(position=opener.position)
        while True:
            nxt = self.tokenizer.peek()
            if nxt is None:
                raise LinslSyntaxError("Found only opening parenthesis", opener.position)
            if nxt.lexeme == ")":
                self.tokenizer.next_token()
                return items
            items.append(self.parse_expr(quasi))


def _is_marker(expr: SExpression, head: Symbol) -> bool:
    return isinstance(expr, list) and len(expr) == 2 and expr[0] == head


def expand_quasiquote(expr: SExpression, position: Position | None = None) -> SExpression:
    """Rewrite a quasiquoted form into ordinary list-construction calls.

        `,x          -> x
        `,@x         -> error, nothing to splice into
        `atom        -> (quote atom)
        `(a ,b ,@c)  -> (append (list (quote a)) (list b) c)

    Nested lists are rewritten the same way, so `(a (b ,c)) unquotes c.
    """
    if _is_marker(expr, UNQUOTE):
        return expr[1]
    if _is_marker(expr, UNQUOTE_SPLICING):
        raise LinslSyntaxError(
            "Unquote-splicing at the top of a quasiquoted form",
            getattr(expr, "position", position),
        )
    if not isinstance(expr, list):
        return SList([QUOTE, expr], position)

    pos = getattr(expr, "position", position)
    parts = SList([APPEND], pos)
    for item in expr:
        if _is_marker(item, UNQUOTE):
            parts.append(SList([LIST, item[1]], pos))
        elif _is_marker(item, UNQUOTE_SPLICING):
            parts.append(item[1])
        else:
            parts.append(SList([LIST, expand_quasiquote(item, pos)], pos))
    return parts


def parse(tokenizer: Tokenizer) -> Optional[SExpression]:
    """Parse one expression from `tokenizer`, or None when it is exhausted."""
    return Parser(tokenizer).parse()


def read_all(source: str) -> list[SExpression]:
    """Convenience: parse every expression in a string."""
    tokenizer = Tokenizer()
    tokenizer.add_text(source)
    return list(Parser(tokenizer).parse_all())
