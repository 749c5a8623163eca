"""Closure and macro values.

Both keep their parameter spec and body exactly as written. The parameter spec
is only checked when arguments are bound (see linsl.types.bind). Neither keeps
a reference to the scope it was created in: both run against the scope of the
call site.
"""

from __future__ import annotations

from linsl import SExpression


class Closure:
    """A first-class function: parameter spec and body."""

    __slots__ = ("params", "body")

    def __init__(self, params: SExpression, body: SExpression):
        self.params: SExpression = params
        self.body: SExpression = body

    def __str__(self) -> str:
        from linsl.printer import to_string
        return to_string(self)

    def __repr__(self) -> str:
        return f"Closure({self.params!r}, {self.body!r})"


class Macro:
    """Like a Closure, but applied to unevaluated argument forms.

    Its body runs in a child of the caller's scope and produces a form that is
    then evaluated by the caller.
    """

    __slots__ = ("params", "body")

    def __init__(self, params: SExpression, body: SExpression):
        self.params: SExpression = params
        self.body: SExpression = body

    def __str__(self) -> str:
        from linsl.printer import to_string
        return to_string(self)

    def __repr__(self) -> str:
        return f"Macro({self.params!r}, {self.body!r})"
