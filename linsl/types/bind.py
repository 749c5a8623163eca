from __future__ import annotations

from linsl import LispValue, SExpression
from linsl.types.environment import Environment
from linsl.types.errors import LinslSyntaxError
from linsl.types.symbol import Symbol


def parse_formals(params: SExpression) -> list[Symbol]:
    """Check that a parameter spec is a flat list of Symbols."""
    if not isinstance(params, list):
        raise LinslSyntaxError(f"Expected list of symbols, found '{_show(params)}'")
    formals = []
    for i, p in enumerate(params):
        if not isinstance(p, Symbol):
            raise LinslSyntaxError(
                f"Expected symbol as parameter {i + 1}, found '{_show(p)}'"
            )
        formals.append(p)
    return formals


def bind_arguments(
    params: SExpression,
    supplied_args: list[LispValue],
    outer: Environment,
) -> Environment:
    """
    Single source of truth for parameter binding in Linsl.

    - (a b) with (1 2)     -> a=1, b=2
    - (a b) with (1 2 3 4) -> a=1, b=(2 3 4): the last formal absorbs the rest
    - (a b) with (1)       -> arity error

    Returns a new Environment whose outer is `outer`, populated with the bindings
    for evaluating the callee body.
    """
    formals = parse_formals(params)
    supplied = list(supplied_args)
    local_env = Environment(outer=outer)

    if len(formals) > len(supplied):
        raise LinslSyntaxError(
            f"Got {len(formals)} parameters and {len(supplied)} arguments; "
            "cannot have more parameters than arguments"
        )

    if len(formals) < len(supplied):
        if not formals:
            raise LinslSyntaxError(
                f"Too many arguments: expected none, got {len(supplied)}"
            )
        *leading, rest_name = formals
        for formal, value in zip(leading, supplied):
            local_env.define(formal, value)
        local_env.define(rest_name, supplied[len(leading):])
        return local_env

    for formal, value in zip(formals, supplied):
        local_env.define(formal, value)
    return local_env


def _show(expr: SExpression) -> str:
    from linsl.printer import to_string
    return to_string(expr)
