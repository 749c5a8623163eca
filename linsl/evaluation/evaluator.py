"""Core evaluator for the Linsl interpreter.

A strict recursive tree walk: special forms are dispatched on the unevaluated
list head, everything else evaluates the head and applies the result.
"""

from __future__ import annotations

from linsl import SExpression, LispValue
from linsl.evaluation.apply import apply
from linsl.evaluation.special_forms import SPECIAL_FORMS
from linsl.types.closure import Closure, Macro
from linsl.types.environment import Environment
from linsl.types.errors import LinslInternalError, LinslSyntaxError
from linsl.types.primitive import Primitive
from linsl.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env`.

    Syntax errors raised while evaluating a list read from source are stamped
    with that list's position unless an inner form already claimed them.
    """
    # bool is a subclass of int; function values can reappear in macro expansions
    if isinstance(expr, (bool, float, Closure, Macro, Primitive)):
        return expr

    if isinstance(expr, Symbol):
        value = env.lookup(expr)
        if value is None:
            raise LinslSyntaxError(f"Undefined symbol '{expr}'")
        return value

    if isinstance(expr, list):
        try:
            return evaluate_list(expr, env)
        except LinslSyntaxError as err:
            if err.position is None:
                err.position = getattr(expr, "position", None)
            raise

    if isinstance(expr, int):
        # embedding code may hand us Python ints
        return float(expr)

    raise LinslInternalError(f"Expected list or atom, found {expr!r}")


def evaluate_list(expr: list[SExpression], env: Environment) -> LispValue:
    if not expr:
        raise LinslSyntaxError("Expected non-empty list")

    head, *tail = expr

    # --- Special forms handling ---
    if isinstance(head, Symbol):
        form = SPECIAL_FORMS.get(head)
        if form is not None:
            return form(tail, env, evaluate)

    # --- Closure / macro / primitive application ---
    fn = evaluate(head, env)
    return apply(fn, tail, env, evaluate)
