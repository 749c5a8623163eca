"""Application engine for Linsl.

This module centralizes application semantics for the interpreter:
- Closures: arguments arrive evaluated and are bound in a fresh child of the
  caller's scope.
- Macros: argument forms arrive unevaluated, are bound in a fresh child of the
  caller's scope, and the body's result is evaluated again in the caller's scope.
- Primitives: called with the list of evaluated arguments.

Keeping this logic in one place prevents duplication between the evaluator and
the special forms.
"""

from __future__ import annotations

from linsl import LispValue, SExpression, EvaluatorFn
from linsl.types.bind import bind_arguments
from linsl.types.closure import Closure, Macro
from linsl.types.environment import Environment
from linsl.types.errors import LinslSyntaxError
from linsl.types.primitive import Primitive


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Closure to already-evaluated arguments from the scope `env`.

    Every call gets its own frame, so bindings never leak between calls.
    """
    call_env = bind_arguments(fn.params, args, env)
    return evaluate_fn(fn.body, call_env)


def expand_macro(
    fn: Macro,
    arg_forms: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> SExpression:
    """First pass of macro application: produce the expansion."""
    expand_env = bind_arguments(fn.params, list(arg_forms), env)
    return evaluate_fn(fn.body, expand_env)


def apply_macro(
    fn: Macro,
    arg_forms: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Expand with the unevaluated forms, then evaluate the expansion in `env`."""
    expansion = expand_macro(fn, arg_forms, env, evaluate_fn)
    return evaluate_fn(expansion, env)


def apply(
    head: Closure | Macro | Primitive | object,
    arg_forms: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply an evaluated list head to the remaining (unevaluated) forms.

    Closure and Primitive arguments are evaluated left to right in `env`
    before the call; Macro arguments are passed through untouched.
    """
    from linsl.printer import to_string

    if isinstance(head, Macro):
        return apply_macro(head, arg_forms, env, evaluate_fn)
    if isinstance(head, (Closure, Primitive)):
        args = [evaluate_fn(form, env) for form in arg_forms]
        if isinstance(head, Closure):
            return apply_closure(head, args, env, evaluate_fn)
        return head(args)
    raise LinslSyntaxError(
        f"Expected the head of list to be a function, found '{to_string(head)}'"
    )
