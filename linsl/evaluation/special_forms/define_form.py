from linsl import EvaluatorFn
from linsl import SExpression, LispValue
from linsl.types.errors import LinslSyntaxError
from linsl.types.environment import Environment
from linsl.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    The value is evaluated and bound in the current scope; the name is returned
    so the REPL can echo it.
    """
    if len(tail) != 2:
        raise LinslSyntaxError(f"define must have two forms, found {len(tail)}")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        from linsl.printer import to_string
        raise LinslSyntaxError(
            f"First define form must be a symbol, found '{to_string(name)}'"
        )

    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return name
