from linsl import SExpression, LispValue, EvaluatorFn
from linsl.types.environment import Environment
from linsl.types.errors import LinslSyntaxError


def quote_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(quote x) returns x unevaluated.

    Quasiquote needs no form of its own: the reader expands it into calls to
    `append` and `list`.
    """
    if len(tail) != 1:
        raise LinslSyntaxError(f"quote takes exactly one form, found {len(tail)}")
    return tail[0]
