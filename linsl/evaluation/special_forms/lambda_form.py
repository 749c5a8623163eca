from linsl import EvaluatorFn
from linsl import SExpression, LispValue
from linsl.types.closure import Closure, Macro
from linsl.types.environment import Environment
from linsl.types.errors import LinslSyntaxError


def _params_and_body(kind: str, tail: list[SExpression]) -> tuple[SExpression, SExpression]:
    # The parameter spec is only checked when the closure is applied.
    if len(tail) != 2:
        raise LinslSyntaxError(f"{kind} must be given two expressions, found {len(tail)}")
    return tail[0], tail[1]


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(lambda params body)"""
    params, body = _params_and_body("lambda", tail)
    return Closure(params, body)


def macro_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(macro params body)"""
    params, body = _params_and_body("macro", tail)
    return Macro(params, body)
