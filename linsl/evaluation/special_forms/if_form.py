from linsl import EvaluatorFn
from linsl import SExpression, LispValue
from linsl.types.errors import LinslSyntaxError
from linsl.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise LinslSyntaxError(f"Expected 3 arguments to if, found {len(tail)}")

    test_form, then_form, else_form = tail
    test = evaluate_fn(test_form, env)
    # No truthiness: the test has to produce #t or #f
    if not isinstance(test, bool):
        from linsl.printer import to_string
        raise LinslSyntaxError(
            f"Test form must evaluate to bool, but evaluated to '{to_string(test)}'"
        )

    return evaluate_fn(then_form if test else else_form, env)
