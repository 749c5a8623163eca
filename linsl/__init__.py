# Core type aliases for Linsl's data model.
# Plain Python values represent both code (forms) and runtime values:
#   #t/#f -> bool, numbers -> float, symbols -> Symbol, lists -> list,
#   plus Closure, Macro and Primitive objects for the callable variants.
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: evaluator passed into special forms and applicators
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.3.0"
