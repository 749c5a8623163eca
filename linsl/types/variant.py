from __future__ import annotations

from linsl import LispValue
from linsl.types.errors import LinslInternalError
from linsl.types.symbol import Symbol
from linsl.types.closure import Closure, Macro
from linsl.types.primitive import Primitive


def variant_name(expr: LispValue) -> str:
    """Name of the Expression variant `expr` belongs to."""
    # bool first: it is a subclass of int
    if isinstance(expr, bool):
        return "Bool"
    if isinstance(expr, float):
        return "Number"
    if isinstance(expr, Symbol):
        return "Symbol"
    if isinstance(expr, list):
        return "List"
    if isinstance(expr, Closure):
        return "Closure"
    if isinstance(expr, Macro):
        return "Macro"
    if isinstance(expr, Primitive):
        return "Primitive"
    raise LinslInternalError(f"Not a Linsl expression: {expr!r}")
