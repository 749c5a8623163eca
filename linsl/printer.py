"""Canonical textual rendering of Linsl expressions."""

from __future__ import annotations

import math
from io import StringIO

from linsl import LispValue
from linsl.types.symbol import Symbol
from linsl.types.closure import Closure, Macro
from linsl.types.primitive import Primitive


def format_number(v: float) -> str:
    if math.isinf(v):
        return "inf" if v > 0 else "-inf"
    if math.isnan(v):
        return "NaN"
    if v.is_integer():
        return str(int(v))
    return repr(v)


def to_string(expr: LispValue) -> str:
    with StringIO() as buffer:
        _write(expr, buffer)
        return buffer.getvalue()


def _write(expr: LispValue, buffer: StringIO) -> None:
    if isinstance(expr, bool):
        buffer.write("#t" if expr else "#f")
    elif isinstance(expr, float):
        buffer.write(format_number(expr))
    elif isinstance(expr, Symbol):
        buffer.write(expr.id)
    elif isinstance(expr, list):
        buffer.write("(")
        for i, item in enumerate(expr):
            if i:
                buffer.write(" ")
            _write(item, buffer)
        buffer.write(")")
    elif isinstance(expr, Closure):
        buffer.write("(lambda ")
        _write(expr.params, buffer)
        buffer.write(", ")
        _write(expr.body, buffer)
        buffer.write(")")
    elif isinstance(expr, Macro):
        buffer.write("(macro ")
        _write(expr.params, buffer)
        buffer.write(", ")
        _write(expr.body, buffer)
        buffer.write(")")
    elif isinstance(expr, Primitive):
        buffer.write(f"#<primitive {expr.name}>")
    else:
        # Foreign values only show up through embedding code; keep them readable.
        buffer.write(repr(expr))
