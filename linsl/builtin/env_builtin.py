"""Built-in functions for the Linsl runtime environment.

Deliberately few: just enough arithmetic, comparison and list handling for
everything else (subtraction, division, boolean logic, map, ...) to be written
in Linsl itself, see linsl/prelude/core.linsl.

Every primitive takes the list of evaluated arguments and either returns a value
or raises LinslSyntaxError. Argument numbers in messages are 1-based.
"""
from __future__ import annotations

from linsl import LispValue
from linsl.printer import to_string
from linsl.types.environment import Environment
from linsl.types.errors import LinslSyntaxError
from linsl.types.primitive import Primitive
from linsl.types.symbol import Symbol
from linsl.types.variant import variant_name


# -------------------------------
# Argument helpers
# -------------------------------
def _is_number(x: LispValue) -> bool:
    return isinstance(x, float) and not isinstance(x, bool)


def expect_number(x: LispValue, index: int) -> float:
    if not _is_number(x):
        raise LinslSyntaxError(f"Expected number as argument {index}, found '{to_string(x)}'")
    return x


def expect_list(x: LispValue, index: int) -> list[LispValue]:
    if not isinstance(x, list):
        raise LinslSyntaxError(f"Expected list as argument {index}, found '{to_string(x)}'")
    return x


def expect_arity(name: str, args: list[LispValue], n: int) -> None:
    if len(args) != n:
        raise LinslSyntaxError(
            f"{name} expects {n} argument{'s' if n != 1 else ''}, got {len(args)}"
        )


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[LispValue]) -> float:
    total = 0.0
    for i, x in enumerate(args, 1):
        total += expect_number(x, i)
    return total


def mul(args: list[LispValue]) -> float:
    product = 1.0
    for i, x in enumerate(args, 1):
        product *= expect_number(x, i)
    return product


def neg(args: list[LispValue]) -> float:
    """(neg x) -> -x; (neg) negates 0."""
    if len(args) > 1:
        raise LinslSyntaxError(f"neg expects at most 1 argument, got {len(args)}")
    num = expect_number(args[0], 1) if args else 0.0
    return -num


def inv(args: list[LispValue]) -> float:
    if not args:
        raise LinslSyntaxError("No number to invert")
    expect_arity("inv", args, 1)
    num = expect_number(args[0], 1)
    if num == 0.0:
        raise LinslSyntaxError("Cannot invert 0")
    return 1.0 / num


# -------------------------------
# Comparison
# -------------------------------
def equals(args: list[LispValue]) -> bool:
    """Equality of two bools, two numbers or two symbols."""
    expect_arity("=", args, 2)
    a, b = args
    kind_a, kind_b = variant_name(a), variant_name(b)
    if kind_a != kind_b or kind_a not in ("Bool", "Number", "Symbol"):
        raise LinslSyntaxError(
            "Can only compare expressions of the same type, and only bools, numbers and symbols; "
            f"got {kind_a} and {kind_b}"
        )
    return a == b


def greater(args: list[LispValue]) -> bool:
    expect_arity(">", args, 2)
    return expect_number(args[0], 1) > expect_number(args[1], 2)


# -------------------------------
# List operations
# -------------------------------
def car(args: list[LispValue]) -> LispValue:
    expect_arity("car", args, 1)
    xs = expect_list(args[0], 1)
    if not xs:
        return []
    return xs[0]


def cdr(args: list[LispValue]) -> list[LispValue]:
    expect_arity("cdr", args, 1)
    xs = expect_list(args[0], 1)
    return list(xs[1:])


def list_builtin(args: list[LispValue]) -> list[LispValue]:
    return list(args)


def append(args: list[LispValue]) -> list[LispValue]:
    for i, x in enumerate(args, 1):
        expect_list(x, i)
    if len(args) == 1:
        return args[0]
    result: list[LispValue] = []
    for xs in args:
        result.extend(xs)
    return result


# -------------------------------
# Predicates
# -------------------------------
def is_empty(args: list[LispValue]) -> bool:
    expect_arity("empty?", args, 1)
    x = args[0]
    return isinstance(x, list) and not x


def same_type(args: list[LispValue]) -> bool:
    expect_arity("eqt?", args, 2)
    return variant_name(args[0]) == variant_name(args[1])


# -------------------------------
# Registration
# -------------------------------
PRIMITIVES: dict[str, Primitive] = {
    name: Primitive(name, fn)
    for name, fn in (
        ("+", add),
        ("*", mul),
        ("neg", neg),
        ("inv", inv),
        ("=", equals),
        (">", greater),
        ("car", car),
        ("cdr", cdr),
        ("list", list_builtin),
        ("append", append),
        ("empty?", is_empty),
        ("eqt?", same_type),
    )
}


def register(env: Environment) -> None:
    """Seed `env` (normally the root scope) with the primitive table."""
    env.update({Symbol(name): prim for name, prim in PRIMITIVES.items()})
