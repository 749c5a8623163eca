import pytest

from linsl.types.environment import Environment
from linsl.types.errors import LinslSyntaxError
from linsl.types.symbol import Symbol


def test_define_and_lookup():
    env = Environment()
    env.define(Symbol("x"), 1.0)
    assert env.lookup(Symbol("x")) == 1.0


def test_lookup_missing_is_none():
    assert Environment().lookup(Symbol("nope")) is None


def test_lookup_walks_outer_chain():
    root = Environment()
    root.define(Symbol("x"), 1.0)
    child = Environment(outer=Environment(outer=root))
    assert child.lookup(Symbol("x")) == 1.0
    assert child.find(Symbol("x")) is root


def test_inner_scope_shadows_without_mutating_outer():
    root = Environment()
    root.define(Symbol("x"), 1.0)
    child = Environment(outer=root)
    child.define(Symbol("x"), 2.0)
    assert child.lookup(Symbol("x")) == 2.0
    assert root.lookup(Symbol("x")) == 1.0


def test_define_requires_symbol():
    with pytest.raises(LinslSyntaxError):
        Environment().define("x", 1.0)


def test_update_bulk_defines():
    env = Environment()
    env.update({Symbol("a"): 1.0, Symbol("b"): 2.0})
    assert env.lookup(Symbol("b")) == 2.0
    assert "a: 1.0" in str(env)
