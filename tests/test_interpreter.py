import io
import logging

import pytest

from linsl.interpreter import Interpreter
from linsl.modules.prelude_loader import prelude_files
from linsl.types.errors import LinslSyntaxError, UnbalancedParens
from linsl.types.position import Position
from linsl.types.symbol import Symbol

S = Symbol


@pytest.fixture
def bare():
    """Interpreter with primitives only."""
    return Interpreter(prelude=None)


def test_eval_returns_last_value(bare):
    assert bare.eval("(+ 1 2 3)") == 6.0
    assert bare.eval("(define x 5) x") == 5.0
    assert bare.eval("") is None
    assert bare.eval("; just a comment") is None


def test_definitions_persist_between_calls(bare):
    bare.eval("(define x 5)")
    assert bare.eval("(* x 2)") == 10.0


def test_eval_next_reads_sources_in_order(bare):
    bare.feed_text("1 2", "first")
    bare.feed(io.StringIO("(+ 1 2)\n"), "second")
    assert [bare.eval_next() for _ in range(4)] == [1.0, 2.0, 3.0, None]


def test_error_discards_rest_of_unit(bare):
    bare.feed_text("(car 5) 7", "bad")
    bare.feed_text("8", "good")
    with pytest.raises(LinslSyntaxError):
        bare.eval_next()
    assert bare.eval_next() == 8.0
    assert bare.eval_next() is None


def test_unbalanced_input_then_recovery(bare):
    with pytest.raises(UnbalancedParens):
        bare.eval("(+ 1")
    assert bare.eval("(+ 1 1)") == 2.0


def test_top_level_symbol_error_gets_token_position(bare):
    with pytest.raises(LinslSyntaxError) as exc:
        bare.eval("\n  nope")
    assert exc.value.position == Position(2, 2)


def test_eval_stream(bare):
    assert bare.eval_stream(io.StringIO("(define y 2)\n(+ y 1)\n"), "file") == 3.0


def test_string_prelude():
    itp = Interpreter(prelude="(define answer 42)")
    assert itp.eval("answer") == 42.0


def test_bundled_prelude_is_found():
    names = [p.name for p in prelude_files()]
    assert names[0] == "core.linsl"


def test_prelude_path_from_environment(tmp_path, monkeypatch):
    (tmp_path / "core.linsl").write_text("(define answer 1)\n", encoding="utf-8")
    (tmp_path / "extra.linsl").write_text("(define more (+ answer 1))\n", encoding="utf-8")
    monkeypatch.setenv("LINSL_PRELUDE_PATH", str(tmp_path))
    itp = Interpreter()
    assert itp.eval("more") == 2.0


def test_missing_prelude_falls_back_to_primitives(tmp_path, monkeypatch, caplog):
    monkeypatch.setenv("LINSL_PRELUDE_PATH", str(tmp_path))
    with caplog.at_level(logging.WARNING, logger="linsl.interpreter"):
        itp = Interpreter()
    assert "No prelude" in caplog.text
    assert itp.eval("(+ 1 1)") == 2.0
    with pytest.raises(LinslSyntaxError):
        itp.eval("(- 1 1)")


# -------------------------------
# Prelude behaviour
# -------------------------------
@pytest.mark.parametrize(
    "source,expected",
    [
        ("(- 10 4)", 6.0),
        ("(/ 1 4)", 0.25),
        ("(not #t)", False),
        ("(and #t #f)", False),
        ("(and #t #t)", True),
        ("(or #f #t)", True),
        ("(or #f #f)", False),
        ("(and #f (car 5))", False),
        ("(or #t (car 5))", True),
        ("(< 1 2)", True),
        ("(>= 2 2)", True),
        ("(<= 3 2)", False),
        ("(cons 1 '(2 3))", [1.0, 2.0, 3.0]),
        ("(length '(1 2 3))", 3.0),
        ("(length '())", 0.0),
        ("(nth 1 '(a b c))", S("b")),
        ("(map (lambda (x) (* x x)) '(1 2 3))", [1.0, 4.0, 9.0]),
        ("(filter (lambda (x) (> x 1)) '(1 2 3))", [2.0, 3.0]),
        ("(foldl + 0 '(1 2 3 4))", 10.0),
        ("(reverse '(1 2 3))", [3.0, 2.0, 1.0]),
        ("(when #t 1)", 1.0),
        ("(when #f 1)", []),
    ],
)
def test_prelude(interp, source, expected):
    assert interp.eval(source) == expected


def test_defun(interp):
    assert interp.eval("(defun square (x) (* x x))") == S("square")
    assert interp.eval("(square 7)") == 49.0
