import io

import pytest
from hypothesis import given, strategies as st

from linsl.reader.tokenizer import Tokenizer, lex_line, count_parens
from linsl.types.errors import LinslInternalError, UnbalancedParens
from linsl.types.position import Position


def _lexemes(line):
    return [tok.lexeme for tok in lex_line(line, 1)]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", ["a"]),
        ("(+ 1 2)", ["(", "+", "1", "2", ")"]),
        ("'a", ["'", "a"]),
        ("`(a ,b ,@c)", ["`", "(", "a", ",", "b", ",@", "c", ")"]),
        ("(a)(b)", ["(", "a", ")", "(", "b", ")"]),
        ("#t #f", ["#t", "#f"]),
        ("empty? eqt? -1.5e3", ["empty?", "eqt?", "-1.5e3"]),
        ("a ; comment (with parens)", ["a"]),
        ("; only a comment", []),
        ("   \t  ", []),
        ("x;y", ["x"]),
    ],
)
def test_lex_line(source, expected):
    assert _lexemes(source) == expected


def test_token_positions():
    tokens = lex_line("(+ 1  22)", 3)
    assert [t.position for t in tokens] == [
        Position(3, 0), Position(3, 1), Position(3, 3), Position(3, 6), Position(3, 8)
    ]


def test_count_parens_ignores_comments():
    assert count_parens(["(a (b)) ; )))\n", "(c\n"]) == (3, 2)


def test_tokens_across_lines_and_sources():
    tz = Tokenizer()
    tz.add_text("(a\n  b)", "one")
    tz.add_text("c", "two")
    tokens = list(tz)
    assert [t.lexeme for t in tokens] == ["(", "a", "b", ")", "c"]
    # line numbers restart with every source
    assert [t.position for t in tokens] == [
        Position(1, 0), Position(1, 1), Position(2, 2), Position(2, 3), Position(1, 0)
    ]
    assert tz.next_token() is None


def test_peek_is_idempotent():
    tz = Tokenizer()
    tz.add_text("x y")
    assert tz.peek() == tz.peek()
    assert tz.peek().lexeme == "x"
    assert tz.next_token().lexeme == "x"
    assert tz.peek().lexeme == "y"


def test_empty_input():
    tz = Tokenizer()
    assert tz.peek() is None
    tz.add_text("")
    tz.add_text("; nothing here\n\n")
    assert tz.next_token() is None


def test_sources_can_be_added_later():
    tz = Tokenizer()
    tz.add_text("a")
    assert tz.next_token().lexeme == "a"
    assert tz.next_token() is None
    tz.add_source(io.StringIO("b\n"), "later")
    assert tz.next_token().lexeme == "b"


def test_unbalanced_unit_is_rejected_before_any_token():
    tz = Tokenizer()
    tz.add_text("(a (b)\nc")
    tz.add_text("d")
    with pytest.raises(UnbalancedParens) as exc:
        tz.peek()
    assert (exc.value.open_count, exc.value.close_count) == (2, 1)
    # the broken unit is gone; reading continues with the next source
    assert tz.next_token().lexeme == "d"


def test_extra_closing_paren_is_unbalanced():
    tz = Tokenizer()
    tz.add_text("a)")
    with pytest.raises(UnbalancedParens):
        tz.next_token()


class _BrokenStream:
    def readline(self):
        raise OSError("disk on fire")


def test_io_failure_is_internal_error():
    tz = Tokenizer()
    tz.add_source(_BrokenStream(), "broken")
    with pytest.raises(LinslInternalError) as exc:
        tz.next_token()
    assert "broken" in str(exc.value)
    assert isinstance(exc.value.__cause__, OSError)


def test_discard_unit_drops_rest_of_current_source():
    tz = Tokenizer()
    tz.add_text("a b\nc")
    tz.add_text("d")
    assert tz.next_token().lexeme == "a"
    tz.discard_unit()
    assert [t.lexeme for t in tz] == ["d"]


# -------------------------------
# Hypothesis tests
# -------------------------------
atom_strat = st.text(
    alphabet="abcxyz+-*/<>=?!#.0123456789", min_size=1, max_size=8
)


@given(st.lists(atom_strat, max_size=10))
def test_atoms_survive_tokenizing(atoms):
    tz = Tokenizer()
    tz.add_text("  ".join(atoms))
    assert [t.lexeme for t in tz] == atoms


@given(st.lists(atom_strat, max_size=6), st.integers(min_value=0, max_value=4))
def test_balanced_nesting_never_rejected(atoms, depth):
    source = "(" * depth + " ".join(atoms) + ")" * depth
    tz = Tokenizer()
    tz.add_text(source)
    lexemes = [t.lexeme for t in tz]
    assert lexemes.count("(") == lexemes.count(")") == depth


def test_broken_source_is_dropped():
    tz = Tokenizer()
    tz.add_source(_BrokenStream(), "broken")
    tz.add_text("ok")
    with pytest.raises(LinslInternalError):
        tz.peek()
    assert tz.next_token().lexeme == "ok"
