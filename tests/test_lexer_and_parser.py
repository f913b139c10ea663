import pytest
from hypothesis import given, strategies as st

from draca.errors import DracaParseError
from draca.printer import display
from draca.reader.parser import lex, parse, TokenStream
from draca.types.expression import expr_equal
from draca.types.nil import Nil
from draca.types.quoted import Quoted
from draca.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a")]),
        ("'a", [("quote", "'"), ("atom", "a")]),
        ("(a b c)", [("lparen", "("), ("atom", "a"), ("atom", "b"), ("atom", "c"), ("rparen", ")")]),
        ('"hello world"', [("string", '"hello world"')]),
        (" ; comment\n a b", [("atom", "a"), ("atom", "b")]),
        ("std::math::pi", [("atom", "std::math::pi")]),
        ("(+ 1 2)", [("lparen", "("), ("atom", "+"), ("atom", "1"), ("atom", "2"), ("rparen", ")")]),
    ]
)
def test_lexer_basic(source, expected):
    tokens = [(kind, value) for kind, value, _ in lex(source)]
    assert tokens == expected


def test_lexer_reports_offsets():
    assert [offset for _, _, offset in lex("(a  bc)")] == [0, 1, 4, 6]


@pytest.mark.parametrize(
    "source, expected",
    [
        ("nil", Nil),
        ("#t", True),
        ("#f", False),
        ("123", 123.0),
        ("-45", -45.0),
        ("3.14", 3.14),
        ("1e3", 1000.0),
        (".5", 0.5),
        ("-", Symbol("-")),
        ("even?", Symbol("even?")),
        ("std::list::map", Symbol("std::list::map")),
        ('"hello"', "hello"),
        ('"a;b (c)"', "a;b (c)"),
        ('"no \\n escapes"', "no \\n escapes"),
        ("'a", Quoted(Symbol("a"))),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("()", []),
    ]
)
def test_parser(source, expected):
    result = parse(source)
    assert len(result) == 1
    assert expr_equal(result[0], expected)


def test_numbers_are_floats():
    (n,) = parse("42")
    assert isinstance(n, float)


def test_nested_lists():
    source = "((a b) (c d))"
    expected = [[Symbol('a'), Symbol('b')], [Symbol('c'), Symbol('d')]]
    assert parse(source) == [expected]


def test_multiple_top_level_forms():
    forms = parse("(define x 1) x ; trailing comment\n 2")
    assert forms == [[Symbol("define"), Symbol("x"), 1.0], Symbol("x"), 2.0]


def test_token_stream_steps_through_forms():
    stream = TokenStream("a (b)")
    assert stream.parse_expr() == Symbol("a")
    assert not stream.at_end()
    assert stream.parse_expr() == [Symbol("b")]
    assert stream.at_end()


@pytest.mark.parametrize(
    "source",
    [
        "",             # empty string
        "    ",         # spaces only
        "; comment",    # comment only
        "\n\n",
    ]
)
def test_empty_programs(source):
    assert parse(source) == []


@pytest.mark.parametrize("source", ["(a b", "((a)", "'", '"open', "(define (f x)\n  (+ x"])
def test_incomplete_input(source):
    with pytest.raises(DracaParseError) as excinfo:
        parse(source)
    assert excinfo.value.incomplete


def test_unbalanced_close_is_not_incomplete():
    with pytest.raises(DracaParseError) as excinfo:
        parse("(a))")
    assert not excinfo.value.incomplete
    assert excinfo.value.line == 1
    assert excinfo.value.column == 4


def test_error_position_spans_lines():
    with pytest.raises(DracaParseError) as excinfo:
        parse("(a)\n  )")
    assert (excinfo.value.line, excinfo.value.column) == (2, 3)
    assert "line 2, column 3" in str(excinfo.value)


# --- Printing then reading gives back an equal value ---

symbols = st.from_regex(r"[a-z][a-z0-9?!*<>=/-]{0,6}", fullmatch=True).filter(lambda s: s != "nil")
atoms = st.one_of(
    st.booleans(),
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(alphabet="abc xyz;()'019", max_size=10),
    symbols.map(Symbol),
    st.just(Nil),
)
expressions = st.recursive(
    atoms,
    lambda children: st.one_of(st.lists(children, max_size=4), children.map(Quoted)),
    max_leaves=12,
)


@given(expressions)
def test_display_then_parse(expr):
    (back,) = parse(display(expr))
    assert expr_equal(back, expr)
