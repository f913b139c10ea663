import pytest

from draca.printer import display, fmt_string, format_number
from draca.reader.parser import parse
from draca.types.environment import Environment
from draca.types.nil import Nil
from draca.types.procedure import Primitive, Procedure
from draca.types.quoted import Quoted
from draca.types.symbol import Symbol


@pytest.mark.parametrize(
    "value,expected",
    [
        (25.0, "25"),
        (3.14, "3.14"),
        (-2.5, "-2.5"),
        (0.1 + 0.2, "0.30000000000000004"),
        (1e21, "1000000000000000000000"),
        (float("inf"), "inf"),
        (float("-inf"), "-inf"),
        (float("nan"), "NaN"),
    ]
)
def test_format_number(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (True, "#t"),
        (False, "#f"),
        (Nil, "nil"),
        (Symbol("std::math::pi"), "std::math::pi"),
        ("hi there", '"hi there"'),
        ([], "()"),
        ([1.0, "a", [Symbol("b"), Nil]], '(1 "a" (b nil))'),
        (Quoted(Symbol("x")), "'x"),
        (Quoted([1.0, 2.0]), "'(1 2)"),
    ]
)
def test_display(value, expected):
    assert display(value) == expected


def test_fmt_string_leaves_strings_raw():
    assert fmt_string("hi") == "hi"
    assert fmt_string(["a", 2.0]) == "(a 2)"
    assert fmt_string(Quoted("s")) == "'s"


def test_functions():
    body = parse("(* x x)")
    square = Procedure([Symbol("x")], body, Environment.empty(), "square")
    assert display(square) == "<fn>(x): (* x x)"
    assert fmt_string(square) == "<fn>"

    prim = Primitive("std::math::+", sum)
    assert display(prim) == "<fn std::math::+>"
    assert fmt_string(prim) == "<fn>"
