"""Variant-aware helpers over Draca expressions.

Python's own `==` conflates `True` with `1.0` and knows nothing about Quoted;
the language needs each variant to compare only with its own kind.
"""

from __future__ import annotations

import math

from draca import Expression
from draca.types.nil import NilType
from draca.types.procedure import Primitive, Procedure
from draca.types.quoted import Quoted
from draca.types.symbol import Symbol


def is_bool(x: Expression) -> bool:
    return isinstance(x, bool)


def is_number(x: Expression) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def is_string(x: Expression) -> bool:
    return isinstance(x, str)


def kind_of(x: Expression) -> str:
    """Name of the variant, as used in error messages."""
    if is_bool(x):
        return "bool"
    if is_number(x):
        return "number"
    if isinstance(x, Symbol):
        return "symbol"
    if is_string(x):
        return "string"
    if isinstance(x, NilType):
        return "nil"
    if isinstance(x, list):
        return "list"
    if isinstance(x, Quoted):
        return "quoted"
    if isinstance(x, Primitive):
        return "fn"
    if isinstance(x, Procedure):
        return "function"
    return type(x).__name__


def expr_equal(a: Expression, b: Expression) -> bool:
    """Structural equality where different variants are never equal."""
    if a is b:
        # NaN is the one value not equal to itself
        return not (is_number(a) and math.isnan(a))
    if is_bool(a) or is_bool(b):
        return is_bool(a) and is_bool(b) and a == b
    if is_number(a) or is_number(b):
        return is_number(a) and is_number(b) and a == b
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(expr_equal(x, y) for x, y in zip(a, b))
    if type(a) is not type(b):
        return False
    return a == b
