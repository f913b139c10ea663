"""Comparison and boolean primitives (std::cmp and the root `not`)."""

from __future__ import annotations

import operator
from typing import Callable

from draca import Expression
from draca.errors import DracaArityError, DracaTypeMismatch
from draca.types.expression import expr_equal, is_bool, is_number, is_string, kind_of
from draca.types.nil import Nil


def _pair(name: str, args: list[Expression]) -> tuple[Expression, Expression]:
    if len(args) != 2:
        raise DracaArityError(name, f"requires two arguments, got {len(args)}")
    return args[0], args[1]


def eq(args: list[Expression]) -> Expression:
    """(= a b): structural equality; values of different kinds are never equal."""
    a, b = _pair("=", args)
    return expr_equal(a, b)


def ne(args: list[Expression]) -> Expression:
    """(/= a b): negation of `=`."""
    a, b = _pair("/=", args)
    return not expr_equal(a, b)


def _ordered(name: str, op: Callable[[Expression, Expression], bool]):
    def compare(args: list[Expression]) -> Expression:
        a, b = _pair(name, args)
        same_kind = (
            (is_number(a) and is_number(b))
            or (is_string(a) and is_string(b))
            or (is_bool(a) and is_bool(b))
        )
        if not same_kind:
            raise DracaTypeMismatch(kind_of(a), kind_of(b))
        return bool(op(a, b))

    compare.__name__ = op.__name__
    compare.__doc__ = f"({name} a b) for two numbers, two strings or two bools."
    return compare


gt = _ordered(">", operator.gt)
lt = _ordered("<", operator.lt)
ge = _ordered(">=", operator.ge)
le = _ordered("<=", operator.le)


def logical_not(args: list[Expression]) -> Expression:
    """(not b): negates a bool; nil stays nil."""
    if not args:
        raise DracaArityError("not", "requires a single argument")
    val = args[0]
    if val is Nil:
        return Nil
    if is_bool(val):
        return not val
    raise DracaTypeMismatch("bool or nil", kind_of(val))
