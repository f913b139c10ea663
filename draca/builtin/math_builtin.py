"""Numeric primitives (std::math).

Every number is a float and arithmetic follows IEEE-754: dividing by zero gives
an infinity, invalid operations give NaN. numpy float64 provides exactly those
semantics, so the folds run on np.float64 with floating-point warnings off.
"""

from __future__ import annotations

import math

import numpy as np

from draca import Expression
from draca.errors import DracaArityError, DracaInvalidArgument, DracaTypeMismatch
from draca.types.expression import is_number, kind_of


def _numbers(name: str, args: list[Expression], minimum: int) -> list[float]:
    if len(args) < minimum:
        raise DracaArityError(name, f"requires at least {minimum} argument(s), got {len(args)}")
    for a in args:
        if not is_number(a):
            raise DracaTypeMismatch("number", kind_of(a))
    return [float(a) for a in args]


def _fold(name: str, args: list[Expression], op) -> float:
    start, *rest = _numbers(name, args, 1)
    acc = np.float64(start)
    with np.errstate(all="ignore"):
        for n in rest:
            acc = op(acc, np.float64(n))
    return float(acc)


def add(args: list[Expression]) -> Expression:
    """Sum of all arguments."""
    return _fold("+", args, np.add)


def sub(args: list[Expression]) -> Expression:
    """Subtract the rest from the first; a single argument is negated."""
    if len(args) == 1:
        (n,) = _numbers("-", args, 1)
        return -n
    return _fold("-", args, np.subtract)


def mul(args: list[Expression]) -> Expression:
    """Product of all arguments."""
    return _fold("*", args, np.multiply)


def div(args: list[Expression]) -> Expression:
    """Divide left to right. Division by zero yields an infinity (or NaN for 0/0)."""
    return _fold("/", args, np.divide)


def _binary(name: str, args: list[Expression]) -> tuple[float, float]:
    if len(args) != 2:
        raise DracaArityError(name, f"requires exactly 2 arguments, got {len(args)}")
    a, b = _numbers(name, args, 2)
    return a, b


def rem(args: list[Expression]) -> Expression:
    """(rem a b): remainder truncated toward zero; the sign follows `a`."""
    a, b = _binary("rem", args)
    with np.errstate(all="ignore"):
        return float(np.fmod(a, b))


def power(args: list[Expression]) -> Expression:
    """(pow base exp). A negative base with a fractional exponent gives NaN."""
    a, b = _binary("pow", args)
    with np.errstate(all="ignore"):
        return float(np.power(np.float64(a), np.float64(b)))


# Anything wider does not fit in a float
MAX_SHIFT_BITS = 1024


def ash(args: list[Expression]) -> Expression:
    """(ash n count): arithmetic shift of round(n); a negative count shifts right."""
    a, b = _binary("ash", args)
    if not (math.isfinite(a) and math.isfinite(b)):
        raise DracaTypeMismatch("finite number", "non-finite number")
    n, count = round(a), round(b)
    if count < 0:
        return float(n >> min(-count, MAX_SHIFT_BITS))
    if n and n.bit_length() + count > MAX_SHIFT_BITS:
        raise DracaInvalidArgument("ash", f"shifting by {count} overflows a number")
    return float(n << count)


PI: float = math.pi
E: float = math.e
