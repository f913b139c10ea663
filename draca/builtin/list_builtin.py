"""List primitives (std::list).

Lists are Python lists. A quoted list (`'(1 2 3)`) is accepted wherever a list
is expected and nil reads as the empty list. None of these mutate their input.
"""

from __future__ import annotations

from draca import Expression
from draca.errors import DracaArityError, DracaTypeMismatch
from draca.types.expression import kind_of
from draca.types.nil import Nil
from draca.types.quoted import Quoted


def extract_list(expr: Expression) -> list[Expression]:
    """Return the elements of a list, quoted list or nil, as a new Python list."""
    if isinstance(expr, Quoted):
        expr = expr.expr
    if isinstance(expr, list):
        return list(expr)
    if expr is Nil:
        return []
    raise DracaTypeMismatch("list", kind_of(expr))


def car(args: list[Expression]) -> Expression:
    """First element; nil for an empty list, '() for a non-list."""
    if not args:
        raise DracaArityError("car", "requires one argument")
    xs = args[0]
    if isinstance(xs, Quoted):
        xs = xs.expr
    if isinstance(xs, list):
        return xs[0] if xs else Nil
    return Quoted([])


def cdr(args: list[Expression]) -> Expression:
    """Everything after the first element; nil when nothing remains."""
    if not args:
        raise DracaArityError("cdr", "requires one argument")
    xs = args[0]
    if isinstance(xs, Quoted):
        xs = xs.expr
    if isinstance(xs, list):
        return xs[1:] if xs else Nil
    if xs is Nil:
        return Nil
    raise DracaTypeMismatch("list", kind_of(xs))


def cons(args: list[Expression]) -> Expression:
    """(cons head tail): a new list with `head` in front of `tail`."""
    if len(args) != 2:
        raise DracaArityError("cons", "requires exactly two arguments")
    head, tail = args
    return [head, *extract_list(tail)]


def append(args: list[Expression]) -> Expression:
    """(append xs ys): concatenation of two lists."""
    if len(args) != 2:
        raise DracaArityError("append", "requires exactly two arguments")
    return extract_list(args[0]) + extract_list(args[1])


def make_list(args: list[Expression]) -> Expression:
    """(list a b ...): the arguments as a list."""
    return list(args)


def is_empty(args: list[Expression]) -> Expression:
    """(empty? xs): #t for an empty list or nil, #f for anything else."""
    if len(args) != 1:
        return False
    xs = args[0]
    if isinstance(xs, Quoted):
        xs = xs.expr
    if isinstance(xs, list):
        return not xs
    return xs is Nil


def length(args: list[Expression]) -> Expression:
    """(len xs) is the length of xs; with several arguments, their count."""
    if not args:
        return 0.0
    if len(args) == 1:
        return float(len(extract_list(args[0])))
    return float(len(args))
