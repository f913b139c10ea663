"""Text renderings of Draca values.

Two renderings exist because primitives and the REPL want different things:

- fmt_string: the raw form. Strings are their characters. Used by `format`,
  `println` and `list->string`.
- display: the echo form. Strings are double-quoted. Used by the REPL and
  `deconst-fn`.
"""

from __future__ import annotations

import math
from io import StringIO

import numpy as np

from draca import Expression
from draca.types.nil import NilType
from draca.types.procedure import Primitive, Procedure
from draca.types.quoted import Quoted
from draca.types.symbol import Symbol


def format_number(n: float) -> str:
    """Shortest round-trip positional text, never scientific notation: 25.0 -> "25"."""
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    return np.format_float_positional(float(n), trim="-")


def _write(buffer: StringIO, expr: Expression, quote_strings: bool) -> None:
    if isinstance(expr, bool):
        buffer.write("#t" if expr else "#f")
    elif isinstance(expr, (int, float)):
        buffer.write(format_number(expr))
    elif isinstance(expr, str):
        if quote_strings:
            buffer.write(f'"{expr}"')
        else:
            buffer.write(expr)
    elif isinstance(expr, Symbol):
        buffer.write(expr.id)
    elif isinstance(expr, NilType):
        buffer.write("nil")
    elif isinstance(expr, Quoted):
        buffer.write("'")
        _write(buffer, expr.expr, quote_strings)
    elif isinstance(expr, list):
        buffer.write("(")
        for i, item in enumerate(expr):
            if i:
                buffer.write(" ")
            _write(buffer, item, quote_strings)
        buffer.write(")")
    elif isinstance(expr, Procedure):
        if not quote_strings:
            buffer.write("<fn>")
            return
        buffer.write("<fn>(")
        buffer.write(", ".join(p.id for p in expr.params))
        buffer.write("): ")
        buffer.write("\n".join(display(form) for form in expr.body))
    elif isinstance(expr, Primitive):
        buffer.write(repr(expr) if quote_strings else "<fn>")
    else:
        buffer.write(str(expr))


def fmt_string(expr: Expression) -> str:
    with StringIO() as buffer:
        _write(buffer, expr, quote_strings=False)
        return buffer.getvalue()


def display(expr: Expression) -> str:
    with StringIO() as buffer:
        _write(buffer, expr, quote_strings=True)
        return buffer.getvalue()
