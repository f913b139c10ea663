from __future__ import annotations

from draca import Expression


class Quoted:
    """A form whose evaluation is suppressed: `'x` reads as Quoted(x)."""

    __slots__ = ("expr",)

    def __init__(self, expr: Expression):
        self.expr: Expression = expr

    def __eq__(self, other: object) -> bool:
        from draca.types.expression import expr_equal
        return isinstance(other, Quoted) and expr_equal(self.expr, other.expr)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        from draca.printer import display
        return display(self)
