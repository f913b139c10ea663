"""Callable values for Draca: native primitives and user-defined closures."""

from __future__ import annotations

from typing import TYPE_CHECKING

from draca import Expression, PrimitiveFn
from draca.types.symbol import Symbol

if TYPE_CHECKING:
    from draca.types.environment import Environment


class Primitive:
    """A native function. Receives the evaluated arguments and nothing else.

    Primitives never see the Environment; they validate their own arity and
    argument types and raise DracaInvalidArgument / DracaTypeMismatch.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[Expression]) -> Expression:
        return self.fn(args)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Primitive) and self.fn is other.fn

    def __hash__(self) -> int:
        return hash(self.fn)

    def __repr__(self) -> str:
        return f"<fn {self.name}>"


class Procedure:
    """A first-class closure with parameters, body forms, and a captured environment.

    `env` is a private clone of the defining environment, so later changes to
    the defining scope are not visible here. `name` is set when the procedure
    is bound by `define` and is rebound on every call to allow recursion.
    """

    __slots__ = ("params", "body", "env", "name")

    def __init__(
        self,
        params: list[Symbol],
        body: list[Expression],
        env: Environment,
        name: str | None = None,
    ):
        self.params: list[Symbol] = list(params)
        self.body: list[Expression] = list(body)
        self.env: Environment = env
        self.name: str | None = name

    @property
    def arity(self) -> int:
        return len(self.params)

    def named(self, name: str) -> Procedure:
        """Return a copy of this procedure carrying `name`."""
        return Procedure(self.params, self.body, self.env, name)

    def __eq__(self, other: object) -> bool:
        from draca.types.expression import expr_equal
        if not isinstance(other, Procedure):
            return False
        if self is other:
            return True
        return (
            self.params == other.params
            and expr_equal(self.body, other.body)
            and self.env == other.env
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        from draca.printer import display
        return display(self)
