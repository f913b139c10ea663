from __future__ import annotations

import sys


class Symbol:
    """A name in Draca source: `x`, `+`, `std::math::pi`.

    The text is kept whole, namespace qualifier included; the Environment
    splits it when resolving. Names are interned so that comparing the
    special-form keywords on every call stays cheap.
    """

    __slots__ = ("id",)

    def __init__(self, name: str):
        self.id: str = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Symbol({self.id!r})"

    def __str__(self) -> str:
        return self.id
