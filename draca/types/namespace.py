"""Qualified names for Draca bindings.

A Namespace is the `::`-joined qualifier in front of a name (`std::math`), and a
NamespaceItem is a fully-qualified binding key (`std::math` + `pi`). Both are
immutable and totally ordered, so the environment can enumerate its bindings
deterministically.
"""

from __future__ import annotations

from dataclasses import dataclass

SEPARATOR = "::"


@dataclass(frozen=True, order=True)
class Namespace:
    frags: tuple[str, ...] = ()

    @classmethod
    def parse(cls, value: str) -> Namespace:
        """Split `a::b::c` into its fragments. The empty string is the root namespace."""
        if not value:
            return cls()
        return cls(tuple(value.split(SEPARATOR)))

    @classmethod
    def coerce(cls, value: Namespace | str) -> Namespace:
        return value if isinstance(value, Namespace) else cls.parse(value)

    def push(self, frag: str) -> Namespace:
        return Namespace(self.frags + (frag,))

    def join(self, name: str) -> NamespaceItem:
        """Qualify `name` with this namespace. `name` may itself be qualified."""
        inner = NamespaceItem.parse(name)
        return NamespaceItem(Namespace(self.frags + inner.namespace.frags), inner.target)

    def is_root(self) -> bool:
        return not self.frags

    def __str__(self) -> str:
        return SEPARATOR.join(self.frags)


@dataclass(frozen=True, order=True)
class NamespaceItem:
    namespace: Namespace
    target: str

    @classmethod
    def parse(cls, value: str) -> NamespaceItem:
        *frags, target = value.split(SEPARATOR)
        return cls(Namespace(tuple(frags)), target)

    @classmethod
    def coerce(cls, value: NamespaceItem | str) -> NamespaceItem:
        return value if isinstance(value, NamespaceItem) else cls.parse(value)

    @classmethod
    def in_namespace(cls, namespace: Namespace | str, target: str) -> NamespaceItem:
        return cls(Namespace.coerce(namespace), target)

    def is_qualified(self) -> bool:
        return not self.namespace.is_root()

    def __str__(self) -> str:
        if self.namespace.is_root():
            return self.target
        return f"{self.namespace}{SEPARATOR}{self.target}"
