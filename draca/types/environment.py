"""Runtime environment for Draca.

The Environment stores bindings of fully-qualified names (NamespaceItem) to
evaluated Draca values, plus an ordered search path of namespaces that are "in
scope" for unqualified lookups. There is no parent chain: nested scopes are
built by cloning, so a clone never observes later changes to its source.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Optional

from draca import Expression
from draca.types.expression import expr_equal
from draca.types.namespace import Namespace, NamespaceItem

logger = logging.getLogger(__name__)


class Environment:
    """Mapping from qualified names to values with a namespace search path."""

    __slots__ = (
        "contents",
        "in_scope",
        "unqualified_fallback",
    )

    def __init__(self, unqualified_fallback: bool = False):
        self.contents: dict[NamespaceItem, Expression] = {}
        self.in_scope: list[Namespace] = []
        # Last-resort scan over every binding's short name; off unless asked for
        self.unqualified_fallback: bool = unqualified_fallback

    @classmethod
    def empty(cls, unqualified_fallback: bool = False) -> Environment:
        return cls(unqualified_fallback=unqualified_fallback)

    # --- Scopes ---
    @property
    def scopes(self) -> tuple[Namespace, ...]:
        return tuple(self.in_scope)

    def add_scope(self, ns: Namespace | str) -> None:
        """Append `ns` to the search path. Scopes are never removed."""
        self.in_scope.append(Namespace.coerce(ns))

    def with_scope(self, ns: Namespace | str) -> Environment:
        self.add_scope(ns)
        return self

    # --- Bindings ---
    def insert(self, key: NamespaceItem | str, value: Expression) -> None:
        """Bind `key` (e.g. "std::math::pi") to `value`, replacing any previous binding."""
        self.contents[NamespaceItem.coerce(key)] = value

    def resolve(self, name: str) -> Optional[NamespaceItem]:
        """Find the key `name` refers to.

        Order of resolution:
        1) `name` taken as already fully qualified
        2) `scope::name` for each in-scope namespace, in the order they were added
        3) if enabled, the first binding (in key order) whose short name is `name`
        Returns None if nothing matches.
        """
        exact = NamespaceItem.parse(name)
        if exact in self.contents:
            return exact

        for ns in self.in_scope:
            candidate = ns.join(name)
            if candidate in self.contents:
                return candidate

        if self.unqualified_fallback and not exact.is_qualified():
            for item in sorted(self.contents):
                if item.target == name:
                    logger.debug("resolved %s by short-name fallback to %s", name, item)
                    return item

        return None

    def get(self, name: str) -> Optional[Expression]:
        item = self.resolve(name)
        if item is None:
            return None
        return self.contents[item]

    def get_namespace_str(self, target: str) -> Optional[str]:
        """Return the qualified name `target` resolves to, or None."""
        item = self.resolve(target)
        return None if item is None else str(item)

    def __contains__(self, name: str) -> bool:
        return self.resolve(name) is not None

    # --- Enumeration (REPL completion) ---
    def full_path_and_name(self) -> list[tuple[str, str]]:
        return [(str(item), item.target) for item in sorted(self.contents)]

    def values(self) -> list[str]:
        return [item.target for item in sorted(self.contents)]

    # --- Copying ---
    def clone(self) -> Environment:
        """Value copy of the bindings and the search path.

        Stored values are never mutated in place, so copying the mapping is
        enough to freeze the current view.
        """
        env = Environment(self.unqualified_fallback)
        env.contents = dict(self.contents)
        env.in_scope = list(self.in_scope)
        return env

    __copy__ = clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Environment):
            return False
        if self is other:
            return True
        if self.in_scope != other.in_scope or self.contents.keys() != other.contents.keys():
            return False
        return all(expr_equal(v, other.contents[k]) for k, v in self.contents.items())

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self.contents)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write the bindings into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k in sorted(self.contents):
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {self.contents[k]!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment scopes=[")
            buffer.write(", ".join(str(ns) for ns in self.in_scope))
            buffer.write("] bindings=")
            buffer.write(str(len(self.contents)))
            buffer.write(">")
            return buffer.getvalue()
