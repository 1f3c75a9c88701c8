"""Expansion state of collapsible rows, keyed by structural position.

The store lives as long as one inspector view. Because keys describe where a
row sits in the tree (not which widget drew it), expanded rows stay expanded
across full rebuilds of the property tree.
"""

from __future__ import annotations

from typing import NamedTuple


class ExpansionKey(NamedTuple):
    """Structural identity of a collapsible row.

    Attributes:
        resource: Group/version/resource of the root object.
        identity: Root object identity, ``kind/namespace/name/uid``; objects
            without a uid still differ by namespace and name.
        path: Names from the top-level section down to the row itself.
        level: Nesting level of the row.
    """

    resource: str
    identity: str
    path: tuple[str, ...]
    level: int

    def __str__(self) -> str:
        return "-".join([self.resource, self.identity, "/".join(self.path), str(self.level)])


class ExpansionStore:
    """Per-view mapping of ``ExpansionKey`` to expanded/collapsed."""

    def __init__(self, default: bool = False) -> None:
        self._default = default
        self._expanded: dict[ExpansionKey, bool] = {}

    def get(self, key: ExpansionKey, default: bool | None = None) -> bool:
        """Return the stored flag, or the default (collapsed) for unknown keys."""
        if default is None:
            default = self._default
        return self._expanded.get(key, default)

    def set(self, key: ExpansionKey, expanded: bool) -> None:
        self._expanded[key] = expanded

    def clear(self) -> None:
        self._expanded.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._expanded

    def __len__(self) -> int:
        return len(self._expanded)


__all__ = [
    "ExpansionKey",
    "ExpansionStore",
]
