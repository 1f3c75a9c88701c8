"""Property tree model consumed by the inspector.

A property tree is what an upstream provider derives from one Kubernetes
object: top-level nodes become titled sections, their descendants become rows.
Nodes may carry a lazy ``Reference`` to a related object, the domain object
they were derived from (for augmentation), and a render hook.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from kubeinspect.constants import MAX_PROPERTY_LEVEL
from kubeinspect.errors import PropertyModelError

if TYPE_CHECKING:
    from kubeinspect.inspector.elements import RenderElement
    from kubeinspect.inspector.scope import NavigationScope

RenderHook = Callable[["RenderElement"], None]


@runtime_checkable
class Reference(Protocol):
    """Lazy link from a property to a related object."""

    async def resolve(self, scope: NavigationScope, cluster: Any) -> Mapping[str, Any]:
        """Resolve the related object; raise on failure."""
        ...


@dataclass(frozen=True)
class ObjectReference:
    """Reference to an object by kind, name and namespace.

    Resolves through the cluster handle's ``get(kind, name, namespace)``,
    which may be synchronous or a coroutine function.
    """

    kind: str
    name: str
    namespace: str | None = None
    api_version: str | None = None

    async def resolve(self, scope: NavigationScope, cluster: Any) -> Mapping[str, Any]:
        result = cluster.get(self.kind, self.name, self.namespace)
        if inspect.isawaitable(result):
            result = await result
        return result

    def __str__(self) -> str:
        if self.namespace:
            return f"{self.kind} {self.namespace}/{self.name}"
        return f"{self.kind} {self.name}"


@dataclass
class PropertyNode:
    """One entry in the displayed property tree.

    Attributes:
        name: Display label.
        value: Pre-formatted display text (usually empty for groups).
        children: Child nodes in display order.
        reference: Optional lazy link to a related object.
        object: Domain object the node was derived from, used for augmentation.
        render_hook: Callback invoked with the constructed element.
        group: Explicit group flag. ``None`` means "group iff it has children".
    """

    name: str
    value: str = ""
    children: list[PropertyNode] = field(default_factory=list)
    reference: Reference | None = None
    object: Mapping[str, Any] | None = None
    render_hook: RenderHook | None = None
    group: bool | None = None

    @property
    def is_group(self) -> bool:
        """Whether the node renders as a group rather than a value."""
        if self.group is not None:
            return self.group
        return bool(self.children)

    @property
    def depth(self) -> int:
        """Number of levels below this node (0 for a leaf)."""
        if not self.children:
            return 0
        return 1 + max(child.depth for child in self.children)


def kind_of(obj: Mapping[str, Any] | None) -> str | None:
    """Return the kind tag of a domain object, or None."""
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        kind = obj.get("kind")
    else:
        kind = getattr(obj, "kind", None)
    return str(kind) if kind else None


def object_identity(obj: Mapping[str, Any] | None) -> tuple[str, str, str, str] | None:
    """Return a stable identity tuple ``(kind, namespace, name, uid)`` for an object."""
    if obj is None:
        return None
    metadata = obj.get("metadata") or {}
    return (
        kind_of(obj) or "",
        str(metadata.get("namespace") or ""),
        str(metadata.get("name") or ""),
        str(metadata.get("uid") or ""),
    )


def validate_depth(nodes: PropertyNode | Sequence[PropertyNode]) -> None:
    """Check that top-level nodes respect the four-level nesting contract.

    Args:
        nodes: A top-level node or a sequence of them.

    Raises:
        PropertyModelError: If any node would sit below the deepest level.
    """
    if isinstance(nodes, PropertyNode):
        nodes = [nodes]
    for node in nodes:
        if node.depth > MAX_PROPERTY_LEVEL:
            raise PropertyModelError(
                f"Property {node.name!r} nests {node.depth + 1} levels deep; "
                f"at most {MAX_PROPERTY_LEVEL + 1} are supported"
            )


__all__ = [
    "ObjectReference",
    "PropertyNode",
    "Reference",
    "RenderHook",
    "kind_of",
    "object_identity",
    "validate_depth",
]
