"""Contract between the inspector and whatever supplies object data.

A detail behavior holds three reactive cells for one inspector view: the
selected object, its property tree, and its YAML form. The inspector only
reads these cells; producing them (watching a cluster, building properties,
serializing) is the behavior's job.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from kubeinspect.behavior.observable import Observable

if TYPE_CHECKING:
    from kubeinspect.inspector.scope import NavigationScope
    from kubeinspect.models.property import PropertyNode

KubeObject = Mapping[str, Any]


class DetailBehavior(ABC):
    """Data provider for one inspector view.

    Attributes:
        cluster: Handle passed to reference resolvers.
        scope: Scope bounding this behavior's subscriptions.
        selected_object: The inspected object.
        properties: Top-level property nodes of the selected object.
        yaml: Textual form of the selected object.
    """

    def __init__(self, cluster: Any, scope: NavigationScope | None = None) -> None:
        self.cluster = cluster
        self.scope = scope
        self.selected_object: Observable[KubeObject | None] = Observable(None)
        self.properties: Observable[list[PropertyNode]] = Observable([])
        self.yaml: Observable[str] = Observable("")

    @abstractmethod
    def new_detail_behavior(self, scope: NavigationScope) -> DetailBehavior:
        """Create a sibling behavior for a pushed view, bound to ``scope``."""

    @abstractmethod
    async def delete_object(self, obj: KubeObject) -> None:
        """Delete ``obj``; raise on failure."""

    async def fetch_logs(self, pod: KubeObject, container: Mapping[str, Any]) -> str:
        """Return the logs of one container of ``pod``."""
        raise NotImplementedError(f"{type(self).__name__} does not provide logs")


__all__ = [
    "DetailBehavior",
    "KubeObject",
]
