"""Detail behavior backed by Kubernetes manifests loaded from YAML files.

``ManifestCluster`` indexes objects from one or more YAML documents (``kind:
List`` documents are flattened) and answers the lookups the property builder
and reference resolvers need. ``ManifestDetailBehavior`` derives the property
tree and YAML form of the selected object from it.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from kubeinspect.behavior.detail_behavior import DetailBehavior, KubeObject
from kubeinspect.behavior.observable import Observable
from kubeinspect.behavior.properties import build_properties
from kubeinspect.errors import ObjectNotFoundError
from kubeinspect.models.property import kind_of, object_identity

if TYPE_CHECKING:
    from kubeinspect.inspector.scope import NavigationScope

logger = logging.getLogger(__name__)


def namespace_of(obj: Mapping[str, Any]) -> str:
    return str((obj.get("metadata") or {}).get("namespace") or "")


def name_of(obj: Mapping[str, Any]) -> str:
    return str((obj.get("metadata") or {}).get("name") or "")


def _labels_match(selector: Mapping[str, Any], labels: Mapping[str, Any]) -> bool:
    match_labels = selector.get("matchLabels") or {}
    if not match_labels and not selector.get("matchExpressions"):
        return False
    if any(labels.get(key) != value for key, value in match_labels.items()):
        return False
    for expression in selector.get("matchExpressions") or []:
        key = expression.get("key")
        operator = expression.get("operator")
        values = expression.get("values") or []
        if operator == "In" and labels.get(key) not in values:
            return False
        if operator == "NotIn" and labels.get(key) in values:
            return False
        if operator == "Exists" and key not in labels:
            return False
        if operator == "DoesNotExist" and key in labels:
            return False
    return True


class ManifestCluster:
    """In-memory set of Kubernetes objects.

    Attributes:
        revision: Incremented whenever objects are added or deleted.
    """

    def __init__(self, objects: Iterable[Mapping[str, Any]] = ()) -> None:
        self._objects: list[dict[str, Any]] = []
        self._logs: dict[tuple[str, str, str], str] = {}
        self.revision: Observable[int] = Observable(0)
        for obj in objects:
            self._add(obj)

    @classmethod
    def from_yaml(cls, text: str) -> ManifestCluster:
        """Build a cluster from a (multi-document) YAML string."""
        return cls(doc for doc in yaml.safe_load_all(text) if doc)

    @classmethod
    def from_paths(cls, paths: Iterable[str | Path]) -> ManifestCluster:
        """Build a cluster from YAML files; directories are searched for ``*.yaml``/``*.yml``."""
        cluster = cls()
        for path in paths:
            path = Path(path)
            files = sorted([*path.glob("*.yaml"), *path.glob("*.yml")]) if path.is_dir() else [path]
            for file in files:
                logger.debug(f"Loading manifests from {file}")
                with file.open(encoding="utf-8") as handle:
                    for doc in yaml.safe_load_all(handle):
                        if doc:
                            cluster._add(doc)
        cluster.revision.update(cluster.revision.value + 1)
        return cluster

    def _add(self, obj: Mapping[str, Any]) -> None:
        if not isinstance(obj, Mapping) or not kind_of(obj):
            logger.warning(f"Skipping document without a kind: {str(obj)[:80]!r}")
            return
        if str(kind_of(obj)).endswith("List"):
            for item in obj.get("items") or []:
                self._add(item)
            return
        self._objects.append(dict(obj))

    def add(self, obj: Mapping[str, Any]) -> None:
        self._add(obj)
        self.revision.update(self.revision.value + 1)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def objects(self, kind: str | None = None, namespace: str | None = None) -> list[dict[str, Any]]:
        """Objects filtered by kind and namespace, in load order."""
        return [
            obj
            for obj in self._objects
            if (kind is None or kind_of(obj) == kind)
            and (namespace is None or namespace_of(obj) == namespace)
        ]

    def get(self, kind: str, name: str, namespace: str | None = None) -> dict[str, Any]:
        """Return one object.

        Raises:
            ObjectNotFoundError: If no such object was loaded.
        """
        for obj in self.objects(kind, namespace):
            if name_of(obj) == name:
                return obj
        location = f"{namespace}/{name}" if namespace else name
        raise ObjectNotFoundError(f"{kind} {location!r} not found")

    def pods_for_owner(self, owner: Mapping[str, Any]) -> list[dict[str, Any]]:
        """Pods selected by a workload's label selector (or owned by it)."""
        namespace = namespace_of(owner)
        selector = (owner.get("spec") or {}).get("selector") or {}
        uid = (owner.get("metadata") or {}).get("uid")
        pods = []
        for pod in self.objects("Pod", namespace):
            labels = (pod.get("metadata") or {}).get("labels") or {}
            owners = (pod.get("metadata") or {}).get("ownerReferences") or []
            if _labels_match(selector, labels) or (uid and any(ref.get("uid") == uid for ref in owners)):
                pods.append(pod)
        return pods

    def pods_on_node(self, node: Mapping[str, Any]) -> list[dict[str, Any]]:
        node_name = name_of(node)
        return [pod for pod in self.objects("Pod") if (pod.get("spec") or {}).get("nodeName") == node_name]

    def metrics_for(self, pod: Mapping[str, Any]) -> dict[str, Any] | None:
        """``PodMetrics`` of a pod, if loaded."""
        for metrics in self.objects("PodMetrics", namespace_of(pod)):
            if name_of(metrics) == name_of(pod):
                return metrics
        return None

    def set_logs(self, pod: Mapping[str, Any], container: str, text: str) -> None:
        self._logs[(namespace_of(pod), name_of(pod), container)] = text

    def logs_for(self, pod: Mapping[str, Any], container: str) -> str:
        return self._logs.get((namespace_of(pod), name_of(pod), container), "")

    def delete(self, obj: Mapping[str, Any]) -> None:
        """Remove an object.

        Raises:
            ObjectNotFoundError: If the object is not present.
        """
        identity = object_identity(obj)
        for index, candidate in enumerate(self._objects):
            if object_identity(candidate) == identity:
                del self._objects[index]
                self.revision.update(self.revision.value + 1)
                return
        raise ObjectNotFoundError(f"{kind_of(obj)} {name_of(obj)!r} not found")

    def __len__(self) -> int:
        return len(self._objects)


def dump_yaml(obj: Mapping[str, Any] | None) -> str:
    if not obj:
        return ""
    return yaml.safe_dump(dict(obj), sort_keys=False, default_flow_style=False)


class ManifestDetailBehavior(DetailBehavior):
    """Detail behavior over a ``ManifestCluster``."""

    cluster: ManifestCluster

    def __init__(self, cluster: ManifestCluster, scope: NavigationScope | None = None) -> None:
        super().__init__(cluster, scope)
        self.selected_object.subscribe(scope, self._on_selected_object_change)

    def _on_selected_object_change(self, obj: KubeObject | None) -> None:
        if obj is None:
            self.properties.update([])
            self.yaml.update("")
            return
        self.properties.update(build_properties(obj, self.cluster))
        self.yaml.update(dump_yaml(obj))

    def refresh(self) -> None:
        """Re-derive properties after the underlying objects changed."""
        self._on_selected_object_change(self.selected_object.value)

    def new_detail_behavior(self, scope: NavigationScope) -> ManifestDetailBehavior:
        return ManifestDetailBehavior(self.cluster, scope)

    async def delete_object(self, obj: KubeObject) -> None:
        self.cluster.delete(obj)

    async def fetch_logs(self, pod: KubeObject, container: Mapping[str, Any]) -> str:
        await asyncio.sleep(0)
        return self.cluster.logs_for(pod, str(container.get("name") or ""))


__all__ = [
    "ManifestCluster",
    "ManifestDetailBehavior",
    "dump_yaml",
    "name_of",
    "namespace_of",
]
