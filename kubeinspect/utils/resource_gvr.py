"""Group/version/resource helpers for Kubernetes objects."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# Kinds whose plural is not simply lowercase + "s".
_IRREGULAR_PLURALS: dict[str, str] = {
    "Endpoints": "endpoints",
    "Ingress": "ingresses",
    "IngressClass": "ingressclasses",
    "NetworkPolicy": "networkpolicies",
    "PodSecurityPolicy": "podsecuritypolicies",
    "PriorityClass": "priorityclasses",
    "StorageClass": "storageclasses",
    "RuntimeClass": "runtimeclasses",
    "PodMetrics": "pods",
    "NodeMetrics": "nodes",
}


def resource_plural(kind: str) -> str:
    """Return the REST resource name for a kind (e.g. "Deployment" -> "deployments")."""
    if kind in _IRREGULAR_PLURALS:
        return _IRREGULAR_PLURALS[kind]
    lowered = kind.lower()
    if lowered.endswith("s"):
        return lowered + "es"
    if lowered.endswith("y"):
        return lowered[:-1] + "ies"
    return lowered + "s"


def resource_gvr(obj: Mapping[str, Any] | None) -> str:
    """Format the group/version/resource of an object.

    Mirrors the ``GroupVersionResource.String()`` form used by client-go,
    e.g. ``"apps/v1, Resource=deployments"`` and ``"/v1, Resource=pods"``.

    Args:
        obj: Kubernetes object mapping (needs ``apiVersion`` and ``kind``).

    Returns:
        The formatted GVR, or an empty string for a missing object.
    """
    if not obj:
        return ""
    api_version = str(obj.get("apiVersion") or "v1")
    group, _, version = api_version.rpartition("/")
    kind = str(obj.get("kind") or "")
    return f"{group}/{version}, Resource={resource_plural(kind)}"


__all__ = [
    "resource_gvr",
    "resource_plural",
]
