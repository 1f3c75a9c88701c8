"""Data models for KubeInspect."""

from kubeinspect.models.property import (
    ObjectReference,
    PropertyNode,
    Reference,
    RenderHook,
    kind_of,
    object_identity,
    validate_depth,
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
