"""Data providers feeding the inspector."""

from kubeinspect.behavior.detail_behavior import DetailBehavior, KubeObject
from kubeinspect.behavior.manifest import ManifestCluster, ManifestDetailBehavior
from kubeinspect.behavior.observable import Observable
from kubeinspect.behavior.properties import build_properties

__all__ = [
    "DetailBehavior",
    "KubeObject",
    "ManifestCluster",
    "ManifestDetailBehavior",
    "Observable",
    "build_properties",
]
