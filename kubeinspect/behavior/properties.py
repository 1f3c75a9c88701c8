"""Build property trees from Kubernetes objects.

Trees follow the inspector's four-level layout: top-level nodes are sections,
their children rows, and so on. Nested domain objects the inspector augments
(containers, pods) are attached through ``PropertyNode.object``; containers
are tagged with ``kind: Container`` since the API leaves them untyped.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from kubeinspect.constants import CPU_PROPERTY, MEMORY_PROPERTY, ResourceKind
from kubeinspect.models.property import ObjectReference, PropertyNode, kind_of

if TYPE_CHECKING:
    from kubeinspect.behavior.manifest import ManifestCluster

KubeObject = Mapping[str, Any]
SectionBuilder = Callable[[KubeObject, "ManifestCluster | None"], list[PropertyNode]]

_POD_OWNER_KINDS = {
    ResourceKind.DEPLOYMENT.value,
    ResourceKind.STATEFUL_SET.value,
    ResourceKind.DAEMON_SET.value,
    ResourceKind.REPLICA_SET.value,
    ResourceKind.JOB.value,
}


def _metadata(obj: KubeObject) -> Mapping[str, Any]:
    return obj.get("metadata") or {}


def _mapping_group(name: str, values: Mapping[str, Any] | None) -> PropertyNode:
    return PropertyNode(
        name=name,
        children=[PropertyNode(name=str(key), value=str(value)) for key, value in (values or {}).items()],
        group=True,
    )


def _pairs(name: str, values: Mapping[str, Any] | None) -> PropertyNode:
    """Level-2 group whose entries render as inline ``key: value`` pairs."""
    return _mapping_group(name, values)


# ============================================================================
# Common sections
# ============================================================================


def metadata_section(obj: KubeObject) -> PropertyNode:
    metadata = _metadata(obj)
    namespace = metadata.get("namespace")
    children = [PropertyNode(name="Name", value=str(metadata.get("name") or ""))]
    if namespace:
        children.append(PropertyNode(name="Namespace", value=str(namespace)))
    if metadata.get("creationTimestamp"):
        children.append(PropertyNode(name="Created", value=str(metadata["creationTimestamp"])))
    children.append(_mapping_group("Labels", metadata.get("labels")))
    children.append(_mapping_group("Annotations", metadata.get("annotations")))

    owners = [
        PropertyNode(
            name=str(ref.get("kind") or ""),
            value=str(ref.get("name") or ""),
            reference=ObjectReference(
                kind=str(ref.get("kind") or ""),
                name=str(ref.get("name") or ""),
                namespace=namespace,
                api_version=ref.get("apiVersion"),
            ),
        )
        for ref in metadata.get("ownerReferences") or []
    ]
    if owners:
        children.append(PropertyNode(name="Owners", children=owners, group=True))
    return PropertyNode(name="Metadata", children=children)


# ============================================================================
# Pods
# ============================================================================


def _env_node(env: Mapping[str, Any], namespace: str | None) -> PropertyNode:
    name = str(env.get("name") or "")
    source = env.get("valueFrom") or {}
    for key, kind in (("configMapKeyRef", "ConfigMap"), ("secretKeyRef", "Secret")):
        ref = source.get(key)
        if ref:
            return PropertyNode(
                name=name,
                value=f"{ref.get('name')}/{ref.get('key')}",
                reference=ObjectReference(kind=kind, name=str(ref.get("name") or ""), namespace=namespace),
            )
    if source.get("fieldRef"):
        return PropertyNode(name=name, value=str(source["fieldRef"].get("fieldPath") or ""))
    return PropertyNode(name=name, value=str(env.get("value") or ""))


def container_node(
    container: Mapping[str, Any],
    namespace: str | None,
    usage: Mapping[str, Any] | None = None,
) -> PropertyNode:
    """Group node for one container; ``usage`` adds Memory/CPU values."""
    children = [PropertyNode(name="Image", value=str(container.get("image") or ""))]
    if container.get("command"):
        children.append(PropertyNode(name="Command", value=" ".join(map(str, container["command"]))))
    if container.get("args"):
        children.append(PropertyNode(name="Args", value=" ".join(map(str, container["args"]))))
    ports = {
        str(port.get("name") or port.get("containerPort")): f"{port.get('containerPort')}/{port.get('protocol') or 'TCP'}"
        for port in container.get("ports") or []
    }
    if ports:
        children.append(_pairs("Ports", ports))

    resources = container.get("resources") or {}
    if resources.get("requests"):
        children.append(_pairs("Requests", resources["requests"]))
    if resources.get("limits"):
        children.append(_pairs("Limits", resources["limits"]))
    children.extend(_env_node(env, namespace) for env in container.get("env") or [])

    if usage:
        if usage.get("memory") is not None:
            children.append(PropertyNode(name=MEMORY_PROPERTY, value=str(usage["memory"])))
        if usage.get("cpu") is not None:
            children.append(PropertyNode(name=CPU_PROPERTY, value=str(usage["cpu"])))

    return PropertyNode(
        name=str(container.get("name") or ""),
        children=children,
        object={**container, "kind": ResourceKind.CONTAINER.value},
        group=True,
    )


def pod_sections(pod: KubeObject, cluster: ManifestCluster | None) -> list[PropertyNode]:
    spec = pod.get("spec") or {}
    status = pod.get("status") or {}
    namespace = _metadata(pod).get("namespace")

    usage_by_container: dict[str, Mapping[str, Any]] = {}
    metrics = cluster.metrics_for(pod) if cluster is not None else None
    for container_metrics in (metrics or {}).get("containers") or []:
        usage_by_container[str(container_metrics.get("name"))] = container_metrics.get("usage") or {}

    sections = [
        PropertyNode(
            name="Containers",
            children=[
                container_node(container, namespace, usage_by_container.get(str(container.get("name"))))
                for container in spec.get("containers") or []
            ],
        )
    ]
    if spec.get("initContainers"):
        sections.append(
            PropertyNode(
                name="Init Containers",
                children=[container_node(container, namespace) for container in spec["initContainers"]],
            )
        )

    status_children = [PropertyNode(name="Phase", value=str(status.get("phase") or "Unknown"))]
    if status.get("podIP"):
        status_children.append(PropertyNode(name="Pod IP", value=str(status["podIP"])))
    if spec.get("nodeName"):
        status_children.append(
            PropertyNode(
                name="Node",
                value=str(spec["nodeName"]),
                reference=ObjectReference(kind=ResourceKind.NODE.value, name=str(spec["nodeName"])),
            )
        )
    if status.get("qosClass"):
        status_children.append(PropertyNode(name="QoS Class", value=str(status["qosClass"])))
    status_children.append(
        PropertyNode(
            name="Conditions",
            children=[
                PropertyNode(name=str(cond.get("type")), value=str(cond.get("status")))
                for cond in status.get("conditions") or []
            ],
            group=True,
        )
    )
    sections.append(PropertyNode(name="Status", children=status_children))
    return sections


def _pod_row(pod: KubeObject) -> PropertyNode:
    return PropertyNode(
        name=str(_metadata(pod).get("name") or ""),
        value=str((pod.get("status") or {}).get("phase") or "Unknown"),
        object={**pod, "kind": pod.get("kind") or ResourceKind.POD.value},
    )


# ============================================================================
# Workloads, nodes and config
# ============================================================================


def workload_sections(obj: KubeObject, cluster: ManifestCluster | None) -> list[PropertyNode]:
    spec = obj.get("spec") or {}
    status = obj.get("status") or {}
    children = []
    if "replicas" in spec:
        children.append(PropertyNode(name="Replicas", value=str(spec["replicas"])))
    if "readyReplicas" in status or "replicas" in spec:
        children.append(PropertyNode(name="Ready", value=str(status.get("readyReplicas") or 0)))
    children.append(_mapping_group("Selector", (spec.get("selector") or {}).get("matchLabels")))
    sections = [PropertyNode(name="Workload", children=children)]
    if cluster is not None:
        sections.append(PropertyNode(name="Pods", children=[_pod_row(pod) for pod in cluster.pods_for_owner(obj)]))
    return sections


def node_sections(node: KubeObject, cluster: ManifestCluster | None) -> list[PropertyNode]:
    status = node.get("status") or {}
    node_info = status.get("nodeInfo") or {}
    sections = [
        PropertyNode(
            name="Resources",
            children=[
                _mapping_group("Capacity", status.get("capacity")),
                _mapping_group("Allocatable", status.get("allocatable")),
            ],
        ),
        PropertyNode(
            name="System",
            children=[
                PropertyNode(name=label, value=str(node_info[key]))
                for key, label in (
                    ("kubeletVersion", "Kubelet"),
                    ("osImage", "OS Image"),
                    ("containerRuntimeVersion", "Container Runtime"),
                    ("architecture", "Architecture"),
                )
                if node_info.get(key)
            ],
        ),
    ]
    if cluster is not None:
        sections.append(PropertyNode(name="Pods", children=[_pod_row(pod) for pod in cluster.pods_on_node(node)]))
    return sections


def service_sections(service: KubeObject, cluster: ManifestCluster | None) -> list[PropertyNode]:
    spec = service.get("spec") or {}
    ports = {
        str(port.get("name") or port.get("port")): f"{port.get('port')}->{port.get('targetPort', port.get('port'))}/{port.get('protocol') or 'TCP'}"
        for port in spec.get("ports") or []
    }
    return [
        PropertyNode(
            name="Service",
            children=[
                PropertyNode(name="Type", value=str(spec.get("type") or "ClusterIP")),
                PropertyNode(name="Cluster IP", value=str(spec.get("clusterIP") or "")),
                _mapping_group("Selector", spec.get("selector")),
                _mapping_group("Ports", ports),
            ],
        )
    ]


def config_sections(obj: KubeObject, cluster: ManifestCluster | None) -> list[PropertyNode]:
    data = obj.get("data") or {}
    if kind_of(obj) == "Secret":
        rows = [PropertyNode(name=str(key), value=f"{len(str(value))} bytes") for key, value in data.items()]
    else:
        rows = [PropertyNode(name=str(key), value=str(value)) for key, value in data.items()]
    return [PropertyNode(name="Data", children=rows)]


_SECTION_BUILDERS: dict[str, SectionBuilder] = {
    ResourceKind.POD.value: pod_sections,
    ResourceKind.NODE.value: node_sections,
    "Service": service_sections,
    "ConfigMap": config_sections,
    "Secret": config_sections,
    **{kind: workload_sections for kind in _POD_OWNER_KINDS},
}


def build_properties(obj: KubeObject, cluster: ManifestCluster | None = None) -> list[PropertyNode]:
    """Top-level property nodes for ``obj``.

    Args:
        obj: The Kubernetes object.
        cluster: Optional cluster for related objects (pods, metrics).

    Returns:
        Metadata section followed by kind-specific sections.
    """
    properties = [metadata_section(obj)]
    builder = _SECTION_BUILDERS.get(kind_of(obj) or "")
    if builder is not None:
        properties.extend(builder(obj, cluster))
    return properties


__all__ = [
    "build_properties",
    "container_node",
    "metadata_section",
]
