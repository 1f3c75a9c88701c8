"""Per-type row augmentation keyed by (root object kind, node object kind).

After the renderer builds a level-1 or level-2 row it asks the registry for
mutations registered under the pair (kind of the inspected root object, kind
of ``node.object``). Mutations add status icons, utilization bars, sub-rows or
make the row activatable. New kind pairs register independently of the
renderer:

    registry = default_registry()

    @registry.register("Service", "Endpoints")
    def _endpoints(context: AugmentContext, node: PropertyNode) -> list[RowMutation]:
        return [AddPrefix(StatusIcon(ready=True))]
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Any, Protocol

from kubeinspect.constants import (
    CONDITION_CONTAINERS_READY,
    CONDITION_STATUS_TRUE,
    CPU_PROPERTY,
    LOGS_ROW_TITLE,
    MEMORY_PROPERTY,
    ResourceKind,
)
from kubeinspect.errors import QuantityParseError
from kubeinspect.inspector.elements import (
    ActionRow,
    ExpanderRow,
    GoNextIndicator,
    RenderElement,
    Row,
    StatusIcon,
    UtilizationBar,
)
from kubeinspect.inspector.utilization import utilization
from kubeinspect.models.property import PropertyNode, kind_of
from kubeinspect.models.state.settings import InspectorSettings
from kubeinspect.utils.resource_parser import parse_optional_quantity, parse_quantity

logger = logging.getLogger(__name__)


# ============================================================================
# Navigation seam
# ============================================================================


class RowNavigator(Protocol):
    """Actions a rendered row can trigger in its inspector view."""

    def push_reference(self, node: PropertyNode) -> Any: ...

    def push_object(self, obj: Mapping[str, Any]) -> Any: ...

    def open_logs(self, pod: Mapping[str, Any], container: Mapping[str, Any]) -> Any: ...

    def copy_to_clipboard(self, text: str) -> Any: ...


class NullNavigator:
    """Navigator that ignores every action (used outside a live view)."""

    def push_reference(self, node: PropertyNode) -> None:
        logger.debug(f"No navigator attached, ignoring reference {node.name!r}")

    def push_object(self, obj: Mapping[str, Any]) -> None:
        logger.debug("No navigator attached, ignoring object push")

    def open_logs(self, pod: Mapping[str, Any], container: Mapping[str, Any]) -> None:
        logger.debug("No navigator attached, ignoring log request")

    def copy_to_clipboard(self, text: str) -> None:
        logger.debug("No navigator attached, ignoring copy")


@dataclass
class AugmentContext:
    """What an augmenter may look at and act on.

    Attributes:
        root: The object currently inspected by the view.
        navigator: Target for activation callbacks.
        settings: Inspector settings (thresholds).
    """

    root: Mapping[str, Any]
    navigator: RowNavigator = field(default_factory=NullNavigator)
    settings: InspectorSettings = field(default_factory=InspectorSettings)


# ============================================================================
# Row mutations
# ============================================================================


class RowMutation:
    """A post-construction change applied to one rendered row."""

    def apply(self, row: RenderElement) -> None:
        raise NotImplementedError


@dataclass(eq=False)
class AddPrefix(RowMutation):
    element: RenderElement

    def apply(self, row: RenderElement) -> None:
        if not isinstance(row, Row):
            logger.debug(f"Cannot add prefix to {type(row).__name__}")
            return
        row.add_prefix(self.element)


@dataclass(eq=False)
class AddSuffix(RowMutation):
    element: RenderElement

    def apply(self, row: RenderElement) -> None:
        if not isinstance(row, Row):
            logger.debug(f"Cannot add suffix to {type(row).__name__}")
            return
        row.add_suffix(self.element)


@dataclass(eq=False)
class AddRow(RowMutation):
    """Append a sub-row; only collapsible rows have a row slot."""

    element: RenderElement

    def apply(self, row: RenderElement) -> None:
        if not isinstance(row, ExpanderRow):
            logger.debug(f"Cannot add sub-row to {type(row).__name__}")
            return
        row.add_row(self.element)


@dataclass(eq=False)
class MakeActivatable(RowMutation):
    callback: Callable[[], Any]

    def apply(self, row: RenderElement) -> None:
        if not isinstance(row, Row):
            logger.debug(f"Cannot make {type(row).__name__} activatable")
            return
        row.set_activatable(self.callback)


Augmenter = Callable[[AugmentContext, PropertyNode], Iterable[RowMutation]]


def _kind_tag(kind: str | Enum) -> str:
    if isinstance(kind, Enum):
        return str(kind.value)
    return str(kind)


# ============================================================================
# Registry
# ============================================================================


class AugmentationRegistry:
    """Dispatch table from ``(root kind, object kind)`` to an augmenter."""

    def __init__(self) -> None:
        self._augmenters: dict[tuple[str, str], Augmenter] = {}

    def register(
        self,
        root_kind: str | Enum,
        object_kind: str | Enum,
        augmenter: Augmenter | None = None,
    ) -> Any:
        """Register an augmenter directly or as a decorator.

        Registering the same pair twice replaces the earlier augmenter.
        """
        key = (_kind_tag(root_kind), _kind_tag(object_kind))

        def decorator(func: Augmenter) -> Augmenter:
            if key in self._augmenters:
                logger.debug(f"Replacing augmenter for {key}")
            self._augmenters[key] = func
            return func

        if augmenter is not None:
            return decorator(augmenter)
        return decorator

    def unregister(self, root_kind: str | Enum, object_kind: str | Enum) -> None:
        self._augmenters.pop((_kind_tag(root_kind), _kind_tag(object_kind)), None)

    def lookup(self, root_kind: str | Enum | None, object_kind: str | Enum | None) -> Augmenter | None:
        if root_kind is None or object_kind is None:
            return None
        return self._augmenters.get((_kind_tag(root_kind), _kind_tag(object_kind)))

    def augment(self, root_kind: str | None, node: PropertyNode, context: AugmentContext) -> list[RowMutation]:
        """Return the mutations for ``node`` under the given root kind.

        Args:
            root_kind: Kind of the inspected root object.
            node: The node whose row was just built.
            context: Augmentation context.

        Returns:
            Mutations to apply, empty when no augmenter matches.
        """
        augmenter = self.lookup(root_kind, kind_of(node.object))
        if augmenter is None:
            return []
        return list(augmenter(context, node))

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        return (_kind_tag(pair[0]), _kind_tag(pair[1])) in self._augmenters

    def __len__(self) -> int:
        return len(self._augmenters)


# ============================================================================
# Built-in augmenters
# ============================================================================


def find_container_status(pod: Mapping[str, Any], name: str | None) -> Mapping[str, Any] | None:
    """Return the live status of the named container, or None."""
    status = pod.get("status") or {}
    for key in ("containerStatuses", "initContainerStatuses"):
        for container_status in status.get(key) or []:
            if container_status.get("name") == name:
                return container_status
    return None


def find_condition(obj: Mapping[str, Any], condition_type: str) -> Mapping[str, Any] | None:
    for condition in (obj.get("status") or {}).get("conditions") or []:
        if condition.get("type") == condition_type:
            return condition
    return None


def _usage_bar(
    node: PropertyNode,
    property_name: str,
    resource_name: str,
    resources: Mapping[str, Any],
    settings: InspectorSettings,
) -> UtilizationBar | None:
    usage_node = next((child for child in node.children if child.name == property_name), None)
    if usage_node is None:
        return None
    try:
        actual = parse_quantity(usage_node.value)
        requested = parse_optional_quantity((resources.get("requests") or {}).get(resource_name))
        limit = parse_optional_quantity((resources.get("limits") or {}).get(resource_name))
    except QuantityParseError as e:
        logger.warning(f"Skipping {property_name} bar for {node.name!r}: {e}")
        return None

    sample = utilization(
        actual,
        requested,
        limit,
        warning_threshold=settings.utilization_warning_threshold,
        error_threshold=settings.utilization_error_threshold,
    )
    if not sample.show_bar:
        return None
    return UtilizationBar(label=property_name, sample=sample)


def augment_pod_container(context: AugmentContext, node: PropertyNode) -> list[RowMutation]:
    """Status icon, usage bars and a Logs sub-row for a container of a pod."""
    pod = context.root
    container = node.object or {}
    status = find_container_status(pod, container.get("name"))
    mutations: list[RowMutation] = [
        AddPrefix(StatusIcon(ready=bool(status and status.get("ready")))),
    ]

    resources = container.get("resources") or {}
    for property_name, resource_name in ((MEMORY_PROPERTY, "memory"), (CPU_PROPERTY, "cpu")):
        bar = _usage_bar(node, property_name, resource_name, resources, context.settings)
        if bar is not None:
            mutations.append(AddSuffix(bar))

    logs = ActionRow(title=LOGS_ROW_TITLE, subtitle_selectable=False)
    logs.add_suffix(GoNextIndicator())
    logs.set_activatable(partial(context.navigator.open_logs, pod, container))
    mutations.append(AddRow(logs))
    return mutations


def augment_owned_pod(context: AugmentContext, node: PropertyNode) -> list[RowMutation]:
    """Readiness icon and drill-down for a pod listed under its owner or node."""
    pod = node.object or {}
    condition = find_condition(pod, CONDITION_CONTAINERS_READY)
    if condition is None:
        return []
    return [
        AddPrefix(StatusIcon(ready=condition.get("status") == CONDITION_STATUS_TRUE)),
        MakeActivatable(partial(context.navigator.push_object, pod)),
        AddSuffix(GoNextIndicator()),
    ]


POD_OWNER_KINDS: tuple[ResourceKind, ...] = (
    ResourceKind.DEPLOYMENT,
    ResourceKind.STATEFUL_SET,
    ResourceKind.DAEMON_SET,
    ResourceKind.REPLICA_SET,
    ResourceKind.JOB,
    ResourceKind.NODE,
)


def default_registry() -> AugmentationRegistry:
    """Build a registry with the built-in augmenters."""
    registry = AugmentationRegistry()
    registry.register(ResourceKind.POD, ResourceKind.CONTAINER, augment_pod_container)
    for owner_kind in POD_OWNER_KINDS:
        registry.register(owner_kind, ResourceKind.POD, augment_owned_pod)
    return registry


__all__ = [
    "POD_OWNER_KINDS",
    "AddPrefix",
    "AddRow",
    "AddSuffix",
    "AugmentContext",
    "Augmenter",
    "AugmentationRegistry",
    "MakeActivatable",
    "NullNavigator",
    "RowMutation",
    "RowNavigator",
    "augment_owned_pod",
    "augment_pod_container",
    "default_registry",
    "find_condition",
    "find_container_status",
]
