"""One inspector view: a rendered object plus its lifecycle scope."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from kubeinspect.constants import ViewState
from kubeinspect.inspector.elements import PropertyPage, Section
from kubeinspect.inspector.expansion import ExpansionStore
from kubeinspect.inspector.renderer import PropertyTreeRenderer
from kubeinspect.models.property import PropertyNode, kind_of

if TYPE_CHECKING:
    from kubeinspect.behavior.detail_behavior import DetailBehavior
    from kubeinspect.inspector.augmentation import AugmentationRegistry
    from kubeinspect.inspector.navigation import NavigationController
    from kubeinspect.inspector.scope import NavigationScope
    from kubeinspect.models.state.settings import InspectorSettings

logger = logging.getLogger(__name__)


class InspectorView:
    """Renders one behavior's properties and routes row actions.

    The view rebuilds its whole page whenever the behavior emits a new
    property tree. Expansion state survives rebuilds because it is keyed by
    tree position. Row actions are forwarded to the navigation controller
    with this view as origin.
    """

    def __init__(
        self,
        behavior: DetailBehavior,
        scope: NavigationScope,
        controller: NavigationController | None = None,
        *,
        registry: AugmentationRegistry | None = None,
        settings: InspectorSettings | None = None,
    ) -> None:
        self.behavior = behavior
        self.scope = scope
        self.controller = controller
        self.state = ViewState.ACTIVE
        self.page = PropertyPage()
        self.renderer = PropertyTreeRenderer(
            ExpansionStore(),
            navigator=self,
            registry=registry,
            settings=settings,
        )
        self.rebuild_count = 0
        behavior.properties.subscribe(scope, self.on_properties_change)

    @property
    def expansion(self) -> ExpansionStore:
        return self.renderer.expansion

    @property
    def selected_object(self) -> Mapping[str, Any] | None:
        return self.behavior.selected_object.value

    @property
    def title(self) -> str:
        obj = self.selected_object
        if not obj:
            return "Object"
        name = (obj.get("metadata") or {}).get("name") or ""
        return f"{kind_of(obj) or 'Object'} {name}".strip()

    @property
    def active(self) -> bool:
        return self.state is ViewState.ACTIVE

    @property
    def sections(self) -> list[Section]:
        return self.page.sections

    def on_properties_change(self, properties: Sequence[PropertyNode]) -> None:
        """Replace every rendered section with a fresh rendering."""
        if not self.active:
            return
        sections = self.renderer.render_all(properties, self.selected_object)
        self.page.replace(sections)
        self.rebuild_count += 1

    def close(self) -> None:
        """Mark the view popped and cancel its scope."""
        if not self.active:
            return
        self.state = ViewState.POPPED
        self.scope.cancel()

    # ------------------------------------------------------------------
    # Row actions
    # ------------------------------------------------------------------

    def push_reference(self, node: PropertyNode) -> Any:
        if self.controller is None:
            logger.debug(f"View {self.title!r} has no controller, ignoring {node.name!r}")
            return None
        return self.controller.push_reference(node, origin=self)

    def push_object(self, obj: Mapping[str, Any]) -> Any:
        if self.controller is None:
            logger.debug(f"View {self.title!r} has no controller, ignoring object push")
            return None
        return self.controller.push_object(obj, origin=self)

    def open_logs(self, pod: Mapping[str, Any], container: Mapping[str, Any]) -> Any:
        if self.controller is None:
            return None
        return self.controller.open_logs(pod, container, origin=self)

    def copy_to_clipboard(self, text: str) -> Any:
        if self.controller is None:
            return None
        return self.controller.copy_to_clipboard(text)

    def __repr__(self) -> str:
        return f"<InspectorView {self.title!r} {self.state.value}>"


__all__ = [
    "InspectorView",
]
