"""Main screen: object list on the left, inspector panel on the right."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from contextlib import suppress
from functools import partial
from typing import TYPE_CHECKING, Any

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import Footer, Header, Label, ListItem, ListView

from kubeinspect.behavior.manifest import ManifestCluster, name_of, namespace_of
from kubeinspect.keyboard import INSPECTOR_SCREEN_BINDINGS
from kubeinspect.models.property import kind_of, object_identity
from kubeinspect.widgets.feedback import CustomConfirmDialog
from kubeinspect.widgets.inspector_panel import InspectorPanel

if TYPE_CHECKING:
    from kubeinspect.behavior.detail_behavior import DetailBehavior
    from kubeinspect.inspector.augmentation import AugmentationRegistry
    from kubeinspect.inspector.view import InspectorView
    from kubeinspect.models.state.settings import InspectorSettings

logger = logging.getLogger(__name__)


def object_label(obj: Mapping[str, Any]) -> str:
    """``Kind namespace/name`` label of an object."""
    namespace = namespace_of(obj)
    name = name_of(obj)
    return f"{kind_of(obj) or '?'} {namespace}/{name}" if namespace else f"{kind_of(obj) or '?'} {name}"


class ObjectListItem(ListItem):
    """List entry carrying one object."""

    def __init__(self, obj: Mapping[str, Any]) -> None:
        super().__init__(Label(object_label(obj), markup=False))
        self.obj = obj


class InspectorScreen(Screen[None]):
    """Browse loaded objects and inspect the selected one.

    Selecting an object in the list sets it as the root view's object, which
    resets the navigation stack. Escape pops the top inspector view.
    """

    DEFAULT_CSS = """
    InspectorScreen #object-list {
        width: 40;
        border-right: solid $panel;
    }
    InspectorScreen #inspector-panel {
        width: 1fr;
    }
    """

    BINDINGS = INSPECTOR_SCREEN_BINDINGS

    def __init__(
        self,
        cluster: ManifestCluster,
        root_behavior: DetailBehavior,
        *,
        settings: InspectorSettings | None = None,
        registry: AugmentationRegistry | None = None,
        namespace: str | None = None,
    ) -> None:
        super().__init__()
        self.cluster = cluster
        self.root_behavior = root_behavior
        self.namespace = namespace
        self._settings = settings
        self._registry = registry
        self._unsubscribe_revision: Callable[[], None] | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            yield ListView(id="object-list")
            yield InspectorPanel(
                self.root_behavior,
                settings=self._settings,
                registry=self._registry,
                id="inspector-panel",
            )
        yield Footer()

    def on_mount(self) -> None:
        self._unsubscribe_revision = self.cluster.revision.subscribe(None, self._on_revision_change)

    def on_unmount(self) -> None:
        if self._unsubscribe_revision is not None:
            self._unsubscribe_revision()
            self._unsubscribe_revision = None

    @property
    def panel(self) -> InspectorPanel:
        return self.query_one("#inspector-panel", InspectorPanel)

    # ------------------------------------------------------------------
    # Object list
    # ------------------------------------------------------------------

    def listed_objects(self) -> list[dict[str, Any]]:
        return self.cluster.objects(namespace=self.namespace)

    def _on_revision_change(self, revision: int) -> None:
        logger.debug(f"Cluster revision {revision}, rebuilding object list")
        with suppress(NoMatches):
            list_view = self.query_one("#object-list", ListView)
            list_view.clear()
            list_view.extend(ObjectListItem(obj) for obj in self.listed_objects())

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if isinstance(event.item, ObjectListItem):
            self.root_behavior.selected_object.update(event.item.obj)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def action_pop_view(self) -> None:
        controller = self.panel.controller
        if controller is not None:
            controller.pop()

    def action_refresh(self) -> None:
        controller = self.panel.controller
        if controller is None:
            return
        for view in controller.views:
            refresh = getattr(view.behavior, "refresh", None)
            if refresh is not None:
                refresh()
        self.notify("Refreshed", timeout=2)

    def action_delete_object(self) -> None:
        controller = self.panel.controller
        if controller is None:
            return
        view = controller.top
        obj = view.selected_object
        if not obj:
            self.notify("Nothing selected to delete", severity="warning")
            return
        self.app.push_screen(
            CustomConfirmDialog(f"Delete {view.title}?", title="Delete object"),
            callback=partial(self._on_delete_confirmed, view, obj),
        )

    def _on_delete_confirmed(
        self,
        view: InspectorView,
        obj: Mapping[str, Any],
        confirmed: bool | None,
    ) -> None:
        if confirmed:
            self.run_worker(self._delete_object(view, obj), group="delete", exit_on_error=False)

    async def _delete_object(self, view: InspectorView, obj: Mapping[str, Any]) -> None:
        try:
            await view.behavior.delete_object(obj)
        except Exception as e:
            logger.error(f"Failed to delete {view.title!r}: {e}")
            self.notify(f"Failed to delete {view.title}: {e}", title="Delete failed", severity="error")
            return

        self.notify(f"Deleted {view.title}", timeout=3)
        controller = self.panel.controller
        if controller is None:
            return
        if object_identity(controller.root.selected_object) == object_identity(obj):
            self.root_behavior.selected_object.update(None)
        elif view is controller.top:
            controller.pop()
        self.action_refresh()


__all__ = [
    "InspectorScreen",
    "ObjectListItem",
    "object_label",
]
