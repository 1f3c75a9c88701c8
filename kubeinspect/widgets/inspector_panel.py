"""Inspector panel: the Textual host of the navigation stack.

``InspectorPanel`` owns a ``NavigationController`` and implements its host
protocol. Each inspector view gets an ``InspectorPage`` with a Properties
tab (the rendered property page) and a Yaml tab. Only the top page is
displayed; popping removes its page and reveals the one below.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from contextlib import suppress
from typing import TYPE_CHECKING, Any

from textual.app import ComposeResult
from textual.containers import Container, Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.widget import Widget
from textual.widgets import Static, TabbedContent, TabPane, TextArea

from kubeinspect.inspector.elements import Section
from kubeinspect.inspector.navigation import NavigationController
from kubeinspect.widgets.property_rows import build_widget

if TYPE_CHECKING:
    from kubeinspect.behavior.detail_behavior import DetailBehavior
    from kubeinspect.inspector.augmentation import AugmentationRegistry
    from kubeinspect.inspector.view import InspectorView
    from kubeinspect.models.state.settings import InspectorSettings

logger = logging.getLogger(__name__)


class InspectorPage(Vertical):
    """Widgets of one inspector view."""

    DEFAULT_CSS = """
    InspectorPage {
        height: 1fr;
    }
    InspectorPage > .page-title {
        text-style: bold;
        padding: 0 1;
        background: $panel;
    }
    InspectorPage .property-sections {
        height: 1fr;
    }
    InspectorPage .yaml-source {
        height: 1fr;
    }
    """

    def __init__(self, view: InspectorView) -> None:
        super().__init__(classes="inspector-page")
        self.view = view
        self._section_widgets: dict[Section, Widget] = {}
        self._unsubscribers: list[Callable[[], None]] = []

    def compose(self) -> ComposeResult:
        yield Static(self.view.title, markup=False, classes="page-title")
        with TabbedContent(initial="properties"):
            with TabPane("Properties", id="properties"):
                yield VerticalScroll(classes="property-sections")
            with TabPane("Yaml", id="yaml"):
                yield TextArea("", read_only=True, show_line_numbers=True, classes="yaml-source")

    def on_mount(self) -> None:
        self._apply_page_change([], self.view.sections)
        behavior = self.view.behavior
        self._unsubscribers = [
            self.view.page.subscribe(self._apply_page_change),
            behavior.yaml.subscribe(self.view.scope, self._on_yaml_change),
            behavior.selected_object.subscribe(self.view.scope, self._on_selected_object_change),
        ]

    def on_unmount(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

    @property
    def section_widgets(self) -> list[Widget]:
        return list(self._section_widgets.values())

    def _apply_page_change(self, removed: Sequence[Section], added: Sequence[Section]) -> None:
        for section in removed:
            widget = self._section_widgets.pop(section, None)
            if widget is not None:
                widget.remove()
        try:
            container = self.query_one(".property-sections", VerticalScroll)
        except NoMatches:
            logger.debug(f"Page of {self.view.title!r} is not composed, skipping render")
            return
        widgets = []
        for section in added:
            widget = build_widget(section)
            self._section_widgets[section] = widget
            widgets.append(widget)
        if widgets:
            container.mount_all(widgets)

    def _on_yaml_change(self, text: str) -> None:
        with suppress(NoMatches):
            self.query_one(".yaml-source", TextArea).load_text(text)

    def _on_selected_object_change(self, obj: Mapping[str, Any] | None) -> None:
        with suppress(NoMatches):
            self.query_one(".page-title", Static).update(self.view.title)


class InspectorPanel(Container):
    """Hosts the navigation stack of inspector views.

    Args:
        root_behavior: Behavior of the root view.
        settings: Inspector settings.
        registry: Augmentation registry; the default one when omitted.
    """

    DEFAULT_CSS = """
    InspectorPanel {
        height: 1fr;
    }
    """

    def __init__(
        self,
        root_behavior: DetailBehavior,
        *,
        settings: InspectorSettings | None = None,
        registry: AugmentationRegistry | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self.root_behavior = root_behavior
        self._settings = settings
        self._registry = registry
        self._pages: dict[InspectorView, InspectorPage] = {}
        self.controller: NavigationController | None = None

    def on_mount(self) -> None:
        self.controller = NavigationController(
            self.root_behavior,
            host=self,
            settings=self._settings,
            registry=self._registry,
        )

    def on_unmount(self) -> None:
        if self.controller is not None:
            self.controller.close()

    def page_for(self, view: InspectorView) -> InspectorPage | None:
        return self._pages.get(view)

    @property
    def pages(self) -> list[InspectorPage]:
        return list(self._pages.values())

    # ------------------------------------------------------------------
    # NavigationHost
    # ------------------------------------------------------------------

    def show_view(self, view: InspectorView) -> None:
        for page in self._pages.values():
            page.display = False
        page = InspectorPage(view)
        self._pages[view] = page
        self.mount(page)
        logger.debug(f"Showing {view.title!r}")

    def hide_view(self, view: InspectorView) -> None:
        page = self._pages.pop(view, None)
        if page is not None:
            page.remove()
        if self.controller is not None:
            top = self._pages.get(self.controller.top)
            if top is not None:
                top.display = True

    def open_logs(self, view: InspectorView, pod: Mapping[str, Any], container: Mapping[str, Any]) -> None:
        from kubeinspect.screens.inspector.log_screen import LogScreen

        self.app.push_screen(LogScreen(view.behavior, pod, container))

    def copy_to_clipboard(self, text: str) -> None:
        self.app.copy_to_clipboard(text)
        self.app.notify("Copied to clipboard", timeout=2)


__all__ = [
    "InspectorPage",
    "InspectorPanel",
]
