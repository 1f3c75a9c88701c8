"""Smoke tests for the inspector app running under Textual's pilot.

This module tests:
- Object list population and selection
- Property page rendering and expansion write-back
- Escape popping pushed views
- Log screen and delete confirmation flows
"""

from __future__ import annotations

from typing import Any

import pytest
from textual.widgets import Collapsible, ListView, TextArea

from kubeinspect.app import InspectorApp
from kubeinspect.behavior.manifest import ManifestCluster
from kubeinspect.keyboard import INSPECTOR_SCREEN_BINDINGS
from kubeinspect.models.state.settings import InspectorSettings
from kubeinspect.screens.inspector import InspectorScreen, LogScreen
from kubeinspect.widgets import CustomConfirmDialog, ExpanderRowWidget, InspectorPanel

MANIFESTS = """
apiVersion: apps/v1
kind: Deployment
metadata:
  name: web
  namespace: default
  uid: dep-1
  labels:
    app: web
spec:
  replicas: 1
  selector:
    matchLabels:
      app: web
---
apiVersion: v1
kind: Pod
metadata:
  name: web-1
  namespace: default
  uid: pod-1
  labels:
    app: web
spec:
  containers:
    - name: app
      image: nginx
status:
  phase: Running
  conditions:
    - type: ContainersReady
      status: "True"
"""


def _app(select: str | None = "Deployment") -> tuple[InspectorApp, ManifestCluster]:
    cluster = ManifestCluster.from_yaml(MANIFESTS)
    selected = cluster.objects(select)[0] if select else None
    return InspectorApp(cluster, settings=InspectorSettings(), selected=selected), cluster


def _panel(app: InspectorApp) -> InspectorPanel:
    return app.screen.query_one(InspectorPanel)


class TestInspectorScreenBindings:
    """Test InspectorScreen class attributes."""

    def test_screen_has_bindings(self) -> None:
        keys = {binding.key for binding in INSPECTOR_SCREEN_BINDINGS}
        assert {"escape", "d", "r"} <= keys
        assert InspectorScreen.BINDINGS == INSPECTOR_SCREEN_BINDINGS


class TestInspectorApp:
    """Pilot-driven tests of the running app."""

    @pytest.mark.asyncio
    async def test_initial_selection_is_rendered(self) -> None:
        app, cluster = _app()
        async with app.run_test(size=(160, 50)) as pilot:
            await pilot.pause()
            assert isinstance(app.screen, InspectorScreen)
            panel = _panel(app)
            assert panel.controller is not None
            assert panel.controller.root.title == "Deployment web"
            page = panel.page_for(panel.controller.root)
            assert page is not None
            assert len(page.section_widgets) == len(panel.controller.root.sections)
            list_view = app.screen.query_one("#object-list", ListView)
            assert len(list_view.children) == len(cluster)

    @pytest.mark.asyncio
    async def test_list_selection_sets_root(self) -> None:
        app, _ = _app(select=None)
        async with app.run_test(size=(160, 50)) as pilot:
            await pilot.pause()
            list_view = app.screen.query_one("#object-list", ListView)
            list_view.focus()
            list_view.index = 1
            await pilot.press("enter")
            await pilot.pause()
            assert _panel(app).controller.root.title == "Pod web-1"  # type: ignore[union-attr]

    @pytest.mark.asyncio
    async def test_expanding_writes_expansion_store(self) -> None:
        app, _ = _app()
        async with app.run_test(size=(160, 50)) as pilot:
            await pilot.pause()
            controller = _panel(app).controller
            assert controller is not None
            labels = next(
                widget for widget in app.screen.query(ExpanderRowWidget) if widget.element.title == "Labels"
            )
            labels.query_one(Collapsible).collapsed = False
            await pilot.pause()
            assert labels.element.key is not None
            assert controller.root.expansion.get(labels.element.key) is True

    @pytest.mark.asyncio
    async def test_escape_pops_pushed_view(self) -> None:
        app, cluster = _app()
        async with app.run_test(size=(160, 50)) as pilot:
            await pilot.pause()
            controller = _panel(app).controller
            assert controller is not None
            controller.push_object(cluster.get("Pod", "web-1"))
            await pilot.pause()
            assert controller.depth == 2
            assert len(_panel(app).pages) == 2
            await pilot.press("escape")
            await pilot.pause()
            assert controller.depth == 1
            assert len(_panel(app).pages) == 1

    @pytest.mark.asyncio
    async def test_open_logs_shows_log_screen(self) -> None:
        app, cluster = _app()
        pod = cluster.get("Pod", "web-1")
        cluster.set_logs(pod, "app", "server started")
        async with app.run_test(size=(160, 50)) as pilot:
            await pilot.pause()
            controller = _panel(app).controller
            assert controller is not None
            controller.root.open_logs(pod, {"name": "app"})
            await pilot.pause()
            assert isinstance(app.screen, LogScreen)
            await app.workers.wait_for_complete()
            await pilot.pause()
            assert app.screen.query_one(TextArea).text == "server started"
            await pilot.press("escape")
            await pilot.pause()
            assert isinstance(app.screen, InspectorScreen)

    @pytest.mark.asyncio
    async def test_delete_after_confirmation(self) -> None:
        app, cluster = _app()
        async with app.run_test(size=(160, 50)) as pilot:
            await pilot.pause()
            await pilot.press("d")
            await pilot.pause()
            assert isinstance(app.screen, CustomConfirmDialog)
            await pilot.click("#confirm-btn")
            await pilot.pause()
            await app.workers.wait_for_complete()
            await pilot.pause()
            assert cluster.objects("Deployment") == []
            assert _panel(app).controller.root.selected_object is None  # type: ignore[union-attr]

    @pytest.mark.asyncio
    async def test_delete_cancelled(self) -> None:
        app, cluster = _app()
        async with app.run_test(size=(160, 50)) as pilot:
            await pilot.pause()
            await pilot.press("d")
            await pilot.pause()
            await pilot.press("escape")
            await pilot.pause()
            assert len(cluster.objects("Deployment")) == 1

    @pytest.mark.asyncio
    async def test_copy_reaches_clipboard(self) -> None:
        app, _ = _app()
        async with app.run_test(size=(160, 50)) as pilot:
            await pilot.pause()
            _panel(app).copy_to_clipboard("web")
            assert app.clipboard == "web"

    @pytest.mark.asyncio
    async def test_unknown_theme_falls_back(self) -> None:
        cluster: Any = ManifestCluster.from_yaml(MANIFESTS)
        app = InspectorApp(cluster, settings=InspectorSettings(theme="no-such-theme"))
        async with app.run_test(size=(160, 50)) as pilot:
            await pilot.pause()
            assert app.theme == "textual-dark"
