"""Main application class for the KubeInspect TUI."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from textual.app import App
from textual.binding import Binding

from kubeinspect.behavior.manifest import ManifestCluster, ManifestDetailBehavior
from kubeinspect.constants import APP_TITLE, THEME_DEFAULT
from kubeinspect.inspector.augmentation import AugmentationRegistry, default_registry
from kubeinspect.keyboard import APP_BINDINGS
from kubeinspect.models.state.config_manager import ConfigLoadError, ConfigManager
from kubeinspect.models.state.settings import InspectorSettings
from kubeinspect.screens.inspector import InspectorScreen

logger = logging.getLogger(__name__)


class InspectorApp(App[None]):
    """Kubernetes object inspector over loaded manifests.

    Args:
        cluster: Objects to browse.
        settings: Settings to use; loaded from disk when omitted.
        config_path: Explicit settings file for loading.
        selected: Object to inspect at startup.
        namespace: Restrict the object list to one namespace.
        registry: Augmentation registry; the default one when omitted.
    """

    TITLE = APP_TITLE
    BINDINGS: list[Binding] = APP_BINDINGS

    settings: InspectorSettings

    def __init__(
        self,
        cluster: ManifestCluster,
        *,
        settings: InspectorSettings | None = None,
        config_path: Path | None = None,
        selected: Mapping[str, Any] | None = None,
        namespace: str | None = None,
        registry: AugmentationRegistry | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.cluster = cluster
        self.namespace = namespace
        self.registry = registry if registry is not None else default_registry()
        self._initial_selection = selected
        if settings is None:
            self._load_settings(config_path)
        else:
            self.settings = settings
        self.root_behavior = ManifestDetailBehavior(cluster)

    def _load_settings(self, config_path: Path | None) -> None:
        """Load application settings from persistent storage."""
        try:
            self.settings = ConfigManager.load(config_path)
        except ConfigLoadError as e:
            # Use defaults if loading fails
            logger.warning(f"{e}; using default settings")
            self.settings = InspectorSettings()

    def _apply_theme(self) -> None:
        """Apply the stored theme, falling back to the default for unknown names."""
        theme_name = str(self.settings.theme or "").strip()
        if theme_name not in self.available_themes:
            logger.warning(f"Unknown theme {theme_name!r}, using {THEME_DEFAULT!r}")
            theme_name = THEME_DEFAULT
        self.theme = theme_name

    def on_mount(self) -> None:
        self._apply_theme()
        self.push_screen(
            InspectorScreen(
                self.cluster,
                self.root_behavior,
                settings=self.settings,
                registry=self.registry,
                namespace=self.namespace,
            )
        )
        if self._initial_selection is not None:
            self.root_behavior.selected_object.update(self._initial_selection)

    def action_show_help(self) -> None:
        """Show keyboard help."""
        self.notify(
            "Keyboard Shortcuts:\n"
            "  enter: Inspect object / follow reference\n"
            "  Esc: Back to previous object\n"
            "  d: Delete inspected object\n"
            "  r: Refresh\n"
            "  q: Quit",
            severity="information",
            title="Help",
        )


__all__ = [
    "InspectorApp",
]
