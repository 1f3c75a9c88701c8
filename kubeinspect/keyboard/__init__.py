"""Keyboard bindings for the KubeInspect TUI."""

from kubeinspect.keyboard.app import APP_BINDINGS
from kubeinspect.keyboard.navigation import INSPECTOR_SCREEN_BINDINGS, LOG_SCREEN_BINDINGS

__all__ = [
    "APP_BINDINGS",
    "INSPECTOR_SCREEN_BINDINGS",
    "LOG_SCREEN_BINDINGS",
]
