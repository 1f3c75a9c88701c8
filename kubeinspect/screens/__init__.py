"""Screens for the KubeInspect TUI."""

from kubeinspect.screens.inspector import InspectorScreen, LogScreen

__all__ = [
    "InspectorScreen",
    "LogScreen",
]
