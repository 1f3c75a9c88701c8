"""Inspector screens."""

from kubeinspect.screens.inspector.inspector_screen import InspectorScreen, ObjectListItem
from kubeinspect.screens.inspector.log_screen import LogScreen

__all__ = [
    "InspectorScreen",
    "LogScreen",
    "ObjectListItem",
]
