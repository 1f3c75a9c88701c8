"""Textual widgets for the KubeInspect TUI."""

from kubeinspect.widgets.feedback import CustomConfirmDialog
from kubeinspect.widgets.inspector_panel import InspectorPage, InspectorPanel
from kubeinspect.widgets.property_rows import (
    ActionRowWidget,
    CopyButton,
    ExpanderRowWidget,
    GoNextWidget,
    InlinePairWidget,
    SectionWidget,
    StatusIconWidget,
    UtilizationBarWidget,
    build_widget,
)

__all__ = [
    "ActionRowWidget",
    "CopyButton",
    "CustomConfirmDialog",
    "ExpanderRowWidget",
    "GoNextWidget",
    "InlinePairWidget",
    "InspectorPage",
    "InspectorPanel",
    "SectionWidget",
    "StatusIconWidget",
    "UtilizationBarWidget",
    "build_widget",
]
