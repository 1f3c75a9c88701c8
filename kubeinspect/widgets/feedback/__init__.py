"""Feedback widgets for confirmations."""

from kubeinspect.widgets.feedback.custom_dialog import (
    CustomConfirmDialog,
)

__all__ = [
    "CustomConfirmDialog",
]
