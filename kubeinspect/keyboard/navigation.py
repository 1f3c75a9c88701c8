"""Screen-level keyboard bindings for the inspector."""

from textual.binding import Binding

# ============================================================================
# Inspector screen
# ============================================================================

INSPECTOR_SCREEN_BINDINGS: list[Binding] = [
    Binding("escape", "pop_view", "Back"),
    Binding("d", "delete_object", "Delete"),
    Binding("r", "refresh", "Refresh"),
]

# ============================================================================
# Log screen
# ============================================================================

LOG_SCREEN_BINDINGS: list[Binding] = [
    Binding("escape", "close", "Close"),
    Binding("q", "close", "Close", show=False, priority=True),
]

__all__ = [
    "INSPECTOR_SCREEN_BINDINGS",
    "LOG_SCREEN_BINDINGS",
]
