"""Limit and threshold constants for the TUI.

All limit values and validation ranges.
"""

from typing import Final

# ============================================================================
# Property model limits
# ============================================================================

# Levels run 0..3; level 3 nodes are terminal.
MAX_PROPERTY_LEVEL: Final = 3

# ============================================================================
# Validation limits
# ============================================================================

MAX_SUBTITLE_LINES_MIN: Final = 1
MAX_SUBTITLE_LINES_MAX: Final = 50
MAX_NAVIGATION_DEPTH_MIN: Final = 1
MAX_NAVIGATION_DEPTH_MAX: Final = 256

__all__ = [
    "MAX_NAVIGATION_DEPTH_MAX",
    "MAX_NAVIGATION_DEPTH_MIN",
    "MAX_PROPERTY_LEVEL",
    "MAX_SUBTITLE_LINES_MAX",
    "MAX_SUBTITLE_LINES_MIN",
]
