"""Default values for settings.

All default values used in the InspectorSettings model and validation fallbacks.
"""

from typing import Final

# ============================================================================
# UI defaults
# ============================================================================

THEME_DEFAULT: Final = "textual-dark"
LOG_LEVEL_DEFAULT: Final = "INFO"

# ============================================================================
# Property tree defaults
# ============================================================================

# Long values are expensive to lay out, so value rows are capped regardless of content.
MAX_SUBTITLE_LINES_DEFAULT: Final = 5
DEFAULT_EXPANDED_DEFAULT: Final = False

# ============================================================================
# Utilization bar defaults (fractions of the request/limit)
# ============================================================================

UTILIZATION_WARNING_THRESHOLD_DEFAULT: Final = 0.9
UTILIZATION_ERROR_THRESHOLD_DEFAULT: Final = 1.0

# ============================================================================
# Navigation defaults
# ============================================================================

MAX_NAVIGATION_DEPTH_DEFAULT: Final = 32

__all__ = [
    "DEFAULT_EXPANDED_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "MAX_NAVIGATION_DEPTH_DEFAULT",
    "MAX_SUBTITLE_LINES_DEFAULT",
    "THEME_DEFAULT",
    "UTILIZATION_ERROR_THRESHOLD_DEFAULT",
    "UTILIZATION_WARNING_THRESHOLD_DEFAULT",
]
