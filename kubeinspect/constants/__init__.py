"""Constants module for the KubeInspect TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, identifiers)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings
"""

from kubeinspect.constants.defaults import (
    DEFAULT_EXPANDED_DEFAULT,
    LOG_LEVEL_DEFAULT,
    MAX_NAVIGATION_DEPTH_DEFAULT,
    MAX_SUBTITLE_LINES_DEFAULT,
    THEME_DEFAULT,
    UTILIZATION_ERROR_THRESHOLD_DEFAULT,
    UTILIZATION_WARNING_THRESHOLD_DEFAULT,
)
from kubeinspect.constants.enums import (
    ResourceKind,
    Severity,
    ViewState,
)
from kubeinspect.constants.limits import (
    MAX_NAVIGATION_DEPTH_MAX,
    MAX_NAVIGATION_DEPTH_MIN,
    MAX_PROPERTY_LEVEL,
    MAX_SUBTITLE_LINES_MAX,
    MAX_SUBTITLE_LINES_MIN,
)
from kubeinspect.constants.values import (
    APP_TITLE,
    CONDITION_CONTAINERS_READY,
    CONDITION_STATUS_TRUE,
    CONFIG_ENV_VAR,
    CPU_PROPERTY,
    LOGS_ROW_TITLE,
    MEMORY_PROPERTY,
)

__all__ = [
    "APP_TITLE",
    "CONDITION_CONTAINERS_READY",
    "CONDITION_STATUS_TRUE",
    "CONFIG_ENV_VAR",
    "CPU_PROPERTY",
    "DEFAULT_EXPANDED_DEFAULT",
    "LOGS_ROW_TITLE",
    "LOG_LEVEL_DEFAULT",
    "MAX_NAVIGATION_DEPTH_DEFAULT",
    "MAX_NAVIGATION_DEPTH_MAX",
    "MAX_NAVIGATION_DEPTH_MIN",
    "MAX_PROPERTY_LEVEL",
    "MAX_SUBTITLE_LINES_DEFAULT",
    "MAX_SUBTITLE_LINES_MAX",
    "MAX_SUBTITLE_LINES_MIN",
    "MEMORY_PROPERTY",
    "THEME_DEFAULT",
    "UTILIZATION_ERROR_THRESHOLD_DEFAULT",
    "UTILIZATION_WARNING_THRESHOLD_DEFAULT",
    "ResourceKind",
    "Severity",
    "ViewState",
]
