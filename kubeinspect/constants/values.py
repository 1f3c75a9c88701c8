"""Scalar constants used across the application."""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "KubeInspect"
CONFIG_ENV_VAR: Final = "KUBEINSPECT_CONFIG"

# ============================================================================
# Kubernetes field values
# ============================================================================

CONDITION_CONTAINERS_READY: Final = "ContainersReady"
CONDITION_STATUS_TRUE: Final = "True"

# ============================================================================
# Property names with augmentation meaning
# ============================================================================

MEMORY_PROPERTY: Final = "Memory"
CPU_PROPERTY: Final = "CPU"
LOGS_ROW_TITLE: Final = "Logs"

__all__ = [
    "APP_TITLE",
    "CONDITION_CONTAINERS_READY",
    "CONDITION_STATUS_TRUE",
    "CONFIG_ENV_VAR",
    "CPU_PROPERTY",
    "LOGS_ROW_TITLE",
    "MEMORY_PROPERTY",
]
