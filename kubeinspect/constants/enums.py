"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Kubernetes Enums
# =============================================================================


class ResourceKind(str, Enum):
    """Object kinds with built-in augmentation behavior."""

    POD = "Pod"
    CONTAINER = "Container"
    DEPLOYMENT = "Deployment"
    STATEFUL_SET = "StatefulSet"
    DAEMON_SET = "DaemonSet"
    REPLICA_SET = "ReplicaSet"
    JOB = "Job"
    NODE = "Node"


# =============================================================================
# Status Enums
# =============================================================================


class Severity(Enum):
    """Severity band of a utilization bar."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ViewState(Enum):
    """Lifecycle state of a pushed inspector view."""

    ACTIVE = "active"
    POPPED = "popped"


__all__ = [
    # Kubernetes
    "ResourceKind",
    # Status
    "Severity",
    "ViewState",
]
