"""Exception hierarchy for KubeInspect."""


class KubeInspectError(Exception):
    """Base exception for all KubeInspect errors."""


class PropertyModelError(KubeInspectError):
    """Raised when a property tree violates the model contract."""


class QuantityParseError(KubeInspectError, ValueError):
    """Raised when a resource quantity string cannot be parsed."""


class ObjectNotFoundError(KubeInspectError, LookupError):
    """Raised when a referenced object does not exist in the cluster."""


class NavigationError(KubeInspectError):
    """Raised when a navigation operation is used incorrectly."""
