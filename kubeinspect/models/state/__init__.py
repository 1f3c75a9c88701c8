"""Application state and settings models."""

from kubeinspect.models.state.config_manager import (
    ConfigError,
    ConfigLoadError,
    ConfigManager,
    ConfigSaveError,
)
from kubeinspect.models.state.settings import InspectorSettings

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
    "InspectorSettings",
]
