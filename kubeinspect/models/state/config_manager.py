"""Settings persistence for KubeInspect.

Settings are stored as JSON. The location defaults to
``~/.config/kubeinspect/settings.json`` and can be overridden with the
``KUBEINSPECT_CONFIG`` environment variable or an explicit path.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from kubeinspect.constants.values import CONFIG_ENV_VAR
from kubeinspect.errors import KubeInspectError
from kubeinspect.models.state.settings import InspectorSettings

logger = logging.getLogger(__name__)


class ConfigError(KubeInspectError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""


class ConfigManager:
    """Load and save ``InspectorSettings``."""

    DEFAULT_PATH = Path("~/.config/kubeinspect/settings.json")

    @classmethod
    def resolve_path(cls, path: str | Path | None = None) -> Path:
        """Return the settings file path to use.

        Args:
            path: Explicit path. Takes precedence over the environment.

        Returns:
            Absolute settings path.
        """
        if path:
            return Path(path).expanduser()
        env_path = os.environ.get(CONFIG_ENV_VAR, "").strip()
        if env_path:
            return Path(env_path).expanduser()
        return cls.DEFAULT_PATH.expanduser()

    @classmethod
    def load(cls, path: str | Path | None = None) -> InspectorSettings:
        """Load settings from disk.

        A missing file yields default settings.

        Args:
            path: Optional explicit settings path.

        Returns:
            Loaded settings.

        Raises:
            ConfigLoadError: If the file cannot be read or fails validation.
        """
        settings_path = cls.resolve_path(path)
        if not settings_path.exists():
            logger.debug(f"No settings file at {settings_path}, using defaults")
            return InspectorSettings()
        try:
            raw = json.loads(settings_path.read_text(encoding="utf-8"))
            return InspectorSettings.model_validate(raw)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            raise ConfigLoadError(f"Failed to load settings from {settings_path}: {e}") from e

    @classmethod
    def save(cls, settings: InspectorSettings, path: str | Path | None = None) -> Path:
        """Save settings to disk.

        Args:
            settings: Settings to persist.
            path: Optional explicit settings path.

        Returns:
            The path written.

        Raises:
            ConfigSaveError: If the file cannot be written.
        """
        settings_path = cls.resolve_path(path)
        try:
            settings_path.parent.mkdir(parents=True, exist_ok=True)
            settings_path.write_text(settings.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            raise ConfigSaveError(f"Failed to save settings to {settings_path}: {e}") from e
        return settings_path
