"""Configuration loaded from the user's settings file.

Settings are read-only at runtime; edit
``$XDG_CONFIG_HOME/tickwatch/settings.json`` to change them. CLI flags take
precedence over anything set here.
"""

import json
import logging
from typing import Any

from tickwatch.config.paths import get_paths
from tickwatch.models.parser import SubEntryPolicy
from tickwatch.runtime.detector import DEFAULT_POLL_INTERVAL

logger = logging.getLogger(__name__)


class Settings:
    """Persistent settings for tickwatch."""

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        """Load settings from disk."""
        path = get_paths().global_settings
        if path.exists():
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
            except (json.JSONDecodeError, OSError):
                data = {}
            self._data = data if isinstance(data, dict) else {}
        else:
            self._data = {}

    @property
    def poll_interval(self) -> float:
        """Seconds between modification-time checks."""
        value = self._data.get("poll_interval")
        try:
            interval = float(value)
        except (TypeError, ValueError):
            return DEFAULT_POLL_INTERVAL
        if interval <= 0:
            logger.warning("Ignoring non-positive poll_interval %r", value)
            return DEFAULT_POLL_INTERVAL
        return interval

    @property
    def sub_entry_policy(self) -> SubEntryPolicy:
        """How repeated sub-entry lines under one parent are handled."""
        value = self._data.get("sub_entry_policy", SubEntryPolicy.REPLACE.value)
        try:
            return SubEntryPolicy(value)
        except ValueError:
            logger.warning("Unknown sub_entry_policy %r, using replace", value)
            return SubEntryPolicy.REPLACE

    @property
    def clear_screen(self) -> bool:
        """Clear the terminal before each progress update."""
        return bool(self._data.get("clear_screen", True))


# Global settings instance
settings = Settings()
