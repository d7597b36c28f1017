"""Centralized path management for tickwatch.

Follows XDG Base Directory Specification:
- Config: $XDG_CONFIG_HOME/tickwatch (default: ~/.config/tickwatch)
- State: $XDG_STATE_HOME/tickwatch (default: ~/.local/state/tickwatch)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path


def _xdg_config_home() -> Path:
    """Get XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def _xdg_state_home() -> Path:
    """Get XDG_STATE_HOME, defaulting to ~/.local/state."""
    return Path(os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state"))


@dataclass
class TickwatchPaths:
    """Centralized path management following XDG spec."""

    _config_home: Path = field(default_factory=_xdg_config_home)
    _state_home: Path = field(default_factory=_xdg_state_home)

    @property
    def global_config_dir(self) -> Path:
        """Global config: ~/.config/tickwatch/"""
        return self._config_home / "tickwatch"

    @property
    def global_settings(self) -> Path:
        """Global settings file: ~/.config/tickwatch/settings.json"""
        return self.global_config_dir / "settings.json"

    @property
    def global_state_dir(self) -> Path:
        """Global state: ~/.local/state/tickwatch/"""
        return self._state_home / "tickwatch"

    @property
    def debug_log(self) -> Path:
        """Debug log: ~/.local/state/tickwatch/tickwatch.log"""
        return self.global_state_dir / "tickwatch.log"


# Singleton instance
_paths: TickwatchPaths | None = None


def get_paths() -> TickwatchPaths:
    """Get the paths singleton."""
    global _paths
    if _paths is None:
        _paths = TickwatchPaths()
    return _paths


def reset_paths() -> None:
    """Reset paths singleton (for testing)."""
    global _paths
    _paths = None
