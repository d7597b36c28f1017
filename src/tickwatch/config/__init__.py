"""Configuration management for tickwatch."""
from __future__ import annotations

from tickwatch.config.paths import TickwatchPaths, get_paths, reset_paths
from tickwatch.config.settings import Settings, settings

__all__ = [
    "Settings",
    "TickwatchPaths",
    "get_paths",
    "reset_paths",
    "settings",
]
