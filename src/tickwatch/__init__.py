"""tickwatch - live completion percentage for a plain-text checklist."""

__version__ = "0.1.0"
