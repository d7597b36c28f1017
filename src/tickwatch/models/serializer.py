"""Serialize a Checklist back to its canonical text layout."""

from __future__ import annotations

import logging
from pathlib import Path

from tickwatch.models.checklist import Checklist, ChecklistEntry

logger = logging.getLogger(__name__)

INDENT = "  "


def format_entry(entry: ChecklistEntry, depth: int = 0) -> str:
    """Render one entry line, without the trailing newline."""
    return f"{INDENT * depth}{entry.status.marker}{entry.content}"


def serialize(checklist: Checklist) -> str:
    """Render the checklist in canonical form.

    Each top-level block (entry plus optional sub-entry) is followed by a
    blank line. Indentation is two spaces per nesting level.
    """
    lines: list[str] = []
    for chain in checklist.chains():
        for depth, entry in enumerate(chain):
            lines.append(format_entry(entry, depth) + "\n")
        lines.append("\n")
    return "".join(lines)


class ChecklistWriter:
    """Persists a checklist in canonical form."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def save(self, checklist: Checklist) -> None:
        """Overwrite the file with the canonical rendering (truncates in place)."""
        with open(self.path, "w", encoding="utf-8", newline="\n") as f:
            f.write(serialize(checklist))
        logger.info("Rewrote %s in canonical form", self.path)
