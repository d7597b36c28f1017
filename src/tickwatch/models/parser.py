"""Parse checklist text into a Checklist tree.

Grammar, one entry per non-blank line::

    <spaces><marker><content>

where ``<marker>`` is exactly ``- [X]`` (done) or ``- [ ]`` (undone) and
``<content>`` is the rest of the line, kept verbatim. Zero leading spaces
starts a top-level entry; any indentation makes the line the sub-entry of
the preceding top-level entry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from tickwatch.errors import (
    DuplicateSubEntryError,
    MalformedLineError,
    OrphanSubEntryError,
    UndecodableLineError,
)
from tickwatch.models.checklist import Checklist, ChecklistEntry, EntryStatus

logger = logging.getLogger(__name__)

MARKER_LENGTH = len(EntryStatus.DONE.marker)


class SubEntryPolicy(Enum):
    """What to do when a parent receives more than one indented line."""

    REPLACE = "replace"  # later line wins
    REJECT = "reject"


@dataclass(frozen=True, slots=True)
class ParsedLine:
    """A single decoded checklist line."""

    indent: int
    status: EntryStatus
    content: str

    @property
    def is_sub(self) -> bool:
        return self.indent > 0


def parse_line(line: str) -> ParsedLine | None:
    """Decode one non-blank line, or return None if it has no marker."""
    body = line.lstrip(" ")
    indent = len(line) - len(body)
    try:
        status = EntryStatus.from_marker(body[:MARKER_LENGTH])
    except ValueError:
        return None
    return ParsedLine(indent=indent, status=status, content=body[MARKER_LENGTH:])


def parse(
    text: str, *, sub_policy: SubEntryPolicy = SubEntryPolicy.REPLACE
) -> Checklist:
    """Parse checklist text.

    Args:
        text: Full file content.
        sub_policy: Handling of repeated sub-entry lines under one parent.

    Returns:
        The parsed Checklist, entries in file order.

    Raises:
        MalformedLineError: A non-blank line has no valid marker.
        OrphanSubEntryError: An indented line precedes every top-level entry.
        DuplicateSubEntryError: A second sub-entry under ``REJECT``.
    """
    checklist = Checklist()

    for line_number, raw in enumerate(text.split("\n"), start=1):
        line = raw.removesuffix("\r")
        if line == "":
            continue

        parsed = parse_line(line)
        if parsed is None:
            raise MalformedLineError(line_number)

        entry = ChecklistEntry(
            done=parsed.status is EntryStatus.DONE, content=parsed.content
        )
        if not parsed.is_sub:
            checklist.add_entry(entry)
            continue

        parent = checklist.last_entry()
        if parent is None:
            raise OrphanSubEntryError(line_number)
        if parent.has_sub and sub_policy is SubEntryPolicy.REJECT:
            raise DuplicateSubEntryError(line_number)

        replaced = parent.set_sub(entry)
        if replaced is not None:
            logger.debug(
                "Line %d replaces sub-entry %r of %r",
                line_number,
                replaced.content,
                parent.content,
            )

    return checklist


class ChecklistReader:
    """Reads a checklist file from disk."""

    @classmethod
    def load(
        cls, path: Path, *, sub_policy: SubEntryPolicy = SubEntryPolicy.REPLACE
    ) -> Checklist:
        """Read and parse ``path``.

        Raises:
            OSError: The file cannot be opened or read.
            ChecklistError: The content is not UTF-8 or does not parse.
        """
        data = path.read_bytes()
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            line_number = data.count(b"\n", 0, e.start) + 1
            raise UndecodableLineError(line_number, e.start) from e
        checklist = parse(text, sub_policy=sub_policy)
        logger.debug("Parsed %d top-level entries from %s", len(checklist), path)
        return checklist
