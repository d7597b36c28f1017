"""Exceptions raised by tickwatch.

Every error here is fatal: the CLI reports it and exits non-zero.
"""

from __future__ import annotations

from pathlib import Path


class TickwatchError(Exception):
    """Base exception for tickwatch errors."""

    pass


class ChecklistError(TickwatchError):
    """Raised when checklist text cannot be turned into a tree."""

    def __init__(self, line_number: int, message: str) -> None:
        self.line_number = line_number
        super().__init__(f"{message} [LINE {line_number}]")


class MalformedLineError(ChecklistError):
    """Raised when a non-blank line carries no recognizable marker."""

    def __init__(self, line_number: int) -> None:
        super().__init__(line_number, "Failed to parse checklist line")


class OrphanSubEntryError(ChecklistError):
    """Raised when an indented line appears before any top-level entry."""

    def __init__(self, line_number: int) -> None:
        super().__init__(line_number, "Found sub-entry without a parent entry")


class DuplicateSubEntryError(ChecklistError):
    """Raised under the reject policy when a parent gets a second sub-entry."""

    def __init__(self, line_number: int) -> None:
        super().__init__(line_number, "Entry already has a sub-entry")


class UndecodableLineError(ChecklistError):
    """Raised when the file holds bytes that are not valid UTF-8."""

    def __init__(self, line_number: int, byte_offset: int) -> None:
        self.byte_offset = byte_offset
        super().__init__(
            line_number, f"Invalid UTF-8 at byte offset {byte_offset}"
        )


class StatFailureError(TickwatchError):
    """Raised when the watched file can no longer be stat'ed."""

    def __init__(self, path: Path, error: OSError) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Cannot stat {path}: {error}")
