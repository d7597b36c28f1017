"""Checklist data model."""

from __future__ import annotations

import copy
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Self


class EntryStatus(Enum):
    """Status of a checklist entry, valued by its literal marker."""

    DONE = "- [X]"
    UNDONE = "- [ ]"

    @property
    def marker(self) -> str:
        return self.value

    @classmethod
    def from_marker(cls, token: str) -> Self:
        """Decode a marker token; only the exact literals are accepted."""
        for status in cls:
            if status.value == token:
                return status
        raise ValueError(f"Unknown checklist marker: {token!r}")

    @classmethod
    def for_done(cls, done: bool) -> EntryStatus:
        return cls.DONE if done else cls.UNDONE


@dataclass(slots=True)
class ChecklistEntry:
    """A single line item, optionally owning one nested sub-entry."""

    done: bool
    content: str
    sub: ChecklistEntry | None = None

    @property
    def has_sub(self) -> bool:
        """True when this entry is a parent."""
        return self.sub is not None

    @property
    def status(self) -> EntryStatus:
        return EntryStatus.for_done(self.done)

    def set_sub(self, sub: ChecklistEntry) -> ChecklistEntry | None:
        """Attach a sub-entry, returning the one it replaced (if any).

        Raises:
            ValueError: If ``sub`` already has a sub-entry of its own.
        """
        if sub.sub is not None:
            raise ValueError("Sub-entries cannot own sub-entries")
        previous = self.sub
        self.sub = sub
        return previous

    def chain(self) -> list[ChecklistEntry]:
        """This entry followed by its sub-entry, if any."""
        nodes: list[ChecklistEntry] = []
        current: ChecklistEntry | None = self
        while current is not None:
            nodes.append(current)
            current = current.sub
        return nodes


@dataclass
class Checklist:
    """Ordered top-level entries in file order."""

    entries: list[ChecklistEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def add_entry(self, entry: ChecklistEntry) -> None:
        """Append a top-level entry."""
        self.entries.append(entry)

    def last_entry(self) -> ChecklistEntry | None:
        """Most recently appended top-level entry."""
        return self.entries[-1] if self.entries else None

    def chains(self) -> Iterator[list[ChecklistEntry]]:
        """Yield each top-level entry's chain (entry, then its sub)."""
        for entry in self.entries:
            yield entry.chain()

    def iterate_in_order(self) -> Iterator[tuple[ChecklistEntry, int]]:
        """Iterate entries in file order with their depth level.

        Yields:
            Tuple of (entry, depth) where depth is 0 for top-level entries.
        """
        for chain in self.chains():
            for depth, entry in enumerate(chain):
                yield (entry, depth)

    def copy(self) -> Checklist:
        """Deep copy, so transformations leave this tree untouched."""
        return copy.deepcopy(self)
