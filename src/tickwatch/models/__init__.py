"""Data models for tickwatch."""

from .checklist import Checklist, ChecklistEntry, EntryStatus
from .parser import ChecklistReader, SubEntryPolicy, parse
from .serializer import ChecklistWriter, serialize

__all__ = [
    "Checklist",
    "ChecklistEntry",
    "ChecklistReader",
    "ChecklistWriter",
    "EntryStatus",
    "SubEntryPolicy",
    "parse",
    "serialize",
]
