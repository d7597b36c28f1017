"""Completion progress over a checklist.

Rest-done propagation: within a chain (a top-level entry followed by its
sub-entry), once a parent entry is done every later entry in that chain is
treated as done as well. The propagated tree is what gets persisted, so the
rule is applied as an explicit transformation rather than while counting.
"""

from __future__ import annotations

from dataclasses import dataclass

from tickwatch.models.checklist import Checklist


@dataclass(frozen=True, slots=True)
class Progress:
    """Done and total entry counts."""

    done: int
    total: int

    @property
    def percentage(self) -> float:
        """Completion percentage; an empty checklist reports 0.0."""
        if self.total == 0:
            return 0.0
        return self.done / self.total * 100


@dataclass(frozen=True, slots=True)
class ProgressResult:
    """Counts plus the propagated tree they were taken from."""

    progress: Progress
    checklist: Checklist

    @property
    def done(self) -> int:
        return self.progress.done

    @property
    def total(self) -> int:
        return self.progress.total

    @property
    def percentage(self) -> float:
        return self.progress.percentage


def propagate_rest_done(checklist: Checklist) -> Checklist:
    """Return a copy of ``checklist`` with rest-done propagation applied.

    The input tree is not modified.
    """
    result = checklist.copy()
    for chain in result.chains():
        rest_done = False
        for entry in chain:
            if entry.done or rest_done:
                if entry.has_sub:
                    rest_done = True
                entry.done = True
    return result


def count(checklist: Checklist) -> Progress:
    """Count done and total entries, top-level and sub alike."""
    done = 0
    total = 0
    for entry, _depth in checklist.iterate_in_order():
        total += 1
        if entry.done:
            done += 1
    return Progress(done=done, total=total)


def calculate(checklist: Checklist) -> ProgressResult:
    """Propagate rest-done and count the result."""
    propagated = propagate_rest_done(checklist)
    return ProgressResult(progress=count(propagated), checklist=propagated)
