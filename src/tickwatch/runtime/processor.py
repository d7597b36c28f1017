"""Per-change processing: parse, compute, display, conditionally rewrite."""

from __future__ import annotations

import logging
from pathlib import Path

from tickwatch.display import Display
from tickwatch.models.parser import ChecklistReader, SubEntryPolicy
from tickwatch.models.serializer import ChecklistWriter
from tickwatch.progress import calculate
from tickwatch.runtime.channel import Rendezvous
from tickwatch.runtime.detector import ChangeEvent

logger = logging.getLogger(__name__)


class ProgressProcessor:
    """Turns change events into displayed percentages.

    The last displayed percentage is kept on the instance, starting unset.
    The file is rewritten in canonical form only when the percentage moves,
    so the processor's own rewrite (seen later as another change) settles
    without a second write.
    """

    def __init__(
        self,
        path: Path,
        display: Display,
        *,
        sub_policy: SubEntryPolicy = SubEntryPolicy.REPLACE,
    ) -> None:
        self.path = path
        self.display = display
        self.sub_policy = sub_policy
        self.last_percentage: float | None = None
        self.writer = ChecklistWriter(path)

    def process(self) -> float:
        """Run one cycle and return the computed percentage.

        Raises:
            OSError: The file cannot be read or rewritten.
            ChecklistError: The file does not parse.
        """
        checklist = ChecklistReader.load(self.path, sub_policy=self.sub_policy)
        result = calculate(checklist)
        percentage = result.percentage
        logger.info(
            "Progress for %s: %d/%d (%.2f%%)",
            self.path,
            result.done,
            result.total,
            percentage,
        )

        self.display.show(percentage)

        if percentage == self.last_percentage:
            return percentage

        self.last_percentage = percentage
        self.writer.save(result.checklist)
        return percentage

    async def run(self, changes: Rendezvous[ChangeEvent]) -> None:
        """Process every change event until cancelled or a cycle fails.

        Each cycle reads and rewrites the file synchronously on the event
        loop. The detector is held by the hand-off until the event is
        taken, so its next stat cannot interleave with a half-done cycle.
        """
        while True:
            event = await changes.receive()
            logger.debug("Processing change at mtime_ns=%d", event.mtime_ns)
            self.process()
