"""Modification-time polling for the watched checklist file."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

from tickwatch.runtime.channel import Rendezvous

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 1.0


@dataclass(frozen=True, slots=True)
class ChangeEvent:
    """The watched file has a new modification time."""

    path: Path
    mtime_ns: int


@dataclass(frozen=True, slots=True)
class StatFailure:
    """The watched file could not be stat'ed."""

    path: Path
    error: OSError


class ChangeDetector:
    """Polls a file's modification time and publishes change events.

    The first successful stat always counts as a change, because the
    remembered time starts at the epoch. Publishing blocks until the
    consumer takes the event, so the detector never runs ahead of it.
    """

    def __init__(self, path: Path, interval: float = DEFAULT_POLL_INTERVAL) -> None:
        if interval <= 0:
            raise ValueError(f"Poll interval must be positive, got {interval}")
        self.path = path
        self.interval = interval
        self.last_mtime_ns = 0
        self.changes: Rendezvous[ChangeEvent] = Rendezvous()
        self.errors: Rendezvous[StatFailure] = Rendezvous()

    async def check_once(self) -> bool:
        """Run a single poll tick.

        Returns:
            True if a change event was published.

        Raises:
            OSError: The stat failed. The failure has already been
                published on ``errors`` by the time this is raised.
        """
        try:
            mtime_ns = self.path.stat().st_mtime_ns
        except OSError as e:
            logger.error("Stat failed for %s: %s", self.path, e)
            await self.errors.send(StatFailure(path=self.path, error=e))
            raise

        if mtime_ns == self.last_mtime_ns:
            return False

        logger.debug("Change detected on %s (mtime_ns=%d)", self.path, mtime_ns)
        await self.changes.send(ChangeEvent(path=self.path, mtime_ns=mtime_ns))
        # Remember the time from this stat, not a fresh one.
        self.last_mtime_ns = mtime_ns
        return True

    async def run(self) -> None:
        """Poll until cancelled."""
        logger.info("Watching %s every %.2fs", self.path, self.interval)
        while True:
            try:
                await self.check_once()
            except OSError:
                continue
            await asyncio.sleep(self.interval)
