"""Run the change detector and progress processor together."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from tickwatch.display import Display
from tickwatch.errors import StatFailureError
from tickwatch.models.parser import SubEntryPolicy
from tickwatch.runtime.detector import DEFAULT_POLL_INTERVAL, ChangeDetector
from tickwatch.runtime.processor import ProgressProcessor

logger = logging.getLogger(__name__)


async def watch(
    path: Path,
    display: Display,
    *,
    interval: float = DEFAULT_POLL_INTERVAL,
    sub_policy: SubEntryPolicy = SubEntryPolicy.REPLACE,
) -> None:
    """Watch ``path`` until a fatal error occurs.

    Never returns normally. The first fatal condition (a stat failure
    published by the detector, or any exception from the processor) stops
    both loops and is raised.

    Raises:
        StatFailureError: The file could not be stat'ed.
        ChecklistError: The file did not parse.
        OSError: The file could not be read or rewritten.
    """
    detector = ChangeDetector(path, interval=interval)
    processor = ProgressProcessor(path, display, sub_policy=sub_policy)

    detector_task = asyncio.create_task(detector.run(), name="change-detector")
    processor_task = asyncio.create_task(
        processor.run(detector.changes), name="progress-processor"
    )
    error_task = asyncio.create_task(detector.errors.receive(), name="stat-errors")
    tasks = {detector_task, processor_task, error_task}

    try:
        done, _pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        if error_task in done:
            failure = error_task.result()
            raise StatFailureError(failure.path, failure.error)
        for task in done:
            # Re-raises the task's exception, if any.
            task.result()
        raise RuntimeError("Watch loop stopped without an error")
    finally:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        logger.info("Stopped watching %s", path)


def run_once(
    path: Path,
    display: Display,
    *,
    sub_policy: SubEntryPolicy = SubEntryPolicy.REPLACE,
) -> float:
    """Process ``path`` a single time without polling."""
    processor = ProgressProcessor(path, display, sub_policy=sub_policy)
    return processor.process()
