"""CLI orchestration: resolve options and run the watcher."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Callable, Sequence

from tickwatch.cli.parser import parse_args
from tickwatch.config.settings import settings
from tickwatch.display import Display, ProgressDisplay
from tickwatch.errors import TickwatchError
from tickwatch.models.parser import SubEntryPolicy
from tickwatch.runtime.watcher import run_once, watch

logger = logging.getLogger(__name__)

EXIT_INTERRUPTED = 130


def dispatch(args: argparse.Namespace, display: Display | None = None) -> int:
    """Run the watcher for parsed args and map fatal errors to exit codes."""
    interval = args.interval or settings.poll_interval
    if args.sub_policy:
        sub_policy = SubEntryPolicy(args.sub_policy)
    else:
        sub_policy = settings.sub_entry_policy
    if display is None:
        display = ProgressDisplay(clear=settings.clear_screen and not args.no_clear)

    logger.info(
        "Checklist: %s (interval=%.2fs, sub_policy=%s)",
        args.path,
        interval,
        sub_policy.value,
    )

    try:
        if args.once:
            run_once(args.path, display, sub_policy=sub_policy)
        else:
            asyncio.run(
                watch(args.path, display, interval=interval, sub_policy=sub_policy)
            )
    except (TickwatchError, OSError) as e:
        logger.error("Fatal: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return EXIT_INTERRUPTED
    return 0


def run(
    argv: Sequence[str] | None = None,
    *,
    configure_logging: Callable[[], None] | None = None,
) -> int:
    """Parse args, apply shared CLI setup, and execute."""
    args = parse_args(argv)

    if configure_logging is not None:
        configure_logging()

    return dispatch(args)
