"""Main module for tickwatch."""

import logging
import os
import sys

from tickwatch.cli.app import run
from tickwatch.config.paths import get_paths


def setup_logging() -> None:
    """Configure logging to file, keeping stdout for the display."""
    paths = get_paths()
    paths.global_state_dir.mkdir(parents=True, exist_ok=True)
    log_file = paths.debug_log

    # Set level from env var, default to INFO
    level = os.environ.get("TICKWATCH_LOG_LEVEL", "INFO").upper()

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(log_file, mode="a"),
        ],
    )
    logging.info("tickwatch starting, logging to %s", log_file)


def main() -> None:
    """Entry point for the tickwatch application."""
    sys.exit(run(configure_logging=setup_logging))


if __name__ == "__main__":
    main()
