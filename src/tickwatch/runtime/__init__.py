"""Runtime loops: change detection, processing and their coordination."""

from tickwatch.runtime.channel import Rendezvous
from tickwatch.runtime.detector import ChangeDetector, ChangeEvent, StatFailure
from tickwatch.runtime.processor import ProgressProcessor
from tickwatch.runtime.watcher import run_once, watch

__all__ = [
    "ChangeDetector",
    "ChangeEvent",
    "ProgressProcessor",
    "Rendezvous",
    "StatFailure",
    "run_once",
    "watch",
]
