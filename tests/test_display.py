from __future__ import annotations

import io

from rich.console import Console

from tickwatch.display import ProgressDisplay, format_percentage


def test_format_percentage() -> None:
    assert format_percentage(200 / 3) == "progress: 66.67"
    assert format_percentage(0) == "progress: 0.00"


def test_show_prints_value() -> None:
    buffer = io.StringIO()
    display = ProgressDisplay(Console(file=buffer, width=40), clear=False)

    display.show(50.0)
    display.show(100.0)

    assert buffer.getvalue() == "progress: 50.00\nprogress: 100.00\n"
