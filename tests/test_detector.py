"""Tests for the modification-time change detector and its channel."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

import pytest

from tickwatch.runtime.channel import Rendezvous
from tickwatch.runtime.detector import ChangeDetector, ChangeEvent, StatFailure


def test_rendezvous_send_waits_for_receiver() -> None:
    async def scenario() -> tuple[bool, bool, str]:
        channel: Rendezvous[str] = Rendezvous()
        send_task = asyncio.create_task(channel.send("hello"))
        await asyncio.sleep(0.02)
        blocked = not send_task.done() and channel.pending
        item = await channel.receive()
        await asyncio.wait_for(send_task, timeout=1)
        return blocked, channel.pending, item

    blocked, pending_after, item = asyncio.run(scenario())

    assert blocked is True
    assert pending_after is False
    assert item == "hello"


def test_interval_must_be_positive(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        ChangeDetector(tmp_path / "todo.txt", interval=0)


def test_first_stat_counts_as_change(checklist_file: Path) -> None:
    async def scenario() -> tuple[bool, ChangeEvent, int]:
        detector = ChangeDetector(checklist_file, interval=0.01)
        receiver = asyncio.create_task(detector.changes.receive())
        changed = await detector.check_once()
        return changed, await receiver, detector.last_mtime_ns

    changed, event, remembered = asyncio.run(scenario())

    mtime_ns = checklist_file.stat().st_mtime_ns
    assert changed is True
    assert event.path == checklist_file
    assert event.mtime_ns == mtime_ns
    assert remembered == mtime_ns


def test_unchanged_mtime_publishes_nothing(checklist_file: Path) -> None:
    async def scenario() -> bool:
        detector = ChangeDetector(checklist_file, interval=0.01)
        detector.last_mtime_ns = checklist_file.stat().st_mtime_ns
        return await asyncio.wait_for(detector.check_once(), timeout=1)

    assert asyncio.run(scenario()) is False


def test_new_mtime_publishes_again(checklist_file: Path) -> None:
    async def scenario() -> list[int]:
        detector = ChangeDetector(checklist_file, interval=0.01)
        seen: list[int] = []

        receiver = asyncio.create_task(detector.changes.receive())
        await detector.check_once()
        seen.append((await receiver).mtime_ns)

        os.utime(checklist_file, ns=(1_000_000_000, 1_000_000_000))
        receiver = asyncio.create_task(detector.changes.receive())
        await detector.check_once()
        seen.append((await receiver).mtime_ns)
        return seen

    first, second = asyncio.run(scenario())

    assert first != second
    assert second == 1_000_000_000


def test_publish_blocks_until_received(checklist_file: Path) -> None:
    async def scenario() -> tuple[bool, int, int]:
        detector = ChangeDetector(checklist_file, interval=0.01)
        tick = asyncio.create_task(detector.check_once())
        await asyncio.sleep(0.02)
        blocked = not tick.done()
        remembered_while_blocked = detector.last_mtime_ns
        await detector.changes.receive()
        await asyncio.wait_for(tick, timeout=1)
        return blocked, remembered_while_blocked, detector.last_mtime_ns

    blocked, while_blocked, after = asyncio.run(scenario())

    assert blocked is True
    assert while_blocked == 0
    assert after == checklist_file.stat().st_mtime_ns


def test_stat_failure_is_published(tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"

    async def scenario() -> StatFailure:
        detector = ChangeDetector(missing, interval=0.01)
        receiver = asyncio.create_task(detector.errors.receive())
        with pytest.raises(FileNotFoundError):
            await detector.check_once()
        return await receiver

    failure = asyncio.run(scenario())

    assert failure.path == missing
    assert isinstance(failure.error, FileNotFoundError)


def test_run_loop_emits_events(checklist_file: Path) -> None:
    async def scenario() -> ChangeEvent:
        detector = ChangeDetector(checklist_file, interval=0.01)
        task = asyncio.create_task(detector.run())
        try:
            return await asyncio.wait_for(detector.changes.receive(), timeout=1)
        finally:
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)

    event = asyncio.run(scenario())

    assert event.mtime_ns == checklist_file.stat().st_mtime_ns


def test_run_retries_without_sleeping_after_stat_failure(tmp_path: Path) -> None:
    path = tmp_path / "todo.txt"

    async def scenario() -> tuple[StatFailure, ChangeEvent]:
        # Far longer than the receive timeouts below.
        detector = ChangeDetector(path, interval=10)
        task = asyncio.create_task(detector.run())
        try:
            failure = await asyncio.wait_for(detector.errors.receive(), timeout=1)
            path.write_text("- [ ] A\n", encoding="utf-8")
            event = await asyncio.wait_for(detector.changes.receive(), timeout=1)
        finally:
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
        return failure, event

    failure, event = asyncio.run(scenario())

    assert isinstance(failure.error, FileNotFoundError)
    assert event.path == path
    assert event.mtime_ns == path.stat().st_mtime_ns
