"""Tests for the snapshot mailbox."""

from __future__ import annotations

import threading

from snapshot_snake.food import FoodSpawner
from snapshot_snake.grid import Grid
from snapshot_snake.mailbox import SnapshotMailbox
from snapshot_snake.snake import Direction, Snake
from snapshot_snake.snapshot import Snapshot


def _snapshot(sequence: int, score: int = 0) -> Snapshot:
    grid = Grid(rows=3, cols=3)
    return Snapshot.capture(
        sequence, grid, Snake(1, 1, Direction.RIGHT, length=1),
        FoodSpawner(grid), score=score, game_over=False,
    )


class TestMailbox:
    def test_empty(self):
        mailbox = SnapshotMailbox()
        assert mailbox.current() is None
        assert mailbox.published == 0

    def test_publish_replaces(self):
        mailbox = SnapshotMailbox()
        first, second = _snapshot(1), _snapshot(2)
        assert mailbox.publish(first)
        assert mailbox.current() is first
        assert mailbox.publish(second)
        assert mailbox.current() is second
        assert mailbox.published == 2

    def test_holds_only_latest(self):
        mailbox = SnapshotMailbox()
        for seq in range(1, 6):
            mailbox.publish(_snapshot(seq))
        assert mailbox.current().sequence == 5

    def test_stale_snapshot_rejected(self):
        mailbox = SnapshotMailbox()
        newer = _snapshot(5)
        mailbox.publish(newer)
        assert not mailbox.publish(_snapshot(4))
        assert mailbox.current() is newer
        assert mailbox.published == 1

    def test_read_does_not_consume(self):
        mailbox = SnapshotMailbox()
        mailbox.publish(_snapshot(1))
        assert mailbox.current() is mailbox.current()


class TestMailboxConcurrency:
    def test_readers_see_monotonic_sequences(self):
        mailbox = SnapshotMailbox()
        snapshots = [_snapshot(seq, score=seq) for seq in range(1, 2001)]
        mailbox.publish(snapshots[0])
        done = threading.Event()
        failures: list[str] = []

        def reader() -> None:
            last = 0
            while not done.is_set():
                snap = mailbox.current()
                if snap.sequence < last:
                    failures.append(f"{snap.sequence} after {last}")
                if snap.score != snap.sequence:
                    failures.append(f"torn snapshot {snap.sequence}")
                last = snap.sequence

        readers = [threading.Thread(target=reader) for _ in range(4)]
        for t in readers:
            t.start()
        for snap in snapshots[1:]:
            mailbox.publish(snap)
        done.set()
        for t in readers:
            t.join()

        assert failures == []
        assert mailbox.current().sequence == 2000

    def test_concurrent_publishers_never_regress(self):
        mailbox = SnapshotMailbox()
        snapshots = [_snapshot(seq) for seq in range(1, 401)]

        def publisher(items: list[Snapshot]) -> None:
            for snap in items:
                mailbox.publish(snap)

        threads = [
            threading.Thread(target=publisher, args=(snapshots[i::2],))
            for i in range(2)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert mailbox.current().sequence == 400
