"""Single-slot, overwrite-on-publish mailbox for the latest snapshot."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from snapshot_snake.snapshot import Snapshot

logger = logging.getLogger(__name__)


class SnapshotMailbox:
    """Holds the most recently published :class:`Snapshot`.

    Publishing swaps a single reference; reading is one attribute load with
    no lock, so observers never block and never mutate anything. Snapshots
    are fully built before they are published and are immutable afterwards,
    so a reader sees either the previous value or the new one.

    The writer-side lock only orders the staleness check against the swap:
    a snapshot whose ``sequence`` is older than the current one is rejected,
    which keeps visibility monotonic for every reader.
    """

    def __init__(self) -> None:
        self._write_lock = threading.Lock()
        self._current: Snapshot | None = None
        self._published = 0

    @property
    def published(self) -> int:
        """Number of snapshots accepted so far."""
        return self._published

    def publish(self, snapshot: Snapshot) -> bool:
        """Make *snapshot* the current value. Returns False if it was stale."""
        with self._write_lock:
            current = self._current
            if current is not None and snapshot.sequence < current.sequence:
                logger.debug(
                    "Dropped stale snapshot %d (current is %d).",
                    snapshot.sequence, current.sequence,
                )
                return False
            self._current = snapshot
            self._published += 1
        return True

    def current(self) -> Snapshot | None:
        """Return the latest published snapshot, or ``None`` before any."""
        return self._current
