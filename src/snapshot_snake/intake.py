"""Pending direction cell shared between input producers and the engine."""

from __future__ import annotations

from collections import deque

from snapshot_snake.snake import Direction


class DirectionIntake:
    """Single-slot holder for the most recent direction request.

    Backed by ``deque(maxlen=1)``: ``append`` overwrites any older request
    and ``pop`` takes-and-clears, each as one atomic operation. Requests are
    not validated here; reversals are filtered by the engine when it
    consumes them.
    """

    def __init__(self) -> None:
        self._slot: deque[Direction] = deque(maxlen=1)

    @property
    def pending(self) -> Direction:
        """Peek at the pending request without consuming it."""
        try:
            return self._slot[-1]
        except IndexError:
            return Direction.NONE

    def request(self, direction: Direction) -> None:
        """Record *direction*, replacing any earlier unconsumed request."""
        if direction is Direction.NONE:
            return
        self._slot.append(direction)

    def take(self) -> Direction:
        """Consume the pending request, or return ``Direction.NONE``."""
        try:
            return self._slot.pop()
        except IndexError:
            return Direction.NONE

    def clear(self) -> None:
        self._slot.clear()
