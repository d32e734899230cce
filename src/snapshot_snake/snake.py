"""Snake body representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque


class Direction(enum.Enum):
    """Cardinal movement directions with (row_delta, col_delta) values.

    ``NONE`` is not a movement: it marks the absence of a pending request.
    """

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)
    NONE = (0, 0)

    def opposite(self) -> Direction:
        """Return the direction that would be a 180° reversal of this one."""
        return _OPPOSITES[self]

    @classmethod
    def parse(cls, name: str) -> Direction:
        """Look up a movement direction by case-insensitive name."""
        try:
            direction = cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}.") from None
        if direction is cls.NONE:
            raise ValueError("NONE is not a movement direction.")
        return direction


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.NONE: Direction.NONE,
}


class Snake:
    """A snake represented as an ordered deque of (row, col) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. Segments are laid out
    backwards from the head, against the initial direction of travel.
    """

    def __init__(
        self,
        start_row: int,
        start_col: int,
        direction: Direction = Direction.RIGHT,
        length: int = 3,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        if direction is Direction.NONE:
            raise ValueError("Snake needs a movement direction.")
        dr, dc = direction.value
        self.body: deque[tuple[int, int]] = deque()
        for i in range(length):
            self.body.append((start_row - dr * i, start_col - dc * i))
        self.direction = direction
        self._grow_pending = 0

    @property
    def head(self) -> tuple[int, int]:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> tuple[int, int]:
        return self.body[-1]

    @property
    def growth_pending(self) -> int:
        """Number of upcoming moves that keep the tail in place."""
        return self._grow_pending

    def __len__(self) -> int:
        return len(self.body)

    def set_direction(self, new_direction: Direction) -> bool:
        """Change direction, ignoring ``NONE`` and 180° reversals.

        Returns True if the direction was adopted.
        """
        if new_direction is Direction.NONE:
            return False
        if new_direction.opposite() is self.direction:
            return False
        self.direction = new_direction
        return True

    def next_head(self) -> tuple[int, int]:
        """Compute the next head position without moving."""
        dr, dc = self.direction.value
        r, c = self.head
        return r + dr, c + dc

    def advance(self) -> tuple[int, int] | None:
        """Move the snake one step forward.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(self.next_head())
        if self._grow_pending > 0:
            self._grow_pending -= 1
            return None
        return self.body.pop()

    def schedule_growth(self, segments: int = 1) -> None:
        """Queue growth for the next *segments* moves."""
        self._grow_pending += segments

    def collides(self, pos: tuple[int, int]) -> bool:
        """Check whether *pos* lands on any segment, tail included."""
        return pos in self.body
