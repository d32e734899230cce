"""Grid representation for the snake game."""

from __future__ import annotations

import enum

import numpy as np


class CellType(enum.IntEnum):
    """Integer codes stored in the grid array."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2
    WALL = 3


class Grid:
    """NumPy-backed game board with fixed dimensions.

    Cells are stored as integers for O(1) collision checks. Coordinates use
    (row, col) ordering consistent with NumPy indexing.
    """

    def __init__(self, rows: int = 20, cols: int = 40) -> None:
        if rows < 1 or cols < 1:
            raise ValueError("Grid dimensions must be at least 1×1.")
        self.rows = rows
        self.cols = cols
        self.cells = np.zeros((rows, cols), dtype=np.int8)

    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> CellType:
        """Return the cell type at the given coordinate."""
        return CellType(self.cells[row, col])

    def set(self, row: int, col: int, cell_type: CellType) -> None:
        """Set the cell type at the given coordinate."""
        self.cells[row, col] = cell_type

    def empty_cells(self) -> list[tuple[int, int]]:
        """Return all empty cell coordinates in row-major order."""
        rows, cols = np.where(self.cells == CellType.EMPTY)
        return list(zip(rows.tolist(), cols.tolist(), strict=True))

    def place_walls(
        self, count: int, rng: np.random.Generator,
    ) -> list[tuple[int, int]]:
        """Turn up to *count* uniformly chosen empty cells into walls.

        Empty cells are re-collected before every draw. Returns the wall
        positions actually placed.
        """
        placed: list[tuple[int, int]] = []
        for _ in range(count):
            empty = self.empty_cells()
            if not empty:
                break
            pos = empty[int(rng.integers(0, len(empty)))]
            self.set(pos[0], pos[1], CellType.WALL)
            placed.append(pos)
        return placed
