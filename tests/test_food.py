"""Tests for the FoodSpawner module."""

import numpy as np

from snapshot_snake.food import FoodSpawner
from snapshot_snake.grid import CellType, Grid


def _count(grid, cell_type):
    return int(np.count_nonzero(grid.cells == cell_type))


class TestFoodSpawning:
    def test_starts_without_food(self):
        spawner = FoodSpawner(Grid(rows=5, cols=5))
        assert spawner.position is None
        assert not spawner.exists

    def test_spawn_marks_cell(self):
        grid = Grid(rows=5, cols=5)
        spawner = FoodSpawner(grid, rng=np.random.default_rng(42))
        pos = spawner.spawn()
        assert pos is not None
        assert spawner.exists
        assert grid.get(*pos) == CellType.FOOD

    def test_at_most_one_food(self):
        grid = Grid(rows=5, cols=5)
        spawner = FoodSpawner(grid, rng=np.random.default_rng(42))
        first = spawner.spawn()
        assert spawner.spawn() == first
        assert _count(grid, CellType.FOOD) == 1

    def test_spawn_deterministic(self):
        """Same seed produces the same food position."""
        assert self._spawn_with_seed(7) == self._spawn_with_seed(7)

    def test_spawn_only_on_empty_cell(self):
        grid = Grid(rows=3, cols=3)
        grid.cells[:] = CellType.SNAKE
        grid.set(2, 1, CellType.EMPTY)
        spawner = FoodSpawner(grid, rng=np.random.default_rng(0))
        assert spawner.spawn() == (2, 1)

    def test_spawn_on_full_grid(self):
        grid = Grid(rows=4, cols=4)
        grid.cells[:] = CellType.SNAKE
        spawner = FoodSpawner(grid)
        assert spawner.spawn() is None
        assert not spawner.exists

    def test_spawn_is_roughly_uniform(self):
        counts = {}
        rng = np.random.default_rng(3)
        for _ in range(400):
            grid = Grid(rows=2, cols=2)
            pos = FoodSpawner(grid, rng=rng).spawn()
            counts[pos] = counts.get(pos, 0) + 1
        assert set(counts) == {(0, 0), (0, 1), (1, 0), (1, 1)}
        assert min(counts.values()) > 50

    @staticmethod
    def _spawn_with_seed(seed: int) -> tuple[int, int] | None:
        grid = Grid(rows=10, cols=10)
        return FoodSpawner(grid, rng=np.random.default_rng(seed)).spawn()


class TestFoodConsumption:
    def test_consume_existing(self):
        grid = Grid(rows=5, cols=5)
        spawner = FoodSpawner(grid)
        pos = spawner.spawn()
        assert spawner.consume() == pos
        assert grid.get(*pos) == CellType.EMPTY
        assert not spawner.exists

    def test_consume_nothing(self):
        spawner = FoodSpawner(Grid(rows=5, cols=5))
        assert spawner.consume() is None
