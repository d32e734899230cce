"""Tests for the Snake module."""

import pytest

from snapshot_snake.snake import Direction, Snake


class TestDirection:
    def test_opposites(self):
        assert Direction.UP.opposite() is Direction.DOWN
        assert Direction.DOWN.opposite() is Direction.UP
        assert Direction.LEFT.opposite() is Direction.RIGHT
        assert Direction.RIGHT.opposite() is Direction.LEFT
        assert Direction.NONE.opposite() is Direction.NONE

    def test_parse(self):
        assert Direction.parse("up") is Direction.UP
        assert Direction.parse(" Right ") is Direction.RIGHT

    def test_parse_rejects_unknown(self):
        with pytest.raises(ValueError, match="Unknown direction"):
            Direction.parse("sideways")

    def test_parse_rejects_none(self):
        with pytest.raises(ValueError, match="not a movement"):
            Direction.parse("none")


class TestSnakeInit:
    def test_default_creation(self):
        snake = Snake(5, 5)
        assert snake.head == (5, 5)
        assert len(snake) == 3
        assert snake.direction == Direction.RIGHT
        assert snake.growth_pending == 0

    def test_body_extends_opposite_to_direction(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        assert list(snake.body) == [(5, 5), (5, 4), (5, 3)]

    def test_body_extends_up(self):
        snake = Snake(5, 5, Direction.UP, length=3)
        assert list(snake.body) == [(5, 5), (6, 5), (7, 5)]

    def test_body_extends_left(self):
        snake = Snake(5, 5, Direction.LEFT, length=2)
        assert list(snake.body) == [(5, 5), (5, 6)]

    def test_minimum_length(self):
        with pytest.raises(ValueError, match="at least 1"):
            Snake(0, 0, length=0)

    def test_none_direction_rejected(self):
        with pytest.raises(ValueError, match="movement direction"):
            Snake(0, 0, Direction.NONE)


class TestSnakeDirection:
    def test_set_valid_direction(self):
        snake = Snake(5, 5, Direction.RIGHT)
        assert snake.set_direction(Direction.UP)
        assert snake.direction == Direction.UP

    def test_ignore_180_reversal(self):
        snake = Snake(5, 5, Direction.RIGHT)
        assert not snake.set_direction(Direction.LEFT)
        assert snake.direction == Direction.RIGHT

    def test_ignore_180_reversal_vertical(self):
        snake = Snake(5, 5, Direction.UP)
        snake.set_direction(Direction.DOWN)
        assert snake.direction == Direction.UP

    def test_ignore_none(self):
        snake = Snake(5, 5, Direction.UP)
        assert not snake.set_direction(Direction.NONE)
        assert snake.direction == Direction.UP


class TestSnakeMovement:
    def test_next_head(self):
        snake = Snake(5, 5, Direction.RIGHT)
        assert snake.next_head() == (5, 6)

    def test_advance_without_growth(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        vacated = snake.advance()
        assert snake.head == (5, 6)
        assert len(snake) == 3
        assert vacated == (5, 3)

    def test_scheduled_growth(self):
        snake = Snake(5, 5, Direction.RIGHT, length=2)
        snake.schedule_growth(2)
        assert snake.advance() is None
        assert len(snake) == 3
        assert snake.growth_pending == 1
        assert snake.advance() is None
        assert len(snake) == 4
        assert snake.growth_pending == 0
        vacated = snake.advance()
        assert len(snake) == 4
        assert vacated is not None


class TestSnakeCollision:
    def test_collides_with_body(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        assert snake.collides((5, 5))
        assert snake.collides((5, 4))
        assert not snake.collides((0, 0))

    def test_tail_counts_as_collision(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        assert snake.collides(snake.tail)
