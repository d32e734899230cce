"""Tests for the direction intake cell."""

import threading

from snapshot_snake.intake import DirectionIntake
from snapshot_snake.snake import Direction


class TestDirectionIntake:
    def test_empty_take(self):
        intake = DirectionIntake()
        assert intake.take() is Direction.NONE
        assert intake.pending is Direction.NONE

    def test_take_clears(self):
        intake = DirectionIntake()
        intake.request(Direction.UP)
        assert intake.pending is Direction.UP
        assert intake.take() is Direction.UP
        assert intake.take() is Direction.NONE

    def test_latest_request_wins(self):
        intake = DirectionIntake()
        intake.request(Direction.UP)
        intake.request(Direction.LEFT)
        assert intake.take() is Direction.LEFT
        assert intake.take() is Direction.NONE

    def test_reversal_not_filtered_at_intake(self):
        intake = DirectionIntake()
        intake.request(Direction.DOWN)
        intake.request(Direction.UP)
        assert intake.take() is Direction.UP

    def test_none_is_ignored(self):
        intake = DirectionIntake()
        intake.request(Direction.RIGHT)
        intake.request(Direction.NONE)
        assert intake.take() is Direction.RIGHT

    def test_clear(self):
        intake = DirectionIntake()
        intake.request(Direction.RIGHT)
        intake.clear()
        assert intake.take() is Direction.NONE

    def test_each_request_taken_at_most_once(self):
        intake = DirectionIntake()
        taken: list[Direction] = []
        done = threading.Event()

        def consumer() -> None:
            while not done.is_set():
                d = intake.take()
                if d is not Direction.NONE:
                    taken.append(d)

        t = threading.Thread(target=consumer)
        t.start()
        for _ in range(2000):
            intake.request(Direction.UP)
        done.set()
        t.join()
        taken.extend(d for d in [intake.take()] if d is not Direction.NONE)
        assert 1 <= len(taken) <= 2000
        assert set(taken) == {Direction.UP}
