"""Throughput benchmark for the engine under concurrent snapshot readers."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass

import numpy as np

from snapshot_snake.engine import GameEngine
from snapshot_snake.snake import Direction

logger = logging.getLogger(__name__)

_MOVES = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


@dataclass
class BenchmarkResult:
    """Results from a throughput benchmark run."""

    readers: int
    total_games: int
    total_ticks: int
    total_reads: int
    ordering_violations: int
    wall_time_seconds: float
    ticks_per_second: float
    reads_per_second: float

    def summary(self) -> str:
        return (
            f"Benchmark: {self.total_games} games, {self.total_ticks} ticks, "
            f"{self.total_reads} reads by {self.readers} reader(s) in "
            f"{self.wall_time_seconds:.2f}s | "
            f"{self.ticks_per_second:.1f} ticks/s, "
            f"{self.reads_per_second:.1f} reads/s, "
            f"{self.ordering_violations} ordering violation(s)"
        )


class _Reader(threading.Thread):
    """Reads snapshots in a tight loop and checks sequences never go back."""

    def __init__(self, engine: GameEngine, done: threading.Event) -> None:
        super().__init__(daemon=True)
        self.engine = engine
        self.done = done
        self.reads = 0
        self.violations = 0

    def run(self) -> None:
        last = 0
        while not self.done.is_set():
            snapshot = self.engine.current_snapshot()
            self.reads += 1
            if snapshot.sequence < last:
                self.violations += 1
            last = snapshot.sequence


def benchmark_throughput(
    *,
    num_games: int = 100,
    rows: int = 20,
    cols: int = 40,
    max_ticks: int = 500,
    readers: int = 1,
    seed: int | None = 42,
) -> BenchmarkResult:
    """Measure tick throughput while *readers* threads poll snapshots.

    Games are driven by random direction requests on the calling thread,
    which is the only one that ticks.
    """
    if num_games < 1:
        raise ValueError("num_games must be at least 1.")
    if readers < 0:
        raise ValueError("readers must be >= 0.")

    engine = GameEngine(seed=seed)
    rng = np.random.default_rng(seed)
    engine.initialize(rows, cols)

    done = threading.Event()
    reader_threads = [_Reader(engine, done) for _ in range(readers)]
    for t in reader_threads:
        t.start()

    total_ticks = 0
    start = time.perf_counter()
    try:
        for game in range(num_games):
            if game:
                engine.initialize(rows, cols)
            for _ in range(max_ticks):
                engine.request_direction(_MOVES[int(rng.integers(0, 4))])
                total_ticks += 1
                if not engine.tick():
                    break
    finally:
        done.set()
        for t in reader_threads:
            t.join()
    elapsed = time.perf_counter() - start

    total_reads = sum(t.reads for t in reader_threads)
    result = BenchmarkResult(
        readers=readers,
        total_games=num_games,
        total_ticks=total_ticks,
        total_reads=total_reads,
        ordering_violations=sum(t.violations for t in reader_threads),
        wall_time_seconds=elapsed,
        ticks_per_second=total_ticks / max(elapsed, 1e-9),
        reads_per_second=total_reads / max(elapsed, 1e-9),
    )
    logger.info(result.summary())
    return result
