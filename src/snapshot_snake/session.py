"""Game session: a simulation thread and an observer loop sharing one engine."""

from __future__ import annotations

import enum
import logging
import threading
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from snapshot_snake.snake import Direction

if TYPE_CHECKING:
    from snapshot_snake.config import GameConfig
    from snapshot_snake.engine import GameEngine
    from snapshot_snake.highscore import HighScoreStore
    from snapshot_snake.snapshot import Snapshot

logger = logging.getLogger(__name__)


class Command(enum.Enum):
    """Non-movement input events."""

    START = "start"
    QUIT = "quit"
    REPLAY = "replay"


class Renderer(Protocol):
    def open(self, rows: int, cols: int) -> None: ...
    def show_intro(self, high_score: int) -> None: ...
    def draw(self, snapshot: Snapshot, high_score: int) -> None: ...
    def show_ready(self, snapshot: Snapshot, high_score: int) -> None: ...
    def show_game_over(
        self, snapshot: Snapshot, high_score: int, new_record: bool,
    ) -> None: ...
    def close(self) -> None: ...


class InputSource(Protocol):
    def poll(self) -> Direction | Command | None:
        """Return the next input event without blocking."""
        ...


class SimulationThread(threading.Thread):
    """Calls ``engine.tick()`` at a fixed interval until the game ends.

    This is the only thread allowed to call :meth:`GameEngine.tick`.
    """

    def __init__(self, engine: GameEngine, interval: float) -> None:
        super().__init__(name="simulation", daemon=True)
        self.engine = engine
        self.interval = interval
        self.ticks = 0
        self.error: Exception | None = None
        self.finished = threading.Event()
        self._halt = threading.Event()

    def run(self) -> None:
        try:
            while not self._halt.wait(self.interval):
                self.ticks += 1
                if not self.engine.tick():
                    break
        except Exception as exc:
            logger.exception("Simulation thread failed after %d ticks.", self.ticks)
            self.error = exc
        finally:
            self.finished.set()

    def stop(self) -> None:
        self._halt.set()


@dataclass
class SessionResult:
    """Outcome of a single game."""

    final: Snapshot
    quit: bool
    new_record: bool
    frames: int


class GameSession:
    """Runs games on a background simulation thread.

    The calling thread acts as the observer: it polls input, forwards
    direction requests to the engine, and redraws whenever a newer snapshot
    has been published.
    """

    def __init__(
        self,
        engine: GameEngine,
        renderer: Renderer,
        input_source: InputSource,
        high_scores: HighScoreStore,
        config: GameConfig,
    ) -> None:
        self.engine = engine
        self.renderer = renderer
        self.input_source = input_source
        self.high_scores = high_scores
        self.config = config

    def run(self) -> int:
        """Intro and game, repeated until the player quits.

        Every replay goes back through the intro screen and the ready
        prompt. Returns the number of games started.
        """
        cfg = self.config
        games = 0
        self.renderer.open(cfg.rows, cfg.cols)
        try:
            while True:
                self.renderer.show_intro(self.high_scores.high_score)
                answer = self.wait_for_command({Command.START, Command.QUIT})
                if answer is Command.QUIT:
                    break
                result = self.play(wait_for_key=True)
                games += 1
                if result.quit:
                    break
                answer = self.wait_for_command({Command.REPLAY, Command.QUIT})
                if answer is Command.QUIT:
                    break
        finally:
            self.renderer.close()
        logger.info("Session ended after %d game(s).", games)
        return games

    def play(self, wait_for_key: bool = False) -> SessionResult:
        """Play one game to completion or until the player quits.

        With *wait_for_key* the fresh board is shown with the controls and
        nothing ticks until a key arrives. That key is consumed; QUIT ends
        the game before it starts.
        """
        cfg = self.config
        engine = self.engine
        engine.initialize(
            cfg.rows,
            cfg.cols,
            cfg.starting_length,
            cfg.points_per_food,
            cfg.direction,
            wall_count=cfg.wall_count,
        )

        snapshot = engine.current_snapshot()
        frames = 0
        if wait_for_key:
            self.renderer.show_ready(snapshot, self.high_scores.high_score)
            frames += 1
            if self._wait_for_input() is Command.QUIT:
                return SessionResult(
                    final=snapshot, quit=True, new_record=False, frames=frames,
                )
        self.renderer.draw(snapshot, self.high_scores.high_score)
        frames += 1
        last_sequence = snapshot.sequence
        quit_requested = False

        sim = SimulationThread(engine, cfg.tick_interval)
        sim.start()
        try:
            while True:
                event = self.input_source.poll()
                if event is Command.QUIT:
                    quit_requested = True
                    break
                if isinstance(event, Direction):
                    engine.request_direction(event)

                snapshot = engine.current_snapshot()
                if snapshot.sequence != last_sequence:
                    self.renderer.draw(snapshot, self.high_scores.high_score)
                    frames += 1
                    last_sequence = snapshot.sequence
                if snapshot.game_over or sim.finished.is_set():
                    break
                time.sleep(cfg.frame_interval)
        finally:
            sim.stop()
            sim.join()

        if sim.error is not None:
            raise RuntimeError("Simulation thread failed.") from sim.error

        # The thread may have published a final tick after our last read.
        latest = engine.current_snapshot()
        if latest.sequence != last_sequence and not quit_requested:
            self.renderer.draw(latest, self.high_scores.high_score)
            frames += 1
        snapshot = latest

        new_record = False
        if snapshot.game_over:
            new_record = self.high_scores.record(snapshot.score)
            self.renderer.show_game_over(
                snapshot, self.high_scores.high_score, new_record,
            )
        return SessionResult(
            final=snapshot,
            quit=quit_requested,
            new_record=new_record,
            frames=frames,
        )

    def _wait_for_input(self) -> Direction | Command:
        while True:
            event = self.input_source.poll()
            if event is not None:
                return event
            time.sleep(self.config.frame_interval)

    def wait_for_command(self, commands: set[Command]) -> Command:
        """Poll input until one of *commands* arrives."""
        while True:
            event = self.input_source.poll()
            if event in commands:
                return event
            time.sleep(self.config.frame_interval)
