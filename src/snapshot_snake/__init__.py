"""Snapshot Snake: a tick-based snake engine with lock-free state publication."""

from snapshot_snake.config import GameConfig
from snapshot_snake.engine import GameEngine
from snapshot_snake.grid import CellType, Grid
from snapshot_snake.highscore import HighScoreStore
from snapshot_snake.mailbox import SnapshotMailbox
from snapshot_snake.session import Command, GameSession
from snapshot_snake.snake import Direction, Snake
from snapshot_snake.snapshot import GameOverReason, Snapshot

__all__ = [
    "CellType",
    "Command",
    "Direction",
    "GameConfig",
    "GameEngine",
    "GameOverReason",
    "GameSession",
    "Grid",
    "HighScoreStore",
    "Snake",
    "Snapshot",
    "SnapshotMailbox",
]
