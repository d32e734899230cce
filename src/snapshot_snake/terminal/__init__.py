"""Curses front end: renderer and keyboard input."""

from snapshot_snake.terminal.keys import KEY_BINDINGS, CursesInput, translate_key
from snapshot_snake.terminal.renderer import CursesRenderer

__all__ = [
    "KEY_BINDINGS",
    "CursesInput",
    "CursesRenderer",
    "translate_key",
]
