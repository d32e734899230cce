"""Keyboard polling and key-to-event mapping."""

from __future__ import annotations

import curses

from snapshot_snake.session import Command
from snapshot_snake.snake import Direction

KEY_BINDINGS: dict[int, Direction | Command] = {
    curses.KEY_UP: Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
    curses.KEY_ENTER: Command.START,
    ord("\n"): Command.START,
    ord("\r"): Command.START,
    ord(" "): Command.START,
}
for _key, _event in {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
    "q": Command.QUIT,
    "r": Command.REPLAY,
}.items():
    KEY_BINDINGS[ord(_key)] = _event
    KEY_BINDINGS[ord(_key.upper())] = _event
del _key, _event


def translate_key(key: int) -> Direction | Command | None:
    """Map a curses key code to an input event, or ``None`` if unbound."""
    return KEY_BINDINGS.get(key)


class CursesInput:
    """Non-blocking keyboard source backed by a curses window."""

    def __init__(self, stdscr: curses.window) -> None:
        self.stdscr = stdscr
        self.stdscr.nodelay(True)
        self.stdscr.keypad(True)

    def poll(self) -> Direction | Command | None:
        key = self.stdscr.getch()
        if key == -1:
            return None
        return translate_key(key)
