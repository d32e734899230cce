"""Curses renderer and the pure frame builders it draws from."""

from __future__ import annotations

import curses
import logging
from typing import TYPE_CHECKING

from snapshot_snake.grid import CellType

if TYPE_CHECKING:
    from snapshot_snake.snapshot import Snapshot

logger = logging.getLogger(__name__)

HEAD_SYMBOL = "O"
SYMBOLS: dict[CellType, str] = {
    CellType.EMPTY: " ",
    CellType.SNAKE: "o",
    CellType.FOOD: "*",
    CellType.WALL: "#",
}

TITLE_LINES = [
    "  +===============================+",
    "  |          SNAKE GAME           |",
    "  +===============================+",
]
CONTROLS_LINE = "  Controls: Arrow Keys or WASD  |  Q: Quit"
READY_LINES = [
    "  +===================================+",
    "  |  CONTROLS:                        |",
    "  |                                   |",
    "  |  W or UP Arrow    - Move UP       |",
    "  |  S or DOWN Arrow  - Move DOWN     |",
    "  |  A or LEFT Arrow  - Move LEFT     |",
    "  |  D or RIGHT Arrow - Move RIGHT    |",
    "  |  Q                - Quit Game     |",
    "  |                                   |",
    "  |  Press ENTER or a move key...     |",
    "  +===================================+",
]

# Screen rows above the board: title, a blank line, the status line, and
# the top border.
STATUS_ROW = len(TITLE_LINES) + 1
BOARD_TOP = STATUS_ROW + 1


def render_rows(snapshot: Snapshot) -> list[str]:
    """Return one string per board row; the head is drawn distinctly."""
    head = snapshot.head if snapshot.snake else None
    lines: list[str] = []
    for r in range(snapshot.rows):
        chars = [SYMBOLS[CellType(v)] for v in snapshot.board[r]]
        if head is not None and head[0] == r:
            chars[head[1]] = HEAD_SYMBOL
        lines.append("".join(chars))
    return lines


def bordered(rows: list[str]) -> list[str]:
    """Frame *rows* with a +---+ box."""
    width = len(rows[0]) if rows else 0
    edge = "+" + "-" * width + "+"
    return [edge, *("|" + row + "|" for row in rows), edge]


def status_line(snapshot: Snapshot, high_score: int) -> str:
    return (
        f"  Score: {snapshot.score:4d}"
        f"  |  Length: {snapshot.snake_length:3d}"
        f"  |  High Score: {max(high_score, snapshot.score):4d}  "
    )


def game_over_lines(
    snapshot: Snapshot, high_score: int, new_record: bool,
) -> list[str]:
    lines = [
        "  +===============================+",
        "  |          GAME OVER!           |",
        f"  |   Final Score: {snapshot.score:4d}           |",
        f"  |   High Score:  {high_score:4d}           |",
    ]
    if new_record:
        lines += [
            "  |                               |",
            "  |    *** NEW HIGH SCORE! ***    |",
        ]
    lines += [
        "  |                               |",
        "  |   Press R to Replay           |",
        "  |   Press Q to Quit             |",
        "  +===============================+",
    ]
    return lines


def intro_lines(high_score: int) -> list[str]:
    return [
        "",
        "  #########################################",
        "  #                                       #",
        "  #              SNAKE GAME               #",
        "  #                                       #",
        "  #########################################",
        "",
        f"  High Score: {high_score}",
        "",
        "  Press ENTER to Start",
        "  Press Q to Quit",
    ]


class CursesRenderer:
    """Draws snapshots onto a curses window."""

    def __init__(self, stdscr: curses.window) -> None:
        self.stdscr = stdscr
        self.rows = 0
        self.cols = 0

    def open(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor.")
        self.stdscr.clear()

    def _put(self, row: int, col: int, text: str) -> None:
        try:
            self.stdscr.addstr(row, col, text)
        except curses.error:
            # Writes past the window edge; the frame is clipped.
            pass

    def _put_lines(self, top: int, lines: list[str]) -> None:
        for i, line in enumerate(lines):
            self._put(top + i, 0, line)

    def show_intro(self, high_score: int) -> None:
        self.stdscr.clear()
        self._put_lines(0, intro_lines(high_score))
        self.stdscr.refresh()

    def _draw_board(self, snapshot: Snapshot, high_score: int) -> int:
        """Erase and draw title, status and board. Returns the next free row."""
        self.stdscr.erase()
        self._put_lines(0, TITLE_LINES)
        self._put(STATUS_ROW, 0, status_line(snapshot, high_score))
        board = bordered(render_rows(snapshot))
        self._put_lines(BOARD_TOP, board)
        return BOARD_TOP + len(board) + 1

    def draw(self, snapshot: Snapshot, high_score: int) -> None:
        row = self._draw_board(snapshot, high_score)
        self._put(row, 0, CONTROLS_LINE)
        self.stdscr.refresh()

    def show_ready(self, snapshot: Snapshot, high_score: int) -> None:
        """Draw the starting board with the full controls box under it."""
        row = self._draw_board(snapshot, high_score)
        self._put_lines(row, READY_LINES)
        self.stdscr.refresh()

    def show_game_over(
        self, snapshot: Snapshot, high_score: int, new_record: bool,
    ) -> None:
        top = BOARD_TOP + snapshot.rows + 4
        self._put_lines(top, game_over_lines(snapshot, high_score, new_record))
        self.stdscr.refresh()

    def close(self) -> None:
        try:
            curses.curs_set(1)
        except curses.error:
            logger.debug("Terminal cannot restore the cursor.")
