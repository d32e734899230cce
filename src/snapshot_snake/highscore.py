"""Plain-text persistence for the best score."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class HighScoreStore:
    """A single integer high score kept in a text file.

    The file is read once on construction; a missing or unreadable file
    counts as a high score of 0.
    """

    def __init__(self, path: str | Path = "game_highest.txt") -> None:
        self.path = Path(path)
        self._high_score = self._load()

    @property
    def high_score(self) -> int:
        return self._high_score

    def _load(self) -> int:
        try:
            raw = self.path.read_text()
        except FileNotFoundError:
            return 0
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read high score from %s: %s", self.path, exc)
            return 0
        try:
            value = int(raw.strip())
        except ValueError:
            logger.warning("Ignoring malformed high score file %s.", self.path)
            return 0
        return max(value, 0)

    def is_new_high_score(self, score: int) -> bool:
        return score > self._high_score

    def record(self, score: int) -> bool:
        """Store *score* if it beats the current high score.

        Returns True if it was a new record. A failed write is logged and
        the new value is still kept for the rest of the process.
        """
        if not self.is_new_high_score(score):
            return False
        self._high_score = score
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(str(score))
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.path, exc)
        else:
            logger.info("New high score %d saved to %s.", score, self.path)
        return True

    def reset(self) -> None:
        """Forget the stored high score."""
        self._high_score = 0
        self.path.unlink(missing_ok=True)
        logger.info("High score reset (%s).", self.path)
