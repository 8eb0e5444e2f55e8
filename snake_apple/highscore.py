"""
highscore.py - Plain-text high score persistence.

The file holds one decimal integer. Problems reading or writing it never
stop the game: a bad file reads as 0 and a failed write is only logged.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class HighScoreStore:
    def __init__(self, path):
        self.path = Path(path)

    def load(self):
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                contents = fh.read()
        except FileNotFoundError:
            logger.debug("No high score file at %s, starting from 0", self.path)
            return 0
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read high score from %s: %s", self.path, exc)
            return 0

        try:
            score = int(contents.strip())
        except ValueError:
            logger.warning("Ignoring unparsable high score in %s: %r", self.path, contents[:32])
            return 0
        if score < 0:
            logger.warning("Ignoring negative high score %d in %s", score, self.path)
            return 0
        return score

    def save(self, score):
        try:
            with self.path.open("w", encoding="utf-8") as fh:
                fh.write(f"{score}\n")
        except OSError as exc:
            logger.warning("Could not save high score %d to %s: %s", score, self.path, exc)
            return False
        logger.debug("Saved high score %d to %s", score, self.path)
        return True
