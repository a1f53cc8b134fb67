"""
High score persistence: one integer stored as decimal text in a file
"""

from __future__ import annotations

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Loads and saves the best score. Never raises to the caller.

    With path=None nothing is persisted (headless runs).
    """

    def __init__(self, path: Optional[str] = "highscore.dat"):
        self.path = path

    def load(self) -> int:
        if self.path is None:
            return 0
        try:
            with open(self.path, "r") as f:
                text = f.read()
        except FileNotFoundError:
            logger.debug("No high score file at %s, starting from 0", self.path)
            return 0
        except OSError as e:
            logger.warning("Could not read high score from %s: %s", self.path, e)
            return 0
        except UnicodeDecodeError as e:
            logger.warning("High score in %s is not text: %s", self.path, e)
            return 0

        try:
            value = int(text)
        except ValueError:
            logger.warning("Corrupt high score in %s: %r", self.path, text[:32])
            return 0
        if value < 0:
            logger.warning("Negative high score in %s ignored", self.path)
            return 0
        return value

    def save(self, high_score: int) -> bool:
        """Write the score; returns False if the write failed"""
        if self.path is None:
            return False
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w") as f:
                f.write(str(int(high_score)))
        except OSError as e:
            logger.warning("Could not save high score to %s: %s", self.path, e)
            return False
        return True
