# difficulty.py
from __future__ import annotations
from typing import Callable, Dict, List, Optional
import logging

from .config import DIFFICULTY, DEFAULT_DIFFICULTY

logger = logging.getLogger(__name__)


def display_name(level: str) -> str:
    """'novice' -> 'Novice' (what the selector shows)."""
    return level[:1].upper() + level[1:]


class DifficultyController:
    """
    Current level and its tick rate.

    Listeners are called with the new level after every accepted change;
    the session uses one to retime its timer, the HUD selector another.
    """

    def __init__(self, level: str = DEFAULT_DIFFICULTY, levels: Optional[Dict[str, int]] = None):
        self.levels = dict(levels if levels is not None else DIFFICULTY)
        if level not in self.levels:
            raise ValueError(f"unknown difficulty {level!r}")
        self.level = level
        self.listeners: List[Callable[[str], None]] = []

    @property
    def rate(self) -> int:
        return self.levels[self.level]

    @property
    def names(self) -> List[str]:
        return list(self.levels)

    def subscribe(self, listener: Callable[[str], None]) -> None:
        self.listeners.append(listener)

    def set(self, level: str) -> bool:
        """Switch to `level`. Unknown names are ignored and return False."""
        if level not in self.levels:
            logger.debug("ignoring unknown difficulty %r", level)
            return False
        self.level = level
        logger.info("difficulty -> %s (%d ticks/s)", level, self.rate)
        for listener in self.listeners:
            listener(level)
        return True
