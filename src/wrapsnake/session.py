# session.py
"""
One game session: snake state, its timer and its difficulty, bundled
so several sessions can coexist and tests can drive one deterministically.
"""
from __future__ import annotations
from typing import Callable, Optional
import logging
import random

from .config import CFG, Config
from .controls import RESTART_KEY, change_direction, difficulty_for_key, direction_for_key
from .difficulty import DifficultyController
from .game import ATE, BOARD_FULL, TERMINAL, IDLE, GameState, new_game_state, step_game
from .scheduler import PeriodicTask

logger = logging.getLogger(__name__)

RUNNING = "running"
GAME_OVER = "game_over"


def score_label(score: int) -> str:
    return f"Score: {score}"


class GameSession:
    def __init__(
        self,
        config: Optional[Config] = None,
        clock=None,
        rng: Optional[random.Random] = None,
        on_render: Optional[Callable[["GameSession"], None]] = None,
    ):
        self.config = config if config is not None else CFG
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.on_render = on_render
        self.difficulty = DifficultyController(self.config.difficulty)
        self.timer = PeriodicTask(self.tick, clock)
        self.state: GameState
        self.score_text = score_label(0)
        self.game_over_reason: Optional[str] = None
        self.difficulty.subscribe(self._retime)
        self.reset()

    # ---------- Lifecycle ----------
    @property
    def phase(self) -> str:
        return RUNNING if self.state.running else GAME_OVER

    @property
    def running(self) -> bool:
        return self.state.running

    def reset(self) -> None:
        """Brand new snake, obstacles, food and score; timer restarted."""
        self.state = new_game_state(self.rng, self.config.num_obstacles)
        self.score_text = score_label(0)
        self.game_over_reason = None
        self.timer.start(self.difficulty.rate)
        logger.debug("session reset: obstacles=%s food=%s", self.state.obstacles, self.state.food)
        self.render()

    def game_over(self, reason: str) -> None:
        self.state.running = False
        self.timer.stop()
        self.game_over_reason = reason
        logger.info("game over (%s), score %d", reason, self.state.score)
        self.render()

    def render(self) -> None:
        if self.on_render is not None:
            self.on_render(self)

    # ---------- Timer ----------
    def tick(self) -> str:
        outcome = step_game(self.state, self.rng)
        if outcome == IDLE:
            return outcome
        if outcome in (ATE, BOARD_FULL):
            self.score_text = score_label(self.state.score)
        if outcome in TERMINAL:
            self.game_over(outcome)
            return outcome
        self.render()
        return outcome

    def poll(self) -> int:
        return self.timer.poll()

    def _retime(self, level: str) -> None:
        # Speed changes keep the board as it is, only the timer restarts
        if self.state.running:
            self.timer.set_rate(self.difficulty.rate)

    # ---------- Input ----------
    def set_difficulty(self, level: str) -> bool:
        return self.difficulty.set(level)

    def handle_key(self, key: int) -> bool:
        """Apply a key press. Returns False for keys the game does not use."""
        level = difficulty_for_key(key)
        if level is not None:
            self.set_difficulty(level)
            return True
        if key == RESTART_KEY:
            self.reset()
            return True
        direction = direction_for_key(key)
        if direction is None:
            return False
        if self.state.running:
            change_direction(self.state, direction)
        return True
