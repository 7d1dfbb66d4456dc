# controls.py
from __future__ import annotations
from typing import Dict, Optional

import pygame  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT
from .game import GameState
from .grid import Direction, is_opposite

# Arrow keys and WASD steer
KEY_DIRECTIONS: Dict[int, Direction] = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_w: UP,
    pygame.K_s: DOWN,
    pygame.K_a: LEFT,
    pygame.K_d: RIGHT,
}

# Digit shortcuts pick the level, whatever has focus
KEY_DIFFICULTY: Dict[int, str] = {
    pygame.K_1: "novice",
    pygame.K_2: "intermediate",
    pygame.K_3: "expert",
}

RESTART_KEY = pygame.K_r


def direction_for_key(key: int) -> Optional[Direction]:
    return KEY_DIRECTIONS.get(key)

def difficulty_for_key(key: int) -> Optional[str]:
    return KEY_DIFFICULTY.get(key)

def change_direction(state: GameState, direction: Direction) -> bool:
    """
    Turn the snake; takes effect on the next tick.
    A snake longer than one cell may not reverse onto itself.
    """
    if len(state.snake) > 1 and is_opposite(direction, state.direction):
        return False
    state.direction = direction
    return True
