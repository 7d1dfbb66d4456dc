from dataclasses import dataclass
from typing import Dict, Optional

# ----- Board -----
COLS, ROWS = 20, 20
CELL = 20
BOARD_W, BOARD_H = COLS * CELL, ROWS * CELL
HUD_HEIGHT = 40
WIDTH, HEIGHT = BOARD_W, BOARD_H + HUD_HEIGHT

NUM_OBSTACLES = 10

# ----- Colors -----
BG       = (0, 0, 0)
FOOD     = (231, 111, 81)    # #e76f51
OBSTACLE = (85, 85, 85)      # #555
HEAD     = (107, 226, 129)   # #6be281
BODY     = (47, 208, 122)    # #2fd07a
TEXT     = (221, 221, 221)
HUD_BG   = (24, 24, 28)
PANEL    = (48, 52, 60)
PANEL_HI = (70, 76, 86)
OUTLINE  = (30, 33, 38)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# ----- Difficulty: name -> ticks per second (lower = slower) -----
DIFFICULTY: Dict[str, int] = {
    "novice": 6,
    "intermediate": 10,
    "expert": 14,
}
DEFAULT_DIFFICULTY = "intermediate"

# Snake the session starts with, head first
START_SNAKE = [(9, 9), (8, 9), (7, 9)]
START_DIRECTION = RIGHT


@dataclass
class Config:
    seed: Optional[int] = None
    num_obstacles: int = NUM_OBSTACLES
    difficulty: str = DEFAULT_DIFFICULTY
    log_level: str = "WARNING"


CFG = Config()
