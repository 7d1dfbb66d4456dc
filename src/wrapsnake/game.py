# game.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
import logging
import random

from .config import CFG, START_SNAKE, START_DIRECTION
from .grid import Cell, Direction, Occupancy, random_cell, wrap

logger = logging.getLogger(__name__)

# ---------- Tick outcomes ----------
IDLE = "idle"                  # game already over, nothing happened
MOVED = "moved"
ATE = "ate"
HIT_OBSTACLE = "obstacle"
HIT_SELF = "self"
BOARD_FULL = "board_full"     # ate the last free cell

TERMINAL = (HIT_OBSTACLE, HIT_SELF, BOARD_FULL)


# ---------- Placement ----------
def spawn_food(body: Occupancy, obstacles: Occupancy, rng: random.Random) -> Cell:
    """Sample random cells until one is free of both the snake and obstacles."""
    if body.free_cells() - len(obstacles) <= 0:
        raise ValueError("no free cell left for food")
    while True:
        cell = random_cell(rng)
        if cell not in body and cell not in obstacles:
            return cell

def place_obstacles(snake: List[Cell], count: int, rng: random.Random) -> List[Cell]:
    """
    Pick `count` distinct cells, none of them on the starting snake.
    Done once per session; obstacles never move afterwards.
    """
    forbidden = Occupancy(snake)
    if count < 0 or count > forbidden.free_cells():
        raise ValueError(f"cannot place {count} obstacles on {forbidden.free_cells()} free cells")
    placed: List[Cell] = []
    while len(placed) < count:
        cell = random_cell(rng)
        if cell in forbidden:
            continue
        forbidden.add(cell)
        placed.append(cell)
    return placed


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]              # head at index 0
    direction: Direction
    food: Cell
    obstacles: List[Cell]
    score: int = 0
    running: bool = True
    body: Occupancy = field(init=False, repr=False)
    blocked: Occupancy = field(init=False, repr=False)

    def __post_init__(self):
        self.body = Occupancy(self.snake)
        self.blocked = Occupancy(self.obstacles)

    @property
    def head(self) -> Cell:
        return self.snake[0]

def new_game_state(rng: random.Random, num_obstacles: Optional[int] = None) -> GameState:
    """Fresh snake, then obstacles, then food (food must avoid both)."""
    if num_obstacles is None:
        num_obstacles = CFG.num_obstacles
    snake = list(START_SNAKE)
    obstacles = place_obstacles(snake, num_obstacles, rng)
    body, blocked = Occupancy(snake), Occupancy(obstacles)
    food = spawn_food(body, blocked, rng)
    return GameState(snake=snake, direction=START_DIRECTION, food=food, obstacles=obstacles)


# ---------- Update ----------
def step_game(state: GameState, rng: random.Random) -> str:
    """
    Advance the snake by one tick and return what happened.

    The self-collision test runs against the body *before* the tail moves,
    so stepping onto the cell the tail is about to leave still kills.
    """
    if not state.running:
        return IDLE

    new_head = wrap(state.head, state.direction)

    if new_head in state.blocked:
        state.running = False
        return HIT_OBSTACLE
    if new_head in state.body:
        state.running = False
        return HIT_SELF

    state.snake.insert(0, new_head)
    state.body.add(new_head)

    if new_head == state.food:
        state.score += 1
        if state.body.free_cells() - len(state.blocked) <= 0:
            state.running = False
            return BOARD_FULL
        state.food = spawn_food(state.body, state.blocked, rng)
        logger.debug("ate at %s, score=%d, food -> %s", new_head, state.score, state.food)
        return ATE

    state.body.discard(state.snake.pop())
    return MOVED
