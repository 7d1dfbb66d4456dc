# render.py
from typing import Tuple
import pygame  # type: ignore

from .config import CELL, BG, FOOD, OBSTACLE, HEAD, BODY
from .game import GameState

BAND_HEIGHT = 60
BAND_ALPHA = 153   # 60% black
OVERLAY_TEXT = (255, 255, 255)


def draw_cell(surface: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    # 1px inset leaves a grid line between neighbours
    rect = pygame.Rect(gx * CELL + 1, gy * CELL + 1, CELL - 2, CELL - 2)
    pygame.draw.rect(surface, color, rect)

def draw_game(surface: pygame.Surface, state: GameState) -> None:
    """Background, food, obstacles, then the snake on top (head last)."""
    surface.fill(BG)
    draw_cell(surface, state.food[0], state.food[1], FOOD)
    for x, y in state.obstacles:
        draw_cell(surface, x, y, OBSTACLE)
    for x, y in reversed(state.snake[1:]):
        draw_cell(surface, x, y, BODY)
    hx, hy = state.head
    draw_cell(surface, hx, hy, HEAD)

def draw_game_over(surface: pygame.Surface, font: pygame.font.Font, score: int) -> None:
    """Dimmed band across the middle with the final score."""
    width, height = surface.get_size()
    band = pygame.Surface((width, BAND_HEIGHT), pygame.SRCALPHA)
    band.fill((0, 0, 0, BAND_ALPHA))
    surface.blit(band, (0, height // 2 - BAND_HEIGHT // 2))

    text = font.render(f"Game Over - Score: {score}", True, OVERLAY_TEXT)
    surface.blit(text, text.get_rect(center=(width // 2, height // 2)))

def draw_frame(surface: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    """Whole board; frozen last frame plus overlay once the game has ended."""
    draw_game(surface, state)
    if not state.running:
        draw_game_over(surface, font, state.score)
