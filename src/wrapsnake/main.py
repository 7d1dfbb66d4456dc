# main.py
from __future__ import annotations
from typing import List, Optional
import argparse
import logging

import pygame  # type: ignore

from .config import (
    WIDTH, HEIGHT, BOARD_W, BOARD_H, HUD_HEIGHT, COLS, ROWS, START_SNAKE,
    HUD_BG, TEXT, DIFFICULTY, CFG, Config,
)
from .difficulty import display_name
from .render import draw_frame
from .session import GameSession
from .widgets import Button, Dropdown

logger = logging.getLogger(__name__)

FPS = 60  # frame rate only; the snake moves on the session timer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Snake on a wrap-around board with obstacles.")
    parser.add_argument(
        "--difficulty",
        type=str,
        default=CFG.difficulty,
        choices=list(DIFFICULTY),
        help="starting speed (keys 1/2/3 switch while playing)",
    )
    parser.add_argument("--seed", type=int, default=CFG.seed, help="seed for food/obstacle placement")
    parser.add_argument("--obstacles", type=int, default=CFG.num_obstacles, help="obstacles per game")
    parser.add_argument(
        "--log-level",
        type=str,
        default=CFG.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def parse_config(argv: Optional[List[str]] = None) -> Config:
    parser = build_parser()
    args = parser.parse_args(argv)
    # Leave at least one cell for food beside the starting snake
    max_obstacles = COLS * ROWS - len(START_SNAKE) - 1
    if not 0 <= args.obstacles <= max_obstacles:
        parser.error(f"--obstacles must be between 0 and {max_obstacles}")
    return Config(
        seed=args.seed,
        num_obstacles=args.obstacles,
        difficulty=args.difficulty,
        log_level=args.log_level,
    )


def draw_hud(screen: pygame.Surface, font: pygame.font.Font, session: GameSession,
             restart: Button, hovered: bool) -> None:
    pygame.draw.rect(screen, HUD_BG, (0, 0, WIDTH, HUD_HEIGHT))
    score = font.render(session.score_text, True, TEXT)
    screen.blit(score, (8, (HUD_HEIGHT - score.get_height()) // 2))
    restart.draw(screen, font, hovered)
    label = font.render("Difficulty:", True, TEXT)
    screen.blit(label, (228, (HUD_HEIGHT - label.get_height()) // 2))


def main(argv: Optional[List[str]] = None) -> None:
    cfg = parse_config(argv)
    logging.basicConfig(
        level=getattr(logging, cfg.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 28)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    board = pygame.Surface((BOARD_W, BOARD_H))
    session = GameSession(cfg, on_render=lambda s: draw_frame(board, big_font, s.state))

    restart = Button(pygame.Rect(140, 6, 76, HUD_HEIGHT - 12), "Restart", session.reset)
    selector = Dropdown(
        pygame.Rect(300, 6, 92, HUD_HEIGHT - 12),
        session.difficulty.names,
        session.difficulty.level,
        session.set_difficulty,
        label_for=display_name,
    )
    session.difficulty.subscribe(selector.set_value)
    logger.info("starting at %s, seed=%s, obstacles=%d", cfg.difficulty, cfg.seed, cfg.num_obstacles)

    running = True
    while running:
        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    session.handle_key(event.key)
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                # an open dropdown covers the board, so it gets first look
                if not selector.handle_click(event.pos):
                    restart.handle_click(event.pos)

        # 2) update
        session.poll()

        # 3) render
        draw_hud(screen, font, session, restart, restart.rect.collidepoint(pygame.mouse.get_pos()))
        screen.blit(board, (0, HUD_HEIGHT))
        selector.draw(screen, font)
        pygame.display.flip()
        clock.tick(FPS)

    pygame.quit()


if __name__ == "__main__":
    main()
