# widgets.py
"""HUD controls drawn with pygame: restart button and difficulty dropdown."""
from __future__ import annotations
from typing import Callable, List

import pygame  # type: ignore

from .config import PANEL, PANEL_HI, OUTLINE, TEXT


def blit_centered(surface: pygame.Surface, font: pygame.font.Font, label: str, rect: pygame.Rect) -> None:
    surf = font.render(label, True, TEXT)
    surface.blit(surf, surf.get_rect(center=rect.center))


class Button:
    def __init__(self, rect: pygame.Rect, label: str, on_click: Callable[[], None]):
        self.rect = pygame.Rect(rect)
        self.label = label
        self.on_click = on_click

    def handle_click(self, pos) -> bool:
        if self.rect.collidepoint(pos):
            self.on_click()
            return True
        return False

    def draw(self, surface: pygame.Surface, font: pygame.font.Font, hovered: bool = False) -> None:
        pygame.draw.rect(surface, PANEL_HI if hovered else PANEL, self.rect, border_radius=6)
        pygame.draw.rect(surface, OUTLINE, self.rect, width=2, border_radius=6)
        blit_centered(surface, font, self.label, self.rect)


class Dropdown:
    """
    Closed: one box showing the current option.
    Open: the options stacked below the box; clicking one selects it.
    """

    def __init__(
        self,
        rect: pygame.Rect,
        values: List[str],
        value: str,
        on_change: Callable[[str], None],
        label_for: Callable[[str], str] = str,
    ):
        self.rect = pygame.Rect(rect)
        self.values = list(values)
        self.value = value
        self.on_change = on_change
        self.label_for = label_for
        self.open = False

    def option_rects(self) -> List[pygame.Rect]:
        return [self.rect.move(0, self.rect.height * (i + 1)) for i in range(len(self.values))]

    def set_value(self, value: str) -> None:
        """Reflect a change made elsewhere without calling back."""
        if value in self.values:
            self.value = value

    def handle_click(self, pos) -> bool:
        if self.open:
            self.open = False
            for value, rect in zip(self.values, self.option_rects()):
                if rect.collidepoint(pos):
                    self.on_change(value)
                    return True
            return self.rect.collidepoint(pos)
        if self.rect.collidepoint(pos):
            self.open = True
            return True
        return False

    def selected_label(self) -> str:
        return self.label_for(self.value)

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        pygame.draw.rect(surface, PANEL, self.rect, border_radius=4)
        pygame.draw.rect(surface, OUTLINE, self.rect, width=2, border_radius=4)
        blit_centered(surface, font, self.selected_label(), self.rect)
        if not self.open:
            return
        for value, rect in zip(self.values, self.option_rects()):
            pygame.draw.rect(surface, PANEL_HI if value == self.value else PANEL, rect)
            pygame.draw.rect(surface, OUTLINE, rect, width=1)
            blit_centered(surface, font, self.label_for(value), rect)
