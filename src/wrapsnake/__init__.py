"""Snake on a wrap-around grid with obstacles and selectable speed."""

from .session import GameSession

__all__ = ["GameSession"]
