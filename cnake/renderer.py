"""A thin drawing helper around a pygame surface."""

from __future__ import annotations

import pygame


class Renderer:
    """Draws filled shapes in a current colour onto a surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.color: tuple[int, int, int, int] = (0, 0, 0, 255)

    def set_draw_color(self, r: int, g: int, b: int, a: int) -> None:
        """Set the colour used by clear and draw_rect."""
        channels = (r, g, b, a)
        if any(not 0 <= c <= 255 for c in channels):
            raise ValueError(f"colour channels must be within 0..255, got {channels}")
        self.color = channels

    def clear(self) -> None:
        """Fill the whole surface with the current colour."""
        self.surface.fill(self.color)

    def draw_rect(self, rect) -> None:
        """Fill a rectangle with the current colour."""
        self.surface.fill(self.color, pygame.Rect(rect))

    def present(self) -> None:
        """Show the frame if the surface is the display surface."""
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()