"""Food placed on a random cell of the board."""

from __future__ import annotations

import random

import pygame

TILE_SIZE = 20
BOARD_WIDTH = 640
BOARD_HEIGHT = 480
FALLBACK_COLOR = (255, 0, 0, 255)


class Food:
    """A single piece of food on the grid."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._position: tuple[int, int] = (0, 0)

    def place_random(self) -> None:
        """Move the food to a random cell."""
        self._position = (
            self._rng.randrange(BOARD_WIDTH // TILE_SIZE),
            self._rng.randrange(BOARD_HEIGHT // TILE_SIZE),
        )

    @property
    def position(self) -> tuple[int, int]:
        """The grid cell the food sits on."""
        return self._position

    def render(self, surface: pygame.Surface) -> None:
        """Draw the food as a filled tile."""
        x, y = self._position
        surface.fill(FALLBACK_COLOR, pygame.Rect(x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, TILE_SIZE))