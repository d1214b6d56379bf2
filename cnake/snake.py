"""The snake: a queue of grid cells that moves, grows and wraps around the board."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

import pygame

WIDTH = 800
HEIGHT = 600

TILE_SIZE = 20
BOARD_WIDTH = 640
BOARD_HEIGHT = 480
GRID_COLUMNS = BOARD_WIDTH // TILE_SIZE
GRID_ROWS = BOARD_HEIGHT // TILE_SIZE

HEAD_COLOR = (0, 255, 0, 255)
BODY_COLOR = (0, 180, 0, 255)

Cell = tuple[int, int]


class Snake:
    """A snake on a wrapping grid, head first."""

    def __init__(self) -> None:
        self._body: deque[Cell] = deque()
        self._direction: Cell = (1, 0)
        self._render_x = 0
        self._render_y = 0
        self.reset()

    def __len__(self) -> int:
        return len(self._body)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._body)

    def set_direction(self, direction: Cell) -> None:
        """Change heading, ignoring a direct reversal."""
        dx, dy = direction
        cx, cy = self._direction
        if (dx == -cx and dx != 0) or (dy == -cy and dy != 0):
            return
        self._direction = (dx, dy)

    def move(self) -> None:
        """Advance one cell, wrapping at the board edges."""
        hx, hy = self._body[0]
        dx, dy = self._direction
        new_head = (
            (hx + dx + GRID_COLUMNS) % GRID_COLUMNS,
            (hy + dy + GRID_ROWS) % GRID_ROWS,
        )
        self._body.appendleft(new_head)
        self._body.pop()
        self._render_x = new_head[0] * TILE_SIZE
        self._render_y = new_head[1] * TILE_SIZE

    def grow(self) -> None:
        """Add a new head one cell ahead without dropping the tail."""
        hx, hy = self._body[0]
        dx, dy = self._direction
        self._body.appendleft((hx + dx, hy + dy))

    @property
    def head(self) -> Cell:
        """The cell at the front of the snake."""
        return self._body[0]

    def check_collision(self) -> bool:
        """Whether the head overlaps any other segment."""
        head = self._body[0]
        return any(cell == head for i, cell in enumerate(self._body) if i > 0)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the head at its last moved position, then the body."""
        head_rect = pygame.Rect(self._render_x, self._render_y, TILE_SIZE, TILE_SIZE)
        surface.fill(HEAD_COLOR, head_rect)
        for i, (x, y) in enumerate(self._body):
            if i == 0:
                continue
            surface.fill(BODY_COLOR, pygame.Rect(x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, TILE_SIZE))

    def reset(self) -> None:
        """Return to a single segment heading right."""
        self._body.clear()
        self._body.append((WIDTH // 2, HEIGHT // 2))
        self._direction = (1, 0)