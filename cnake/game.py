"""The game loop: input, timed movement, scoring and drawing."""

from __future__ import annotations

import pygame

from cnake.food import Food
from cnake.renderer import Renderer
from cnake.snake import Snake

WINDOW_WIDTH = 640
WINDOW_HEIGHT = 480
TITLE = "Snake Game"
FONT_SIZE = 24
MOVE_DELAY_MS = 100
FRAME_DELAY_MS = 1000 // 60
POINTS_PER_FOOD = 10

BACKGROUND = (30, 30, 30, 255)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
GREEN = (0, 255, 0)

_DIRECTIONS = {
    pygame.K_UP: (0, -1),
    pygame.K_DOWN: (0, 1),
    pygame.K_LEFT: (-1, 0),
    pygame.K_RIGHT: (1, 0),
}


class Game:
    """A window holding one snake, one piece of food and the score."""

    def __init__(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)
        self.renderer = Renderer(self.screen)
        self.font = pygame.font.Font(None, FONT_SIZE)
        self.snake = Snake()
        self.food = Food()
        self.food.place_random()
        self.running = True
        self.paused = False
        self.over = False
        self.last_move_time = 0
        self.move_delay = MOVE_DELAY_MS
        self._score = 0

    @property
    def score(self) -> int:
        """Points earned since the last reset."""
        return self._score

    def handle_key(self, key: int) -> None:
        """React to a pressed key: steer, pause or restart."""
        if key in _DIRECTIONS:
            self.snake.set_direction(_DIRECTIONS[key])
        elif key == pygame.K_p:
            self.paused = not self.paused
        elif key == pygame.K_r:
            self.reset()

    def process_events(self) -> None:
        """Drain the event queue."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self.handle_key(event.key)

    def update(self, now: int) -> None:
        """Advance the snake if the move delay has passed at time ``now`` (ms)."""
        if self.paused or self.over:
            return
        if now - self.last_move_time < self.move_delay:
            return
        self.snake.move()
        self.last_move_time = now

        if self.snake.head == self.food.position:
            self.snake.grow()
            self.food.place_random()
            self._score += POINTS_PER_FOOD

        if self.snake.check_collision():
            self._render_text("GAME OVER", RED)
            self.over = True

    def render(self) -> None:
        """Draw a whole frame and show it."""
        self.renderer.set_draw_color(*BACKGROUND)
        self.renderer.clear()
        self.food.render(self.screen)
        self.snake.render(self.screen)
        if self.paused:
            self._render_text("PAUSED", WHITE)
        if self.over:
            self._render_text_lines([("Game Over", RED), ("Press R to Restart", GREEN)])
        self.renderer.present()

    def reset(self) -> None:
        """Start a new round."""
        self.snake.reset()
        self.food.place_random()
        self._score = 0
        self.paused = False
        self.over = False

    def run(self) -> None:
        """Loop until the window is closed."""
        while self.running:
            self.process_events()
            self.update(pygame.time.get_ticks())
            self.render()
            pygame.time.delay(FRAME_DELAY_MS)

    def close(self) -> None:
        """Release the window and pygame."""
        pygame.quit()

    def _render_text(self, text: str, color: tuple[int, int, int]) -> None:
        image = self.font.render(text, False, color)
        rect = image.get_rect(center=(WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2))
        rect.x = WINDOW_WIDTH // 2 - image.get_width() // 2
        rect.y = WINDOW_HEIGHT // 2 - image.get_height() // 2
        self.screen.blit(image, rect)

    def _render_text_lines(self, lines: list[tuple[str, tuple[int, int, int]]]) -> None:
        images = [self.font.render(text, False, color) for text, color in lines]
        total_height = sum(image.get_height() for image in images)
        y = WINDOW_HEIGHT // 2 - total_height // 2
        for image in images:
            self.screen.blit(image, (WINDOW_WIDTH // 2 - image.get_width() // 2, y))
            y += image.get_height()

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    with Game() as game:
        game.run()
    return 0