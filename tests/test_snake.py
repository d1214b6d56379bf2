import pygame
import pytest

from cnake import snake as snake_mod
from cnake.snake import GRID_COLUMNS, GRID_ROWS, TILE_SIZE, Snake


@pytest.fixture
def snake():
    s = Snake()
    s.move()  # bring the head onto the board
    return s


def test_reset_state():
    s = Snake()
    assert s.head == (snake_mod.WIDTH // 2, snake_mod.HEIGHT // 2)
    assert len(s) == 1
    assert s.check_collision() is False


def test_move_keeps_head_on_board(snake):
    x, y = snake.head
    assert 0 <= x < GRID_COLUMNS
    assert 0 <= y < GRID_ROWS
    assert len(snake) == 1


def test_move_right_by_default(snake):
    x, y = snake.head
    if x == GRID_COLUMNS - 1:
        snake.set_direction((0, 1))
        snake.set_direction((-1, 0))
        snake.move()
        snake.move()
        x, y = snake.head
    snake.set_direction((1, 0)) if False else None
    before = snake.head
    snake.set_direction((0, -1))
    snake.set_direction((1, 0))
    snake.move()
    assert snake.head == ((before[0] + 1) % GRID_COLUMNS, before[1])


def test_reverse_is_ignored(snake):
    before = snake.head
    snake.set_direction((-1, 0))
    snake.move()
    assert snake.head == ((before[0] + 1) % GRID_COLUMNS, before[1])


def test_turn_up(snake):
    before = snake.head
    snake.set_direction((0, -1))
    snake.move()
    assert snake.head == (before[0], (before[1] - 1) % GRID_ROWS)


def test_full_lap_returns_to_start(snake):
    start = snake.head
    for _ in range(GRID_COLUMNS):
        snake.move()
    assert snake.head == start


def test_wraps_left_edge(snake):
    snake.set_direction((0, 1))
    snake.set_direction((-1, 0))
    while snake.head[0] != 0:
        snake.move()
    snake.move()
    assert snake.head[0] == GRID_COLUMNS - 1


def test_grow_adds_segment_ahead(snake):
    before = snake.head
    snake.grow()
    assert len(snake) == 2
    assert snake.head == (before[0] + 1, before[1])
    assert list(snake)[1] == before


def test_move_keeps_length_after_growth(snake):
    snake.grow()
    snake.grow()
    snake.move()
    assert len(snake) == 3


def test_collision_when_head_meets_body(snake):
    if snake.head[0] > GRID_COLUMNS - 6:
        for _ in range(8):
            snake.move()
    for _ in range(4):
        snake.grow()
    assert snake.check_collision() is False
    for direction in [(0, -1), (-1, 0), (0, 1)]:
        snake.set_direction(direction)
        snake.move()
    assert snake.check_collision() is True


def test_reset_after_growth():
    s = Snake()
    s.move()
    s.grow()
    s.grow()
    s.reset()
    assert len(s) == 1
    assert s.head == (snake_mod.WIDTH // 2, snake_mod.HEIGHT // 2)


def test_render_head_and_body(snake):
    surface = pygame.Surface((snake_mod.BOARD_WIDTH, snake_mod.BOARD_HEIGHT))
    snake.render(surface)
    hx, hy = snake.head
    assert tuple(surface.get_at((hx * TILE_SIZE, hy * TILE_SIZE))) == snake_mod.HEAD_COLOR

    snake.set_direction((0, 1))
    snake.grow()
    snake.move()
    surface.fill((0, 0, 0))
    snake.render(surface)
    bx, by = list(snake)[1]
    assert tuple(surface.get_at((bx * TILE_SIZE + 1, by * TILE_SIZE + 1))) == snake_mod.BODY_COLOR
    hx, hy = snake.head
    assert tuple(surface.get_at((hx * TILE_SIZE, hy * TILE_SIZE))) == snake_mod.HEAD_COLOR