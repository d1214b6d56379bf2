# cnake

A small snake arcade game in a 640 × 480 window, played on a 32 × 24 tile grid.
Steer the snake to the food, which is drawn as a red tile. Each piece of food makes the snake one tile longer and adds 10 points to the score.
The snake wraps around the edges of the board. The round ends when the snake's head runs into its own body.

## Installation

```
pip install .
```

This also installs pygame.

## Playing

```
cnake
```

| Key            | Action                    |
|----------------|---------------------------|
| Arrow keys     | Change direction          |
| P              | Pause or resume           |
| R              | Restart the round         |
| Close window   | Quit                      |

The snake cannot reverse straight into itself, and it moves one tile every 100 ms.
When the round is over, "Game Over" and "Press R to Restart" are shown in the middle of the window; pressing R clears the score and starts again.

## Using it from code

`cnake.game.Game` opens the window and can be used as a context manager, which calls `close()` on exit:

```python
from cnake.game import Game

with Game() as game:
    game.run()
```

A `Game` can also be driven step by step: `handle_key(key)` takes a pygame key code, `update(now)` advances the snake when 100 ms have passed since the last move at time `now` (in milliseconds), `render()` draws a frame, `reset()` starts a new round, and `score` holds the points so far.

The game logic needs no window:

- `cnake.snake.Snake` handles direction changes, movement, growth, wrapping and self-collision; `head` gives the front cell, and the snake supports `len()` and iteration over its cells.
- `cnake.food.Food` places the food on a random grid cell with `place_random()`, using any `random.Random` you pass in; `position` gives its cell.
- `cnake.renderer.Renderer` fills a pygame surface or rectangles on it in a current colour.

## What it does not do

There is no sprite artwork, no sound and no menu, and scores are not saved between runs.

## Running the tests

```
pip install .[test]
pytest
```