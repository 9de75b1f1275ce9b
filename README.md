# sfmlplay

Small 2D game pieces and toy physics, plus a block snake game you can
play in a pygame window.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Play snake

```
sfmlplay-snake
sfmlplay-snake --seed 42
```

The game opens a 1024×768 window with walls around a grid of 16-pixel
cells. Hold an arrow key to steer. The snake cannot turn straight back
on itself, and it moves ten cells a second. When it eats an apple it
grows by one segment and gains ten points. If it bites itself, the
bitten part of the tail is cut off and it loses one of its three lives.
If it hits a wall or runs out of lives, "GAME OVER" and the score are
logged and the snake starts again. A box in the top part of the window
shows the last five log messages. F5 switches between windowed and
full screen. Closing the window ends the game.

`--seed` sets the seed for apple placement. Without it, the current time
is used. The seed in use is shown in the log.

## Modules

- `sfmlplay.vector`: the immutable `Vec2` type (`+`, `-`, scalar `*` and
  `/`, unary `-`, unpacking, `length()`), with `normalize` and `dot`.
- `sfmlplay.physics`
  - `simulate_bounce` yields one `BounceStep` per bounce of a dropped
    ball.
  - `format_bounce_report` turns those bounces into a text report.
  - `Ball`, `resolve_collision` and `bounce_off_walls` handle
    impulse-based collisions between balls and with the walls.
  - `ParticleSystem.step` moves many particles and resolves their
    collisions. `random_particles` creates a random set of them.
- `sfmlplay.geometry`
  - `cos_degrees` returns a cosine with tiny positive values snapped to
    zero.
  - `advance_angle` and `orbit_position` are for circular orbits.
  - `Rect` is placed by its origin. `Rect.top_left()` gives its top-left
    corner.
- `sfmlplay.tilemap`: `build_tile_vertices` turns a level of tile indices
  into six `Vertex` objects per tile, with matching tileset texture
  coordinates. `LEVEL` holds a 16×8 sample level.
- `sfmlplay.motion`
  - `perimeter_step` moves a sprite clockwise around the screen edge.
  - `bounce_increment` and `move_mushroom` reverse a sprite's motion
    when it leaves the screen.
- `sfmlplay.pong`: `Pong` holds the ball and two paddles. `move_player`
  moves the player paddle and `step` advances the ball.
  `reflect_direction` and `step_vector` are the ball's rules.
- `sfmlplay.grid_snake`: `GridSnake`, a snake on a pixel board whose head
  jumps a part length plus a gap each step. It provides `steer`,
  `place_food`, `add_tail` and `step`.
- `sfmlplay.snake`: `Snake`, `SnakeSegment` and `Direction`, the grid
  snake with lives, score, growth and cutting.
- `sfmlplay.world`: `World`, the walled field and its apple.
- `sfmlplay.textbox`: `Textbox`, a log that keeps the five latest
  messages.
- `sfmlplay.events`: frozen dataclasses for window, keyboard, mouse,
  text and joystick events. `should_close` is true for a close request
  or Escape. `describe_event` returns the lines reported for an event.
- `sfmlplay.app`
  - `Window` collects draw commands into frames.
  - `Game` runs the snake game: `handle_input`, `update`, `render` and
    `restart_clock`.
  - `main` is the `sfmlplay-snake` command.

## Example

```python
from sfmlplay.physics import format_bounce_report
print(format_bounce_report(2.0, 0.8, 9.8, 0.01))

from sfmlplay.snake import Snake, Direction
from sfmlplay.textbox import Textbox

log = Textbox()
snake = Snake(16, log)
snake.direction = Direction.RIGHT
snake.tick()
print(snake.position)  # (6, 7)
```

## What it does not do

Only the block snake game has a window and a command. The bounce report,
the colliding balls and particles, the orbit, the tile map, the pong
board, the free-moving snake and the event descriptions are plain state
and functions. You drive them and draw them yourself.

The package loads no images or fonts from disk. The tile map produces
vertices but no texture. The pong enemy paddle does not move, and there
is no scoring.