import random

import pytest

from sfmlplay.snake import Direction, Snake, SnakeSegment
from sfmlplay.textbox import Textbox
from sfmlplay.vector import Vec2
from sfmlplay.world import World


@pytest.mark.parametrize("seed", range(20))
def test_apple_is_inside_walls(seed):
    world = World((1024, 768), random.Random(seed))
    grid_x, grid_y = world.grid_size
    x, y = world.item
    assert 1 <= x < grid_x - 1
    assert 1 <= y < grid_y - 1


def test_block_size_is_sixteen():
    assert World().block_size == 16


def test_snake_eats_apple():
    log = Textbox()
    world = World((1024, 768), random.Random(1))
    snake = Snake(16, log)
    snake.direction = Direction.DOWN
    world.item = snake.position
    world.update(snake)
    assert len(snake.body) == 4
    assert snake.score == 10
    assert log.messages == ["You ate an apple. Score: 10"]
    assert not snake.lost


def test_snake_on_border_loses():
    world = World((1024, 768), random.Random(2))
    snake = Snake(16)
    snake.body = [SnakeSegment((0, 5))]
    world.item = (3, 3)
    world.update(snake)
    assert snake.lost


def test_snake_on_far_border_loses():
    world = World((1024, 768), random.Random(2))
    grid_x, _ = world.grid_size
    snake = Snake(16)
    snake.body = [SnakeSegment((grid_x - 1, 5))]
    world.item = (3, 3)
    world.update(snake)
    assert snake.lost


def test_snake_inside_does_not_lose():
    world = World((1024, 768), random.Random(3))
    snake = Snake(16)
    world.item = (1, 1)
    world.update(snake)
    assert not snake.lost
    assert snake.score == 0


def test_bounds_frame_the_window():
    world = World((1024, 768), random.Random(4))
    corners = [rect.top_left() for rect in world.bounds]
    assert corners[0] == Vec2(0, 0)
    assert corners[1] == Vec2(0, 0)
    assert corners[2] == Vec2(1024 - 16, 0)
    assert corners[3] == Vec2(0, 768 - 16)


def test_too_small_window_rejected():
    with pytest.raises(ValueError):
        World((32, 32))