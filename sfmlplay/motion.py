"""Sprite motion rules: tracing the screen border and bouncing off edges."""

from __future__ import annotations

from .vector import Vec2


def perimeter_step(
    position: Vec2,
    screen_size: tuple[float, float] = (800, 600),
    sprite_size: tuple[float, float] = (128, 128),
) -> Vec2:
    """Move one pixel clockwise along the screen border; off the border, stay put."""
    x, y = position
    max_x = screen_size[0] - sprite_size[0]
    max_y = screen_size[1] - sprite_size[1]
    if 0 <= x < max_x and y == 0:
        return Vec2(x + 1, y)
    if x == max_x and 0 <= y < max_y:
        return Vec2(x, y + 1)
    if 0 < x <= max_x and y == max_y:
        return Vec2(x - 1, y)
    if x == 0 and 0 < y <= max_y:
        return Vec2(x, y - 1)
    return position


def bounce_increment(
    position: Vec2,
    increment: Vec2,
    half_size: tuple[float, float],
    screen_size: tuple[float, float] = (640, 480),
) -> Vec2:
    """Reverse the increment along any axis where a centred sprite leaves the screen."""
    ix, iy = increment
    hx, hy = half_size
    width, height = screen_size
    if (position.x + hx > width and ix > 0) or (position.x - hx < 0 and ix < 0):
        ix = -ix
    if (position.y + hy > height and iy > 0) or (position.y - hy < 0 and iy < 0):
        iy = -iy
    return Vec2(ix, iy)


def move_mushroom(
    position: Vec2,
    increment: Vec2,
    window_size: tuple[float, float],
    texture_size: tuple[float, float],
    elapsed: float,
) -> tuple[Vec2, Vec2]:
    """Bounce a top-left anchored sprite inside the window; return position and increment."""
    ix, iy = increment
    max_x = window_size[0] - texture_size[0]
    max_y = window_size[1] - texture_size[1]
    if (position.x > max_x and ix > 0) or (position.x < 0 and ix < 0):
        ix = -ix
    if (position.y > max_y and iy > 0) or (position.y < 0 and iy < 0):
        iy = -iy
    new_increment = Vec2(ix, iy)
    return position + new_increment * elapsed, new_increment