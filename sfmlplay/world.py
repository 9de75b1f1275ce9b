"""The playing field: border walls and the apple."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .geometry import Rect
from .snake import GridPos, Snake
from .vector import Vec2


@dataclass
class World:
    """A walled grid holding one apple."""

    window_size: tuple[int, int] = (1024, 768)
    rng: random.Random = field(default_factory=random.Random)
    block_size: int = field(default=16, init=False)
    item: GridPos = field(default=(0, 0), init=False)
    bounds: list[Rect] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.respawn_apple()
        width, height = self.window_size
        block = float(self.block_size)
        window = Vec2(float(width), float(height))
        self.bounds = []
        for i in range(4):
            if (i + 1) % 2 == 0:
                size = Vec2(float(width), block)
            else:
                size = Vec2(block, float(height))
            if i < 2:
                self.bounds.append(Rect(size))
            else:
                self.bounds.append(Rect(size, origin=size, position=window))

    @property
    def grid_size(self) -> GridPos:
        """Number of cells across and down."""
        width, height = self.window_size
        return width // self.block_size, height // self.block_size

    @property
    def apple_radius(self) -> float:
        """Radius of the drawn apple."""
        return self.block_size // 2

    @property
    def apple_pixel_position(self) -> Vec2:
        """Top-left pixel of the apple's cell."""
        x, y = self.item
        return Vec2(float(x * self.block_size), float(y * self.block_size))

    def respawn_apple(self) -> None:
        """Put the apple on a random cell inside the walls."""
        grid_x, grid_y = self.grid_size
        max_x, max_y = grid_x - 2, grid_y - 2
        if max_x <= 0 or max_y <= 0:
            raise ValueError("window is too small for the playing field")
        self.item = (self.rng.randrange(max_x) + 1, self.rng.randrange(max_y) + 1)

    def update(self, snake: Snake) -> None:
        """Let the snake eat the apple, and make it lose if it hits a wall."""
        if snake.position == self.item:
            snake.extend()
            snake.increase_score()
            self.respawn_apple()
        grid_x, grid_y = self.grid_size
        x, y = snake.position
        if x <= 0 or y <= 0 or x >= grid_x - 1 or y >= grid_y - 1:
            snake.lose()