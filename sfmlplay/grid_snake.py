"""A free-moving snake that jumps one body length per frame and eats food."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .snake import Direction
from .vector import Vec2

HEADINGS = (0, 90, 180, 270)

_HEADING_FOR: dict[Direction, int] = {
    Direction.RIGHT: 0,
    Direction.DOWN: 90,
    Direction.LEFT: 180,
    Direction.UP: 270,
}

_OPPOSITE: dict[int, int] = {0: 180, 90: 270, 180: 0, 270: 90}

_UNIT: dict[int, tuple[int, int]] = {
    0: (1, 0),
    90: (0, 1),
    180: (-1, 0),
    270: (0, -1),
}


@dataclass
class GridSnake:
    """Snake of square parts on a pixel board; the head jumps a part and a gap each step."""

    width: float = 1024
    height: float = 1024
    part_size: float = 35
    part_gap: float = 5
    food_size: float = 20
    rng: random.Random = field(default_factory=random.Random)
    body: list[Vec2] = field(default_factory=list, init=False)
    heading: int = field(default=0, init=False)
    food: Vec2 = field(default_factory=Vec2, init=False)
    food_available: bool = field(default=True, init=False)
    lost: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.reset()

    @property
    def stride(self) -> float:
        """Distance the head travels in one step."""
        return self.part_size + self.part_gap

    def _random_coordinate(self, extent: float) -> float:
        return self.rng.uniform(self.part_size, extent - self.part_size)

    def reset(self) -> None:
        """Start over: random heading, new food and three parts in a line behind the head."""
        self.lost = False
        self.heading = self.rng.choice(HEADINGS)
        self.place_food()
        head = Vec2(
            self._random_coordinate(self.width), self._random_coordinate(self.height)
        )
        dx, dy = _UNIT[self.heading]
        self.body = [
            head - Vec2(dx * i * self.stride, dy * i * self.stride) for i in range(3)
        ]

    def steer(self, direction: Direction) -> None:
        """Turn towards ``direction`` unless that would reverse the snake."""
        if direction not in _HEADING_FOR:
            raise ValueError(f"cannot steer towards {direction!r}")
        heading = _HEADING_FOR[direction]
        if self.heading != _OPPOSITE[heading]:
            self.heading = heading

    def place_food(self) -> None:
        """Put the food at a random place and mark it available."""
        self.food = Vec2(
            self._random_coordinate(self.width), self._random_coordinate(self.height)
        )
        self.food_available = True

    def add_tail(self) -> None:
        """Grow by one part placed on the current tail."""
        if not self.body:
            raise ValueError("the snake has no body to grow")
        self.body.append(self.body[-1])

    def _head_off_board(self, head: Vec2) -> bool:
        return (
            head.x > self.width
            or head.x + self.part_size < 0
            or head.y > self.height
            or head.y + self.part_size < 0
        )

    def _head_covers_food(self, head: Vec2) -> bool:
        return (
            head.x < self.food.x < head.x + self.part_size
            and head.y < self.food.y < head.y + self.part_size
        )

    def step(self) -> bool:
        """Advance one frame; return False once the snake has left the board."""
        if self.lost:
            return False
        head = self.body[0]
        if self._head_off_board(head):
            self.lost = True
            return False
        if self._head_covers_food(head):
            self.food_available = False
            self.add_tail()
        dx, dy = _UNIT[self.heading]
        moved = head + Vec2(dx * self.stride, dy * self.stride)
        self.body = [moved, *self.body[:-1]]
        if not self.food_available:
            self.place_food()
        return True