"""The grid snake: body segments, movement, growth and self-collision."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

GridPos = tuple[int, int]


class Direction(Enum):
    """Heading of the snake's head."""

    NONE = "none"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


_STEP: dict[Direction, GridPos] = {
    Direction.NONE: (0, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class _Log(Protocol):
    def add(self, message: str) -> None: ...


@dataclass
class SnakeSegment:
    """One block of the snake's body on the grid."""

    position: GridPos


@dataclass
class Snake:
    """A snake moving one grid cell per tick."""

    block_size: int = 16
    log: _Log | None = None
    body: list[SnakeSegment] = field(default_factory=list, init=False)
    direction: Direction = field(default=Direction.NONE, init=False)
    speed: int = field(default=10, init=False)
    lives: int = field(default=3, init=False)
    score: int = field(default=0, init=False)
    lost: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Put the snake back at its start, still, with full lives and no score."""
        self.body = [SnakeSegment((5, 7)), SnakeSegment((5, 6)), SnakeSegment((5, 5))]
        self.direction = Direction.NONE
        self.speed = 10
        self.lives = 3
        self.score = 0
        self.lost = False

    @property
    def position(self) -> GridPos:
        """Grid position of the head, or (1, 1) when there is no body."""
        return self.body[0].position if self.body else (1, 1)

    def increase_score(self) -> None:
        """Add ten points and log the new score."""
        self.score += 10
        if self.log is not None:
            self.log.add(f"You ate an apple. Score: {self.score}")

    def lose(self) -> None:
        """Mark the game as lost."""
        self.lost = True

    def toggle_lost(self) -> None:
        """Flip the lost state."""
        self.lost = not self.lost

    def extend(self) -> None:
        """Grow the snake by one segment behind its tail."""
        if not self.body:
            return
        tx, ty = self.body[-1].position
        if len(self.body) > 1:
            bx, by = self.body[-2].position
            if tx == bx:
                new = (tx, ty + 1) if ty > by else (tx, ty - 1)
            elif ty == by:
                new = (tx + 1, ty) if tx > bx else (tx - 1, ty)
            else:
                return
        else:
            if self.direction is Direction.NONE:
                return
            dx, dy = _STEP[self.direction]
            new = (tx - dx, ty - dy)
        self.body.append(SnakeSegment(new))

    def tick(self) -> None:
        """Move one cell and check for running into itself."""
        if not self.body or self.direction is Direction.NONE:
            return
        self.move()
        self._check_collision()

    def move(self) -> None:
        """Shift every segment to its predecessor's place and step the head."""
        if not self.body:
            return
        positions = [segment.position for segment in self.body]
        hx, hy = positions[0]
        dx, dy = _STEP[self.direction]
        new_positions = [(hx + dx, hy + dy), *positions[:-1]]
        for segment, pos in zip(self.body, new_positions):
            segment.position = pos

    def _check_collision(self) -> None:
        if len(self.body) < 5:
            return
        head = self.body[0].position
        for index, segment in enumerate(self.body[1:], start=1):
            if segment.position == head:
                self.cut(len(self.body) - index)
                break

    def cut(self, segments: int) -> None:
        """Remove ``segments`` from the tail and lose a life."""
        if segments > 0:
            del self.body[-segments:]
        self.lives -= 1
        if not self.lives:
            self.lose()

    def physical_direction(self) -> Direction:
        """Direction the head actually points, judged from the neck."""
        if len(self.body) <= 1:
            return Direction.NONE
        hx, hy = self.body[0].position
        nx, ny = self.body[1].position
        if hx == nx:
            return Direction.DOWN if hy > ny else Direction.UP
        if hy == ny:
            return Direction.RIGHT if hx > nx else Direction.LEFT
        return Direction.NONE