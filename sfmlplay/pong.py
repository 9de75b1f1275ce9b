"""A single-paddle pong board with a ball reflecting off the walls."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .vector import Vec2

EPSILON = 1e-9


def step_vector(direction: float, speed: float) -> Vec2:
    """Displacement for one frame along ``direction`` degrees, tiny positives snapped to zero."""
    radians = direction * math.pi / 180
    dx = math.cos(radians)
    dy = math.sin(radians)
    if 0 < dx < EPSILON:
        dx = 0.0
    if 0 < dy < EPSILON:
        dy = 0.0
    return Vec2(dx * speed, dy * speed)


def reflect_direction(
    direction: float,
    position: Vec2,
    screen_size: tuple[float, float] = (800, 800),
    radius: float = 20,
) -> float:
    """New heading in degrees after the ball touches a wall; unchanged otherwise."""
    width, height = screen_size
    d = direction
    if position.x >= width - 2 * radius:
        if d == 0 or d == 360:
            return 180
        if 0 < d < 90:
            return 90 + (90 - d)
        if 270 < d < 360:
            return 270 - (d - 270)
    elif position.y >= height - 2 * radius:
        if d == 90:
            return 270
        if 0 < d < 90:
            return 360 - d
        if 90 < d < 180:
            return 180 + (180 - d)
    elif position.x <= 0:
        if d == 180:
            return 0
        if 180 < d < 270:
            return 270 + (d - 180)
        if 90 < d < 180:
            return 90 - (180 - d)
    elif position.y <= 0:
        if d == 270:
            return 90
        if 180 < d < 270:
            return 180 - (d - 180)
        if 270 < d < 360:
            return 360 - d
    return direction


@dataclass
class Pong:
    """Ball, player paddle and enemy paddle on a square board."""

    width: float = 800
    height: float = 800
    ball_radius: float = 20
    ball_speed: float = 2
    player_speed: float = 8
    player_size: Vec2 = field(default_factory=lambda: Vec2(10.0, 80.0))
    ball: Vec2 = field(default_factory=Vec2, init=False)
    direction: float = field(default=0.0, init=False)
    player: Vec2 = field(default_factory=Vec2, init=False)
    enemy: Vec2 = field(default_factory=Vec2, init=False)

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Put the ball at its start heading right and centre both paddles."""
        self.direction = 0.0
        center = self.width / 2
        self.ball = Vec2(center, center)
        paddle_y = (self.height - self.player_size.y) / 2
        self.player = Vec2(0.0, paddle_y)
        self.enemy = Vec2(self.width - self.player_size.x, paddle_y)

    def move_player(self, up: bool) -> None:
        """Move the player paddle one step up or down unless it is at the edge."""
        if up:
            if self.player.y >= 0:
                self.player = self.player + Vec2(0.0, -self.player_speed)
        elif self.player.y + self.player_size.y <= self.height:
            self.player = self.player + Vec2(0.0, self.player_speed)

    def step(self) -> None:
        """Advance the ball one frame and reflect it off any wall it reached."""
        self.ball = self.ball + step_vector(self.direction, self.ball_speed)
        self.direction = reflect_direction(
            self.direction, self.ball, (self.width, self.height), self.ball_radius
        )