"""Bouncing-ball drop, ball collisions and a simple particle system."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from itertools import combinations
from typing import Iterator

from .vector import Vec2, dot, normalize

Color = tuple[int, int, int]


@dataclass(frozen=True)
class BounceStep:
    """One bounce of a ball dropped on the floor."""

    number: int
    impact_velocity: float
    bounce_velocity: float
    new_height: float


def simulate_bounce(
    initial_height: float = 2.0,
    restitution: float = 0.8,
    g: float = 9.8,
    min_height: float = 0.01,
) -> Iterator[BounceStep]:
    """Yield each bounce until the bounce height drops to ``min_height`` or less."""
    if not 0 <= restitution < 1:
        raise ValueError("restitution must be in [0, 1)")
    if g <= 0:
        raise ValueError("gravity must be positive")
    height = initial_height
    number = 0
    while height > min_height:
        v_impact = math.sqrt(2 * g * height)
        v_bounce = restitution * v_impact
        next_height = (v_bounce * v_bounce) / (2 * g)
        number += 1
        yield BounceStep(number, v_impact, v_bounce, next_height)
        height = next_height


def format_bounce_report(
    initial_height: float = 2.0,
    restitution: float = 0.8,
    g: float = 9.8,
    min_height: float = 0.01,
) -> str:
    """Render the bounce simulation as a text report."""
    lines = [
        "Simulating bouncing ball:\n",
        f"Initial height: {initial_height:.2f} m\n",
        f"Coefficient of restitution: {restitution:.2f}\n\n",
    ]
    for step in simulate_bounce(initial_height, restitution, g, min_height):
        lines.append(f"Bounce #{step.number}:\n")
        lines.append(f"  Impact velocity: {step.impact_velocity:.2f} m/s\n")
        lines.append(f"  Bounce velocity: {step.bounce_velocity:.2f} m/s\n")
        lines.append(f"  New height: {step.new_height:.2f} m\n\n")
    lines.append("Ball has essentially stopped bouncing.\n")
    return "".join(lines)


@dataclass
class Ball:
    """A circular body whose position is its centre."""

    radius: float
    position: Vec2
    velocity: Vec2
    mass: float
    color: Color = (255, 255, 255)

    def update(self, dt: float) -> None:
        """Advance the position by the velocity over ``dt`` seconds."""
        self.position = self.position + self.velocity * dt


def resolve_collision(
    a: Ball, b: Ball, restitution: float = 1.0, mass_weighted: bool = False
) -> bool:
    """Apply an impulse and separate two touching balls.

    Returns False and changes nothing when the balls are already moving apart.
    """
    pos_a, pos_b = a.position, b.position
    normal = normalize(pos_b - pos_a)
    vel_along_normal = dot(b.velocity - a.velocity, normal)
    if vel_along_normal > 0:
        return False

    inv_a, inv_b = 1 / a.mass, 1 / b.mass
    j = -(1 + restitution) * vel_along_normal / (inv_a + inv_b)
    impulse = normal * j
    a.velocity = a.velocity - impulse * inv_a
    b.velocity = b.velocity + impulse * inv_b

    overlap = (a.radius + b.radius) - (pos_a - pos_b).length()
    correction = normal * (overlap / 2.0)
    if mass_weighted:
        total_inv = inv_a + inv_b
        a.position = pos_a - correction * (inv_a / total_inv)
        b.position = pos_b + correction * (inv_b / total_inv)
    else:
        a.position = pos_a - correction
        b.position = pos_b + correction
    return True


def bounce_off_walls(ball: Ball, width: float = 800, height: float = 600) -> None:
    """Reverse the velocity component of a ball that crosses a wall."""
    pos = ball.position
    vx, vy = ball.velocity
    if pos.x - ball.radius < 0 or pos.x + ball.radius > width:
        vx = -vx
    if pos.y - ball.radius < 0 or pos.y + ball.radius > height:
        vy = -vy
    ball.velocity = Vec2(vx, vy)


def _particle_wall_bounce(p: Ball, width: float, height: float) -> None:
    pos = p.position
    vx, vy = p.velocity
    if pos.x < p.radius or pos.x + 2 * p.radius > width:
        vx = -vx
    if pos.y < p.radius or pos.y + 2 * p.radius > height:
        vy = -vy
    p.velocity = Vec2(vx, vy)


@dataclass
class ParticleSystem:
    """Particles bouncing off the walls and each other."""

    particles: list[Ball] = field(default_factory=list)
    width: float = 800
    height: float = 600
    restitution: float = 0.5

    def step(self, dt: float) -> None:
        """Move every particle, bounce off walls and resolve collisions."""
        for p in self.particles:
            p.update(dt)
            _particle_wall_bounce(p, self.width, self.height)
        for a, b in combinations(self.particles, 2):
            if (b.position - a.position).length() < a.radius + b.radius:
                resolve_collision(a, b, self.restitution, mass_weighted=True)


def random_particles(
    count: int = 50,
    width: int = 800,
    height: int = 600,
    rng: random.Random | None = None,
) -> list[Ball]:
    """Create ``count`` particles with random size, place, speed and colour."""
    rng = rng or random.Random()
    particles = []
    for _ in range(count):
        r = 5 + rng.randrange(10)
        x = r + rng.randrange(width - int(2 * r))
        y = r + rng.randrange(height - int(2 * r))
        vx = rng.randrange(200) - 100
        vy = rng.randrange(200) - 100
        color = (rng.randrange(255), rng.randrange(255), rng.randrange(255))
        particles.append(
            Ball(float(r), Vec2(float(x), float(y)), Vec2(float(vx), float(vy)), float(r), color)
        )
    return particles