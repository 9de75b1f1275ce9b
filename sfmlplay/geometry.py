"""Angles, orbits and origin-anchored rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .vector import Vec2


def cos_degrees(deg: float = 180, epsilon: float = 1e-9) -> float:
    """Cosine of an angle in degrees, with tiny positive results snapped to zero."""
    result = math.cos(deg * math.pi / 180)
    if 0 < result < epsilon:
        return 0.0
    return result


def advance_angle(angle: float, angular_speed: float, dt: float) -> float:
    """Advance an angle in radians, wrapping once past a full turn."""
    angle += angular_speed * dt
    if angle > math.tau:
        angle -= math.tau
    return angle


def orbit_position(center: Vec2, radius: float, angle: float) -> Vec2:
    """Point on a circle of ``radius`` around ``center`` at ``angle`` radians."""
    return Vec2(center.x + radius * math.cos(angle), center.y + radius * math.sin(angle))


@dataclass
class Rect:
    """A rectangle placed by the position of its local origin."""

    size: Vec2
    origin: Vec2 = field(default_factory=Vec2)
    position: Vec2 = field(default_factory=Vec2)

    def top_left(self) -> Vec2:
        """Screen coordinates of the rectangle's top-left corner."""
        return self.position - self.origin