"""Straight-line motion and arena bounds for projectiles."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .geometry import Vector2


class Side(Enum):
    """Which party fired a projectile. Same-side points never collide."""

    SHOOTER = "shooter"
    PURSUER = "pursuer"


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned rectangle with its origin at the top-left corner."""

    left: float = 0.0
    top: float = 0.0
    width: float = 400.0
    height: float = 400.0

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height


@dataclass
class MovingPoint:
    """A projectile in flight."""

    position: Vector2
    velocity: Vector2
    side: Side
    active: bool = True

    @classmethod
    def fire(cls, origin: Vector2, heading: Vector2, speed: float, side: Side) -> "MovingPoint":
        return cls(position=origin, velocity=heading.normalized() * speed, side=side)

    def deactivate(self) -> None:
        self.active = False


def advance(point: MovingPoint, dt: float) -> None:
    """Move ``point`` along its velocity for ``dt`` seconds."""

    if dt < 0:
        raise ValueError(f"dt must be non-negative, got {dt}")
    if not point.active:
        return
    point.position = point.position + point.velocity * dt


def is_out_of_bounds(point: MovingPoint, bounds: Bounds, radius: float) -> bool:
    """True when the point's circle lies completely outside ``bounds``.

    A circle exactly tangent to an edge still counts as inside.
    """

    x, y = point.position.x, point.position.y
    if x + radius < bounds.left:
        return True
    if x - radius > bounds.right:
        return True
    if y + radius < bounds.top:
        return True
    if y - radius > bounds.bottom:
        return True
    return False
