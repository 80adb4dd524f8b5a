"""Basic 2D vector math utilities for the predictive aim simulation."""
from __future__ import annotations

from dataclasses import dataclass
import math

EPSILON = 1e-10
TWO_PI = 2.0 * math.pi


@dataclass(frozen=True)
class Vector2:
    """Simple immutable 2D vector with helper operations.

    Screen coordinates: x grows to the right, y grows downwards.
    """

    x: float
    y: float

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def squared_magnitude(self) -> float:
        return self.x ** 2 + self.y ** 2

    def normalized(self) -> "Vector2":
        mag = self.magnitude()
        if mag == 0:
            raise ValueError("Cannot normalize zero-length vector")
        return Vector2(self.x / mag, self.y / mag)

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2") -> float:
        """Z component of the 3D cross product of the two vectors."""
        return self.x * other.y - self.y * other.x

    def distance_to(self, other: "Vector2") -> float:
        return (self - other).magnitude()


def angle_between(u: Vector2, v: Vector2) -> float:
    """Signed angle in radians rotating ``u`` onto ``v``.

    The magnitude is the unsigned angle in ``[0, pi]`` derived from the dot
    product; the sign follows the cross product ``u x v``. With y pointing
    down this is positive when ``v`` lies clockwise of ``u`` on screen.
    Zero-length inputs give ``0.0``.
    """

    denom = u.magnitude() * v.magnitude()
    if denom == 0:
        return 0.0
    cos_theta = max(-1.0, min(1.0, u.dot(v) / denom))
    angle = math.acos(cos_theta)
    return -angle if u.cross(v) < 0 else angle


def normalize_angle(angle: float) -> float:
    """Map a signed angle from ``angle_between`` into ``[0, 2*pi)``."""

    return TWO_PI + angle if angle < 0 else angle
