"""Real-root quadratic solver used by the intercept computation."""
from __future__ import annotations

import math
from typing import NamedTuple


class QuadraticRoots(NamedTuple):
    """Number of usable roots and their values.

    With a single root both values are equal. With no usable roots both
    values are ``0.0``.
    """

    count: int
    root1: float
    root2: float

    def __bool__(self) -> bool:
        return self.count > 0


NO_ROOTS = QuadraticRoots(0, 0.0, 0.0)


def solve_quadratic(a: float, b: float, c: float) -> QuadraticRoots:
    """Solve ``a*x**2 + b*x + c = 0`` for real, non-negative-time roots.

    ``root1`` takes the ``+sqrt(D)`` branch and ``root2`` the ``-sqrt(D)``
    branch. A pair of strictly negative roots is reported as no roots since
    it can only describe an intercept in the past.
    """

    discriminant = b * b - 4 * a * c
    if discriminant < 0 or a == 0:
        return NO_ROOTS

    count = 1 if discriminant == 0 else 2
    sqrt_disc = math.sqrt(discriminant)
    root1 = (-b + sqrt_disc) / (2 * a)
    root2 = (-b - sqrt_disc) / (2 * a)

    if root1 < 0 and root2 < 0:
        return NO_ROOTS

    return QuadraticRoots(count, root1, root2)
