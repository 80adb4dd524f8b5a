"""Predictive aiming: launch velocity for a pursuer to meet a moving target."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .geometry import EPSILON, Vector2, angle_between, normalize_angle
from .quadratic import solve_quadratic


@dataclass(frozen=True)
class InterceptProblem:
    """Inputs for a single firing decision.

    ``target_speed`` defaults to the magnitude of ``target_velocity``.
    """

    target_position: Vector2
    target_velocity: Vector2
    interceptor_origin: Vector2
    interceptor_speed: float
    target_speed: Optional[float] = None

    @property
    def resolved_target_speed(self) -> float:
        if self.target_speed is None:
            return self.target_velocity.magnitude()
        return self.target_speed


@dataclass(frozen=True)
class InterceptSolution:
    """Launch velocity together with where and when the two points meet."""

    launch_velocity: Vector2
    intercept_time: float
    intercept_point: Vector2


def select_root(root1: float, root2: float) -> float:
    """Pick the earliest usable intercept distance from two quadratic roots."""

    if root1 > 0 and root2 > 0:
        return min(root1, root2)
    return max(root1, root2)


def solve_intercept(problem: InterceptProblem) -> Optional[InterceptSolution]:
    """Return the pursuer's launch velocity, or ``None`` when it cannot hit.

    The triangle has vertices A (target now), B (pursuer origin) and C (the
    unknown intercept point). With ``alpha`` the angle at A between the
    target's heading and AB, ``dC = |AB|`` and ``r`` the ratio of target to
    pursuer speed, the law of cosines for the pursuer path length ``x`` gives::

        (1 - r**2) * x**2 + 2 * dC * r * cos(alpha) * x - dC**2 = 0

    Equal speeds zero the leading term; it is replaced with a tiny epsilon
    so the solve still runs, which can yield a very distant intercept.
    """

    speed = problem.interceptor_speed
    if speed <= 0:
        return None

    to_pursuer = problem.interceptor_origin - problem.target_position
    alpha = normalize_angle(angle_between(problem.target_velocity, to_pursuer))
    d_c = to_pursuer.magnitude()
    ratio = problem.resolved_target_speed / speed

    a = 1 - ratio * ratio
    if a == 0:
        a = EPSILON
    b = 2 * d_c * ratio * math.cos(alpha)
    c = -d_c * d_c

    roots = solve_quadratic(a, b, c)
    if not roots:
        return None

    # the selected root is the pursuer's path length, hence the pursuer speed
    distance = select_root(roots.root1, roots.root2)
    time = distance / speed
    point = problem.target_position + problem.target_velocity * time

    heading = point - problem.interceptor_origin
    if heading.squared_magnitude() == 0:
        return None
    return InterceptSolution(
        launch_velocity=heading.normalized() * speed,
        intercept_time=time,
        intercept_point=point,
    )


def predict_launch_vector(
    target_position: Vector2,
    target_velocity: Vector2,
    interceptor_origin: Vector2,
    interceptor_speed: float,
    target_speed: Optional[float] = None,
) -> Optional[Vector2]:
    """Convenience wrapper returning only the launch velocity."""

    solution = solve_intercept(
        InterceptProblem(
            target_position=target_position,
            target_velocity=target_velocity,
            interceptor_origin=interceptor_origin,
            interceptor_speed=interceptor_speed,
            target_speed=target_speed,
        )
    )
    return solution.launch_velocity if solution else None
