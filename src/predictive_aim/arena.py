"""Headless arena: owns projectiles, handles firing and advances each tick."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from .config import SimulationConfig
from .exporters import FrameExporter
from .geometry import Vector2
from .intercept import InterceptProblem, solve_intercept
from .kinematics import MovingPoint, Side, advance, is_out_of_bounds

LOGGER = logging.getLogger(__name__)


class TriggerButton(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


@dataclass(frozen=True)
class FireTrigger:
    """External input event: a point on the arena and which button was used."""

    point: Vector2
    button: TriggerButton = TriggerButton.PRIMARY


@dataclass(frozen=True)
class RenderItem:
    """What a renderer needs to draw one projectile as a filled circle."""

    position: Vector2
    radius: float
    color: str
    side: str


@dataclass(frozen=True)
class ArenaFrame:
    """Snapshot of the arena after a tick."""

    time: float
    shooter: Vector2
    pursuer: Vector2
    projectiles: List[RenderItem]


class Arena:
    """Shooter fires at will, the pursuer answers with a predicted intercept."""

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        exporters: Sequence[FrameExporter] = (),
    ) -> None:
        self.config = config or SimulationConfig()
        self.bounds = self.config.bounds
        self.shooter_position = self.config.shooter_position
        self.pursuer_position = self.config.pursuer_position
        self.projectiles: List[MovingPoint] = []
        self.time = 0.0
        self._exporters = list(exporters)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def handle_trigger(self, trigger: FireTrigger) -> List[MovingPoint]:
        if trigger.button is TriggerButton.SECONDARY:
            self.reposition_shooter(trigger.point)
            return []
        return self.fire(trigger.point)

    def reposition_shooter(self, point: Vector2) -> None:
        LOGGER.debug("Shooter moved to (%.1f, %.1f)", point.x, point.y)
        self.shooter_position = point

    def fire(self, target_point: Vector2) -> List[MovingPoint]:
        """Fire from the shooter towards ``target_point`` and let the pursuer respond."""

        heading = target_point - self.shooter_position
        if heading.squared_magnitude() == 0:
            LOGGER.debug("Ignoring trigger on the shooter's own position")
            return []

        shot = MovingPoint.fire(
            self.shooter_position, heading, self.config.shooter_speed, Side.SHOOTER
        )
        self.projectiles.append(shot)
        spawned = [shot]

        interceptor = self._respond_to(shot)
        if interceptor is not None:
            self.projectiles.append(interceptor)
            spawned.append(interceptor)
        return spawned

    def _respond_to(self, shot: MovingPoint) -> Optional[MovingPoint]:
        solution = solve_intercept(
            InterceptProblem(
                target_position=shot.position,
                target_velocity=shot.velocity,
                interceptor_origin=self.pursuer_position,
                interceptor_speed=self.config.pursuer_speed,
                target_speed=self.config.shooter_speed,
            )
        )
        if solution is None:
            LOGGER.debug("No intercept for shot with velocity %s", shot.velocity)
            return None

        LOGGER.info(
            "Pursuer firing, intercept in %.2fs at (%.1f, %.1f)",
            solution.intercept_time,
            solution.intercept_point.x,
            solution.intercept_point.y,
        )
        return MovingPoint(
            position=self.pursuer_position,
            velocity=solution.launch_velocity,
            side=Side.PURSUER,
        )

    # ------------------------------------------------------------------
    # Update loop
    # ------------------------------------------------------------------
    def tick(self, dt: float) -> ArenaFrame:
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")
        self.time += dt
        radius = self.config.projectile_radius
        for point in self.projectiles:
            advance(point, dt)
            if point.active and is_out_of_bounds(point, self.bounds, radius):
                LOGGER.debug("%s projectile left the arena", point.side.value)
                point.deactivate()

        self.prune_collisions()
        self.projectiles = [point for point in self.projectiles if point.active]

        frame = self.frame()
        for exporter in self._exporters:
            exporter.send(frame)
        return frame

    def prune_collisions(self) -> int:
        """Deactivate opposing pairs closer than the collision threshold.

        Returns the number of pairs removed.
        """

        threshold = self.config.collision_threshold
        pairs = 0
        for point in self.projectiles:
            if not point.active:
                continue
            match = self._find_collision(point, self.projectiles, threshold)
            if match is None:
                continue
            point.deactivate()
            match.deactivate()
            pairs += 1
            LOGGER.info(
                "Intercept at (%.1f, %.1f) after %.2fs",
                point.position.x,
                point.position.y,
                self.time,
            )
        return pairs

    @staticmethod
    def _find_collision(
        point: MovingPoint, candidates: Iterable[MovingPoint], threshold: float
    ) -> Optional[MovingPoint]:
        for other in candidates:
            if other is point or not other.active or other.side is point.side:
                continue
            if point.position.distance_to(other.position) < threshold:
                return other
        return None

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def frame(self) -> ArenaFrame:
        colors = {
            Side.SHOOTER: self.config.shooter_color,
            Side.PURSUER: self.config.pursuer_color,
        }
        items = [
            RenderItem(
                position=point.position,
                radius=self.config.projectile_radius,
                color=colors[point.side],
                side=point.side.value,
            )
            for point in self.projectiles
            if point.active
        ]
        return ArenaFrame(
            time=self.time,
            shooter=self.shooter_position,
            pursuer=self.pursuer_position,
            projectiles=items,
        )

    def close(self) -> None:
        for exporter in self._exporters:
            exporter.close()
