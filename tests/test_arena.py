"""Tests for the arena tick loop, firing and collision pruning."""
from __future__ import annotations

import math
from typing import List, Tuple

import pytest

from predictive_aim.arena import Arena, FireTrigger, TriggerButton
from predictive_aim.config import SimulationConfig
from predictive_aim.exporters import RpcFrameExporter
from predictive_aim.geometry import Vector2
from predictive_aim.kinematics import MovingPoint, Side


def place(arena: Arena, x: float, y: float, side: Side) -> MovingPoint:
    point = MovingPoint(position=Vector2(x, y), velocity=Vector2(0, 0), side=side)
    arena.projectiles.append(point)
    return point


def test_fire_spawns_shot_and_interceptor() -> None:
    arena = Arena()

    spawned = arena.fire(Vector2(200, 0))

    assert [point.side for point in spawned] == [Side.SHOOTER, Side.PURSUER]
    shot, interceptor = spawned
    assert shot.position == Vector2(200, 200)
    assert shot.velocity.y == -150.0
    assert interceptor.position == Vector2(200, 390)
    assert math.isclose(interceptor.velocity.magnitude(), 200.0, abs_tol=1e-6)
    assert interceptor.velocity.y < 0


def test_fire_without_solution_spawns_only_shot() -> None:
    config = SimulationConfig(shooter_speed=300.0, pursuer_speed=100.0)
    arena = Arena(config)

    spawned = arena.fire(Vector2(200, 0))

    assert [point.side for point in spawned] == [Side.SHOOTER]


def test_fire_on_shooter_position_is_ignored() -> None:
    arena = Arena()

    assert arena.fire(Vector2(200, 200)) == []
    assert arena.projectiles == []


def test_secondary_trigger_moves_shooter_without_firing() -> None:
    arena = Arena()

    spawned = arena.handle_trigger(FireTrigger(Vector2(50, 60), TriggerButton.SECONDARY))

    assert spawned == []
    assert arena.shooter_position == Vector2(50, 60)
    assert arena.projectiles == []

    shot = arena.handle_trigger(FireTrigger(Vector2(50, 0)))[0]
    assert shot.position == Vector2(50, 60)


def test_opposing_points_within_threshold_both_deactivate() -> None:
    arena = Arena()
    shot = place(arena, 100, 100, Side.SHOOTER)
    interceptor = place(arena, 103, 100, Side.PURSUER)

    frame = arena.tick(0.0)

    assert not shot.active
    assert not interceptor.active
    assert frame.projectiles == []
    assert arena.projectiles == []


def test_same_side_points_never_collide() -> None:
    arena = Arena()
    place(arena, 100, 100, Side.SHOOTER)
    place(arena, 100, 100, Side.SHOOTER)
    place(arena, 300, 300, Side.PURSUER)

    arena.tick(0.0)

    assert len(arena.projectiles) == 3


def test_each_point_is_consumed_by_one_collision() -> None:
    arena = Arena()
    shot = place(arena, 100, 100, Side.SHOOTER)
    first = place(arena, 102, 100, Side.PURSUER)
    second = place(arena, 101, 100, Side.PURSUER)

    pairs = arena.prune_collisions()

    assert pairs == 1
    assert not shot.active
    assert not first.active
    assert second.active


def test_points_at_threshold_do_not_collide() -> None:
    arena = Arena()
    place(arena, 100, 100, Side.SHOOTER)
    place(arena, 105, 100, Side.PURSUER)

    assert arena.prune_collisions() == 0


def test_points_leaving_the_arena_are_culled() -> None:
    arena = Arena()
    leaving = MovingPoint(position=Vector2(395, 200), velocity=Vector2(100, 0), side=Side.SHOOTER)
    arena.projectiles.append(leaving)

    arena.tick(0.2)

    assert not leaving.active
    assert arena.projectiles == []


def test_interceptor_meets_shot_in_flight() -> None:
    arena = Arena()
    arena.fire(Vector2(200, 400))

    for _ in range(60):
        arena.tick(0.01)

    assert arena.projectiles == []
    assert math.isclose(arena.time, 0.6)


def test_frames_are_exported_each_tick() -> None:
    calls: List[Tuple[str, dict]] = []
    arena = Arena(exporters=[RpcFrameExporter(lambda method, payload: calls.append((method, payload)))])
    arena.fire(Vector2(0, 200))

    arena.tick(0.1)
    arena.tick(0.1)

    assert len(calls) == 2
    method, payload = calls[-1]
    assert method == "arena.frame"
    assert payload["time"] == 0.2
    assert payload["shooter"] == [200.0, 200.0]
    colors = {item["side"]: item["color"] for item in payload["circles"]}
    assert colors == {"shooter": "#c8c8c8", "pursuer": "red"}
    assert all(item["radius"] == 10.0 for item in payload["circles"])


def test_negative_dt_leaves_clock_untouched() -> None:
    arena = Arena()
    arena.tick(0.5)

    with pytest.raises(ValueError):
        arena.tick(-0.1)

    assert arena.time == 0.5


def test_second_shot_survives_when_its_opponent_is_taken() -> None:
    # Overlapping shots, one interceptor: only the first shot in firing order is consumed.
    arena = Arena()
    first_shot = place(arena, 100, 100, Side.SHOOTER)
    second_shot = place(arena, 101, 100, Side.SHOOTER)
    interceptor = place(arena, 102, 100, Side.PURSUER)

    arena.tick(0.0)

    assert not first_shot.active
    assert not interceptor.active
    assert second_shot.active
    assert arena.projectiles == [second_shot]
