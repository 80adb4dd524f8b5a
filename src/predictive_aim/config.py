"""Configuration for the predictive aim arena."""
from __future__ import annotations

import json
import math
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict

from .geometry import Vector2
from .kinematics import Bounds

_POSITIVE_FIELDS = (
    "shooter_speed",
    "pursuer_speed",
    "projectile_radius",
    "collision_threshold",
    "arena_width",
    "arena_height",
)
_VECTOR_FIELDS = ("shooter_position", "pursuer_position")


@dataclass
class SimulationConfig:
    """Tunable constants for the arena and its projectiles."""

    shooter_speed: float = 150.0
    pursuer_speed: float = 200.0
    projectile_radius: float = 10.0
    collision_threshold: float = 5.0
    arena_width: float = 400.0
    arena_height: float = 400.0
    shooter_position: Vector2 = field(default_factory=lambda: Vector2(200.0, 200.0))
    pursuer_position: Vector2 = field(default_factory=lambda: Vector2(200.0, 390.0))
    shooter_color: str = "#c8c8c8"
    pursuer_color: str = "red"

    def __post_init__(self) -> None:
        for name in _POSITIVE_FIELDS:
            value = getattr(self, name)
            if not (math.isfinite(value) and value > 0):
                raise ValueError(f"SimulationConfig.{name} must be positive and finite, got {value}")
        for name in _VECTOR_FIELDS:
            vector = getattr(self, name)
            if not (math.isfinite(vector.x) and math.isfinite(vector.y)):
                raise ValueError(f"SimulationConfig.{name} must be finite, got {vector}")

    @property
    def bounds(self) -> Bounds:
        return Bounds(width=self.arena_width, height=self.arena_height)


def _parse_float(name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a number, got {value!r}") from exc


def _parse_vector(name: str, value: Any) -> Vector2:
    if isinstance(value, dict):
        if "x" not in value or "y" not in value:
            raise ValueError(f"{name} needs both x and y")
        return Vector2(_parse_float(f"{name}.x", value["x"]), _parse_float(f"{name}.y", value["y"]))
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return Vector2(_parse_float(f"{name}[0]", value[0]), _parse_float(f"{name}[1]", value[1]))
    raise ValueError(f"{name} must be an [x, y] pair or an object with x and y")


def config_from_dict(data: Dict[str, Any]) -> SimulationConfig:
    """Build a config from a mapping, keeping defaults for missing keys."""

    known = {item.name for item in fields(SimulationConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

    kwargs: Dict[str, Any] = {}
    for key, value in data.items():
        if key in _VECTOR_FIELDS:
            kwargs[key] = _parse_vector(key, value)
        elif key in _POSITIVE_FIELDS:
            kwargs[key] = _parse_float(key, value)
        else:
            kwargs[key] = str(value)
    return SimulationConfig(**kwargs)


def load_config(path: str | Path) -> SimulationConfig:
    """Load configuration from a JSON file."""

    content = Path(path).read_text(encoding="utf-8")
    data = json.loads(content)
    if not isinstance(data, dict):
        raise ValueError("Configuration file must contain a JSON object")
    return config_from_dict(data)
