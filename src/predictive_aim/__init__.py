"""Predictive aim package exposing the solver, kinematics and arena."""
from __future__ import annotations

from .arena import Arena, ArenaFrame, FireTrigger, RenderItem, TriggerButton
from .config import SimulationConfig, load_config
from .exporters import CallbackFrameExporter, FrameExporter, RpcFrameExporter
from .geometry import Vector2, angle_between
from .intercept import (
    InterceptProblem,
    InterceptSolution,
    predict_launch_vector,
    select_root,
    solve_intercept,
)
from .kinematics import Bounds, MovingPoint, Side, advance, is_out_of_bounds
from .quadratic import QuadraticRoots, solve_quadratic

__all__ = [
    "Arena",
    "ArenaFrame",
    "FireTrigger",
    "RenderItem",
    "TriggerButton",
    "SimulationConfig",
    "load_config",
    "Vector2",
    "angle_between",
    "InterceptProblem",
    "InterceptSolution",
    "predict_launch_vector",
    "select_root",
    "solve_intercept",
    "Bounds",
    "MovingPoint",
    "Side",
    "advance",
    "is_out_of_bounds",
    "QuadraticRoots",
    "solve_quadratic",
    "FrameExporter",
    "CallbackFrameExporter",
    "RpcFrameExporter",
]
