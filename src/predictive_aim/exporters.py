"""Render hooks: hand each arena frame to whatever draws it."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, List, Protocol, runtime_checkable

if TYPE_CHECKING:  # pragma: no cover
    from .arena import ArenaFrame


def frame_to_dict(frame: "ArenaFrame") -> Dict[str, object]:
    """Flatten a frame into the circles a renderer has to fill."""

    circles: List[Dict[str, object]] = [
        {
            "x": item.position.x,
            "y": item.position.y,
            "radius": item.radius,
            "color": item.color,
            "side": item.side,
        }
        for item in frame.projectiles
    ]
    return {
        "time": frame.time,
        "shooter": [frame.shooter.x, frame.shooter.y],
        "pursuer": [frame.pursuer.x, frame.pursuer.y],
        "circles": circles,
    }


@runtime_checkable
class FrameExporter(Protocol):
    """Receives every frame produced by ``Arena.tick``."""

    def send(self, frame: "ArenaFrame") -> None:
        ...

    def close(self) -> None:
        ...


class CallbackFrameExporter:
    """Pass frames untouched to a draw callback living in the host harness."""

    def __init__(self, draw: Callable[["ArenaFrame"], None]) -> None:
        self._draw = draw

    def send(self, frame: "ArenaFrame") -> None:
        self._draw(frame)

    def close(self) -> None:
        return None


class RpcFrameExporter:
    """Dispatch flattened frames to a ``(method, payload)`` handler."""

    def __init__(self, dispatcher: Callable[[str, dict], None], method: str = "arena.frame") -> None:
        self._dispatcher = dispatcher
        self._method = method
        self.frames_sent = 0

    def send(self, frame: "ArenaFrame") -> None:
        self._dispatcher(self._method, frame_to_dict(frame))
        self.frames_sent += 1

    def close(self) -> None:
        return None


__all__ = [
    "FrameExporter",
    "CallbackFrameExporter",
    "RpcFrameExporter",
    "frame_to_dict",
]
