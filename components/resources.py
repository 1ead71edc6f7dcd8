"""components.resources — World-level singletons (not per-entity)."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class GameClock:
    """Monotonic game time — accumulated ``dt`` since session start.

    Updated once per frame by ``logic.tick.tick_systems``.
    """
    time: float = 0.0
    frame: int = 0


@dataclass
class Camera:
    """Viewport into the world.

    ``scroll_x``/``scroll_y`` are the world coordinates of the view's
    top-left corner.  ``bounds`` is ``(x, y, width, height)`` in world
    pixels or ``None`` for an unbounded camera.  ``target`` is the
    entity the camera follows.
    """
    scroll_x: float = 0.0
    scroll_y: float = 0.0
    width: int = 800
    height: int = 600
    bounds: tuple[float, float, float, float] | None = None
    target: int | None = None

    def start_follow(self, eid: int):
        self.target = eid

    def stop_follow(self):
        self.target = None

    def set_bounds(self, x: float, y: float, width: float, height: float):
        self.bounds = (x, y, width, height)

    def world_to_screen(self, x: float, y: float) -> tuple[int, int]:
        return int(round(x - self.scroll_x)), int(round(y - self.scroll_y))


@dataclass
class Player:
    """Marks the player entity."""
    speed: float = 175.0       # px/s
