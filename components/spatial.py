"""components.spatial — Position, movement, and collision shapes.

All coordinates and dimensions are in world pixels.  ``Position`` is
the sprite's centre; a ``Body`` box is centred on it.
"""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class Position:
    x: float = 0.0        # px
    y: float = 0.0        # px


@dataclass
class Velocity:
    x: float = 0.0        # px/s
    y: float = 0.0        # px/s


@dataclass
class Body:
    """Axis-aligned physics box, centred on Position.

    ``colliders`` holds the tile layers this body cannot pass through;
    register them with ``logic.movement.add_collider``.
    ``blocked`` records which sides touched a wall on the last step.
    """
    width: float = 32.0   # px
    height: float = 32.0  # px
    colliders: list = field(default_factory=list)
    blocked: dict[str, bool] = field(default_factory=lambda: {
        "left": False, "right": False, "up": False, "down": False,
    })

    def box(self, x: float, y: float) -> tuple[float, float, float, float]:
        """``(left, top, width, height)`` for a body centred at (x, y)."""
        return (x - self.width * 0.5, y - self.height * 0.5, self.width, self.height)
