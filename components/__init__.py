"""components — ECS component dataclasses, organised by domain.

Submodules
----------
spatial        Position, Velocity, Body
rendering      Sprite
animation      Animator
resources      Camera, GameClock, Player

All public names are re-exported here so code can do
``from components import Position``.
"""

# ── Spatial ──────────────────────────────────────────────────────────
from components.spatial import Position, Velocity, Body

# ── Rendering ────────────────────────────────────────────────────────
from components.rendering import Sprite

# ── Animation ────────────────────────────────────────────────────────
from components.animation import Animator

# ── World resources / singletons ─────────────────────────────────────
from components.resources import Camera, GameClock, Player

__all__ = [
    # spatial
    "Position", "Velocity", "Body",
    # rendering
    "Sprite",
    # animation
    "Animator",
    # resources
    "Camera", "GameClock", "Player",
]
