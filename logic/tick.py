"""logic/tick.py — System tick orchestration.

The per-frame pipeline, in order:

    clock → animation → movement → camera

Input resolution (``logic.motion.apply_motion``) runs in the scene
before this, so this frame's velocity and walk cycle are what the
systems below see.

Usage::

    from logic.tick import tick_systems
    tick_systems(world, dt, anims, gravity=(0.0, 0.0))
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from components import GameClock
from logic.animation import animation_system
from logic.movement import movement_system
from logic.camera import camera_system

if TYPE_CHECKING:
    from core.ecs import World
    from logic.animation import AnimationRegistry


def tick_systems(world: "World", dt: float, anims: "AnimationRegistry",
                 gravity: tuple[float, float] = (0.0, 0.0)) -> None:
    clock = world.res(GameClock)
    if clock is not None:
        clock.time += dt
        clock.frame += 1

    animation_system(world, anims, dt)
    movement_system(world, dt, gravity)
    camera_system(world)
    world.purge()
