"""logic/motion.py — Keyboard → player velocity, walk cycle and idle pose.

Runs once per frame, before physics.  The decision itself is the pure
function ``resolve_motion``; ``apply_motion`` writes its result onto
the player entity.

Directions are checked in a fixed priority order — left, right, up,
down — and the first one held wins, so the player only ever moves
along one axis.  With nothing held the player stops and turns to face
the way it was last moving.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from components import Velocity, Sprite, Animator
from core.constants import (
    KEY_STAND, STAND_DOWN, STAND_LEFT, STAND_RIGHT, STAND_UP,
)

if TYPE_CHECKING:
    from core.ecs import World
    from logic.input_manager import CursorKeys


class Walk(Enum):
    """Walk animation to play.  Values are the animation keys."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    NONE = "none"


@dataclass(frozen=True)
class MotionResult:
    velocity: tuple[float, float]
    walk: Walk
    idle_frame: int | None = None   # stand frame to show, None = leave as is


def idle_frame_for(prev_vx: float, prev_vy: float) -> int | None:
    """Stand frame facing the way the previous velocity pointed."""
    if prev_vx < 0:
        return STAND_LEFT
    if prev_vx > 0:
        return STAND_RIGHT
    if prev_vy < 0:
        return STAND_UP
    if prev_vy > 0:
        return STAND_DOWN
    return None


def normalize_scale(vx: float, vy: float, speed: float) -> tuple[float, float]:
    """Rescale (vx, vy) to length *speed*.  A zero vector stays zero."""
    mag = math.hypot(vx, vy)
    if mag == 0.0:
        return 0.0, 0.0
    return vx / mag * speed, vy / mag * speed


def resolve_motion(keys: CursorKeys, prev_velocity: tuple[float, float],
                   speed: float) -> MotionResult:
    if keys.left:
        vx, vy, walk = -speed, 0.0, Walk.LEFT
    elif keys.right:
        vx, vy, walk = speed, 0.0, Walk.RIGHT
    elif keys.up:
        vx, vy, walk = 0.0, -speed, Walk.UP
    elif keys.down:
        vx, vy, walk = 0.0, speed, Walk.DOWN
    else:
        return MotionResult((0.0, 0.0), Walk.NONE,
                            idle_frame_for(prev_velocity[0], prev_velocity[1]))

    # |v| is exactly speed whenever anything is held.
    return MotionResult(normalize_scale(vx, vy, speed), walk)


def apply_motion(world: World, eid: int, keys: CursorKeys, speed: float) -> MotionResult:
    """Resolve this frame's motion for *eid* and write it to its components."""
    vel = world.get(eid, Velocity)
    result = resolve_motion(keys, (vel.x, vel.y), speed)
    vel.x, vel.y = result.velocity

    anim = world.get(eid, Animator)
    if result.walk is Walk.NONE:
        if result.idle_frame is not None:
            sprite = world.get(eid, Sprite)
            if sprite is not None:
                sprite.set_texture(KEY_STAND, result.idle_frame)
        if anim is not None:
            anim.stop()
    elif anim is not None:
        anim.play(result.walk.value, ignore_if_playing=True)
    return result
