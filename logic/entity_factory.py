"""logic/entity_factory.py — Entity spawning.

One function per archetype.  Each returns the new entity id with every
component the per-frame systems expect already attached.
"""

from __future__ import annotations
from core.ecs import World
from core.constants import KEY_STAND, STAND_DOWN, BODY_WIDTH, BODY_HEIGHT, PLAYER_SPEED
from components import Position, Velocity, Body, Sprite, Animator, Player


def spawn_player(world: World, x: float, y: float, *,
                 speed: float = PLAYER_SPEED,
                 texture: str = KEY_STAND, frame: int = STAND_DOWN,
                 body_size: tuple[float, float] = (BODY_WIDTH, BODY_HEIGHT)) -> int:
    """Spawn the player centred on (x, y), facing down, standing still."""
    eid = world.spawn()
    world.add(eid, Position(x=float(x), y=float(y)))
    world.add(eid, Velocity())
    world.add(eid, Body(width=float(body_size[0]), height=float(body_size[1])))
    world.add(eid, Sprite(texture=texture, frame=frame))
    world.add(eid, Animator())
    world.add(eid, Player(speed=float(speed)))
    return eid
