"""logic/movement.py — Physics / movement system.

Moves entities with Position+Velocity+Body and resolves collisions
against the tile layers registered on each body (wall-sliding).
"""

from __future__ import annotations
from core.ecs import World
from core.tilemap import TileLayer
from core.collision import sweep_x, sweep_y
from components import Position, Velocity, Body


def add_collider(world: World, eid: int, layer: TileLayer):
    """Make *eid*'s body collide with *layer*'s colliding tiles."""
    body = world.get(eid, Body)
    if body is None:
        raise KeyError(f"entity {eid} has no Body to collide with '{layer.name}'")
    if layer not in body.colliders:
        body.colliders.append(layer)


def movement_system(world: World, dt: float,
                    gravity: tuple[float, float] = (0.0, 0.0)):
    """Integrate velocity, stop bodies on walls.

    - Gravity is added to velocity before the move.
    - Axis-separated (x then y) so a body pushing into a wall still
      slides along it.
    - A blocked axis has its velocity zeroed; the resolver reads that
      as "not moving" on the next frame.
    """
    gx, gy = gravity
    for eid, pos, vel, body in world.query(Position, Velocity, Body):
        vel.x += gx * dt
        vel.y += gy * dt

        left, top, w, h = body.box(pos.x, pos.y)
        for side in body.blocked:
            body.blocked[side] = False

        # Axis-separated tile collision: allows wall-sliding
        new_left, hit_x = sweep_x(left, top, w, h, vel.x * dt, body.colliders)
        if hit_x:
            body.blocked["right" if vel.x > 0 else "left"] = True
            vel.x = 0.0
        new_top, hit_y = sweep_y(new_left, top, w, h, vel.y * dt, body.colliders)
        if hit_y:
            body.blocked["down" if vel.y > 0 else "up"] = True
            vel.y = 0.0

        # Commit movement
        pos.x = new_left + w * 0.5
        pos.y = new_top + h * 0.5
