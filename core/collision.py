"""core/collision.py — Low-level AABB / tile-layer collision primitives.

These live in ``core/`` (not ``logic/``) because they only know about
boxes and layers, not about entities or components.

Boxes are ``(left, top, width, height)`` in world pixels.  Moves are
resolved one axis at a time so a body pressed against a wall still
slides along it.  Only tiles the box enters during the move stop it; a
box that already overlaps a tile can walk out of it.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from core.tilemap import TileLayer


def box_hits_layer(left: float, top: float, width: float, height: float,
                   layer: TileLayer) -> bool:
    """Return True if the box overlaps any colliding tile of *layer*."""
    return bool(layer.colliding_tiles_in(left, top, width, height))


def sweep_x(left: float, top: float, width: float, height: float,
            dx: float, layers: Iterable[TileLayer]) -> tuple[float, bool]:
    """Move the box by *dx* horizontally; stop flush against walls.

    Returns ``(new_left, blocked)``.
    """
    new_left = left + dx
    if dx == 0.0:
        return new_left, False
    blocked = False
    for layer in layers:
        for col, row in layer.colliding_tiles_in(new_left, top, width, height):
            tx, _, tw, _ = layer.tile_rect(col, row)
            if dx > 0:
                if tx < left + width:
                    continue  # already overlapping before the move
                new_left = min(new_left, tx - width)
            else:
                if tx + tw > left:
                    continue
                new_left = max(new_left, tx + tw)
            blocked = True
    return new_left, blocked


def sweep_y(left: float, top: float, width: float, height: float,
            dy: float, layers: Iterable[TileLayer]) -> tuple[float, bool]:
    """Move the box by *dy* vertically; stop flush against walls.

    Returns ``(new_top, blocked)``.
    """
    new_top = top + dy
    if dy == 0.0:
        return new_top, False
    blocked = False
    for layer in layers:
        for col, row in layer.colliding_tiles_in(left, new_top, width, height):
            _, ty, _, th = layer.tile_rect(col, row)
            if dy > 0:
                if ty < top + height:
                    continue
                new_top = min(new_top, ty - height)
            else:
                if ty + th > top:
                    continue
                new_top = max(new_top, ty + th)
            blocked = True
    return new_top, blocked
