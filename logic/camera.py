"""logic/camera.py — Camera follow.

Centres the view on the camera's target entity and keeps it inside
the camera bounds.  Runs after movement so the view never lags a frame
behind the player.
"""

from __future__ import annotations
from core.ecs import World
from components import Camera, Position


def clamp_axis(scroll: float, view: float, lo: float, extent: float) -> float:
    """Clamp one scroll axis to ``[lo, lo + extent - view]``.

    A bounds region narrower than the view is centred instead.
    """
    if extent <= view:
        return lo + (extent - view) * 0.5
    return max(lo, min(scroll, lo + extent - view))


def camera_system(world: World):
    cam = world.res(Camera)
    if cam is None:
        return
    if cam.target is not None:
        pos = world.get(cam.target, Position)
        if pos is not None:
            cam.scroll_x = pos.x - cam.width * 0.5
            cam.scroll_y = pos.y - cam.height * 0.5
    if cam.bounds is not None:
        bx, by, bw, bh = cam.bounds
        cam.scroll_x = clamp_axis(cam.scroll_x, cam.width, bx, bw)
        cam.scroll_y = clamp_axis(cam.scroll_y, cam.height, by, bh)
