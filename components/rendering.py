"""components.rendering — Visual identity and display."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Sprite:
    """Which texture frame to draw for an entity.

    ``texture`` is an asset key; ``frame`` indexes that texture's frames.
    Higher ``depth`` draws later (on top); ties keep creation order.
    """
    texture: str = ""
    frame: int = 0
    depth: int = 0
    visible: bool = True

    def set_texture(self, texture: str, frame: int = 0):
        self.texture = texture
        self.frame = frame
