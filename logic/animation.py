"""logic/animation.py — Spritesheet animations.

Definitions are registered once, during scene setup:

    anims = AnimationRegistry()
    anims.create("left", generate_frame_numbers("walk_left", 0, 8),
                 frame_rate=10, repeat=-1)

Entities play them through their ``Animator`` component; the system
below advances every playing animator each frame and copies the
current frame into the entity's ``Sprite``.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

from components import Animator, Sprite

if TYPE_CHECKING:
    from core.ecs import World


Frame = tuple[str, int]   # (texture key, frame index)


def generate_frame_numbers(texture: str, start: int, end: int) -> list[Frame]:
    """Frames *start*..*end* (inclusive) of one spritesheet.

    A reversed range (start > end) plays the frames backwards.
    """
    step = 1 if end >= start else -1
    return [(texture, i) for i in range(start, end + step, step)]


@dataclass(frozen=True)
class Animation:
    key: str
    frames: tuple[Frame, ...]
    frame_rate: float = 10.0     # frames/s
    repeat: int = 0              # extra plays; -1 = forever

    @property
    def frame_duration(self) -> float:
        return 1.0 / self.frame_rate


class AnimationRegistry:
    def __init__(self):
        self._anims: dict[str, Animation] = {}

    def create(self, key: str, frames: list[Frame], frame_rate: float = 10.0,
               repeat: int = 0) -> Animation:
        """Register an animation.  An existing key is kept, not replaced."""
        if key in self._anims:
            print(f"[ANIM] '{key}' already exists — keeping the first definition")
            return self._anims[key]
        if not frames:
            raise ValueError(f"animation '{key}' has no frames")
        if frame_rate <= 0:
            raise ValueError(f"animation '{key}' needs a positive frame rate, got {frame_rate}")
        anim = Animation(key, tuple(frames), float(frame_rate), int(repeat))
        self._anims[key] = anim
        return anim

    def get(self, key: str) -> Animation:
        try:
            return self._anims[key]
        except KeyError:
            raise KeyError(f"no animation registered under '{key}'") from None

    def __contains__(self, key: str) -> bool:
        return key in self._anims

    def __len__(self) -> int:
        return len(self._anims)


def animation_system(world: World, registry: AnimationRegistry, dt: float):
    """Advance playing animators and push their frame to the Sprite."""
    for eid, anim, sprite in world.query(Animator, Sprite):
        if anim.current is None:
            continue
        if not anim.playing and not anim.dirty:
            continue
        definition = registry.get(anim.current)

        if anim.playing and not anim.dirty:
            anim.elapsed += dt
            while anim.elapsed >= definition.frame_duration and anim.playing:
                anim.elapsed -= definition.frame_duration
                _advance(anim, definition)

        anim.dirty = False
        tex, idx = definition.frames[anim.index]
        sprite.set_texture(tex, idx)


def _advance(anim: Animator, definition: Animation):
    if anim.index + 1 < len(definition.frames):
        anim.index += 1
        return
    if definition.repeat == -1 or anim.loops_done < definition.repeat:
        anim.loops_done += 1
        anim.index = 0
        return
    # Out of repeats: hold the last frame.
    anim.playing = False
