"""components.animation — Per-entity animation playback state.

The definitions (frames, rate, repeat) live in the scene's
``AnimationRegistry``; this component only tracks where an entity is
inside the one it is playing.  ``logic.animation.animation_system``
advances it and writes the frame into the entity's ``Sprite``.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Animator:
    current: str | None = None   # animation key, None when nothing assigned
    index: int = 0               # position in the animation's frame list
    elapsed: float = 0.0         # s accumulated toward the next frame
    loops_done: int = 0
    playing: bool = False
    dirty: bool = False          # frame must be pushed to the Sprite

    def play(self, key: str, ignore_if_playing: bool = True):
        """Start *key* from its first frame.

        With ``ignore_if_playing`` a call for the animation already
        running is a no-op, so calling ``play`` every frame keeps the
        cycle going instead of pinning it to frame 0.
        """
        if ignore_if_playing and self.playing and self.current == key:
            return
        self.current = key
        self.index = 0
        self.elapsed = 0.0
        self.loops_done = 0
        self.playing = True
        self.dirty = True

    def stop(self):
        """Freeze on the current frame."""
        self.playing = False

    def is_playing(self, key: str | None = None) -> bool:
        if key is None:
            return self.playing
        return self.playing and self.current == key
