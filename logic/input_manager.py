"""logic/input_manager.py — Intent-based input layer.

Sits between raw pygame events and game actions.  The scene feeds in
raw events; the manager maps them to *intents* through a binding
table.  Other systems read the intents — they never touch raw keycodes.

Usage (in walk_scene):

    self.input = InputManager()
    # each frame:
    self.input.begin_frame()
    for event in events:
        self.input.feed(event)
    self.input.end_frame()          # captures held-key state

    if self.input.just("toggle_debug"):   # discrete press
        ...
    keys = self.input.cursors()           # → CursorKeys snapshot
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Mapping

import pygame


# ── Intent names ────────────────────────────────────────────────────
# Held:   move_up  move_down  move_left  move_right
# Press:  toggle_debug  reload_tuning

DEFAULT_BINDS: dict[str, list[int]] = {
    # Movement  (held: continuous)
    "move_up":       [pygame.K_UP, pygame.K_w],
    "move_down":     [pygame.K_DOWN, pygame.K_s],
    "move_left":     [pygame.K_LEFT, pygame.K_a],
    "move_right":    [pygame.K_RIGHT, pygame.K_d],
    # Debug / toggles  (press: discrete)
    "toggle_debug":  [pygame.K_TAB],
    "reload_tuning": [pygame.K_F4],
}


@dataclass(frozen=True)
class CursorKeys:
    """One frame's worth of direction flags."""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    def any(self) -> bool:
        return self.up or self.down or self.left or self.right


# ── InputManager ────────────────────────────────────────────────────

class InputManager:
    """Binding-table input mapper.

    Call ``begin_frame()`` before processing events,
    ``feed(event)`` for each pygame event,
    ``end_frame()`` after all events.

    Then use ``just(intent)`` for discrete presses,
    ``held(intent)`` for continuous holds and ``cursors()`` for the
    direction snapshot the motion resolver reads.
    """

    def __init__(self, binds: dict[str, list[int]] | None = None,
                 key_state: Callable[[], Mapping[int, bool]] | None = None):
        self.binds = binds if binds is not None else {
            intent: list(keys) for intent, keys in DEFAULT_BINDS.items()}
        # Where held-key state comes from; None = pygame.key.get_pressed
        self.key_state = key_state
        # Intents pressed *this frame* (rising edge)
        self._pressed: set[str] = set()
        # Intents currently held (key is down right now)
        self._held: set[str] = set()

    # ── frame lifecycle ─────────────────────────────────────────

    def begin_frame(self):
        """Call at the start of each frame before feeding events."""
        self._pressed.clear()

    def feed(self, event: pygame.event.Event):
        """Feed a raw pygame event.  KEYDOWN maps to discrete intents."""
        if event.type != pygame.KEYDOWN:
            return
        for intent, keys in self.binds.items():
            if event.key in keys:
                self._pressed.add(intent)

    def end_frame(self, pressed: Mapping[int, bool] | None = None):
        """Snapshot held-key state for continuous intents (movement).

        *pressed* defaults to ``key_state()`` when one was given, else
        ``pygame.key.get_pressed()``.  Plain ``{key: bool}`` mappings work.
        """
        self._held.clear()
        if pressed is None:
            pressed = self.key_state() if self.key_state else pygame.key.get_pressed()
        for intent, keys in self.binds.items():
            for key in keys:
                if _is_down(pressed, key):
                    self._held.add(intent)
                    break

    # ── queries ─────────────────────────────────────────────────

    def just(self, intent: str) -> bool:
        """True if the intent was triggered this frame (rising edge)."""
        return intent in self._pressed

    def held(self, intent: str) -> bool:
        """True if the intent is continuously held down."""
        return intent in self._held

    def cursors(self) -> CursorKeys:
        return CursorKeys(
            up=self.held("move_up"),
            down=self.held("move_down"),
            left=self.held("move_left"),
            right=self.held("move_right"),
        )


def _is_down(pressed, key: int) -> bool:
    if isinstance(pressed, Mapping):
        return bool(pressed.get(key, False))
    try:
        return bool(pressed[key])
    except IndexError:
        return False
