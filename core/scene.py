"""
core/scene.py — Scene interface

Every screen in the game is a Scene. The app holds a stack of them.
Only the top scene gets update/draw calls. Scenes below stay frozen.

A scene's life is three phases, in order:

    preload   queue and load assets (runs once, the first time the
              scene is pushed)
    on_enter  one-time setup: build the map, spawn entities, wire the
              camera (called each time the scene becomes active)
    update    per-frame logic; dt is seconds since last frame

To make a new scene:

    class MyScene(Scene):
        def preload(self, app):
            app.assets.image("logo", "assets/logo.png")

        def on_enter(self, app):
            pass

        def handle_event(self, event, app):
            pass

        def update(self, dt, app):
            pass

        def draw(self, surface, app):
            pass
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    preloaded: bool = False

    def preload(self, app: App):
        """Queue and load assets.  Called once before the first on_enter."""
        pass

    def on_enter(self, app: App):
        """Called when this scene becomes active (pushed or revealed)."""
        pass

    def on_exit(self, app: App):
        """Called when this scene is removed or covered."""
        pass

    def handle_event(self, event: pygame.event.Event, app: App):
        """Process a single pygame event."""
        pass

    def update(self, dt: float, app: App):
        """Advance simulation. dt is seconds."""
        pass

    def draw(self, surface: pygame.Surface, app: App):
        """Draw to the screen surface."""
        pass
