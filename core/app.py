"""
core/app.py — Pygame application shell

Handles the window, main loop, asset loader and scene stack.
You don't edit this file to build your game.
You write Scenes and push/pop them.

    app = App(title="Tilemap Walker", width=800, height=600)
    app.push_scene(MyScene())
    app.run()
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.ecs import World
from core.assets import AssetLoader
from core.constants import SCREEN_WIDTH, SCREEN_HEIGHT, FPS, WINDOW_TITLE, BACKGROUND

# Longest frame the simulation will integrate in one step (s).  A stalled
# window (drag, breakpoint) would otherwise let the player tunnel through
# a one-tile wall.
MAX_DT = 0.05


class App:
    def __init__(self, title: str = WINDOW_TITLE, width: int = SCREEN_WIDTH,
                 height: int = SCREEN_HEIGHT, fps: int = FPS,
                 background: tuple = BACKGROUND):
        pygame.init()
        self._windowed_size = (width, height)
        # The virtual (design) resolution: all game rendering targets this.
        self._virtual_size = (width, height)
        self._render_surface = pygame.Surface((width, height))
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.running = True
        self.fullscreen = False
        self.fps = fps
        self.dt = 0.0
        self.background = tuple(background)

        # Scene stack: only the top scene is active
        self._scenes: list[Scene] = []

        # The ECS world: shared across all scenes
        self.world = World()

        # Named images / spritesheets / maps, filled by Scene.preload
        self.assets = AssetLoader()

        # Debug font: fixed size (the virtual surface is always the same size)
        self.font_sm = pygame.font.SysFont("monospace", 11)

        print(f"[APP] {title} {width}x{height} @ {fps} fps")

    @property
    def size(self) -> tuple[int, int]:
        """Virtual resolution every scene draws at."""
        return self._virtual_size

    # -- Scene management --

    @property
    def scene(self) -> Scene | None:
        return self._scenes[-1] if self._scenes else None

    def push_scene(self, scene: Scene):
        if self._scenes:
            self._scenes[-1].on_exit(self)
        self._scenes.append(scene)
        if not scene.preloaded:
            scene.preload(self)
            scene.preloaded = True
        scene.on_enter(self)

    def pop_scene(self):
        if self._scenes:
            self._scenes[-1].on_exit(self)
            self._scenes.pop()
        if self._scenes:
            self._scenes[-1].on_enter(self)

    # -- Main loop --

    def run(self):
        try:
            while self.running:
                dt = self.clock.tick(self.fps) / 1000.0

                # Events
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                        self.toggle_fullscreen()
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        self.running = False
                    elif event.type == pygame.VIDEORESIZE and not self.fullscreen:
                        self._windowed_size = (event.w, event.h)
                        self.screen = pygame.display.set_mode(
                            (event.w, event.h), pygame.RESIZABLE)
                    elif self.scene:
                        self.scene.handle_event(event, self)

                self.step(dt)
                self.present()
        finally:
            pygame.quit()

    def step(self, dt: float):
        """Run one update + draw on the virtual surface.

        Does not poll events or touch the clock, so tests can drive the
        app frame by frame with a fixed dt.
        """
        self.dt = min(dt, MAX_DT)
        if self.scene:
            self.scene.update(self.dt, self)

        self._render_surface.fill(self.background)
        if self.scene:
            self.scene.draw(self._render_surface, self)

    def present(self):
        """Scale the virtual surface to the window (nearest-neighbour) and flip."""
        pygame.transform.scale(self._render_surface,
                               self.screen.get_size(), self.screen)
        pygame.display.flip()

    def toggle_fullscreen(self):
        """Switch between windowed and fullscreen (F11)."""
        self.fullscreen = not self.fullscreen
        if self.fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode(
                self._windowed_size, pygame.RESIZABLE)

    # -- Convenience --

    def draw_text_bg(self, surface: pygame.Surface, text: str, x: int, y: int,
                     color=(255, 255, 255), bg=(0, 0, 0, 160), font=None,
                     pad: int = 2):
        """Draw text with a semi-transparent background box."""
        f = font or self.font_sm
        img = f.render(text, True, color)
        w, h = img.get_size()
        bg_surf = pygame.Surface((w + pad * 2, h + pad * 2), pygame.SRCALPHA)
        bg_surf.fill(bg)
        surface.blit(bg_surf, (x - pad, y - pad))
        return surface.blit(img, (x, y))
