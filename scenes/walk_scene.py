"""
scenes/walk_scene.py — Top-down tilemap walk

Loads a Tiled map, spawns the player at the map's spawn object and
walks it around with the arrow keys (or WASD).  The camera follows
the player and stops at the map edges.

    preload   load map, tileset image and the five character sheets
    on_enter  build layers, spawn the player, register walk cycles,
              wire collisions and the camera
    update    keys → velocity / walk cycle / idle pose, then physics

Tab toggles the debug overlay, F4 hot-reloads data/tuning.toml.
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.app import App
from core.tilemap import Tilemap, TileLayer
from core import constants as C
from core import tuning as tuning_mod
from components import Camera, GameClock, Player
from logic.input_manager import InputManager
from logic.animation import AnimationRegistry, generate_frame_numbers
from logic.motion import apply_motion
from logic.movement import add_collider
from logic.camera import camera_system
from logic.entity_factory import spawn_player
from logic.tick import tick_systems
from scenes.walk_draw import draw_world, draw_debug_colliders, draw_debug_overlay


# Character sheets: (asset key, animation key, first frame, last frame)
WALK_CYCLES = [
    (C.KEY_WALK_LEFT, "left", 0, 8),
    (C.KEY_WALK_RIGHT, "right", 0, 8),
    (C.KEY_WALK_UP, "up", 0, 7),
    (C.KEY_WALK_DOWN, "down", 0, 7),
]


class WalkScene(Scene):
    def __init__(self, input_manager: InputManager | None = None):
        # Session state: everything the frame loop reads lives here.
        self.input = input_manager or InputManager()
        self.anims = AnimationRegistry()
        self.tilemap: Tilemap | None = None
        self.layers: list[TileLayer] = []
        self.player: int | None = None
        self.show_debug = False
        self.gravity = (C.GRAVITY_X, C.GRAVITY_Y)

    # ── preload ──────────────────────────────────────────────────────

    def preload(self, app: App):
        paths = dict(C.ASSET_PATHS)
        paths.update(tuning_mod.section("assets.paths"))

        app.assets.image(C.KEY_TILES, paths[C.KEY_TILES])
        app.assets.tilemap_json(C.KEY_MAP, paths[C.KEY_MAP])
        for key in (C.KEY_STAND, C.KEY_WALK_LEFT, C.KEY_WALK_RIGHT,
                    C.KEY_WALK_UP, C.KEY_WALK_DOWN):
            app.assets.spritesheet(key, paths[key], C.FRAME_WIDTH, C.FRAME_HEIGHT)
        app.assets.start()

    # ── create ───────────────────────────────────────────────────────

    def on_enter(self, app: App):
        if self.player is not None and app.world.alive(self.player):
            return  # revealed again after a covering scene popped

        world = app.world
        if not world.res(GameClock):
            world.set_res(GameClock())

        tmap = Tilemap.from_data(app.assets.tilemap_data(C.KEY_MAP))
        tileset = tmap.add_tileset_image(
            tuning_mod.get("map", "tileset", C.TILESET_NAME),
            app.assets.texture(C.KEY_TILES))

        below = tmap.create_layer(tuning_mod.get("map", "below_layer", C.LAYER_BELOW), tileset)
        walls = tmap.create_layer(tuning_mod.get("map", "world_layer", C.LAYER_WORLD), tileset)
        above = tmap.create_layer(tuning_mod.get("map", "above_layer", C.LAYER_ABOVE), tileset)
        above.set_depth(int(tuning_mod.get("map", "above_depth", C.ABOVE_DEPTH)))
        self.tilemap = tmap
        self.layers = [below, walls, above]

        spawn_layer = tuning_mod.get("player", "spawn_layer", C.SPAWN_LAYER)
        spawn_name = tuning_mod.get("player", "spawn_object", C.SPAWN_OBJECT)
        spawn = tmap.find_object(spawn_layer, lambda obj: obj.name == spawn_name)
        if spawn is None:
            raise LookupError(f"map has no object named '{spawn_name}' in layer '{spawn_layer}'")

        self.player = spawn_player(world, spawn.x, spawn.y,
                                   speed=float(tuning_mod.get("player", "speed", C.PLAYER_SPEED)))

        walls.set_collision_by_property({"collides": True})
        add_collider(world, self.player, walls)

        frame_rate = float(tuning_mod.get("animation", "frame_rate", C.WALK_FRAME_RATE))
        repeat = int(tuning_mod.get("animation", "repeat", C.WALK_REPEAT))
        for sheet, key, start, end in WALK_CYCLES:
            self.anims.create(key, generate_frame_numbers(sheet, start, end),
                              frame_rate=frame_rate, repeat=repeat)

        cam = Camera(width=app.size[0], height=app.size[1])
        cam.start_follow(self.player)
        cam.set_bounds(0, 0, tmap.width_in_pixels, tmap.height_in_pixels)
        world.set_res(cam)
        camera_system(world)

        self._apply_tuning(app)
        print(f"[SCENE] walk: player {self.player} at ({spawn.x:.0f}, {spawn.y:.0f}), "
              f"{walls.collision_count} wall tiles, {len(self.anims)} animations")

    # ── events ───────────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event, app: App):
        self.input.feed(event)

    # ── update ───────────────────────────────────────────────────────

    def update(self, dt: float, app: App):
        self.input.end_frame()

        if self.input.just("toggle_debug"):
            self.show_debug = not self.show_debug
        if self.input.just("reload_tuning"):
            tuning_mod.reload()
            self._apply_tuning(app)

        if self.player is not None:
            player = app.world.get(self.player, Player)
            apply_motion(app.world, self.player, self.input.cursors(), player.speed)

        tick_systems(app.world, dt, self.anims, self.gravity)
        self.input.begin_frame()

    def _apply_tuning(self, app: App):
        """Re-read the values that may change while the scene runs."""
        if self.player is not None:
            player = app.world.get(self.player, Player)
            player.speed = float(tuning_mod.get("player", "speed", C.PLAYER_SPEED))
        self.gravity = (float(tuning_mod.get("physics", "gravity_x", C.GRAVITY_X)),
                        float(tuning_mod.get("physics", "gravity_y", C.GRAVITY_Y)))

    # ── draw ─────────────────────────────────────────────────────────

    def draw(self, surface: pygame.Surface, app: App):
        cam = app.world.res(Camera) or Camera(width=app.size[0], height=app.size[1])
        draw_world(surface, app.assets, app.world, self.layers, cam)

        if self.show_debug:
            draw_debug_colliders(surface, app.world, cam)
            draw_debug_overlay(surface, app, app.world, self.player, cam)
