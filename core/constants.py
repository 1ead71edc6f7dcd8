"""core/constants.py — Shared constants used across the codebase.

Centralises magic numbers so there's exactly one place to change them.
Every value here is also the fallback for the matching key in
``data/tuning.toml`` (see ``core/tuning.py``).

Unit System
-----------
Everything is measured in **world pixels**, the same unit Tiled uses
for object positions:

    Distance / position     px
    Speed                   px/s
    Time                    s
    Animation rate          frames/s

The player sprite's position is its *centre*; the physics body is a
box of ``BODY_WIDTH`` × ``BODY_HEIGHT`` centred on that point.
"""

# ── Window ──────────────────────────────────────────────────────────
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
FPS = 60
WINDOW_TITLE = "Tilemap Walker"
BACKGROUND = (0, 0, 0)

# ── Player ──────────────────────────────────────────────────────────
PLAYER_SPEED = 175.0          # px/s
SPAWN_LAYER = "Objects"
SPAWN_OBJECT = "Spawn Point"

# Frame size of every character spritesheet.
FRAME_WIDTH = 32
FRAME_HEIGHT = 32
BODY_WIDTH = 32
BODY_HEIGHT = 32

# ── Physics ─────────────────────────────────────────────────────────
GRAVITY_X = 0.0               # px/s²
GRAVITY_Y = 0.0               # px/s²

# ── Animation ───────────────────────────────────────────────────────
WALK_FRAME_RATE = 10          # frames/s
WALK_REPEAT = -1              # -1 = loop forever

# ── Asset keys ──────────────────────────────────────────────────────
KEY_TILES = "tiles"
KEY_MAP = "map"
KEY_STAND = "stand"
KEY_WALK_LEFT = "walk_left"
KEY_WALK_RIGHT = "walk_right"
KEY_WALK_UP = "walk_up"
KEY_WALK_DOWN = "walk_down"

ASSET_PATHS = {
    KEY_TILES: "assets/map.png",
    KEY_MAP: "assets/map.json",
    KEY_STAND: "assets/stand.png",
    KEY_WALK_LEFT: "assets/walk_left.png",
    KEY_WALK_RIGHT: "assets/walk_right.png",
    KEY_WALK_UP: "assets/walk_up.png",
    KEY_WALK_DOWN: "assets/walk_down.png",
}

# Idle poses: frame index into the ``stand`` sheet.
STAND_DOWN = 0
STAND_LEFT = 1
STAND_RIGHT = 2
STAND_UP = 3

# ── Map ─────────────────────────────────────────────────────────────
TILESET_NAME = "tuxmon-sample-32px-extruded"
LAYER_BELOW = "Below Player"
LAYER_WORLD = "World"
LAYER_ABOVE = "Above Player"
ABOVE_DEPTH = 10              # draws over the player (roofs, treetops)
