"""data/generate_assets.py — Generate placeholder art and a demo map.

Run once:  python data/generate_assets.py

Creates (same names, frame sizes and layer names as the real art):
  assets/map.png        4-tile extruded tileset (margin 1, spacing 2)
  assets/map.json       40×30 Tiled map: Below Player / World / Above Player / Objects
  assets/stand.png      4 idle poses (down, left, right, up)
  assets/walk_left.png  9 frames
  assets/walk_right.png 9 frames
  assets/walk_up.png    8 frames
  assets/walk_down.png  8 frames

The builder functions are importable so tests can make the same
assets in memory without touching the disk.
"""

import json
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pygame

from core.constants import (
    TILESET_NAME, LAYER_BELOW, LAYER_WORLD, LAYER_ABOVE, SPAWN_LAYER, SPAWN_OBJECT,
    FRAME_WIDTH, FRAME_HEIGHT,
)

TILE = 32
MARGIN = 1
SPACING = 2

# Local tile ids in the tileset image (GID = id + 1)
GRASS = 0
PATH = 1
WALL = 2
ROOF = 3

TILE_COLORS = {
    GRASS: (50, 110, 50),
    PATH: (150, 130, 90),
    WALL: (90, 90, 100),
    ROOF: (150, 50, 40),
}

# Walk sheets: asset name → (frame count, body colour)
SHEETS = {
    "walk_left": (9, (70, 120, 220)),
    "walk_right": (9, (70, 200, 220)),
    "walk_up": (8, (220, 180, 70)),
    "walk_down": (8, (220, 90, 90)),
}


# ═════════════════════════════════════════════════════════════════════
#  Images
# ═════════════════════════════════════════════════════════════════════

def make_tileset_surface() -> pygame.Surface:
    count = len(TILE_COLORS)
    w = MARGIN * 2 + count * TILE + (count - 1) * SPACING
    h = MARGIN * 2 + TILE
    surf = pygame.Surface((w, h), pygame.SRCALPHA)
    for tid, color in TILE_COLORS.items():
        x = MARGIN + tid * (TILE + SPACING)
        # Extrude one pixel into the gutter so scaled tiles never show seams.
        pygame.draw.rect(surf, color, (x - 1, MARGIN - 1, TILE + 2, TILE + 2))
        if tid == WALL:
            pygame.draw.rect(surf, (60, 60, 70), (x, MARGIN, TILE, TILE), 2)
    return surf


def make_sheet(frames: int, color: tuple) -> pygame.Surface:
    """A strip of *frames* cells; the marker dot walks across each cell."""
    surf = pygame.Surface((frames * FRAME_WIDTH, FRAME_HEIGHT), pygame.SRCALPHA)
    for i in range(frames):
        x = i * FRAME_WIDTH
        pygame.draw.ellipse(surf, color, (x + 8, 4, 16, 26))
        dot_x = x + 8 + (i * 16) // max(frames - 1, 1)
        pygame.draw.circle(surf, (255, 255, 255), (dot_x, 10), 2)
    return surf


def make_stand_sheet() -> pygame.Surface:
    """Idle poses in stand-frame order: down, left, right, up."""
    surf = pygame.Surface((4 * FRAME_WIDTH, FRAME_HEIGHT), pygame.SRCALPHA)
    eyes = [(16, 14), (10, 10), (22, 10), (16, 6)]
    for i, (ex, ey) in enumerate(eyes):
        x = i * FRAME_WIDTH
        pygame.draw.ellipse(surf, (230, 230, 230), (x + 8, 4, 16, 26))
        pygame.draw.circle(surf, (20, 20, 20), (x + ex, ey), 2)
    return surf


# ═════════════════════════════════════════════════════════════════════
#  Map
# ═════════════════════════════════════════════════════════════════════

def make_map_data(width: int = 40, height: int = 30,
                  spawn: tuple[float, float] | None = None) -> dict:
    """A walled field with a path, a house and a roof over its top row."""
    gid = lambda tid: tid + 1  # noqa: E731

    below = [gid(GRASS)] * (width * height)
    for c in range(width):
        below[(height // 2) * width + c] = gid(PATH)

    world = [0] * (width * height)
    for r in range(height):
        for c in range(width):
            if r in (0, height - 1) or c in (0, width - 1):
                world[r * width + c] = gid(WALL)
    # House: a 4×3 block of wall near the top-left
    for r in range(4, 7):
        for c in range(5, 9):
            world[r * width + c] = gid(WALL)

    above = [0] * (width * height)
    for c in range(5, 9):
        above[3 * width + c] = gid(ROOF)

    if spawn is None:
        spawn = (width * TILE / 2, height * TILE / 2)

    def tile_layer(lid: int, name: str, data: list[int]) -> dict:
        return {"id": lid, "name": name, "type": "tilelayer", "width": width,
                "height": height, "x": 0, "y": 0, "opacity": 1, "visible": True,
                "data": data}

    image = make_tileset_surface()
    return {
        "type": "map",
        "orientation": "orthogonal",
        "renderorder": "right-down",
        "width": width,
        "height": height,
        "tilewidth": TILE,
        "tileheight": TILE,
        "infinite": False,
        "layers": [
            tile_layer(1, LAYER_BELOW, below),
            tile_layer(2, LAYER_WORLD, world),
            tile_layer(3, LAYER_ABOVE, above),
            {"id": 4, "name": SPAWN_LAYER, "type": "objectgroup", "opacity": 1,
             "visible": True, "x": 0, "y": 0,
             "objects": [{"id": 1, "name": SPAWN_OBJECT, "type": "", "point": True,
                          "x": spawn[0], "y": spawn[1], "width": 0, "height": 0,
                          "rotation": 0, "visible": True}]},
        ],
        "tilesets": [{
            "firstgid": 1,
            "name": TILESET_NAME,
            "image": "map.png",
            "imagewidth": image.get_width(),
            "imageheight": image.get_height(),
            "margin": MARGIN,
            "spacing": SPACING,
            "columns": len(TILE_COLORS),
            "tilecount": len(TILE_COLORS),
            "tilewidth": TILE,
            "tileheight": TILE,
            "tiles": [{"id": WALL, "properties": [
                {"name": "collides", "type": "bool", "value": True}]}],
        }],
    }


def main(out_dir: str = "assets"):
    os.makedirs(out_dir, exist_ok=True)
    pygame.image.save(make_tileset_surface(), os.path.join(out_dir, "map.png"))
    with open(os.path.join(out_dir, "map.json"), "w", encoding="utf-8") as f:
        json.dump(make_map_data(), f, indent=1)
    pygame.image.save(make_stand_sheet(), os.path.join(out_dir, "stand.png"))
    for name, (frames, color) in SHEETS.items():
        pygame.image.save(make_sheet(frames, color), os.path.join(out_dir, f"{name}.png"))
    print(f"[ASSETS] Wrote placeholder assets to {out_dir}/")


if __name__ == "__main__":
    root = os.path.join(os.path.dirname(__file__), "..")
    main(os.path.join(root, "assets"))
