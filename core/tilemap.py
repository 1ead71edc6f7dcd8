"""
core/tilemap.py — Tiled JSON tilemaps

Reads the JSON export of the Tiled map editor (orthogonal maps) into
layers the scene can draw and collide against:

    data = app.assets.tilemap_data("map")
    tmap = Tilemap.from_data(data)
    tileset = tmap.add_tileset_image("tuxmon-sample-32px-extruded",
                                     app.assets.texture("tiles"))
    world = tmap.create_layer("World", tileset)
    world.set_collision_by_property({"collides": True})
    spawn = tmap.find_object("Objects", lambda o: o.name == "Spawn Point")

Tile data may be a plain array or base64 (optionally zlib/gzip
compressed).  Group layers are flattened; their children are named
``"group/child"``.  Custom properties are accepted in both the list
form (Tiled ≥ 1.2) and the older ``{"name": value}`` dict form.
"""

from __future__ import annotations
import base64
import gzip
import math
import struct
import zlib
from dataclasses import dataclass, field
from typing import Callable, Iterator

import pygame

from core.assets import Texture, cut_frames

# Tiled stores flip/rotation flags in the top bits of every GID.
FLIP_H = 0x80000000
FLIP_V = 0x40000000
FLIP_D = 0x20000000      # anti-diagonal (transpose)
_FLIP_MASK = FLIP_H | FLIP_V | FLIP_D | 0x10000000


def _props(raw) -> dict:
    """Normalise Tiled custom properties to a flat dict."""
    if not raw:
        return {}
    if isinstance(raw, dict):
        return dict(raw)
    return {p["name"]: p.get("value") for p in raw if "name" in p}


def _decode_data(layer: dict) -> list[int]:
    raw = layer.get("data", [])
    if layer.get("encoding") != "base64":
        return [int(g) for g in raw]
    blob = base64.b64decode(raw)
    compression = layer.get("compression") or ""
    if compression == "zlib":
        blob = zlib.decompress(blob)
    elif compression == "gzip":
        blob = gzip.decompress(blob)
    elif compression:
        raise ValueError(f"layer '{layer.get('name')}': unsupported compression '{compression}'")
    count = len(blob) // 4
    return list(struct.unpack(f"<{count}I", blob[:count * 4]))


@dataclass
class MapObject:
    name: str = ""
    type: str = ""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    properties: dict = field(default_factory=dict)


@dataclass
class Tileset:
    name: str
    firstgid: int
    tile_width: int
    tile_height: int
    margin: int = 0
    spacing: int = 0
    columns: int = 0
    tilecount: int = 0
    # local tile id → custom properties
    tile_properties: dict[int, dict] = field(default_factory=dict)
    texture: Texture | None = None
    frames: list[pygame.Surface] = field(default_factory=list)
    _flipped: dict[tuple[int, int], pygame.Surface] = field(
        default_factory=dict, init=False, repr=False)

    @classmethod
    def from_data(cls, raw: dict) -> Tileset:
        ts = cls(
            name=raw.get("name", ""),
            firstgid=int(raw.get("firstgid", 1)),
            tile_width=int(raw.get("tilewidth", 0)),
            tile_height=int(raw.get("tileheight", 0)),
            margin=int(raw.get("margin", 0)),
            spacing=int(raw.get("spacing", 0)),
            columns=int(raw.get("columns", 0)),
            tilecount=int(raw.get("tilecount", 0)),
        )
        # Tiled ≥ 1.2: "tiles": [{"id": 5, "properties": [...]}]
        for tile in raw.get("tiles", []) or []:
            props = _props(tile.get("properties"))
            if props:
                ts.tile_properties[int(tile["id"])] = props
        # Older exports: "tileproperties": {"5": {"collides": true}}
        for tid, props in (raw.get("tileproperties") or {}).items():
            ts.tile_properties.setdefault(int(tid), {}).update(props)
        return ts

    def contains(self, gid: int) -> bool:
        if gid < self.firstgid:
            return False
        return self.tilecount <= 0 or gid < self.firstgid + self.tilecount

    def properties_for(self, gid: int) -> dict:
        return self.tile_properties.get(gid - self.firstgid, {})

    def bind(self, texture: Texture):
        self.texture = texture
        self.frames = cut_frames(texture.surface, self.tile_width, self.tile_height,
                                 self.margin, self.spacing)
        self._flipped.clear()
        if self.tilecount <= 0:
            self.tilecount = len(self.frames)

    def tile_surface(self, gid: int, flips: int = 0) -> pygame.Surface | None:
        """Image for *gid*, transformed by the Tiled *flips* bits if any."""
        idx = gid - self.firstgid
        if not 0 <= idx < len(self.frames):
            return None
        img = self.frames[idx]
        if not flips:
            return img
        key = (idx, flips)
        if key not in self._flipped:
            # Tiled order: diagonal first, then horizontal, then vertical
            if flips & FLIP_D:
                img = pygame.transform.flip(pygame.transform.rotate(img, -90), True, False)
            img = pygame.transform.flip(img, bool(flips & FLIP_H), bool(flips & FLIP_V))
            self._flipped[key] = img
        return self._flipped[key]


class TileLayer:
    """A grid of GIDs drawn with one tileset, optionally collidable."""

    def __init__(self, name: str, gids: list[int], width: int, height: int,
                 tile_width: int, tile_height: int, tileset: Tileset,
                 x: float = 0.0, y: float = 0.0, visible: bool = True,
                 opacity: float = 1.0, properties: dict | None = None):
        self.name = name
        self.width = width
        self.height = height
        self.tile_width = tile_width
        self.tile_height = tile_height
        self.tileset = tileset
        self.x = x
        self.y = y
        self.depth = 0
        self.visible = visible
        self.opacity = opacity
        self.properties = properties or {}
        self.rows: list[list[int]] = [
            [g & ~_FLIP_MASK for g in gids[r * width:(r + 1) * width]]
            for r in range(height)
        ]
        # (col, row) → flip bits, only for cells that carry any
        self.flips: dict[tuple[int, int], int] = {
            (i % width, i // width): g & _FLIP_MASK
            for i, g in enumerate(gids[:width * height]) if g & _FLIP_MASK
        }
        self._colliding: set[tuple[int, int]] = set()

    # -- Setup --

    def set_depth(self, depth: int) -> TileLayer:
        self.depth = depth
        return self

    def set_collision_by_property(self, props: dict, collides: bool = True) -> int:
        """Flag every tile whose custom properties match all of *props*.

        Returns the number of cells that changed state.
        """
        changed = 0
        for row, col, gid in self.cells():
            tile_props = self.tileset.properties_for(gid)
            if all(tile_props.get(k) == v for k, v in props.items()):
                cell = (col, row)
                if collides and cell not in self._colliding:
                    self._colliding.add(cell)
                    changed += 1
                elif not collides and cell in self._colliding:
                    self._colliding.discard(cell)
                    changed += 1
        return changed

    # -- Queries --

    @property
    def width_in_pixels(self) -> int:
        return self.width * self.tile_width

    @property
    def height_in_pixels(self) -> int:
        return self.height * self.tile_height

    @property
    def collision_count(self) -> int:
        return len(self._colliding)

    def cells(self) -> Iterator[tuple[int, int, int]]:
        """Yield ``(row, col, gid)`` for every non-empty cell."""
        for r, row in enumerate(self.rows):
            for c, gid in enumerate(row):
                if gid:
                    yield r, c, gid

    def gid_at(self, col: int, row: int) -> int:
        if 0 <= row < self.height and 0 <= col < self.width:
            return self.rows[row][col]
        return 0

    def collides_at(self, col: int, row: int) -> bool:
        return (col, row) in self._colliding

    def world_to_tile(self, px: float, py: float) -> tuple[int, int]:
        return (int(math.floor((px - self.x) / self.tile_width)),
                int(math.floor((py - self.y) / self.tile_height)))

    def tile_rect(self, col: int, row: int) -> tuple[float, float, float, float]:
        """World-pixel ``(left, top, width, height)`` of a cell."""
        return (self.x + col * self.tile_width, self.y + row * self.tile_height,
                self.tile_width, self.tile_height)

    def colliding_tiles_in(self, left: float, top: float,
                           width: float, height: float) -> list[tuple[int, int]]:
        """Return ``(col, row)`` of every colliding tile the box overlaps."""
        min_c, min_r = self.world_to_tile(left, top)
        max_c, max_r = self.world_to_tile(left + width - 0.001, top + height - 0.001)
        hits = []
        for r in range(min_r, max_r + 1):
            for c in range(min_c, max_c + 1):
                if (c, r) in self._colliding:
                    hits.append((c, r))
        return hits


class Tilemap:
    def __init__(self, width: int, height: int, tile_width: int, tile_height: int):
        self.width = width
        self.height = height
        self.tile_width = tile_width
        self.tile_height = tile_height
        self.tilesets: dict[str, Tileset] = {}
        self._tile_layers: dict[str, dict] = {}
        self._object_layers: dict[str, list[MapObject]] = {}
        self.layers: list[TileLayer] = []

    @classmethod
    def from_data(cls, data: dict) -> Tilemap:
        orientation = data.get("orientation", "orthogonal")
        if orientation != "orthogonal":
            raise ValueError(f"only orthogonal maps are supported, got '{orientation}'")
        tmap = cls(int(data["width"]), int(data["height"]),
                   int(data["tilewidth"]), int(data["tileheight"]))
        for raw in data.get("tilesets", []):
            if "source" in raw and "name" not in raw:
                raise ValueError(f"external tileset '{raw['source']}' must be embedded in the map")
            ts = Tileset.from_data(raw)
            tmap.tilesets[ts.name] = ts
        tmap._index_layers(data.get("layers", []), prefix="")
        print(f"[MAP] {tmap.width}x{tmap.height} tiles, "
              f"{len(tmap._tile_layers)} tile layers, {len(tmap._object_layers)} object layers")
        return tmap

    def _index_layers(self, layers: list[dict], prefix: str):
        for layer in layers:
            name = prefix + layer.get("name", "")
            kind = layer.get("type")
            if kind == "tilelayer":
                self._tile_layers[name] = layer
            elif kind == "objectgroup":
                self._object_layers[name] = [
                    MapObject(
                        name=o.get("name", ""),
                        type=o.get("type", o.get("class", "")),
                        x=float(o.get("x", 0.0)),
                        y=float(o.get("y", 0.0)),
                        width=float(o.get("width", 0.0)),
                        height=float(o.get("height", 0.0)),
                        properties=_props(o.get("properties")),
                    )
                    for o in layer.get("objects", [])
                ]
            elif kind == "group":
                self._index_layers(layer.get("layers", []), prefix=name + "/")

    # -- Sizes --

    @property
    def width_in_pixels(self) -> int:
        return self.width * self.tile_width

    @property
    def height_in_pixels(self) -> int:
        return self.height * self.tile_height

    @property
    def tile_layer_names(self) -> list[str]:
        return list(self._tile_layers)

    # -- Building --

    def add_tileset_image(self, tileset_name: str, texture: Texture) -> Tileset:
        """Bind the map's tileset called *tileset_name* to a loaded image."""
        try:
            ts = self.tilesets[tileset_name]
        except KeyError:
            known = ", ".join(self.tilesets) or "none"
            raise KeyError(f"map has no tileset '{tileset_name}' (known: {known})") from None
        ts.bind(texture)
        return ts

    def create_layer(self, name: str, tileset: Tileset,
                     x: float = 0.0, y: float = 0.0) -> TileLayer:
        try:
            raw = self._tile_layers[name]
        except KeyError:
            known = ", ".join(self._tile_layers) or "none"
            raise KeyError(f"map has no tile layer '{name}' (known: {known})") from None
        width = int(raw.get("width", self.width))
        height = int(raw.get("height", self.height))
        layer = TileLayer(
            name, _decode_data(raw), width, height,
            self.tile_width, self.tile_height, tileset,
            x=x + float(raw.get("offsetx", 0.0)),
            y=y + float(raw.get("offsety", 0.0)),
            visible=bool(raw.get("visible", True)),
            opacity=float(raw.get("opacity", 1.0)),
            properties=_props(raw.get("properties")),
        )
        self.layers.append(layer)
        return layer

    # -- Objects --

    def objects(self, layer_name: str) -> list[MapObject]:
        try:
            return list(self._object_layers[layer_name])
        except KeyError:
            known = ", ".join(self._object_layers) or "none"
            raise KeyError(f"map has no object layer '{layer_name}' (known: {known})") from None

    def find_object(self, layer_name: str,
                    predicate: Callable[[MapObject], bool]) -> MapObject | None:
        for obj in self.objects(layer_name):
            if predicate(obj):
                return obj
        return None
