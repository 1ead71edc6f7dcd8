"""
core/assets.py — Named asset loader

Scenes queue assets in ``preload`` and read them back by key once
``start()`` has run:

    app.assets.image("tiles", "assets/map.png")
    app.assets.spritesheet("stand", "assets/stand.png", 32, 32)
    app.assets.tilemap_json("map", "assets/map.json")
    app.assets.start()

    surf = app.assets.frame("stand", 2)
    data = app.assets.tilemap_data("map")

Relative paths resolve against the project root, so the demo runs from
any working directory.  Frames of a spritesheet are cut row-major at a
fixed cell size (with optional Tiled-style margin/spacing).
"""

from __future__ import annotations
import json
from dataclasses import dataclass, field
from pathlib import Path

import pygame


ROOT_DIR = Path(__file__).resolve().parent.parent


class AssetError(Exception):
    """An asset file is missing or cannot be decoded."""


@dataclass
class Texture:
    """A loaded image plus the frames cut from it.

    Plain images have exactly one frame: the whole surface.
    """
    key: str
    surface: pygame.Surface
    frames: list[pygame.Surface] = field(default_factory=list)
    frame_width: int = 0
    frame_height: int = 0


@dataclass
class _Pending:
    kind: str                  # "image", "spritesheet", "tilemap_json"
    key: str
    path: Path
    frame_width: int = 0
    frame_height: int = 0
    margin: int = 0
    spacing: int = 0


def cut_frames(surface: pygame.Surface, frame_width: int, frame_height: int,
               margin: int = 0, spacing: int = 0) -> list[pygame.Surface]:
    """Slice *surface* into fixed-size cells, left→right then top→bottom."""
    if frame_width <= 0 or frame_height <= 0:
        raise ValueError(f"frame size must be positive, got {frame_width}x{frame_height}")
    w, h = surface.get_size()
    cols = (w - 2 * margin + spacing) // (frame_width + spacing)
    rows = (h - 2 * margin + spacing) // (frame_height + spacing)
    frames = []
    for r in range(max(rows, 0)):
        for c in range(max(cols, 0)):
            x = margin + c * (frame_width + spacing)
            y = margin + r * (frame_height + spacing)
            frames.append(surface.subsurface(pygame.Rect(x, y, frame_width, frame_height)))
    return frames


class AssetLoader:
    def __init__(self, base_dir: str | Path | None = None):
        self.base_dir = Path(base_dir) if base_dir is not None else ROOT_DIR
        self._queue: list[_Pending] = []
        self._textures: dict[str, Texture] = {}
        self._maps: dict[str, dict] = {}

    # -- Queueing (preload) --

    def image(self, key: str, path: str | Path):
        self._queue.append(_Pending("image", key, self._resolve(path)))

    def spritesheet(self, key: str, path: str | Path,
                    frame_width: int, frame_height: int,
                    margin: int = 0, spacing: int = 0):
        self._queue.append(_Pending("spritesheet", key, self._resolve(path),
                                    frame_width, frame_height, margin, spacing))

    def tilemap_json(self, key: str, path: str | Path):
        self._queue.append(_Pending("tilemap_json", key, self._resolve(path)))

    def start(self) -> int:
        """Load everything queued so far.  Returns how many assets loaded.

        Raises ``AssetError`` on the first file that is missing or
        cannot be decoded; nothing after it in the queue is loaded.
        """
        queue, self._queue = self._queue, []
        for item in queue:
            if not item.path.exists():
                raise AssetError(f"{item.kind} '{item.key}': file not found: {item.path}")
            if item.kind == "tilemap_json":
                self.add_tilemap_data(item.key, self._read_json(item))
            else:
                surface = self._read_image(item)
                if item.kind == "spritesheet":
                    self.add_texture(item.key, surface, item.frame_width,
                                     item.frame_height, item.margin, item.spacing)
                else:
                    self.add_texture(item.key, surface)
        print(f"[ASSETS] Loaded {len(queue)} assets "
              f"({len(self._textures)} textures, {len(self._maps)} maps)")
        return len(queue)

    # -- Direct registration (generated / in-memory assets) --

    def add_texture(self, key: str, surface: pygame.Surface,
                    frame_width: int | None = None, frame_height: int | None = None,
                    margin: int = 0, spacing: int = 0) -> Texture:
        if key in self._textures:
            print(f"[ASSETS] texture '{key}' replaced")
        if frame_width and frame_height:
            frames = cut_frames(surface, frame_width, frame_height, margin, spacing)
        else:
            frames = [surface]
            frame_width, frame_height = surface.get_size()
        tex = Texture(key, surface, frames, frame_width, frame_height)
        self._textures[key] = tex
        return tex

    def add_tilemap_data(self, key: str, data: dict):
        if key in self._maps:
            print(f"[ASSETS] map '{key}' replaced")
        self._maps[key] = data

    # -- Lookup --

    def has(self, key: str) -> bool:
        return key in self._textures or key in self._maps

    def texture(self, key: str) -> Texture:
        try:
            return self._textures[key]
        except KeyError:
            raise KeyError(f"no texture loaded under key '{key}'") from None

    def frame(self, key: str, index: int = 0) -> pygame.Surface:
        tex = self.texture(key)
        if not 0 <= index < len(tex.frames):
            raise IndexError(f"texture '{key}' has {len(tex.frames)} frames, asked for {index}")
        return tex.frames[index]

    def frame_count(self, key: str) -> int:
        return len(self.texture(key).frames)

    def tilemap_data(self, key: str) -> dict:
        try:
            return self._maps[key]
        except KeyError:
            raise KeyError(f"no tilemap loaded under key '{key}'") from None

    # -- internal --

    def _resolve(self, path: str | Path) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self.base_dir / p

    @staticmethod
    def _read_image(item: _Pending) -> pygame.Surface:
        try:
            surface = pygame.image.load(str(item.path))
        except pygame.error as ex:
            raise AssetError(f"{item.kind} '{item.key}': cannot decode {item.path}: {ex}") from ex
        # convert_alpha needs a display mode; headless loads keep the raw surface
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        return surface

    @staticmethod
    def _read_json(item: _Pending) -> dict:
        try:
            with open(item.path, encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as ex:
            raise AssetError(f"tilemap '{item.key}': invalid JSON in {item.path}: {ex}") from ex
