"""scenes/walk_draw.py — Rendering helpers for the walk scene.

All pure-draw functions live here so that WalkScene.draw() stays thin.
Every function receives the data it needs as parameters — no implicit
coupling to the scene object beyond what is explicitly passed.
"""

from __future__ import annotations
import pygame
from core.app import App
from core.assets import AssetLoader
from core.ecs import World
from core.tilemap import TileLayer
from components import Position, Sprite, Velocity, Body, Animator, Camera


# ── Tiles ───────────────────────────────────────────────────────────

def visible_range(layer: TileLayer, cam: Camera) -> tuple[int, int, int, int]:
    """``(start_col, start_row, end_col, end_row)`` of cells in view (end exclusive)."""
    start_col, start_row = layer.world_to_tile(cam.scroll_x, cam.scroll_y)
    end_col, end_row = layer.world_to_tile(cam.scroll_x + cam.width,
                                           cam.scroll_y + cam.height)
    return (max(0, start_col), max(0, start_row),
            min(layer.width, end_col + 1), min(layer.height, end_row + 1))


def draw_layer(surface: pygame.Surface, layer: TileLayer, cam: Camera):
    """Blit the visible cells of *layer*, honouring flip flags and opacity.

    A translucent layer is drawn onto a scratch surface first and then
    blended in one blit, so overlapping tiles don't double up.
    """
    if not layer.visible or layer.opacity <= 0.0:
        return
    target = surface
    if layer.opacity < 1.0:
        target = pygame.Surface(surface.get_size(), pygame.SRCALPHA)

    start_col, start_row, end_col, end_row = visible_range(layer, cam)
    tw, th = layer.tile_width, layer.tile_height
    ox, oy = cam.world_to_screen(layer.x, layer.y)
    for row in range(start_row, end_row):
        line = layer.rows[row]
        for col in range(start_col, end_col):
            gid = line[col]
            if not gid:
                continue
            img = layer.tileset.tile_surface(gid, layer.flips.get((col, row), 0))
            if img is not None:
                target.blit(img, (ox + col * tw, oy + row * th))

    if target is not surface:
        target.set_alpha(int(round(layer.opacity * 255)))
        surface.blit(target, (0, 0))


# ── Sprites ─────────────────────────────────────────────────────────

def draw_sprite(surface: pygame.Surface, assets: AssetLoader,
                pos: Position, sprite: Sprite, cam: Camera):
    if not sprite.visible or not sprite.texture:
        return
    img = assets.frame(sprite.texture, sprite.frame)
    sx, sy = cam.world_to_screen(pos.x, pos.y)
    w, h = img.get_size()
    surface.blit(img, (sx - w // 2, sy - h // 2))


# ── Display list ────────────────────────────────────────────────────

def draw_world(surface: pygame.Surface, assets: AssetLoader, world: World,
               layers: list[TileLayer], cam: Camera):
    """Draw layers and sprites sorted by depth; ties keep creation order.

    Layers were created before any entity, so at equal depth they sit
    underneath sprites.
    """
    display: list[tuple[int, int, object]] = []
    for order, layer in enumerate(layers):
        display.append((layer.depth, order, layer))
    base = len(layers)
    for eid, pos, sprite in world.query(Position, Sprite):
        display.append((sprite.depth, base + eid, (pos, sprite)))
    display.sort(key=lambda d: (d[0], d[1]))

    for _, _, item in display:
        if isinstance(item, TileLayer):
            draw_layer(surface, item, cam)
        else:
            pos, sprite = item
            draw_sprite(surface, assets, pos, sprite, cam)


# ── Debug ───────────────────────────────────────────────────────────

def draw_debug_colliders(surface: pygame.Surface, world: World, cam: Camera):
    """Outline colliding tiles (red) and physics bodies (green)."""
    for eid, pos, body in world.query(Position, Body):
        for layer in body.colliders:
            start_col, start_row, end_col, end_row = visible_range(layer, cam)
            for row in range(start_row, end_row):
                for col in range(start_col, end_col):
                    if layer.collides_at(col, row):
                        x, y, w, h = layer.tile_rect(col, row)
                        sx, sy = cam.world_to_screen(x, y)
                        pygame.draw.rect(surface, (200, 60, 60), (sx, sy, w, h), 1)
        left, top, w, h = body.box(pos.x, pos.y)
        sx, sy = cam.world_to_screen(left, top)
        pygame.draw.rect(surface, (60, 220, 60), (sx, sy, int(w), int(h)), 1)


def draw_debug_overlay(surface: pygame.Surface, app: App, world: World,
                       player: int | None, cam: Camera):
    lines = [f"FPS: {app.clock.get_fps():.0f}",
             f"Camera: ({cam.scroll_x:.0f}, {cam.scroll_y:.0f})"]
    if player is not None:
        pos = world.get(player, Position)
        vel = world.get(player, Velocity)
        anim = world.get(player, Animator)
        sprite = world.get(player, Sprite)
        if pos:
            lines.append(f"Pos: ({pos.x:.1f}, {pos.y:.1f})")
        if vel:
            lines.append(f"Vel: ({vel.x:.1f}, {vel.y:.1f})")
        if anim:
            state = "playing" if anim.playing else "stopped"
            lines.append(f"Anim: {anim.current or '-'} ({state})")
        if sprite:
            lines.append(f"Texture: {sprite.texture}[{sprite.frame}]")
    y = 8
    for text in lines:
        app.draw_text_bg(surface, text, 8, y, (0, 255, 0))
        y += 14
