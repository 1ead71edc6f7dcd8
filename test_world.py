"""test_world.py — Headless tests for the map, physics, camera and scene.

Builds the demo map and character sheets in memory (the same builders
``data/generate_assets.py`` writes to disk) and drives:

  1. Asset loader: frame cutting, lookups, load errors
  2. Tilemap: layers, tile properties, objects, encodings
  3. Movement: wall stop, wall slide, walking out of a wall, blocked flags
  4. Camera: follow, bounds clamp, small-map centring
  5. Walk scene: full create → update → draw loop through App.step
  6. Drawing: depth order, layer opacity
  7. Tuning file: missing / malformed fallback, reload

Run:  python test_world.py
"""
from __future__ import annotations
import os, sys, json, base64, zlib, struct, math, tempfile, traceback

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame

from core import tuning
from core import constants as C
from core.ecs import World
from core.assets import AssetLoader, AssetError, Texture, cut_frames
from core.tilemap import Tilemap, Tileset, FLIP_H, FLIP_V, FLIP_D
from core.collision import box_hits_layer, sweep_x
from components import Position, Velocity, Body, Sprite, Animator, Camera, Player
from logic.input_manager import InputManager
from logic.movement import add_collider, movement_system
from logic.camera import camera_system, clamp_axis
from logic.entity_factory import spawn_player
from data.generate_assets import (
    make_tileset_surface, make_sheet, make_stand_sheet, make_map_data,
    SHEETS, TILE_COLORS, GRASS, WALL, ROOF, TILE, MARGIN, SPACING,
)


# ── Test harness ─────────────────────────────────────────────────────

_passed = 0
_failed = 0

def ok(label: str):
    global _passed
    _passed += 1
    print(f"  [PASS] {label}")

def fail(label: str, detail: str = ""):
    global _failed
    _failed += 1
    msg = f"  [FAIL] {label}"
    if detail:
        msg += f" — {detail}"
    print(msg)


STEP = 0.05                    # one clamped frame
STEP_PX = C.PLAYER_SPEED * STEP  # 8.75 px


def _loaded_tileset_texture():
    assets = AssetLoader()
    return assets.add_texture(C.KEY_TILES, make_tileset_surface())


def _build_map(**kw):
    """Parse the demo map and create its three tile layers."""
    tmap = Tilemap.from_data(make_map_data(**kw))
    tileset = tmap.add_tileset_image(C.TILESET_NAME, _loaded_tileset_texture())
    below = tmap.create_layer(C.LAYER_BELOW, tileset)
    walls = tmap.create_layer(C.LAYER_WORLD, tileset)
    above = tmap.create_layer(C.LAYER_ABOVE, tileset).set_depth(C.ABOVE_DEPTH)
    walls.set_collision_by_property({"collides": True})
    return tmap, below, walls, above


def _fill_assets(assets: AssetLoader, **map_kw):
    """Register every asset the walk scene reads, without touching disk."""
    assets.add_texture(C.KEY_TILES, make_tileset_surface())
    assets.add_tilemap_data(C.KEY_MAP, make_map_data(**map_kw))
    assets.add_texture(C.KEY_STAND, make_stand_sheet(), C.FRAME_WIDTH, C.FRAME_HEIGHT)
    for key, (frames, color) in SHEETS.items():
        assets.add_texture(key, make_sheet(frames, color), C.FRAME_WIDTH, C.FRAME_HEIGHT)


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 1:  ASSET LOADER
# ═══════════════════════════════════════════════════════════════════════

def test_asset_loader():
    print("\n=== 1: Asset loader ===")
    assets = AssetLoader()
    tex = assets.add_texture(C.KEY_WALK_LEFT, make_sheet(9, (255, 0, 0)),
                             C.FRAME_WIDTH, C.FRAME_HEIGHT)
    assert len(tex.frames) == 9
    assert assets.frame_count(C.KEY_WALK_LEFT) == 9
    assert assets.frame(C.KEY_WALK_LEFT, 8).get_size() == (C.FRAME_WIDTH, C.FRAME_HEIGHT)
    ok("1a: a 9-frame strip cuts into 9 frames of 32x32")

    tiles = assets.add_texture(C.KEY_TILES, make_tileset_surface())
    assert len(tiles.frames) == 1 and tiles.frames[0] is tiles.surface
    frames = cut_frames(tiles.surface, TILE, TILE, MARGIN, SPACING)
    assert len(frames) == 4
    assert frames[WALL].get_offset() == (MARGIN + WALL * (TILE + SPACING), MARGIN)
    ok("1b: plain images are one frame; margin/spacing skip the gutters")

    try:
        assets.frame(C.KEY_WALK_LEFT, 9)
    except IndexError:
        ok("1c: out-of-range frame raises IndexError")
    else:
        raise AssertionError("frame 9 of a 9-frame sheet did not raise")

    try:
        assets.texture("nope")
    except KeyError:
        ok("1d: unknown texture key raises KeyError")
    else:
        raise AssertionError("unknown key did not raise")

    with tempfile.TemporaryDirectory() as tmp:
        pygame.image.save(make_stand_sheet(), os.path.join(tmp, "stand.png"))
        with open(os.path.join(tmp, "map.json"), "w", encoding="utf-8") as f:
            json.dump(make_map_data(width=10, height=8), f)

        disk = AssetLoader(base_dir=tmp)
        disk.spritesheet(C.KEY_STAND, "stand.png", C.FRAME_WIDTH, C.FRAME_HEIGHT)
        disk.tilemap_json(C.KEY_MAP, "map.json")
        assert disk.start() == 2
        assert disk.frame_count(C.KEY_STAND) == 4
        assert disk.tilemap_data(C.KEY_MAP)["width"] == 10
        ok("1e: files queued in preload load on start()")

        missing = AssetLoader(base_dir=tmp)
        missing.image(C.KEY_TILES, "map.png")
        try:
            missing.start()
        except AssetError:
            ok("1f: a missing file raises AssetError")
        else:
            raise AssertionError("missing file did not raise")

        with open(os.path.join(tmp, "bad.json"), "w", encoding="utf-8") as f:
            f.write("{not json")
        broken = AssetLoader(base_dir=tmp)
        broken.tilemap_json(C.KEY_MAP, "bad.json")
        try:
            broken.start()
        except AssetError:
            ok("1g: invalid map JSON raises AssetError")
        else:
            raise AssertionError("bad JSON did not raise")


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 2:  TILEMAP
# ═══════════════════════════════════════════════════════════════════════

def test_tilemap_layers():
    print("\n=== 2: Tilemap ===")
    tmap, below, walls, above = _build_map()
    assert (tmap.width_in_pixels, tmap.height_in_pixels) == (40 * TILE, 30 * TILE)
    assert tmap.tile_layer_names == [C.LAYER_BELOW, C.LAYER_WORLD, C.LAYER_ABOVE]
    assert tmap.layers == [below, walls, above]
    ok("2a: 40x30 map, three tile layers created in order")

    assert above.depth == C.ABOVE_DEPTH and below.depth == 0 and walls.depth == 0
    ok("2b: 'Above Player' draws at depth 10")

    # border (2*40 + 2*28) + house 4x3
    assert walls.collision_count == 2 * 40 + 2 * 28 + 12, walls.collision_count
    assert walls.collides_at(0, 0) and walls.collides_at(5, 4)
    assert not walls.collides_at(20, 15)
    assert below.collision_count == 0 and above.collision_count == 0
    ok("2c: only World tiles with collides=true become walls")

    assert walls.set_collision_by_property({"collides": True}) == 0
    ok("2d: re-flagging the same tiles changes nothing")

    assert tmap.tilesets[C.TILESET_NAME].tile_surface(WALL + 1) is not None
    assert above.gid_at(5, 3) == ROOF + 1
    assert walls.gid_at(-1, 0) == 0 and walls.gid_at(40, 0) == 0
    ok("2e: GIDs resolve to tileset frames; off-map reads as empty")

    spawn = tmap.find_object(C.SPAWN_LAYER, lambda o: o.name == C.SPAWN_OBJECT)
    assert spawn is not None and (spawn.x, spawn.y) == (640.0, 480.0)
    assert tmap.find_object(C.SPAWN_LAYER, lambda o: o.name == "Exit") is None
    ok("2f: spawn point found; unknown object name → None")

    for bad in (lambda: tmap.create_layer("Roofs", tmap.tilesets[C.TILESET_NAME]),
                lambda: tmap.add_tileset_image("other", _loaded_tileset_texture()),
                lambda: tmap.objects("Spawns")):
        try:
            bad()
        except KeyError:
            pass
        else:
            raise AssertionError("unknown layer/tileset name did not raise")
    ok("2g: unknown layer or tileset names raise KeyError")


def test_tilemap_encodings():
    print("\n=== 3: Tilemap encodings ===")
    data = make_map_data(width=10, height=8)
    world = next(l for l in data["layers"] if l["name"] == C.LAYER_WORLD)
    gids = list(world["data"])
    gids[5] |= 0x80000000  # horizontally flipped wall
    world["data"] = base64.b64encode(
        zlib.compress(struct.pack(f"<{len(gids)}I", *gids))).decode("ascii")
    world["encoding"] = "base64"
    world["compression"] = "zlib"

    ts = data["tilesets"][0]
    del ts["tiles"]
    ts["tileproperties"] = {str(WALL): {"collides": True}}

    data["layers"] = [{"type": "group", "name": "ground", "layers": data["layers"][:2]},
                      *data["layers"][2:]]

    tmap = Tilemap.from_data(data)
    assert tmap.tile_layer_names == ["ground/" + C.LAYER_BELOW, "ground/" + C.LAYER_WORLD,
                                     C.LAYER_ABOVE]
    walls = tmap.create_layer("ground/" + C.LAYER_WORLD, tmap.tilesets[C.TILESET_NAME])
    walls.set_collision_by_property({"collides": True})
    assert walls.gid_at(5, 0) == WALL + 1
    # border (2*10 + 2*6) + house 4x3
    assert walls.collision_count == 2 * 10 + 2 * 6 + 12, walls.collision_count
    assert walls.flips == {(5, 0): FLIP_H}
    ok("3a: base64+zlib data, flip flags, legacy properties and groups all parse")

    red, black = (255, 0, 0, 255), (0, 0, 0, 255)
    img = pygame.Surface((2, 2), pygame.SRCALPHA)
    img.fill(black)
    img.set_at((1, 0), red)
    ts = Tileset("tiny", firstgid=1, tile_width=2, tile_height=2)
    ts.bind(Texture("tiny", img))
    red_at = lambda surf: [(x, y) for y in range(2) for x in range(2)  # noqa: E731
                           if tuple(surf.get_at((x, y))) == red]
    assert red_at(ts.tile_surface(1)) == [(1, 0)]
    assert red_at(ts.tile_surface(1, FLIP_H)) == [(0, 0)]
    assert red_at(ts.tile_surface(1, FLIP_V)) == [(1, 1)]
    assert red_at(ts.tile_surface(1, FLIP_D)) == [(0, 1)]
    assert red_at(ts.tile_surface(1, FLIP_H | FLIP_V)) == [(0, 1)]
    assert ts.tile_surface(1, FLIP_H) is ts.tile_surface(1, FLIP_H)
    ok("3c: flipped cells draw mirrored (horizontal, vertical, diagonal)")

    iso = dict(data, orientation="isometric")
    try:
        Tilemap.from_data(iso)
    except ValueError:
        ok("3b: non-orthogonal maps are rejected")
    else:
        raise AssertionError("isometric map accepted")


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 3:  MOVEMENT
# ═══════════════════════════════════════════════════════════════════════

def test_movement_against_walls():
    print("\n=== 4: Movement ===")
    _, _, walls, _ = _build_map()

    w = World()
    eid = spawn_player(w, 640.0, 480.0)
    add_collider(w, eid, walls)
    add_collider(w, eid, walls)
    assert w.get(eid, Body).colliders == [walls]
    ok("4a: colliders register once")

    vel = w.get(eid, Velocity)
    pos = w.get(eid, Position)
    vel.x = C.PLAYER_SPEED
    movement_system(w, STEP)
    assert math.isclose(pos.x, 640.0 + STEP_PX) and pos.y == 480.0
    ok("4b: open ground moves speed * dt")

    # Stand just right of the west border (col 0 spans x 0..32)
    pos.x, pos.y = 60.0, 480.0
    for _ in range(10):
        vel.x, vel.y = -C.PLAYER_SPEED, 0.0
        movement_system(w, STEP)
    body = w.get(eid, Body)
    assert pos.x == TILE + body.width / 2, pos.x
    assert vel.x == 0.0 and body.blocked["left"]
    assert not box_hits_layer(*body.box(pos.x, pos.y), walls)
    ok("4c: walking into a wall stops flush against it")

    vel.x, vel.y = -C.PLAYER_SPEED, C.PLAYER_SPEED
    for _ in range(4):
        movement_system(w, STEP)
    assert pos.x == TILE + body.width / 2
    assert math.isclose(pos.y, 480.0 + 4 * STEP_PX), pos.y
    ok("4d: pressing into a wall still slides along it")

    pos.x, pos.y = 640.0, 60.0
    for _ in range(10):
        vel.x, vel.y = 0.0, -C.PLAYER_SPEED
        movement_system(w, STEP)
    assert pos.y == TILE + body.height / 2 and body.blocked["up"]
    vel.x, vel.y = 0.0, C.PLAYER_SPEED
    movement_system(w, STEP)
    assert not body.blocked["up"]
    ok("4e: blocked flags reset every step")

    left, blocked = sweep_x(100.0, 100.0, 32.0, 32.0, 0.0, [walls])
    assert (left, blocked) == (100.0, False)
    ok("4f: a zero move never reports a hit")

    try:
        add_collider(w, w.spawn(), walls)
    except KeyError:
        ok("4g: add_collider on a body-less entity raises KeyError")
    else:
        raise AssertionError("collider on entity without Body accepted")

    # A body that starts inside a wall walks out instead of being pushed through
    w2 = World()
    inside_x = spawn_player(w2, 30.0, 480.0)    # west wall spans x 0..32
    inside_y = spawn_player(w2, 640.0, 30.0)    # north wall spans y 0..32
    for eid2 in (inside_x, inside_y):
        add_collider(w2, eid2, walls)
    w2.get(inside_x, Velocity).x = C.PLAYER_SPEED
    w2.get(inside_y, Velocity).y = C.PLAYER_SPEED
    movement_system(w2, STEP)
    px, py = w2.get(inside_x, Position), w2.get(inside_y, Position)
    assert math.isclose(px.x, 30.0 + STEP_PX), f"moved to x={px.x}"
    assert math.isclose(py.y, 30.0 + STEP_PX), f"moved to y={py.y}"
    assert not w2.get(inside_x, Body).blocked["right"]
    assert not w2.get(inside_y, Body).blocked["down"]
    assert w2.get(inside_x, Velocity).x == C.PLAYER_SPEED
    ok("4h: a body overlapping a wall moves away from it, not through it")


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 4:  CAMERA
# ═══════════════════════════════════════════════════════════════════════

def test_camera_follow():
    print("\n=== 5: Camera ===")
    w = World()
    eid = spawn_player(w, 640.0, 480.0)
    cam = Camera(width=800, height=600)
    cam.start_follow(eid)
    cam.set_bounds(0, 0, 1280, 960)
    w.set_res(cam)
    pos = w.get(eid, Position)

    camera_system(w)
    assert (cam.scroll_x, cam.scroll_y) == (240.0, 180.0)
    assert cam.world_to_screen(pos.x, pos.y) == (400, 300)
    ok("5a: the target sits in the middle of the view")

    pos.x, pos.y = 50.0, 50.0
    camera_system(w)
    assert (cam.scroll_x, cam.scroll_y) == (0.0, 0.0)
    pos.x, pos.y = 1250.0, 940.0
    camera_system(w)
    assert (cam.scroll_x, cam.scroll_y) == (480.0, 360.0)
    ok("5b: the view never leaves the map")

    cam.set_bounds(0, 0, 400, 300)
    camera_system(w)
    assert (cam.scroll_x, cam.scroll_y) == (-200.0, -150.0)
    assert clamp_axis(123.0, 800, 0, 800) == 0.0
    ok("5c: a map smaller than the view is centred")

    cam.stop_follow()
    cam.set_bounds(0, 0, 1280, 960)
    cam.scroll_x = 100.0
    pos.x = 1000.0
    camera_system(w)
    assert cam.scroll_x == 100.0
    ok("5d: without a target the camera stays put")


def test_world_store():
    print("\n=== 5b: World ===")
    from logic.tick import tick_systems
    from logic.animation import AnimationRegistry
    from components import GameClock

    w = World()
    w.set_res(GameClock())
    w.set_res(Camera())
    a = spawn_player(w, 10.0, 10.0)
    b = spawn_player(w, 20.0, 20.0)
    assert w.count(Position) == 2
    assert [eid for eid, _ in w.query(Position)] == [a, b]
    assert w.query_one(Camera) is None
    ok("5e: resources never show up in entity queries")

    w.kill(a)
    assert not w.alive(a) and w.alive(b)
    tick_systems(w, STEP, AnimationRegistry())
    assert not w.has(a, Position) and w.has(b, Position)
    assert list(w.debug_dump()) == [b]
    clock = w.res(GameClock)
    assert clock.frame == 1 and clock.time == STEP
    ok("5f: tick advances the clock and purges killed entities")


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 5:  WALK SCENE (full loop through App.step)
# ═══════════════════════════════════════════════════════════════════════

def test_walk_scene():
    print("\n=== 6: Walk scene ===")
    from core.app import App
    from scenes.walk_scene import WalkScene

    tuning.override({})
    held: dict[int, bool] = {}
    app = App()
    _fill_assets(app.assets)
    scene = WalkScene(InputManager(key_state=lambda: held))
    scene.preloaded = True
    app.push_scene(scene)

    w = app.world
    eid = scene.player
    pos = w.get(eid, Position)
    sprite = w.get(eid, Sprite)
    cam = w.res(Camera)
    assert (pos.x, pos.y) == (640.0, 480.0)
    assert (sprite.texture, sprite.frame) == (C.KEY_STAND, C.STAND_DOWN)
    assert len(scene.anims) == 4
    assert cam.target == eid and cam.bounds == (0, 0, 1280, 960)
    assert (cam.scroll_x, cam.scroll_y) == (240.0, 180.0)
    ok("6a: create spawns the player at the spawn point, camera centred")

    app.step(1.0)  # clamped to one short frame
    assert (pos.x, pos.y) == (640.0, 480.0)
    ok("6b: no keys → the player stays put")

    held[pygame.K_LEFT] = True
    app.step(STEP)
    assert math.isclose(pos.x, 640.0 - STEP_PX)
    assert w.get(eid, Animator).is_playing("left")
    assert (sprite.texture, sprite.frame) == (C.KEY_WALK_LEFT, 0)
    assert math.isclose(cam.scroll_x, pos.x - 400.0)
    ok("6c: holding left walks left, plays 'left', camera follows")

    held.clear()
    app.step(STEP)
    assert math.isclose(pos.x, 640.0 - STEP_PX)
    assert (sprite.texture, sprite.frame) == (C.KEY_STAND, C.STAND_LEFT)
    assert not w.get(eid, Animator).playing
    ok("6d: releasing stops the player facing left")

    held[pygame.K_LEFT] = True
    for _ in range(100):
        app.step(STEP)
    body = w.get(eid, Body)
    assert pos.x == TILE + body.width / 2 and body.blocked["left"]
    assert cam.scroll_x == 0.0
    ok("6e: the west wall stops the player; the camera stops at the edge")

    # The wall zeroed the velocity, so there is no direction to face.
    held.clear()
    frame_at_wall = (sprite.texture, sprite.frame)
    app.step(STEP)
    assert (sprite.texture, sprite.frame) == frame_at_wall
    assert sprite.texture == C.KEY_WALK_LEFT
    assert not w.get(eid, Animator).playing
    ok("6f: releasing against a wall freezes the last walk frame")

    tuning.override({"player": {"speed": 350.0}})
    scene.input.feed(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_TAB))
    scene._apply_tuning(app)
    held[pygame.K_RIGHT] = True
    x0 = pos.x
    app.step(STEP)
    assert w.get(eid, Player).speed == 350.0
    assert math.isclose(pos.x, x0 + 350.0 * STEP)
    assert scene.show_debug
    ok("6g: tuning changes apply to speed; Tab turns on the debug overlay")

    app.pop_scene()
    tuning.override({})


def test_walk_scene_missing_spawn():
    print("\n=== 7: Walk scene without a spawn point ===")
    from core.app import App
    from scenes.walk_scene import WalkScene

    tuning.override({})
    app = App()
    _fill_assets(app.assets)
    data = app.assets.tilemap_data(C.KEY_MAP)
    for layer in data["layers"]:
        if layer["name"] == C.SPAWN_LAYER:
            layer["objects"] = []
    scene = WalkScene(InputManager(key_state=lambda: {}))
    scene.preloaded = True
    try:
        app.push_scene(scene)
    except LookupError:
        ok("7a: a map without 'Spawn Point' raises LookupError")
    else:
        raise AssertionError("missing spawn point accepted")


def test_draw_order():
    print("\n=== 8: Draw order and layer opacity ===")
    from core.app import App
    from scenes.walk_scene import WalkScene
    from scenes.walk_draw import draw_world, draw_layer

    tuning.override({})
    app = App()
    _fill_assets(app.assets)
    scene = WalkScene(InputManager(key_state=lambda: {}))
    scene.preloaded = True
    app.push_scene(scene)

    w = app.world
    pos = w.get(scene.player, Position)
    # Under the roof row (row 3, cols 5..8); the World layer is empty there
    pos.x, pos.y = 208.0, 112.0
    camera_system(w)
    cam = w.res(Camera)
    assert (cam.scroll_x, cam.scroll_y) == (0.0, 0.0)

    # Inside the body of stand frame 0, clear of the eyes
    spot = (204, 118)
    surf = pygame.Surface(app.size)
    draw_world(surf, app.assets, w, scene.layers, cam)
    assert tuple(surf.get_at(spot))[:3] == TILE_COLORS[ROOF]
    ok("8a: the 'Above Player' layer draws over the player")

    scene.layers[2].visible = False
    surf.fill((0, 0, 0))
    draw_world(surf, app.assets, w, scene.layers, cam)
    assert tuple(surf.get_at(spot))[:3] == (230, 230, 230)
    ok("8b: ground layers at the same depth draw under the player")

    _, below, _, _ = _build_map()
    view = Camera(width=64, height=64)
    small = pygame.Surface((64, 64))
    below.opacity = 0.5
    draw_layer(small, below, view)
    got = tuple(small.get_at((10, 10)))[:3]
    assert all(abs(c - e / 2) <= 3 for c, e in zip(got, TILE_COLORS[GRASS])), got
    ok("8c: a half-opaque layer blends over what is underneath")

    below.opacity = 0.0
    small.fill((0, 0, 0))
    draw_layer(small, below, view)
    assert tuple(small.get_at((10, 10)))[:3] == (0, 0, 0)
    ok("8d: a fully transparent layer draws nothing")

    app.pop_scene()


def test_tuning_fallback():
    print("\n=== 9: Tuning file ===")
    with tempfile.TemporaryDirectory() as tmp:
        tuning.load(os.path.join(tmp, "nope.toml"))
        assert tuning.get("player", "speed", C.PLAYER_SPEED) == C.PLAYER_SPEED
        assert tuning.section("assets.paths") == {}
        ok("9a: a missing tuning file falls back to defaults")

        bad = os.path.join(tmp, "bad.toml")
        with open(bad, "w", encoding="utf-8") as f:
            f.write("[player\nspeed = \n")
        tuning.load(bad)
        assert tuning.get("player", "speed", C.PLAYER_SPEED) == C.PLAYER_SPEED
        ok("9b: malformed TOML falls back to defaults")

        good = os.path.join(tmp, "good.toml")
        with open(good, "w", encoding="utf-8") as f:
            f.write('[player]\nspeed = 200.0\n\n[assets.paths]\nmap = "maps/other.json"\n')
        tuning.load(good)
        assert tuning.get("player", "speed", C.PLAYER_SPEED) == 200.0
        assert tuning.get("player", "missing", 1) == 1
        assert tuning.get("assets.paths", "map") == "maps/other.json"
        assert tuning.section("assets.paths") == {"map": "maps/other.json"}
        with open(good, "w", encoding="utf-8") as f:
            f.write("[player]\nspeed = 250.0\n")
        tuning.reload()
        assert tuning.get("player", "speed", C.PLAYER_SPEED) == 250.0
        ok("9c: values load, dot paths resolve, reload re-reads the file")

    tuning.load()
    assert tuning.get("player", "speed") == C.PLAYER_SPEED
    assert tuning.get("window", "width") == C.SCREEN_WIDTH
    assert tuning.get("map", "tileset") == C.TILESET_NAME
    assert tuning.section("assets.paths") == C.ASSET_PATHS
    ok("9d: the shipped data/tuning.toml agrees with core/constants.py")
    tuning.override({})


# ═══════════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("Asset loader", test_asset_loader),
        ("Tilemap", test_tilemap_layers),
        ("Tilemap encodings", test_tilemap_encodings),
        ("Movement", test_movement_against_walls),
        ("Camera", test_camera_follow),
        ("World", test_world_store),
        ("Walk scene", test_walk_scene),
        ("Missing spawn", test_walk_scene_missing_spawn),
        ("Draw order", test_draw_order),
        ("Tuning file", test_tuning_fallback),
    ]

    for name, fn in sections:
        try:
            fn()
        except Exception:
            fail(name, "unhandled exception")
            traceback.print_exc()

    pygame.quit()
    total = _passed + _failed
    print(f"\n{'=' * 60}")
    print(f"  World Tests: {_passed} passed, {_failed} failed  (total {total})")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
