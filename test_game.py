"""test_game.py — Game orchestration, input dispatch and tuning.

Includes the end-to-end session checks: fresh spawn, walking into
solid vs open tiles, crafting the pickaxe and then mining ore.

Run:  python test_game.py   (or: pytest test_game.py)
"""
from __future__ import annotations
import math
import random
import sys
import tempfile
import traceback
from pathlib import Path

import pygame

from core import tuning
from core.constants import TILE_SIZE, DAY_LENGTH, INVENTORY_SLOTS, MOUSE_PRIMARY, MOUSE_SECONDARY
from components.blocks import BlockId
from components.event_log import EventLog
from components.recipes import RECIPES, recipe_by_name
from logic.game import Game, GameMode
from scenes.sandbox_draw import PANEL_W
from ui.helpers import wrap_text

PICKAXE = recipe_by_name("Stone Pickaxe")
PLANKS = recipe_by_name("Craft Planks")


def _game(seed: int = 0) -> Game:
    g = Game(rng=random.Random(seed))
    g.world.fill(BlockId.GRASS)
    return g


def _click(tx: int, ty: int) -> tuple[int, int]:
    """Screen pixel somewhere inside tile (tx, ty)."""
    return tx * TILE_SIZE + TILE_SIZE // 3, ty * TILE_SIZE + TILE_SIZE // 2


# ═══════════════════════════════════════════════════════════════════════
#  Session
# ═══════════════════════════════════════════════════════════════════════

def test_fresh_session():
    g = Game(rng=random.Random(5))
    assert (g.world.width, g.world.height) == (24, 18)
    assert g.player.pos == (12, 9)
    assert g.frame_count == 0
    assert g.crafting_open is False
    assert g.mode is GameMode.EXPLORING
    assert g.player.world is g.world


def test_walk_into_stone_then_grass():
    g = _game()
    x, y = g.player.pos
    g.world.set(x + 1, y, BlockId.STONE)
    g.world.set(x - 1, y, BlockId.GRASS)

    assert g.handle_movement(pygame.K_d) is False
    assert g.player.pos == (x, y)
    assert g.handle_movement(pygame.K_a) is True
    assert g.player.pos == (x - 1, y)


def test_movement_bindings():
    g = _game()
    x, y = g.player.pos
    for key, expected in ((pygame.K_UP, (x, y - 1)),
                          (pygame.K_DOWN, (x, y)),
                          (pygame.K_LEFT, (x - 1, y)),
                          (pygame.K_RIGHT, (x, y)),
                          (pygame.K_w, (x, y - 1)),
                          (pygame.K_s, (x, y))):
        g.handle_movement(key)
        assert g.player.pos == expected, key


def test_unbound_key_does_nothing():
    g = _game()
    pos = g.player.pos
    assert g.handle_movement(pygame.K_q) is False
    assert g.handle_key(pygame.K_q) is False
    assert g.player.pos == pos


def test_update_advances_frames_and_hunger():
    g = _game()
    for _ in range(540):
        g.update()
    assert g.frame_count == 540
    assert g.player.hunger == 95
    # A routine tick leaves the HUD message alone.
    assert g.log.for_cat("hunger") == []


def test_starvation_is_logged_without_hiding_mining():
    g = _game()
    g.world.set(3, 2, BlockId.TREE)
    g.handle_mouse(*_click(3, 2), MOUSE_PRIMARY)
    g.player.hunger = 10
    for _ in range(540):
        g.update()
    assert g.player.hunger == 5
    assert g.log.latest()["msg"] == "Mined Tree"

    for _ in range(540):
        g.update()
    assert g.player.hunger == 0
    assert g.log.latest()["msg"] == "Starving! Health 90"
    assert len(g.log.for_cat("hunger")) == 1


def test_daylight_cycle():
    g = _game()
    assert math.isclose(g.daylight(), 0.5)
    g.frame_count = DAY_LENGTH // 4
    assert math.isclose(g.daylight(), 1.0)
    g.frame_count = 3 * DAY_LENGTH // 4
    assert math.isclose(g.daylight(), 0.0, abs_tol=1e-9)


# ═══════════════════════════════════════════════════════════════════════
#  Keys → craft menu / eat
# ═══════════════════════════════════════════════════════════════════════

def test_craft_key_toggles_mode():
    g = _game()
    assert g.handle_key(pygame.K_e) is True
    assert g.mode is GameMode.CRAFTING
    g.handle_key(pygame.K_e)
    assert g.mode is GameMode.EXPLORING


def test_space_eats():
    g = _game()
    g.player.hunger = 50
    assert g.handle_key(pygame.K_SPACE) is True
    assert g.player.hunger == 70
    assert g.player.inventory.count("food") == 0
    assert g.handle_key(pygame.K_SPACE) is False
    assert g.player.hunger == 70


# ═══════════════════════════════════════════════════════════════════════
#  Crafting
# ═══════════════════════════════════════════════════════════════════════

def test_stone_pickaxe_unlocks_ore():
    g = _game()
    inv = g.player.inventory
    inv.add_resource("wood", 1)
    inv.add_resource("stone", 2)
    assert g.try_craft(PICKAXE) is True
    assert (inv.count("wood"), inv.count("stone"), inv.count("ore")) == (0, 0, 1)
    assert g.player.can_mine_ore is True


def test_stone_pickaxe_insufficient():
    g = _game()
    inv = g.player.inventory
    inv.add_resource("wood", 3)
    inv.add_resource("stone", 1)
    before = dict(inv.resources)
    assert g.try_craft(PICKAXE) is False
    assert inv.resources == before
    assert g.player.can_mine_ore is False


def test_planks_do_not_unlock_ore():
    g = _game()
    g.player.inventory.add_resource("wood", 1)
    assert g.try_craft(PLANKS) is True
    assert g.player.inventory.count("wood") == 2
    assert g.player.can_mine_ore is False


# ═══════════════════════════════════════════════════════════════════════
#  Mouse
# ═══════════════════════════════════════════════════════════════════════

def test_screen_to_tile():
    g = _game()
    assert g.screen_to_tile(0, 0) == (0, 0)
    assert g.screen_to_tile(TILE_SIZE - 1, TILE_SIZE) == (0, 1)
    assert g.screen_to_tile(5 * TILE_SIZE + 3, 2 * TILE_SIZE + 23) == (5, 2)


def test_primary_click_mines():
    g = _game()
    g.world.set(3, 2, BlockId.TREE)
    assert g.handle_mouse(*_click(3, 2), MOUSE_PRIMARY) is True
    assert g.world.get(3, 2) == BlockId.AIR
    assert g.player.inventory.count("wood") == 1
    assert g.log.latest()["msg"] == "Mined Tree"


def test_secondary_click_places():
    g = _game()
    g.handle_mouse(*_click(3, 2), MOUSE_PRIMARY)     # grass → dirt in slot
    assert g.handle_mouse(*_click(3, 2), MOUSE_SECONDARY) is True
    assert g.world.get(3, 2) == BlockId.DIRT
    assert g.log.latest()["cat"] == "place"


def test_click_below_world_is_ignored():
    g = _game()
    before = [row[:] for row in g.world.tiles]
    y = g.world.height * TILE_SIZE + 10              # HUD strip
    assert g.handle_mouse(40, y, MOUSE_PRIMARY) is False
    assert g.world.tiles == before


def test_crafting_menu_blocks_world_clicks():
    g = _game()
    g.world.set(3, 2, BlockId.TREE)
    g.toggle_crafting()
    assert g.handle_mouse(*_click(3, 2), MOUSE_PRIMARY, {}) is False
    assert g.world.get(3, 2) == BlockId.TREE


def test_crafting_button_hit():
    g = _game()
    g.player.inventory.add_resource("wood", 1)
    g.player.inventory.add_resource("stone", 2)
    g.toggle_crafting()
    bounds = {"Craft Planks": (100, 100, 80, 28), "Stone Pickaxe": (100, 160, 80, 28)}

    assert g.handle_mouse(50, 50, MOUSE_PRIMARY, bounds) is False
    assert g.player.can_mine_ore is False
    # Edges are inclusive.
    assert g.handle_mouse(180, 188, MOUSE_PRIMARY, bounds) is True
    assert g.player.can_mine_ore is True
    assert g.player.inventory.count("ore") == 1


def test_crafting_button_without_bounds_is_ignored():
    g = _game()
    g.player.inventory.add_resource("wood", 5)
    g.toggle_crafting()
    assert g.handle_mouse(110, 110, MOUSE_PRIMARY, {"Unknown": (100, 100, 80, 28)}) is False
    assert g.handle_mouse(110, 110, MOUSE_PRIMARY) is False
    assert g.player.inventory.count("wood") == 5


def test_wheel_cycles_slots():
    g = _game()
    g.handle_wheel(1)
    assert g.player.inventory.selected_index == 1
    g.handle_wheel(-1)
    g.handle_wheel(-1)
    assert g.player.inventory.selected_index == INVENTORY_SLOTS - 1


def test_pickaxe_then_mine_ore():
    g = _game()
    g.world.set(2, 2, BlockId.ORE)
    g.handle_mouse(*_click(2, 2), MOUSE_PRIMARY)
    assert g.world.get(2, 2) == BlockId.ORE

    g.player.inventory.add_resource("wood", 1)
    g.player.inventory.add_resource("stone", 2)
    g.try_craft(PICKAXE)
    assert g.handle_mouse(*_click(2, 2), MOUSE_PRIMARY) is True
    assert g.world.get(2, 2) == BlockId.AIR
    assert g.player.inventory.count("ore") == 2


# ═══════════════════════════════════════════════════════════════════════
#  Tuning
# ═══════════════════════════════════════════════════════════════════════

def test_tuning_defaults_without_file():
    tuning.reset()
    assert tuning.get("hunger", "tick_frames", 540) == 540
    assert tuning.section("hunger") == {}


def test_tuning_overrides_hunger_interval():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "tuning.toml"
        path.write_text("[hunger]\ntick_frames = 10\ndrain = 50\n\n[food.extra]\nx = 1\n")
        try:
            tuning.load(path)
            assert tuning.get("hunger", "tick_frames") == 10
            assert tuning.get("food.extra", "x") == 1
            assert tuning.get("food.missing", "x", "d") == "d"
            assert tuning.section("hunger") == {"tick_frames": 10, "drain": 50}

            g = _game()
            for _ in range(10):
                g.update()
            assert g.player.hunger == 50
        finally:
            tuning.reset()


def test_tuning_reload_picks_up_edits():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "tuning.toml"
        path.write_text("[food]\nforage_chance = 0.3\n")
        try:
            tuning.load(path)
            assert tuning.get("food", "forage_chance") == 0.3
            path.write_text("[food]\nforage_chance = 0.9\nhunger_restore = 40\n")
            tuning.reload()
            assert tuning.get("food", "forage_chance") == 0.9
            assert tuning.get("food", "hunger_restore") == 40

            path.unlink()
            tuning.reload()
            assert tuning.get("food", "forage_chance", 0.3) == 0.3
        finally:
            tuning.reset()


def test_shipped_tuning_matches_defaults():
    try:
        tuning.load()
        g = _game()
        for _ in range(540):
            g.update()
        assert g.player.hunger == 95
        assert (g.world.width, g.world.height) == (24, 18)
    finally:
        tuning.reset()


# ═══════════════════════════════════════════════════════════════════════
#  Event log
# ═══════════════════════════════════════════════════════════════════════

def test_event_log_keeps_newest_entries():
    log = EventLog(max_entries=3)
    for frame in range(10):
        log.record(frame, "mine", f"Mined {frame}")
    assert [e["frame"] for e in log.entries] == [7, 8, 9]
    assert log.latest()["msg"] == "Mined 9"
    assert [e["frame"] for e in log.recent(2)] == [8, 9]


def test_event_log_default_capacity():
    log = EventLog()
    for frame in range(250):
        log.record(frame, "place", "Placed Dirt")
    assert len(log.entries) == 200
    assert log.entries[0]["frame"] == 50


def test_event_log_pause_and_resume():
    log = EventLog()
    log.record(1, "eat", "Ate berries")
    log.pause()
    log.record(2, "eat", "Ate berries")
    assert len(log.entries) == 1
    log.resume()
    log.record(3, "craft", "Crafted Craft Planks", details={"outputs": {"wood": 2}})
    assert [e["frame"] for e in log.entries] == [1, 3]
    assert log.latest()["details"] == {"outputs": {"wood": 2}}


def test_event_log_category_filter():
    log = EventLog(cat_filter={"craft"})
    log.record(1, "mine", "Mined Tree")
    log.record(2, "craft", "Crafted Stone Pickaxe")
    log.record(3, "hunger", "Starving! Health 90")
    assert [e["cat"] for e in log.entries] == ["craft"]
    assert log.for_cat("mine") == []


def test_event_log_clear():
    log = EventLog()
    log.record(1, "mine", "Mined Tree")
    log.clear()
    assert log.latest() is None
    assert log.recent() == []


# ═══════════════════════════════════════════════════════════════════════
#  Crafting panel text
# ═══════════════════════════════════════════════════════════════════════

def _mono(s: str) -> int:
    return len(s) * 7


def test_recipe_descriptions_fit_the_panel():
    width = PANEL_W - 24
    for recipe in RECIPES:
        lines = wrap_text(recipe.description, width, _mono)
        assert lines, recipe.name
        assert all(_mono(line) <= width for line in lines), lines
        assert " ".join(lines) == recipe.description


def test_wrap_text_long_word_gets_own_line():
    assert wrap_text("a verylongword b", 35, _mono) == ["a", "verylongword", "b"]
    assert wrap_text("", 100, _mono) == []


# ═══════════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    passed = failed = 0
    for name, fn in list(globals().items()):
        if not name.startswith("test_") or not callable(fn):
            continue
        try:
            fn()
            passed += 1
            print(f"  [PASS] {name}")
        except Exception:
            failed += 1
            print(f"  [FAIL] {name}")
            for line in traceback.format_exc().strip().splitlines():
                print(f"         {line}")
    print(f"\n  Game Tests: {passed} passed, {failed} failed")
    sys.exit(1 if failed else 0)
