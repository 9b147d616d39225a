"""logic/game.py — Session orchestrator.

Owns the World, the Player, the frame counter and the crafting-menu
flag.  The scene feeds it raw input; the renderer reads its state.

Modes
-----
EXPLORING   keys move / eat, left click mines, right click places
CRAFTING    left or right click hits recipe buttons; the world is untouchable

The crafting key is the only way in or out of CRAFTING.

Button bounds
-------------
The renderer owns the geometry of the recipe buttons it last drew and
passes it in as ``{recipe name: (x, y, w, h)}``.  Recipes themselves are
never mutated.
"""

from __future__ import annotations
import math
import random
from enum import Enum, auto
from typing import Mapping, Sequence

from core.constants import (
    WORLD_WIDTH, WORLD_HEIGHT, TILE_SIZE, DAY_LENGTH,
    MOUSE_PRIMARY, MOUSE_SECONDARY,
)
from core.tuning import get as _tun
from core.world import World
from components.blocks import block_type
from components.event_log import EventLog
from components.recipes import RECIPES, Recipe, UNLOCK_ORE_MINING
from logic.bindings import bound_to, direction_for
from logic.crafting import can_craft, craft
from logic.player import Player


class GameMode(Enum):
    EXPLORING = auto()
    CRAFTING  = auto()


class Game:
    def __init__(self, width: int | None = None, height: int | None = None,
                 rng: random.Random | None = None,
                 recipes: Sequence[Recipe] = RECIPES):
        if width is None:
            width = _tun("world", "width", WORLD_WIDTH)
        if height is None:
            height = _tun("world", "height", WORLD_HEIGHT)
        rng = rng if rng is not None else random.Random()
        self.world = World(width, height, rng=rng)
        self.player = Player(self.world, rng=rng)
        self.recipes = tuple(recipes)
        self.frame_count = 0
        self.crafting_open = False
        self.log = EventLog()

    @property
    def mode(self) -> GameMode:
        return GameMode.CRAFTING if self.crafting_open else GameMode.EXPLORING

    # ── per-frame ───────────────────────────────────────────────────

    def update(self) -> None:
        self.frame_count += 1
        # Routine hunger ticks show on the HUD bar; only starvation is logged.
        if self.player.update(self.frame_count) and self.player.starving:
            self.log.record(self.frame_count, "hunger",
                            f"Starving! Health {self.player.health}")

    def daylight(self) -> float:
        """Ambient light factor in [0, 1]; 1 is noon."""
        day = _tun("display", "day_length", DAY_LENGTH)
        return (math.sin(self.frame_count / day * math.pi * 2) + 1) / 2

    # ── keyboard ────────────────────────────────────────────────────

    def handle_key(self, key_code: int) -> bool:
        """Route a key-down: crafting toggle, eat, or movement."""
        if bound_to("craft", key_code):
            self.toggle_crafting()
            return True
        if bound_to("eat", key_code):
            if self.player.eat():
                self.log.record(self.frame_count, "eat", "Ate berries")
                return True
            return False
        return self.handle_movement(key_code)

    def handle_movement(self, key_code: int) -> bool:
        step = direction_for(key_code)
        if step is None:
            return False
        return self.player.move(*step)

    def toggle_crafting(self) -> None:
        self.crafting_open = not self.crafting_open

    # ── crafting ────────────────────────────────────────────────────

    def can_craft(self, recipe: Recipe) -> bool:
        return can_craft(self.player.inventory, recipe)

    def try_craft(self, recipe: Recipe) -> bool:
        if not craft(self.player.inventory, recipe):
            return False
        if recipe.unlock == UNLOCK_ORE_MINING:
            self.player.can_mine_ore = True
        self.log.record(self.frame_count, "craft", f"Crafted {recipe.name}",
                        details={"outputs": dict(recipe.outputs)})
        return True

    # ── mouse ───────────────────────────────────────────────────────

    def screen_to_tile(self, px: int, py: int) -> tuple[int, int]:
        return px // TILE_SIZE, py // TILE_SIZE

    def handle_mouse(self, x: int, y: int, button: int,
                     button_bounds: Mapping[str, Sequence[int]] | None = None) -> bool:
        if self.crafting_open:
            return self._click_recipes(x, y, button_bounds or {})

        tx, ty = self.screen_to_tile(x, y)
        if not self.world.in_bounds(tx, ty):
            return False
        if button == MOUSE_PRIMARY:
            name = block_type(self.world.get(tx, ty)).name
            if self.player.mine(tx, ty):
                self.log.record(self.frame_count, "mine", f"Mined {name}",
                                details={"x": tx, "y": ty})
                return True
        elif button == MOUSE_SECONDARY:
            if self.player.place(tx, ty):
                block = block_type(self.world.get(tx, ty)).name
                self.log.record(self.frame_count, "place", f"Placed {block}",
                                details={"x": tx, "y": ty})
                return True
        return False

    def handle_wheel(self, delta: int) -> None:
        """Positive *delta* (scroll down) selects the next slot."""
        self.player.inventory.toggle_selection(1 if delta > 0 else -1)

    def _click_recipes(self, x: int, y: int,
                       button_bounds: Mapping[str, Sequence[int]]) -> bool:
        crafted = False
        for recipe in self.recipes:
            bounds = button_bounds.get(recipe.name)
            if bounds is None:
                continue
            bx, by, bw, bh = bounds
            if bx <= x <= bx + bw and by <= y <= by + bh:
                crafted = self.try_craft(recipe) or crafted
        return crafted
