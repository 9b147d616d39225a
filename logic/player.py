"""logic/player.py — The player: movement, mining, placing, eating, hunger.

All actions follow the same contract: an invalid action is a silent
no-op that returns False; a successful one returns True.  Nothing here
raises during normal play.

Hunger
------
Every ``HUNGER_TICK`` frames hunger drops by ``HUNGER_DRAIN``.  Starvation
damage is applied only on a tick that leaves hunger at exactly zero,
not continuously while it stays there between ticks.
"""

from __future__ import annotations
import random

from core.constants import (
    STAT_MAX, HUNGER_TICK, HUNGER_DRAIN, STARVE_DAMAGE,
    EAT_HUNGER, EAT_HEALTH, FORAGE_CHANCE,
)
from core.tuning import get as _tun
from core.world import World
from components.blocks import BlockId, is_solid, resolve_drop
from components.inventory import Inventory
from components.resources import FOOD

STARTING_RESOURCES = {"wood": 0, "stone": 0, "ore": 0, "food": 1}


class Player:
    def __init__(self, world: World, rng: random.Random | None = None):
        self.world = world
        self.rng = rng if rng is not None else random.Random()
        self.x = world.width // 2
        self.y = world.height // 2
        self.health = STAT_MAX
        self.hunger = STAT_MAX
        self.inventory = Inventory(resources=dict(STARTING_RESOURCES))
        self.can_mine_ore = False
        self.last_hunger_tick = 0

    @property
    def pos(self) -> tuple[int, int]:
        return self.x, self.y

    # ── movement ────────────────────────────────────────────────────

    def move(self, dx: int, dy: int) -> bool:
        nx = self.x + dx
        ny = self.y + dy
        if not self.world.in_bounds(nx, ny):
            return False
        if is_solid(self.world.get(nx, ny)):
            return False
        self.x = nx
        self.y = ny
        return True

    # ── world interaction ───────────────────────────────────────────

    def mine(self, x: int, y: int) -> bool:
        block_id = self.world.get(x, y)
        if block_id == BlockId.AIR:
            return False
        if block_id == BlockId.ORE and not self.can_mine_ore:
            return False

        drop = resolve_drop(block_id)
        self.world.set(x, y, BlockId.AIR)
        if drop is not None:
            if drop.placeable:
                self.inventory.set_block(drop.block)
            else:
                self.inventory.add_resource(drop.resource)

        # Foraging bonus, independent of the drop.
        if self.rng.random() < _tun("food", "forage_chance", FORAGE_CHANCE):
            self.inventory.add_resource(FOOD)
        return True

    def place(self, x: int, y: int) -> bool:
        if not self.world.in_bounds(x, y) or self.world.get(x, y) != BlockId.AIR:
            return False
        block = self.inventory.selected_block()
        if block is None:
            return False
        # The slot is left as-is: placing is free.
        self.world.set(x, y, block)
        return True

    # ── needs ───────────────────────────────────────────────────────

    def eat(self) -> bool:
        if not self.inventory.consume_resource(FOOD, 1):
            return False
        self.hunger = min(STAT_MAX, self.hunger + _tun("food", "hunger_restore", EAT_HUNGER))
        self.health = min(STAT_MAX, self.health + _tun("food", "health_restore", EAT_HEALTH))
        return True

    def update(self, frame_count: int) -> bool:
        """Apply a hunger tick if one is due.  Returns True if it fired."""
        interval = _tun("hunger", "tick_frames", HUNGER_TICK)
        if frame_count - self.last_hunger_tick < interval:
            return False
        self.last_hunger_tick = frame_count
        self.hunger = max(0, self.hunger - _tun("hunger", "drain", HUNGER_DRAIN))
        if self.hunger == 0:
            self.health = max(0, self.health - _tun("hunger", "starve_damage", STARVE_DAMAGE))
        return True

    @property
    def starving(self) -> bool:
        return self.hunger == 0
