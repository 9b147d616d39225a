"""
core/world.py — The tile grid

Owns a width × height grid of ``BlockId`` values, indexed
``tiles[y][x]``.  Every read and write is bounds-checked: reading
outside the grid yields AIR, writing outside it does nothing.

The grid is generated once when the World is created and then only
mutated in place (mining clears to AIR, placing fills AIR).
"""

from __future__ import annotations
import random

from components.blocks import BlockId
from core.tuning import get as _tun


class World:
    def __init__(self, width: int, height: int,
                 rng: random.Random | None = None, generate: bool = True):
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.tiles: list[list[BlockId]] = [
            [BlockId.AIR] * width for _ in range(height)
        ]
        if generate:
            self.generate()

    def generate(self) -> None:
        """Fill the grid with cosmetic terrain.

        Bottom row is water.  A ragged dirt band (re-rolled per cell) sits
        above it.  Everything else is sampled from descending noise
        thresholds; no connectivity is guaranteed.
        """
        band_min = _tun("generation", "dirt_band_min", 4)
        band_max = _tun("generation", "dirt_band_max", 6)
        t_tree = _tun("generation", "tree", 0.92)
        t_grass = _tun("generation", "grass", 0.85)
        t_stone = _tun("generation", "stone", 0.80)
        t_ore = _tun("generation", "ore", 0.77)

        for y in range(self.height):
            for x in range(self.width):
                noise = self.rng.random()
                tile = BlockId.DIRT
                if y == self.height - 1:
                    tile = BlockId.WATER
                elif y > self.height - self.rng.randint(band_min, band_max):
                    tile = BlockId.DIRT
                elif noise > t_tree:
                    tile = BlockId.TREE
                elif noise > t_grass:
                    tile = BlockId.GRASS
                elif noise > t_stone:
                    tile = BlockId.STONE
                elif noise > t_ore:
                    tile = BlockId.ORE
                else:
                    tile = BlockId.GRASS
                self.tiles[y][x] = tile

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> BlockId:
        if not self.in_bounds(x, y):
            return BlockId.AIR
        return self.tiles[y][x]

    def set(self, x: int, y: int, block_id: BlockId) -> None:
        if self.in_bounds(x, y):
            self.tiles[y][x] = block_id

    def fill(self, block_id: BlockId) -> None:
        """Overwrite every tile (handy for building test arenas)."""
        for row in self.tiles:
            for x in range(self.width):
                row[x] = block_id
