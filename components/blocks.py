"""components.blocks — Block catalog and drop resolution.

Every tile in the world is a ``BlockId``.  ``BLOCKS`` maps each id to
its immutable ``BlockType`` (display colour, solidity, what it drops).

Drops are resolved by lookup, not by a per-block callback::

    drop = resolve_drop(BlockId.TREE)
    drop.block      # BlockId.WOOD
    drop.resource   # "wood"  → credit the counter

A drop whose ``resource`` is ``None`` is a *placeable* block and goes
into the player's selected inventory slot instead.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum


class BlockId(IntEnum):
    AIR   = 0
    GRASS = 1
    DIRT  = 2
    STONE = 3
    TREE  = 4
    WOOD  = 5
    ORE   = 6
    WATER = 7


@dataclass(frozen=True)
class BlockType:
    id: BlockId
    name: str
    color: tuple              # (r, g, b) or (r, g, b, a)
    solid: bool = False
    drops: BlockId | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("BlockType name must be non-empty")
        if len(self.color) not in (3, 4):
            raise ValueError(f"color must be RGB or RGBA, got {self.color!r}")

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        """Colour with an explicit alpha channel (opaque when omitted)."""
        if len(self.color) == 4:
            return tuple(self.color)
        return (*self.color, 255)


@dataclass(frozen=True)
class Drop:
    """What mining a block yields."""
    block: BlockId
    resource: str | None = None   # counter to credit, or None → placeable

    @property
    def placeable(self) -> bool:
        return self.resource is None


BLOCKS: dict[BlockId, BlockType] = {
    b.id: b for b in (
        BlockType(BlockId.AIR,   "Air",   (0, 0, 0, 0)),
        BlockType(BlockId.GRASS, "Grass", (104, 170, 67), drops=BlockId.DIRT),
        BlockType(BlockId.DIRT,  "Dirt",  (128, 98, 60),  drops=BlockId.DIRT),
        BlockType(BlockId.STONE, "Stone", (110, 110, 110), solid=True, drops=BlockId.STONE),
        BlockType(BlockId.TREE,  "Tree",  (60, 120, 45),   solid=True, drops=BlockId.WOOD),
        BlockType(BlockId.WOOD,  "Wood",  (166, 126, 86),  solid=True, drops=BlockId.WOOD),
        BlockType(BlockId.ORE,   "Ore",   (180, 170, 200), solid=True, drops=BlockId.ORE),
        BlockType(BlockId.WATER, "Water", (80, 140, 220, 200)),
    )
}

# Raw materials go to resource counters; everything else is placeable.
RESOURCE_DROPS: dict[BlockId, str] = {
    BlockId.WOOD:  "wood",
    BlockId.STONE: "stone",
    BlockId.ORE:   "ore",
}


def block_type(block_id: int) -> BlockType:
    """Catalog entry for *block_id*.  Raises ValueError for unknown ids."""
    return BLOCKS[BlockId(block_id)]


def is_solid(block_id: int) -> bool:
    return block_type(block_id).solid


def resolve_drop(block_id: int) -> Drop | None:
    """Return the drop for mining *block_id*, or None if it drops nothing."""
    dropped = block_type(block_id).drops
    if dropped is None:
        return None
    return Drop(block=dropped, resource=RESOURCE_DROPS.get(dropped))
