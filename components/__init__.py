"""components — Plain data and static catalogs, organised by domain.

Submodules
----------
blocks      BlockId, BlockType, Drop, BLOCKS, resolve_drop
resources   ResourceKind, RESOURCES
recipes     Recipe, RECIPES
inventory   Inventory, Slot
event_log   EventLog

All public names are re-exported here so code can simply do
``from components import BlockId``.
"""

# ── Blocks ───────────────────────────────────────────────────────────
from components.blocks import (
    BlockId, BlockType, Drop, BLOCKS, RESOURCE_DROPS,
    block_type, is_solid, resolve_drop,
)

# ── Resources ────────────────────────────────────────────────────────
from components.resources import ResourceKind, RESOURCES, FOOD

# ── Recipes ──────────────────────────────────────────────────────────
from components.recipes import Recipe, RECIPES, UNLOCK_ORE_MINING, recipe_by_name

# ── Inventory ────────────────────────────────────────────────────────
from components.inventory import Inventory, Slot

# ── Logging ──────────────────────────────────────────────────────────
from components.event_log import EventLog

__all__ = [
    # blocks
    "BlockId", "BlockType", "Drop", "BLOCKS", "RESOURCE_DROPS",
    "block_type", "is_solid", "resolve_drop",
    # resources
    "ResourceKind", "RESOURCES", "FOOD",
    # recipes
    "Recipe", "RECIPES", "UNLOCK_ORE_MINING", "recipe_by_name",
    # inventory
    "Inventory", "Slot",
    # logging
    "EventLog",
]
