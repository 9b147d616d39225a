"""components.recipes — Crafting recipe catalog.

Recipes are immutable and defined once at import.  ``Game.try_craft``
does the resolution; this module only describes them.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

# Unlock tags a recipe can grant in addition to its outputs.
UNLOCK_ORE_MINING = "ore_mining"


@dataclass(frozen=True)
class Recipe:
    """Immutable crafting recipe definition.

    Attributes:
        name: Recipe identifier, also shown on the crafting panel.
        inputs: Resource costs (resource_key -> quantity).
        outputs: Resources produced (resource_key -> quantity).
        description: One-line hint for the crafting panel.
        unlock: Optional ability tag granted on a successful craft.
    """

    name: str
    inputs: Mapping[str, int] = field(default_factory=dict)
    outputs: Mapping[str, int] = field(default_factory=dict)
    description: str = ""
    unlock: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Recipe name must be non-empty")
        for key, amount in {**self.inputs, **self.outputs}.items():
            if amount <= 0:
                raise ValueError(f"{self.name}: amount for {key!r} must be > 0, got {amount}")
        # Read-only views over private copies.
        object.__setattr__(self, "inputs", MappingProxyType(dict(self.inputs)))
        object.__setattr__(self, "outputs", MappingProxyType(dict(self.outputs)))


RECIPES: tuple[Recipe, ...] = (
    Recipe(
        name="Craft Planks",
        inputs={"wood": 1},
        outputs={"wood": 2},
        description="Turn logs into planks (counts as building material).",
    ),
    Recipe(
        name="Stone Pickaxe",
        inputs={"wood": 1, "stone": 2},
        outputs={"ore": 1},
        description="Unlock ore gathering.",
        unlock=UNLOCK_ORE_MINING,
    ),
)


def recipe_by_name(name: str) -> Recipe | None:
    for recipe in RECIPES:
        if recipe.name == name:
            return recipe
    return None
