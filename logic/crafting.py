"""logic/crafting.py — Recipe affordability and resolution.

Crafting is all-or-nothing: either every input is covered and the whole
recipe applies, or nothing changes.
"""

from __future__ import annotations

from components.inventory import Inventory
from components.recipes import Recipe


def can_craft(inventory: Inventory, recipe: Recipe) -> bool:
    """Check if inventory has all required inputs."""
    return inventory.has_all(recipe.inputs)


def craft(inventory: Inventory, recipe: Recipe) -> bool:
    """Consume inputs and produce outputs.  Returns False if insufficient."""
    if not can_craft(inventory, recipe):
        return False
    for kind, amount in recipe.inputs.items():
        inventory.consume_resource(kind, amount)
    for kind, amount in recipe.outputs.items():
        inventory.add_resource(kind, amount)
    return True
