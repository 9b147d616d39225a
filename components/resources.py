"""components.resources — Resource kinds tracked by inventory counters."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class ResourceKind:
    key: str
    name: str
    color: tuple


RESOURCES: dict[str, ResourceKind] = {
    r.key: r for r in (
        ResourceKind("wood",  "Wood",    (166, 126, 86)),
        ResourceKind("stone", "Stone",   (110, 110, 110)),
        ResourceKind("ore",   "Ore",     (180, 170, 200)),
        ResourceKind("food",  "Berries", (190, 56, 56)),
    )
}

FOOD = "food"


def display_name(key: str) -> str:
    """Human-readable name for a resource key, falling back to the key itself."""
    kind = RESOURCES.get(key)
    return kind.name if kind else key


def swatch(key: str) -> tuple:
    kind = RESOURCES.get(key)
    return kind.color if kind else (200, 200, 200)
