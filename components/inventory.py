"""components.inventory — Resource counters and block-placement slots."""

from __future__ import annotations
from dataclasses import dataclass, field

from core.constants import INVENTORY_SLOTS
from components.blocks import BlockId


@dataclass
class Slot:
    item: BlockId | None = None
    amount: int = 0


@dataclass
class Inventory:
    """Owned by exactly one Player.

    ``resources`` maps resource key -> count.  Keys appear lazily on the
    first credit; a missing key reads as zero.

    ``slots`` is a fixed-length row of placeable blocks with a cursor
    (``selected_index``) that the mouse wheel cycles.
    """

    resources: dict[str, int] = field(default_factory=dict)
    slots: list[Slot] = field(
        default_factory=lambda: [Slot() for _ in range(INVENTORY_SLOTS)])
    selected_index: int = 0

    # ── resource counters ────────────────────────────────────────────

    def add_resource(self, kind: str, amount: int = 1) -> bool:
        if amount <= 0:
            return False
        self.resources[kind] = self.resources.get(kind, 0) + amount
        return True

    def consume_resource(self, kind: str, amount: int) -> bool:
        """Debit *amount* of *kind*.  Returns False (and changes nothing)
        if there isn't enough or *amount* isn't positive."""
        current = self.resources.get(kind, 0)
        if amount <= 0 or current < amount:
            return False
        self.resources[kind] = current - amount
        return True

    def count(self, kind: str) -> int:
        return self.resources.get(kind, 0)

    def has_all(self, requirements: dict[str, int]) -> bool:
        """True if every requirement is covered at the same time."""
        return all(self.count(kind) >= needed
                   for kind, needed in requirements.items())

    # ── placement slots ──────────────────────────────────────────────

    def toggle_selection(self, direction: int) -> None:
        n = len(self.slots)
        self.selected_index = (self.selected_index + direction) % n

    def set_block(self, block: BlockId) -> None:
        slot = self.slots[self.selected_index]
        slot.item = block
        slot.amount = 1

    def selected_block(self) -> BlockId | None:
        return self.slots[self.selected_index].item
