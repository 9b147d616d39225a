"""logic/bindings.py — Key bindings.

Raw pygame key codes are mapped to action names here and nowhere else.
Movement is resolved in table order, so when a code appears under more
than one direction the first one listed wins.

Actions:  move_up  move_down  move_left  move_right  craft  eat
Editable at runtime — ``Game`` reads the table on every key press.
"""

from __future__ import annotations
import pygame


KEY_BINDINGS: dict[str, list[int]] = {
    "move_up":    [pygame.K_w, pygame.K_UP],
    "move_down":  [pygame.K_s, pygame.K_DOWN],
    "move_left":  [pygame.K_a, pygame.K_LEFT],
    "move_right": [pygame.K_d, pygame.K_RIGHT],
    "craft":      [pygame.K_e],        # toggles the crafting menu
    "eat":        [pygame.K_SPACE],
}

# Checked in this order; first match wins.
MOVES: list[tuple[str, tuple[int, int]]] = [
    ("move_up",    (0, -1)),
    ("move_down",  (0, 1)),
    ("move_left",  (-1, 0)),
    ("move_right", (1, 0)),
]


def bound_to(action: str, key_code: int) -> bool:
    return key_code in KEY_BINDINGS.get(action, ())


def direction_for(key_code: int) -> tuple[int, int] | None:
    """The single cardinal step bound to *key_code*, or None."""
    for action, step in MOVES:
        if bound_to(action, key_code):
            return step
    return None
