"""core/constants.py — Shared constants used across the codebase.

Centralises magic numbers so there's exactly one place to change them.

Units
-----
Positions are integer **tile** coordinates.  Rendering converts to
pixels via ``TILE_SIZE``; no simulation code should reference pixels
except ``Game.screen_to_tile``.

Time is counted in **frames**.  The app runs at ``FPS`` frames per
second, so ``HUNGER_TICK = 9 * 60`` is nine real seconds.
"""

# ── World ───────────────────────────────────────────────────────────
WORLD_WIDTH = 24
WORLD_HEIGHT = 18

# ── Render ──────────────────────────────────────────────────────────
TILE_SIZE = 24
HUD_HEIGHT = 90          # px strip below the world for stats / hints
FPS = 60

# ── Frame intervals ─────────────────────────────────────────────────
DAY_LENGTH = 45 * 60     # frames per full day/night cycle
HUNGER_TICK = 9 * 60     # frames between hunger drains

# ── Player stats ────────────────────────────────────────────────────
STAT_MAX = 100
HUNGER_DRAIN = 5
STARVE_DAMAGE = 10
EAT_HUNGER = 20
EAT_HEALTH = 10
FORAGE_CHANCE = 0.3      # food bonus per successful mine

# ── Inventory ───────────────────────────────────────────────────────
INVENTORY_SLOTS = 6

# ── Mouse buttons (pygame numbering) ────────────────────────────────
MOUSE_PRIMARY = 1
MOUSE_SECONDARY = 3
