"""scenes/sandbox_draw.py — Rendering helpers for the sandbox scene.

All pure-draw functions live here so that SandboxScene.draw() stays thin.
Every function receives the data it needs as parameters and only reads
simulation state.  The one thing flowing back out is the crafting
panel's button geometry, which ``draw_crafting`` returns for the scene
to hand to ``Game.handle_mouse``.
"""

from __future__ import annotations
import pygame
from core.app import App
from core.constants import TILE_SIZE, HUD_HEIGHT, STAT_MAX
from components.blocks import BLOCKS, BlockId
from components.inventory import Inventory
from components.resources import display_name, swatch
from logic.game import Game
from logic.player import Player
from ui.helpers import blit_alpha_outline, blit_alpha_rect, draw_bar, draw_button, draw_panel, wrap_text

NIGHT = pygame.Color(30, 30, 40)
NOON = pygame.Color(255, 255, 255)
PLAYER_COLOR = (66, 135, 245)

SLOT_SIZE = 52
SLOT_STRIDE = 60

PANEL_W = 260
PANEL_H = 176
RECIPE_ROW_H = 64
BUTTON_W = 80
BUTTON_H = 28


# ── World ───────────────────────────────────────────────────────────

def draw_world(surface: pygame.Surface, game: Game):
    """Day/night ambient background, then every non-air tile on top."""
    surface.fill(NIGHT.lerp(NOON, game.daylight()))

    world = game.world
    for y in range(world.height):
        for x in range(world.width):
            block_id = world.get(x, y)
            if block_id == BlockId.AIR:
                continue
            rect = (x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, TILE_SIZE)
            blit_alpha_rect(surface, BLOCKS[block_id].rgba, rect)


def highlight_tile(surface: pygame.Surface, x: int, y: int):
    blit_alpha_outline(surface, (255, 255, 255, 150),
                       (x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, TILE_SIZE))


def draw_player(surface: pygame.Surface, player: Player):
    rect = pygame.Rect(player.x * TILE_SIZE, player.y * TILE_SIZE,
                       TILE_SIZE, TILE_SIZE)
    pygame.draw.rect(surface, PLAYER_COLOR, rect)


# ── HUD ─────────────────────────────────────────────────────────────

def draw_hud(surface: pygame.Surface, app: App, game: Game):
    top = game.world.height * TILE_SIZE
    width = surface.get_width()
    blit_alpha_rect(surface, (0, 0, 0, 150), (0, top, width, HUD_HEIGHT - 10))

    player = game.player
    app.draw_text(surface, f"Health: {player.health}", 10, top + 6)
    draw_bar(surface, 10, top + 23, 120, 4, player.health / STAT_MAX)
    app.draw_text(surface, f"Hunger: {player.hunger}", 10, top + 28)
    draw_bar(surface, 10, top + 45, 120, 4, player.hunger / STAT_MAX)

    app.draw_text(surface, "Resources:", 160, top + 8)
    offset = 0
    for key, amount in player.inventory.resources.items():
        pygame.draw.rect(surface, swatch(key), (160 + offset, top + 30, 14, 14))
        app.draw_text(surface, f"{display_name(key)}: {amount}",
                      178 + offset, top + 28, font=app.font_sm)
        offset += 100

    latest = game.log.latest()
    if latest is not None:
        app.draw_text(surface, latest["msg"], 10, top + 54,
                      (220, 220, 160), font=app.font_sm)

    app.draw_text_centered(
        surface,
        "Scroll wheel to cycle blocks. E to craft. Click to mine/Place.",
        width // 2, surface.get_height() - 10, font=app.font_sm)


def draw_inventory(surface: pygame.Surface, inventory: Inventory, top: int):
    """Row of placement slots along the bottom edge of the world."""
    base_x = 12
    base_y = top - SLOT_SIZE - 4
    for i, slot in enumerate(inventory.slots):
        rect = pygame.Rect(base_x + i * SLOT_STRIDE, base_y, SLOT_SIZE, SLOT_SIZE)
        alpha = 150 if i == inventory.selected_index else 80
        blit_alpha_rect(surface, (0, 0, 0, alpha), rect, radius=6)
        pygame.draw.rect(surface, (255, 255, 255), rect, 1, border_radius=6)
        if slot.item is not None:
            inner = rect.inflate(-16, -16)
            blit_alpha_rect(surface, BLOCKS[slot.item].rgba, inner, radius=4)


# ── Crafting ────────────────────────────────────────────────────────

def draw_crafting(surface: pygame.Surface, app: App,
                  game: Game) -> dict[str, pygame.Rect]:
    """Draw the crafting panel.  Returns ``{recipe name: button Rect}``."""
    if not game.crafting_open:
        return {}

    sw, sh = surface.get_size()
    panel = pygame.Rect(sw // 2 - PANEL_W // 2, sh // 2 - PANEL_H // 2,
                        PANEL_W, PANEL_H)
    draw_panel(surface, panel)
    app.draw_text_centered(surface, "Crafting", panel.centerx, panel.y + 18,
                           font=app.font_lg)

    bounds: dict[str, pygame.Rect] = {}
    for index, recipe in enumerate(game.recipes):
        ry = panel.y + 40 + index * RECIPE_ROW_H
        app.draw_text(surface, recipe.name, panel.x + 12, ry)
        desc_y = ry + BUTTON_H + 2
        for line in wrap_text(recipe.description, panel.width - 24,
                              lambda s: app.font_sm.size(s)[0]):
            app.draw_text(surface, line, panel.x + 12, desc_y,
                          (200, 200, 200), font=app.font_sm)
            desc_y += app.font_sm.get_linesize()
        button = pygame.Rect(panel.right - BUTTON_W - 12, ry, BUTTON_W, BUTTON_H)
        bounds[recipe.name] = draw_button(surface, app, button, "Craft",
                                          enabled=game.can_craft(recipe))
    return bounds
