"""
scenes/sandbox_scene.py — The one playable scene

Translates pygame events into Game calls and draws the result.

    KEYDOWN            → Game.handle_key   (E crafting, Space eat, WASD/arrows move)
    MOUSEBUTTONDOWN    → Game.handle_mouse (1 mine / craft, 3 place)
    MOUSEWHEEL         → Game.handle_wheel (cycle placement slot)
    F5                 → hot-reload data/tuning.toml

The crafting button bounds returned by the last draw are kept here and
passed into the next mouse click, never stored on the recipes.
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.app import App
from core.constants import MOUSE_PRIMARY, MOUSE_SECONDARY, TILE_SIZE
from core import tuning as tuning_mod
from logic.game import Game
from scenes.sandbox_draw import (
    draw_world, highlight_tile, draw_player, draw_hud, draw_inventory,
    draw_crafting,
)


class SandboxScene(Scene):
    def __init__(self, game: Game | None = None):
        self.game = game if game is not None else Game()
        self.button_bounds: dict[str, pygame.Rect] = {}

    def handle_event(self, event: pygame.event.Event, app: App):
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_F5:
                tuning_mod.reload()
                return
            self.game.handle_key(event.key)

        elif event.type == pygame.MOUSEBUTTONDOWN:
            # Wheel clicks arrive as buttons 4/5 too; MOUSEWHEEL covers them.
            if event.button in (MOUSE_PRIMARY, MOUSE_SECONDARY):
                x, y = event.pos
                self.game.handle_mouse(x, y, event.button, self.button_bounds)

        elif event.type == pygame.MOUSEWHEEL:
            # pygame: y > 0 is scroll up; Game treats positive as "down".
            if event.y:
                self.game.handle_wheel(-event.y)

    def update(self, dt: float, app: App):
        self.game.update()

    def draw(self, surface: pygame.Surface, app: App):
        game = self.game
        draw_world(surface, game)
        highlight_tile(surface, game.player.x, game.player.y)
        draw_player(surface, game.player)
        top = game.world.height * TILE_SIZE
        draw_hud(surface, app, game)
        draw_inventory(surface, game.player.inventory, top)
        self.button_bounds = draw_crafting(surface, app, game)
