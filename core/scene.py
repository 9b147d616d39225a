"""
core/scene.py — Scene interface

The App drives its active scene once per frame:
every pending pygame event goes to ``handle_event``, then ``update``
advances the simulation one frame, then ``draw`` paints the result.

The sandbox has one scene, ``scenes.sandbox_scene``.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    def on_enter(self, app: App):
        """Called when this scene becomes active (``App.set_scene``)."""

    def on_exit(self, app: App):
        """Called when another scene replaces this one."""

    def handle_event(self, event: pygame.event.Event, app: App):
        """React to one input event delivered between frames."""

    def update(self, dt: float, app: App):
        """Advance exactly one frame.  *dt* is wall-clock seconds."""

    def draw(self, surface: pygame.Surface, app: App):
        """Paint the current state onto *surface*."""
