"""
core/app.py — Pygame application shell

Owns the window, the fixed-rate main loop and the one active Scene.
Rendering goes to a virtual surface the size of the world plus HUD and
is scaled to the window, so resizing and F11 fullscreen never change
game coordinates.

    app = App(title="Sandbox", width=576, height=522)
    app.set_scene(MyScene())
    app.run()
"""

from __future__ import annotations
import pygame
from core.constants import FPS
from core.scene import Scene
from core.tuning import get as _tun


class App:
    def __init__(self, title: str = "Sandbox", width: int = 576, height: int = 522):
        pygame.init()
        self._windowed_size = (width, height)
        # Virtual (design) resolution; all game rendering targets this.
        self._virtual_size = (width, height)
        self._render_surface = pygame.Surface((width, height))
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.running = True
        self.fullscreen = False
        self.fps = _tun("display", "fps", FPS)
        self.dt = 0.0

        self.scene: Scene | None = None

        self.font = pygame.font.SysFont("monospace", 14)
        self.font_sm = pygame.font.SysFont("monospace", 12)
        self.font_lg = pygame.font.SysFont("monospace", 16)

    @property
    def width(self) -> int:
        return self._virtual_size[0]

    @property
    def height(self) -> int:
        return self._virtual_size[1]

    # -- Scene --

    def set_scene(self, scene: Scene):
        """Make *scene* the active one, notifying the outgoing scene first."""
        if self.scene is not None:
            self.scene.on_exit(self)
        self.scene = scene
        scene.on_enter(self)

    # -- Coordinate mapping --

    def _remap_mouse_event(self, event: pygame.event.Event) -> pygame.event.Event:
        """Return a copy of *event* with .pos mapped to virtual coords."""
        if not hasattr(event, "pos"):
            return event
        sw, sh = self.screen.get_size()
        vw, vh = self._virtual_size
        vx = int(event.pos[0] * vw / sw)
        vy = int(event.pos[1] * vh / sh)
        attrs: dict = {}
        for attr in ("button", "buttons", "rel", "touch", "window"):
            if hasattr(event, attr):
                attrs[attr] = getattr(event, attr)
        attrs["pos"] = (vx, vy)
        return pygame.event.Event(event.type, **attrs)

    # -- Main loop --

    def run(self):
        while self.running:
            self.dt = self.clock.tick(self.fps) / 1000.0

            # Events
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                    self.toggle_fullscreen()
                elif event.type == pygame.VIDEORESIZE and not self.fullscreen:
                    self._windowed_size = (event.w, event.h)
                    self.screen = pygame.display.set_mode(
                        (event.w, event.h), pygame.RESIZABLE)
                elif self.scene:
                    if event.type in (pygame.MOUSEBUTTONDOWN,
                                      pygame.MOUSEBUTTONUP,
                                      pygame.MOUSEMOTION):
                        event = self._remap_mouse_event(event)
                    self.scene.handle_event(event, self)

            # One simulation step, then draw to the virtual surface
            if self.scene:
                self.scene.update(self.dt, self)
                self.scene.draw(self._render_surface, self)

            pygame.transform.scale(self._render_surface,
                                   self.screen.get_size(), self.screen)
            pygame.display.flip()

        pygame.quit()

    def toggle_fullscreen(self):
        """Switch between windowed and fullscreen (F11)."""
        self.fullscreen = not self.fullscreen
        if self.fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode(
                self._windowed_size, pygame.RESIZABLE)

    # -- Convenience --

    def draw_text(self, surface: pygame.Surface, text: str, x: int, y: int,
                  color=(255, 255, 255), font=None):
        """Quick text draw. Returns the rect for layout chaining."""
        f = font or self.font
        img = f.render(text, True, color)
        return surface.blit(img, (x, y))

    def draw_text_centered(self, surface: pygame.Surface, text: str,
                           cx: int, cy: int, color=(255, 255, 255), font=None):
        """Draw text centred on (cx, cy)."""
        f = font or self.font
        img = f.render(text, True, color)
        return surface.blit(img, img.get_rect(center=(cx, cy)))
