"""
main.py — Bootstrap

1. Load tuning constants
2. Create the game session (world + player)
3. Open a window sized to the world plus the HUD strip
4. Activate the sandbox scene
5. Run
"""

from core import tuning
from core.app import App
from core.constants import TILE_SIZE, HUD_HEIGHT
from logic.game import Game
from scenes.sandbox_scene import SandboxScene


def main():
    tuning.load()

    game = Game()
    width = game.world.width * TILE_SIZE
    height = game.world.height * TILE_SIZE + HUD_HEIGHT

    app = App(title="Block Survival", width=width, height=height)
    app.set_scene(SandboxScene(game))
    app.run()


if __name__ == "__main__":
    main()
