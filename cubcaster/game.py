"""The game window, its input handling and the command-line entry point."""

from __future__ import annotations

import struct
import sys
from pathlib import Path
from typing import Callable, Sequence

from .errors import CubError, MapError
from .mapgrid import Scene, load_scene
from .player import MouseLook, Player
from .render import Frame, GunAnimation, render_frame
from .textures import TextureSet, load_textures

WIDTH = 1080
HEIGHT = 720
TITLE = "cubcaster"
FPS = 60
_OPAQUE = 0xFF000000


class Game:
    """A running scene: the map, the player, the textures and the frame."""

    def __init__(
        self,
        scene: Scene,
        textures: TextureSet,
        width: int = WIDTH,
        height: int = HEIGHT,
    ) -> None:
        types = scene.types
        if types.floor_color is None or types.ceiling_color is None:
            raise MapError("Invalid map(missing types)")
        self.scene = scene
        self.grid = scene.grid
        self.textures = textures
        self.width = width
        self.height = height
        self.player = Player.from_grid(self.grid)
        self.floor = types.floor_color.to_int()
        self.ceiling = types.ceiling_color.to_int()
        self.frame = Frame(width, height)
        self.gun_anim = GunAnimation()
        self.mouse = MouseLook()
        self.running = True
        self._actions: dict[str, Callable[[], None]] = {
            "escape": self._quit,
            "space": self.gun_anim.fire,
            "e": lambda: self.player.toggle_door(self.grid),
            "w": lambda: self.player.move_forward(self.grid),
            "s": lambda: self.player.move_back(self.grid),
            "d": lambda: self.player.move_right(self.grid),
            "a": lambda: self.player.move_left(self.grid),
            "right": self.player.rotate_left,
            "left": self.player.rotate_right,
        }

    def _quit(self) -> None:
        self.running = False

    def handle_key(self, key: str) -> None:
        """React to a key press given by its name; unknown keys are ignored."""
        action = self._actions.get(key.lower())
        if action is not None:
            action()

    def handle_mouse(self, x: int) -> None:
        """Turn the view as the mouse moves to horizontal position ``x``."""
        self.mouse.update(x, self.player)

    def redraw(self) -> Frame:
        """Render the current view into the frame and return it."""
        render_frame(
            self.frame,
            self.grid,
            self.player,
            self.textures,
            self.gun_anim,
            self.ceiling,
            self.floor,
        )
        return self.frame

    def run(self) -> None:
        """Open the window and run the event loop until the player quits."""
        import pygame

        pygame.init()
        try:
            screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(TITLE)
            pygame.key.set_repeat(200, 30)
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self._quit()
                    elif event.type == pygame.KEYDOWN:
                        self.handle_key(pygame.key.name(event.key))
                    elif event.type == pygame.MOUSEMOTION:
                        self.handle_mouse(event.pos[0])
                if not self.running:
                    break
                frame = self.redraw()
                data = struct.pack(
                    f">{len(frame.pixels)}I", *(_OPAQUE | p for p in frame.pixels)
                )
                surface = pygame.image.frombuffer(data, (frame.width, frame.height), "ARGB")
                screen.blit(surface, (0, 0))
                pygame.display.flip()
                clock.tick(FPS)
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Load the scene named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Invalid count of arguments", file=sys.stderr)
        return 1
    try:
        scene = load_scene(args[0])
        textures = load_textures(scene.types, Path.cwd())
        game = Game(scene, textures)
    except CubError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())