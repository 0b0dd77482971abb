"""The game loop, its pygame canvas and the command that starts it."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from enum import Enum, auto
from pathlib import Path

import pygame

from .keyboard import Keyboard
from .player import KEY_LEFT, KEY_RIGHT, KEY_SPACE
from .stage import Stage
from .world import WIN_HEIGHT, WIN_WIDTH, Canvas, World

KEY_ESCAPE = 0x01
TITLE_IMAGE_PATH = "TITLE.png"
WINDOW_TITLE = "TITLE"
BACKGROUND_COLOR = (0, 0, 0)
FRAME_WAIT_MS = 16
DEFAULT_ASSET_DIR = "Aseets"
OPAQUE = 255

_PYGAME_KEYS = {
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_SPACE: KEY_SPACE,
    pygame.K_ESCAPE: KEY_ESCAPE,
}


class GameState(Enum):
    """Which screen the game is on."""

    START = auto()
    PLAY = auto()
    GAMEOVER = auto()


class Game:
    """One run of the game, advanced a frame at a time."""

    def __init__(self) -> None:
        self.world = World()
        self.keyboard = Keyboard()
        self.state = GameState.START
        self.stage = Stage(self.world, self.keyboard)
        self._prev_time: int | None = None

    def step(self, now_ms: int, pressed: Iterable[int], canvas: Canvas) -> bool:
        """Run one frame; return False once escape is held."""
        keys = set(pressed)
        self.keyboard.update(keys)
        prev = now_ms if self._prev_time is None else self._prev_time
        self.world.delta_time = (now_ms - prev) / 1000.0

        if self.state is GameState.START:
            canvas.draw_image(TITLE_IMAGE_PATH, 0, 0, WIN_WIDTH, WIN_HEIGHT, OPAQUE)
            if KEY_SPACE in keys:
                self.state = GameState.PLAY
                self.world.flush()
                self.world.update_all()
                self.world.draw_all(canvas)
                self.world.sweep()

        self._prev_time = now_ms
        return KEY_ESCAPE not in keys


class PygameCanvas:
    """Draws images from an asset directory onto a pygame surface."""

    def __init__(self, surface: pygame.Surface, asset_dir: str | Path = ".") -> None:
        self.surface = surface
        self.asset_dir = Path(asset_dir)
        self._images: dict[str, pygame.Surface | None] = {}

    def _image(self, path: str) -> pygame.Surface | None:
        if path not in self._images:
            try:
                self._images[path] = pygame.image.load(str(self.asset_dir / path))
            except (pygame.error, OSError):
                self._images[path] = None
        return self._images[path]

    def _blit(self, image: pygame.Surface, x1: float, y1: float, x2: float, y2: float,
              alpha: int) -> None:
        width, height = round(x2 - x1), round(y2 - y1)
        if width <= 0 or height <= 0:
            return
        scaled = pygame.transform.scale(image, (width, height))
        scaled.set_alpha(alpha)
        self.surface.blit(scaled, (round(x1), round(y1)))

    def draw_image(self, path: str, x1: float, y1: float, x2: float, y2: float,
                   alpha: int = OPAQUE) -> None:
        """Draw an image stretched into the box; missing images draw nothing."""
        image = self._image(path)
        if image is not None:
            self._blit(image, x1, y1, x2, y2, alpha)

    def draw_frame(self, path: str, frame: int, columns: int, size: int,
                   x1: float, y1: float, x2: float, y2: float) -> None:
        """Draw one square cell of a sprite sheet; cells off the sheet draw nothing."""
        sheet = self._image(path)
        if sheet is None or frame < 0:
            return
        row, col = divmod(frame, columns)
        cell = pygame.Rect(col * size, row * size, size, size)
        if not sheet.get_rect().contains(cell):
            return
        self._blit(sheet.subsurface(cell), x1, y1, x2, y2, OPAQUE)


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the game until escape or the window closes."""
    parser = argparse.ArgumentParser(prog="invaders", description="Play the invaders game.")
    parser.add_argument("--assets", default=DEFAULT_ASSET_DIR,
                        help="directory that holds the game's images")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        surface = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        canvas = PygameCanvas(surface, args.assets)
        game = Game()
        while True:
            surface.fill(BACKGROUND_COLOR)
            state = pygame.key.get_pressed()
            pressed = {code for key, code in _PYGAME_KEYS.items() if state[key]}
            keep_going = game.step(pygame.time.get_ticks(), pressed, canvas)
            pygame.display.flip()
            pygame.time.wait(FRAME_WAIT_MS)
            closed = any(event.type == pygame.QUIT for event in pygame.event.get())
            if closed or not keep_going:
                break
    finally:
        pygame.quit()
    return 0