"""The game loop: switches between the menu and a level."""

from __future__ import annotations

import argparse
import enum
import logging
import os
import sys
from pathlib import Path

import pygame

from .game_object import IMAGE_DIR
from .level import Level
from .menu import SCREEN_SIZE, Menu, MenuState

log = logging.getLogger(__name__)

FRAME_RATE = 60
DEFAULT_MAP = "map1.txt"
TILE_SIZE = 32


class GameState(enum.Enum):
    MENU = enum.auto()
    PLAYING = enum.auto()
    PAUSED = enum.auto()
    GAME_OVER = enum.auto()


MOVES = {
    pygame.K_UP: (0, -1),
    pygame.K_w: (0, -1),
    pygame.K_DOWN: (0, 1),
    pygame.K_s: (0, 1),
    pygame.K_LEFT: (-1, 0),
    pygame.K_a: (-1, 0),
    pygame.K_RIGHT: (1, 0),
    pygame.K_d: (1, 0),
}


class Game:
    """Owns the screen, the menu and the level being played."""

    def __init__(
        self,
        *,
        map_file: str | os.PathLike[str] = DEFAULT_MAP,
        tile_size: int = TILE_SIZE,
        image_dir: str | Path = IMAGE_DIR,
        surface: pygame.Surface | None = None,
    ) -> None:
        if surface is None:
            surface = pygame.display.set_mode(SCREEN_SIZE)
            pygame.display.set_caption("Sokoban")
        self.surface = surface
        self.map_file = map_file
        self.tile_size = tile_size
        self.image_dir = Path(image_dir)
        self.menu = Menu(background_path=self.image_dir / "menu.jpg")
        self.menu.load_resources()
        self.level: Level | None = None
        self.state = GameState.MENU
        self.running = True

    def run(self) -> None:
        clock = pygame.time.Clock()
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
            self.update()
            self.render()
            pygame.display.flip()
            clock.tick(FRAME_RATE)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False

        if self.state is GameState.MENU:
            self.menu.handle_event(event)
        elif self.state is GameState.PLAYING and event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.state = GameState.MENU
                self.menu.state = MenuState.MENU
                self._cleanup()
            elif self.level is not None and self.level.player is not None:
                step = MOVES.get(event.key)
                if step is not None:
                    self.level.player.move(*step)

    def update(self) -> None:
        if self.state is GameState.MENU:
            self.menu.update()
            if self.menu.state is MenuState.PLAYING:
                self.state = GameState.PLAYING
                self._start_level()
            elif self.menu.state is MenuState.EXIT:
                self.running = False
        elif self.state is GameState.PLAYING and self.level is not None:
            self.level.update()

    def render(self) -> None:
        self.surface.fill((0, 0, 0))
        if self.state is GameState.MENU:
            self.menu.draw(self.surface)
        elif self.state is GameState.PLAYING and self.level is not None:
            self.level.draw(self.surface)

    def _start_level(self) -> None:
        self._cleanup()
        try:
            self.level = Level(self.map_file, self.tile_size, image_dir=self.image_dir)
        except OSError as exc:
            log.error("cannot open map file %s: %s", self.map_file, exc)
            return
        log.info("game initialized")

    def _cleanup(self) -> None:
        self.level = None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="sokoban", description="Push the boxes onto the goals.")
    parser.add_argument("--map", default=DEFAULT_MAP, help="level file to play")
    parser.add_argument("--images", default=str(IMAGE_DIR), help="directory holding the images")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    pygame.init()
    try:
        Game(map_file=args.map, image_dir=args.images).run()
    except Exception as exc:  # report any failure and exit with an error status
        print(f"Error: {exc}", file=sys.stderr)
        return -1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())