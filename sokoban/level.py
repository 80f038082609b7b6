"""A level: the grid of walls, floors, boxes and the player, read from a text map."""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path

import pygame

from .game_object import IMAGE_DIR, Box, Clock, Floor, Wall
from .player import Player

log = logging.getLogger(__name__)

WALL = "#"
PLAYER = "@"
BOX = "$"
FLOOR_TILES = frozenset(". ")


def _load_texture(path: Path) -> pygame.Surface | None:
    try:
        return pygame.image.load(os.fspath(path))
    except (pygame.error, OSError):
        log.error("failed to load texture: %s", path)
        return None


class Level:
    """Objects laid out from a map file, where '#' is a wall, '@' the player,
    '$' a box and '.' or ' ' a floor tile."""

    def __init__(
        self,
        filename: str | os.PathLike[str],
        tile_size: int = 32,
        *,
        image_dir: str | Path = IMAGE_DIR,
        clock: Clock = time.perf_counter,
    ) -> None:
        self.tile_size = tile_size
        self.walls: list[Wall] = []
        self.floors: list[Floor] = []
        self.boxes: list[Box] = []
        self._player: Player | None = None

        image_dir = Path(image_dir)
        wall_texture = _load_texture(image_dir / "wall.png")
        player_texture = _load_texture(image_dir / "worker.png")
        floor_texture = _load_texture(image_dir / "floor.png")
        box_texture = _load_texture(image_dir / "box.png")

        text = Path(filename).read_text(encoding="utf-8")
        for y, line in enumerate(text.splitlines()):
            for x, char in enumerate(line):
                if char == WALL:
                    wall = Wall(x, y, tile_size, clock=clock)
                    wall.set_texture(wall_texture)
                    self.walls.append(wall)
                elif char == PLAYER:
                    self._player = Player(x, y, tile_size, image_dir=image_dir, clock=clock)
                    self._player.set_texture(player_texture)
                elif char == BOX:
                    box = Box(x, y, tile_size, image_dir=image_dir, clock=clock)
                    box.set_texture(box_texture)
                    self.boxes.append(box)
                elif char in FLOOR_TILES:
                    floor = Floor(x, y, tile_size, clock=clock)
                    floor.set_texture(floor_texture)
                    self.floors.append(floor)

    @property
    def player(self) -> Player | None:
        return self._player

    def update(self) -> None:
        """Advance the animated objects: the player and the boxes."""
        if self._player is not None:
            self._player.update()
        for box in self.boxes:
            box.update()

    def draw(self, surface: pygame.Surface) -> None:
        """Draw floors, then walls, then boxes, then the player on top."""
        for floor in self.floors:
            floor.draw(surface)
        for wall in self.walls:
            wall.draw(surface)
        for box in self.boxes:
            box.draw(surface)
        if self._player is not None:
            self._player.draw(surface)