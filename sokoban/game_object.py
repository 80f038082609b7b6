"""Objects placed on the level grid: the common base, walls, floors and boxes."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import replace
from pathlib import Path

import pygame

from .animation import Animation, SpriteSheetError
from .point import Point

log = logging.getLogger(__name__)

Clock = Callable[[], float]

IMAGE_DIR = Path("images")


class GameObject:
    """A drawable object at a grid position, optionally driven by an animation."""

    def __init__(self, x: int, y: int, tile_size: int, *, clock: Clock = time.perf_counter) -> None:
        self._position = Point(x, y)
        self.tile_size = tile_size
        self.texture: pygame.Surface | None = None
        self.texture_rect: pygame.Rect | None = None
        self.current_animation: Animation | None = None
        self._has_animation = False
        self._clock = clock
        self._last_tick = clock()

    @property
    def position(self) -> Point:
        return replace(self._position)

    @property
    def x(self) -> int:
        return self._position.x

    @property
    def y(self) -> int:
        return self._position.y

    @property
    def pixel_position(self) -> tuple[int, int]:
        """Top-left corner of the object on screen."""
        return self._position.x * self.tile_size, self._position.y * self.tile_size

    @property
    def has_animation(self) -> bool:
        return self._has_animation

    def set_position(self, x: int, y: int) -> None:
        self._position.x = x
        self._position.y = y

    def set_texture(self, texture: pygame.Surface | None) -> None:
        """Show a static texture; this turns animation updates off."""
        self.texture = texture
        self._has_animation = False

    def set_animation(self, animation: Animation | None) -> None:
        """Switch to animation, taking its texture and starting it."""
        self.current_animation = animation
        self._has_animation = animation is not None
        if animation is not None:
            self.texture = animation.texture
            animation.play()

    def update_animation(self) -> None:
        if not (self._has_animation and self.current_animation is not None):
            return
        now = self._clock()
        delta = now - self._last_tick
        self._last_tick = now
        self.current_animation.update(delta)
        self.texture_rect = self.current_animation.current_frame

    def update(self) -> None:
        self.update_animation()

    def draw(self, surface: pygame.Surface) -> None:
        if self.texture is None:
            return
        surface.blit(self.texture, self.pixel_position, self.texture_rect)


class Wall(GameObject):
    """An impassable tile."""


class Floor(GameObject):
    """An empty tile or a goal tile."""


class Box(GameObject):
    """A pushable crate with an idle and a short push animation."""

    def __init__(
        self,
        x: int,
        y: int,
        tile_size: int,
        *,
        image_dir: str | Path = IMAGE_DIR,
        clock: Clock = time.perf_counter,
    ) -> None:
        super().__init__(x, y, tile_size, clock=clock)
        self.idle_animation = Animation()
        self.push_animation = Animation()
        self._pushing = False
        self._image_dir = Path(image_dir)
        try:
            self.load_animations()
        except SpriteSheetError as exc:
            log.error("failed to load box animations: %s", exc)

    @property
    def is_pushing(self) -> bool:
        return self._pushing

    def load_animations(self) -> None:
        """Load both sprite sheets and start idling; raise SpriteSheetError on a missing sheet."""
        self.idle_animation.load_sprite_sheet(self._image_dir / "box_idle.png")
        self.idle_animation.add_frame(0, 0, 32, 32)
        self.idle_animation.frame_time = 0.5
        self.idle_animation.looping = True

        self.push_animation.load_sprite_sheet(self._image_dir / "box_push.png")
        self.push_animation.add_frame_row(0, 0, 32, 32, 3)
        self.push_animation.frame_time = 0.1
        self.push_animation.looping = False

        self.set_animation(self.idle_animation)

    def update(self) -> None:
        super().update()
        if self._pushing and self.push_animation.is_finished:
            self.stop_push()

    def start_push(self) -> None:
        if not self._pushing:
            self._pushing = True
            self.push_animation.stop()
            self.set_animation(self.push_animation)

    def stop_push(self) -> None:
        self._pushing = False
        self.set_animation(self.idle_animation)