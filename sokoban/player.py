"""The player character and its directional walk animations."""

from __future__ import annotations

import enum
import logging
import time
from pathlib import Path

from .animation import Animation, SpriteSheetError
from .game_object import IMAGE_DIR, Clock, GameObject

log = logging.getLogger(__name__)

IDLE_DELAY = 0.3


class PlayerDirection(enum.Enum):
    IDLE = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()


class Player(GameObject):
    """The worker, which walks one tile at a time and falls back to idle when still."""

    def __init__(
        self,
        x: int = 0,
        y: int = 0,
        tile_size: int = 40,
        *,
        image_dir: str | Path = IMAGE_DIR,
        clock: Clock = time.perf_counter,
    ) -> None:
        super().__init__(x, y, tile_size, clock=clock)
        self.idle_animation = Animation()
        self.walk_up_animation = Animation()
        self.walk_down_animation = Animation()
        self.walk_left_animation = Animation()
        self.walk_right_animation = Animation()
        self._direction = PlayerDirection.IDLE
        self._moving = False
        self._idle_timer_start: float | None = None
        self._image_dir = Path(image_dir)
        try:
            self.load_animations()
        except SpriteSheetError as exc:
            log.error("failed to load player animations: %s", exc)

    @property
    def is_moving(self) -> bool:
        return self._moving

    @property
    def direction(self) -> PlayerDirection:
        return self._direction

    def _animation_for(self, direction: PlayerDirection) -> Animation:
        return {
            PlayerDirection.IDLE: self.idle_animation,
            PlayerDirection.UP: self.walk_up_animation,
            PlayerDirection.DOWN: self.walk_down_animation,
            PlayerDirection.LEFT: self.walk_left_animation,
            PlayerDirection.RIGHT: self.walk_right_animation,
        }[direction]

    def load_animations(self) -> None:
        """Load all sheets and start idling; raise SpriteSheetError on a missing sheet."""
        self.idle_animation.load_sprite_sheet(self._image_dir / "player_idle.png")
        self.idle_animation.add_frame(0, 0, 60, 60)
        self.idle_animation.frame_time = 1.0
        self.idle_animation.looping = True

        walks = (
            (self.walk_down_animation, "player_walk_down.png"),
            (self.walk_up_animation, "player_walk_up.png"),
            (self.walk_left_animation, "player_walk_left.png"),
            (self.walk_right_animation, "player_walk_right.png"),
        )
        for animation, name in walks:
            animation.load_sprite_sheet(self._image_dir / name)
            animation.add_frame_row(0, 0, 60, 60, 4)
            animation.frame_time = 0.15
            animation.looping = True

        self.set_animation(self.idle_animation)

    def update(self) -> None:
        super().update()
        now = self._clock()
        if self._idle_timer_start is None:
            self._idle_timer_start = now
        if self._moving and now - self._idle_timer_start > IDLE_DELAY:
            self.set_moving(False)
            self._idle_timer_start = now

    def move(self, dx: int, dy: int) -> None:
        """Step by (dx, dy) and face the direction of travel."""
        self.set_position(self.x + dx, self.y + dy)
        if dx > 0:
            self.set_direction(PlayerDirection.RIGHT)
        elif dx < 0:
            self.set_direction(PlayerDirection.LEFT)
        elif dy > 0:
            self.set_direction(PlayerDirection.DOWN)
        elif dy < 0:
            self.set_direction(PlayerDirection.UP)
        self.set_moving(True)

    def set_direction(self, direction: PlayerDirection) -> None:
        if self._direction == direction and self._moving:
            return
        self._direction = direction
        self.set_animation(self._animation_for(direction))

    def set_moving(self, moving: bool) -> None:
        self._moving = moving
        if not moving:
            self.set_direction(PlayerDirection.IDLE)