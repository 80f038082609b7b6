"""Frame-based sprite sheet animation."""

from __future__ import annotations

import os

import pygame


class SpriteSheetError(OSError):
    """Raised when a sprite sheet image cannot be loaded."""


class Animation:
    """A sequence of rectangles cut from one sprite sheet, advanced by elapsed time."""

    def __init__(self, frame_time: float = 0.1, looping: bool = True) -> None:
        self.texture: pygame.Surface | None = None
        self.frames: list[pygame.Rect] = []
        self.frame_index = 0
        self.frame_time = frame_time
        self.elapsed = 0.0
        self.looping = looping
        self._playing = False

    def load_sprite_sheet(self, filename: str | os.PathLike[str]) -> None:
        """Load the sheet image; raise SpriteSheetError when it cannot be read."""
        try:
            self.texture = pygame.image.load(os.fspath(filename))
        except (pygame.error, OSError) as exc:
            raise SpriteSheetError(f"failed to load sprite sheet: {filename}") from exc

    def add_frame(self, x: int, y: int, width: int, height: int) -> None:
        self.frames.append(pygame.Rect(x, y, width, height))

    def add_frame_row(
        self,
        start_x: int,
        start_y: int,
        frame_width: int,
        frame_height: int,
        frame_count: int,
    ) -> None:
        """Add frame_count frames laid out left to right from (start_x, start_y)."""
        for i in range(frame_count):
            self.add_frame(start_x + i * frame_width, start_y, frame_width, frame_height)

    def play(self) -> None:
        self._playing = True

    def pause(self) -> None:
        self._playing = False

    def stop(self) -> None:
        """Halt playback and rewind to the first frame."""
        self._playing = False
        self.frame_index = 0
        self.elapsed = 0.0

    def update(self, delta_time: float) -> None:
        """Advance by delta_time seconds, moving at most one frame."""
        if not self._playing or not self.frames:
            return
        self.elapsed += delta_time
        if self.elapsed < self.frame_time:
            return
        self.elapsed = 0.0
        self.frame_index += 1
        if self.frame_index >= len(self.frames):
            if self.looping:
                self.frame_index = 0
            else:
                self.frame_index = len(self.frames) - 1
                self._playing = False

    @property
    def current_frame(self) -> pygame.Rect:
        """The rectangle of the current frame, or an empty one when there are no frames."""
        if not self.frames:
            return pygame.Rect(0, 0, 0, 0)
        return pygame.Rect(self.frames[self.frame_index])

    @property
    def is_playing(self) -> bool:
        return self._playing

    @property
    def is_finished(self) -> bool:
        """True once a non-looping animation has stopped on its last frame."""
        return (
            not self.looping
            and bool(self.frames)
            and self.frame_index >= len(self.frames) - 1
            and not self._playing
        )