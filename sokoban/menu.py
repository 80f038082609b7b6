"""The title menu with its Play and Exit buttons."""

from __future__ import annotations

import enum
import logging
import os
from pathlib import Path

import pygame

from .game_object import IMAGE_DIR

log = logging.getLogger(__name__)

SCREEN_SIZE = (800, 600)
FALLBACK_BACKGROUND = (50, 80, 120)

PLAY_COLOR = (70, 130, 180, 200)
PLAY_HOVER_COLOR = (100, 160, 210, 200)
EXIT_COLOR = (180, 70, 70, 200)
EXIT_HOVER_COLOR = (210, 100, 100, 200)
OUTLINE_COLOR = (255, 255, 255)
TEXT_COLOR = (255, 255, 255)
OUTLINE_THICKNESS = 3
FONT_SIZE = 24


class MenuState(enum.Enum):
    MENU = enum.auto()
    PLAYING = enum.auto()
    EXIT = enum.auto()


class Menu:
    """Tracks the selected button and the choice made with keyboard or mouse."""

    def __init__(
        self,
        *,
        background_path: str | os.PathLike[str] = IMAGE_DIR / "menu.jpg",
        font_path: str | os.PathLike[str] | None = None,
    ) -> None:
        self.background_path = Path(background_path)
        self.font_path = font_path
        self.state = MenuState.MENU
        self.selected_item = 0
        self.play_button = pygame.Rect(300, 200, 200, 60)
        self.exit_button = pygame.Rect(300, 300, 200, 60)
        self.play_color = PLAY_COLOR
        self.exit_color = EXIT_COLOR
        self.background: pygame.Surface | None = None
        self._play_text: pygame.Surface | None = None
        self._exit_text: pygame.Surface | None = None
        self._play_text_pos = (0, 0)
        self._exit_text_pos = (0, 0)

    def load_resources(self) -> None:
        """Load the background and font and render the button labels."""
        try:
            image = pygame.image.load(os.fspath(self.background_path))
        except (pygame.error, OSError):
            log.error("failed to load menu background: %s", self.background_path)
            image = pygame.Surface(SCREEN_SIZE)
            image.fill(FALLBACK_BACKGROUND)
        if image.get_width() > 0 and image.get_height() > 0:
            image = pygame.transform.scale(image, SCREEN_SIZE)
        self.background = image

        pygame.font.init()
        font = None
        if self.font_path is not None:
            try:
                font = pygame.font.Font(os.fspath(self.font_path), FONT_SIZE)
            except (pygame.error, OSError):
                log.error("failed to load font %s, using default font", self.font_path)
        if font is None:
            font = pygame.font.Font(None, FONT_SIZE)
        font.set_bold(True)

        self._play_text = font.render("PLAY", True, TEXT_COLOR)
        self._exit_text = font.render("EXIT", True, TEXT_COLOR)
        self._play_text_pos = (400 - self._play_text.get_width() / 2, 215)
        self._exit_text_pos = (400 - self._exit_text.get_width() / 2, 315)

    @staticmethod
    def _hit(button: pygame.Rect, pos: tuple[int, int]) -> bool:
        # The clickable area includes the outline drawn around the button.
        bounds = button.inflate(2 * OUTLINE_THICKNESS, 2 * OUTLINE_THICKNESS)
        return bounds.collidepoint(pos)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self._hit(self.play_button, event.pos):
                self.state = MenuState.PLAYING
            elif self._hit(self.exit_button, event.pos):
                self.state = MenuState.EXIT

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_UP:
                self.selected_item = (self.selected_item - 1) % 2
            elif event.key == pygame.K_DOWN:
                self.selected_item = (self.selected_item + 1) % 2
            elif event.key == pygame.K_RETURN:
                self.state = MenuState.PLAYING if self.selected_item == 0 else MenuState.EXIT
            elif event.key == pygame.K_ESCAPE:
                self.state = MenuState.EXIT

        if event.type == pygame.MOUSEMOTION:
            if self._hit(self.play_button, event.pos):
                self.selected_item = 0
                self.play_color = PLAY_HOVER_COLOR
            else:
                self.play_color = PLAY_COLOR
            if self._hit(self.exit_button, event.pos):
                self.selected_item = 1
                self.exit_color = EXIT_HOVER_COLOR
            else:
                self.exit_color = EXIT_COLOR

    def update(self) -> None:
        """Highlight the selected button."""
        if self.selected_item == 0:
            self.play_color = PLAY_HOVER_COLOR
            self.exit_color = EXIT_COLOR
        else:
            self.play_color = PLAY_COLOR
            self.exit_color = EXIT_HOVER_COLOR

    def _draw_button(self, surface: pygame.Surface, rect: pygame.Rect, color) -> None:
        fill = pygame.Surface(rect.size, pygame.SRCALPHA)
        fill.fill(color)
        surface.blit(fill, rect.topleft)
        outline = rect.inflate(2 * OUTLINE_THICKNESS, 2 * OUTLINE_THICKNESS)
        pygame.draw.rect(surface, OUTLINE_COLOR, outline, OUTLINE_THICKNESS)

    def draw(self, surface: pygame.Surface) -> None:
        if self.background is not None:
            surface.blit(self.background, (0, 0))
        self._draw_button(surface, self.play_button, self.play_color)
        self._draw_button(surface, self.exit_button, self.exit_color)
        if self._play_text is not None:
            surface.blit(self._play_text, self._play_text_pos)
        if self._exit_text is not None:
            surface.blit(self._exit_text, self._exit_text_pos)

    def reset(self) -> None:
        self.state = MenuState.MENU
        self.selected_item = 0