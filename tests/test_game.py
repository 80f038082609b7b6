import pygame
import pytest

from sokoban.game import Game, GameState
from sokoban.menu import MenuState

MAP = "#####\n#@$.#\n#####\n"


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


@pytest.fixture
def game(tmp_path):
    map_file = tmp_path / "map.txt"
    map_file.write_text(MAP, encoding="utf-8")
    return Game(map_file=map_file, image_dir=tmp_path, surface=pygame.Surface((800, 600)))


def start(game):
    game.handle_event(key(pygame.K_RETURN))
    game.update()


def test_starts_in_menu(game):
    assert game.state is GameState.MENU
    assert game.level is None
    assert game.running is True


def test_enter_starts_level(game):
    start(game)
    assert game.state is GameState.PLAYING
    assert (game.level.player.x, game.level.player.y) == (1, 1)


@pytest.mark.parametrize(
    "code, expected",
    [
        (pygame.K_RIGHT, (2, 1)),
        (pygame.K_d, (2, 1)),
        (pygame.K_LEFT, (0, 1)),
        (pygame.K_a, (0, 1)),
        (pygame.K_UP, (1, 0)),
        (pygame.K_w, (1, 0)),
        (pygame.K_DOWN, (1, 2)),
        (pygame.K_s, (1, 2)),
    ],
)
def test_movement_keys(game, code, expected):
    start(game)
    game.handle_event(key(code))
    player = game.level.player
    assert (player.x, player.y) == expected


def test_other_keys_do_not_move(game):
    start(game)
    game.handle_event(key(pygame.K_SPACE))
    assert (game.level.player.x, game.level.player.y) == (1, 1)


def test_escape_returns_to_menu(game):
    start(game)
    game.handle_event(key(pygame.K_ESCAPE))
    assert game.state is GameState.MENU
    assert game.menu.state is MenuState.MENU
    assert game.level is None


def test_quit_event_stops(game):
    game.handle_event(pygame.event.Event(pygame.QUIT))
    assert game.running is False


def test_menu_exit_stops(game):
    game.handle_event(key(pygame.K_ESCAPE))
    game.update()
    assert game.running is False


def test_missing_map_leaves_no_level(tmp_path):
    game = Game(
        map_file=tmp_path / "absent.txt",
        image_dir=tmp_path,
        surface=pygame.Surface((800, 600)),
    )
    start(game)
    assert game.state is GameState.PLAYING
    assert game.level is None


def test_render_menu_draws_background(game):
    game.render()
    assert game.surface.get_at((10, 10))[:3] == (50, 80, 120)


def test_render_level_clears_screen(game):
    start(game)
    game.render()
    assert game.surface.get_at((700, 500))[:3] == (0, 0, 0)