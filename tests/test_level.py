import pygame
import pytest

from sokoban.level import Level
from sokoban.player import PlayerDirection

MAP = "#####\n#@$.#\n#####\n"


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def map_file(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text(MAP, encoding="utf-8")
    return path


def _save_tile(path, color, size=32):
    tile = pygame.Surface((size, size))
    tile.fill(color)
    pygame.image.save(tile, str(path))


def test_layout_is_read_from_map(map_file, tmp_path):
    level = Level(map_file, 32, image_dir=tmp_path)
    assert len(level.walls) == 12
    assert [(b.x, b.y) for b in level.boxes] == [(2, 1)]
    assert [(f.x, f.y) for f in level.floors] == [(3, 1)]
    assert (level.player.x, level.player.y) == (1, 1)


def test_space_is_floor(tmp_path):
    path = tmp_path / "m.txt"
    path.write_text("# #\n", encoding="utf-8")
    level = Level(path, image_dir=tmp_path)
    assert [(f.x, f.y) for f in level.floors] == [(1, 0)]
    assert level.player is None


def test_tile_size_sets_pixel_positions(map_file, tmp_path):
    level = Level(map_file, 16, image_dir=tmp_path)
    assert level.player.pixel_position == (16, 16)


def test_missing_map_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Level(tmp_path / "absent.txt", image_dir=tmp_path)


def test_draw_places_textures(map_file, tmp_path):
    _save_tile(tmp_path / "wall.png", (255, 0, 0))
    _save_tile(tmp_path / "worker.png", (0, 255, 0))
    _save_tile(tmp_path / "box.png", (0, 0, 255))
    _save_tile(tmp_path / "floor.png", (255, 255, 0))
    level = Level(map_file, 32, image_dir=tmp_path)
    surface = pygame.Surface((160, 96))
    level.draw(surface)
    assert surface.get_at((5, 5))[:3] == (255, 0, 0)
    assert surface.get_at((40, 40))[:3] == (0, 255, 0)
    assert surface.get_at((70, 40))[:3] == (0, 0, 255)
    assert surface.get_at((100, 40))[:3] == (255, 255, 0)


def test_update_returns_player_to_idle(map_file, tmp_path):
    clock = FakeClock()
    level = Level(map_file, image_dir=tmp_path, clock=clock)
    level.player.move(1, 0)
    assert level.player.direction is PlayerDirection.RIGHT
    level.update()
    clock.now = 1.0
    level.update()
    assert level.player.is_moving is False
    assert level.player.direction is PlayerDirection.IDLE