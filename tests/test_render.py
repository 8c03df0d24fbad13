import pygame
import pytest

from solong.game import Game
from solong.gamemap import parse_map, validate_map
from solong.render import Renderer, TextureError, load_textures
from solong.xpm import parse_xpm_lines

COLORS = {
    "wall": "#112233",
    "floor": "#445566",
    "player": "#00FF00",
    "collectible": "#FFFF00",
    "exit": "#0000FF",
}
SIZE = 2


def solid(color):
    return parse_xpm_lines([f"{SIZE} {SIZE} 1 1", f". c {color}", "..", ".."])


def with_hole(color):
    return parse_xpm_lines([f"{SIZE} {SIZE} 2 1", f". c {color}", "x c None", ".x", ".."])


def textures():
    result = {name: solid(color) for name, color in COLORS.items()}
    result["player"] = with_hole(COLORS["player"])
    return result


def rgb(color):
    return tuple(pygame.Color(color))[:3]


def pixel(surface, pos):
    return tuple(surface.get_at(pos))[:3]


@pytest.fixture
def game():
    return Game(validate_map(parse_map(["111111", "1P0CE1", "111111"])))


@pytest.fixture
def drawn(game):
    surface = pygame.Surface((game.game_map.width * SIZE, game.game_map.height * SIZE))
    renderer = Renderer(surface, textures())
    renderer.draw(game)
    return surface, renderer


def find(game, char):
    for y, row in enumerate(game.game_map.grid):
        for x, tile in enumerate(row):
            if tile == char:
                return x * SIZE, y * SIZE
    raise AssertionError(char)


def test_tile_size_follows_wall_texture(drawn):
    _, renderer = drawn
    assert renderer.tile_size == textures()["wall"].width


def test_walls_and_floor(game, drawn):
    surface, _ = drawn
    assert pixel(surface, (0, 0)) == rgb(COLORS["wall"])
    assert pixel(surface, find(game, "0")) == rgb(COLORS["floor"])


@pytest.mark.parametrize("char,name", [("C", "collectible"), ("E", "exit"), ("P", "player")])
def test_overlays(game, drawn, char, name):
    surface, _ = drawn
    assert pixel(surface, find(game, char)) == rgb(COLORS[name])


def test_transparent_player_pixel_shows_floor(game, drawn):
    surface, _ = drawn
    x, y = find(game, "P")
    assert pixel(surface, (x + 1, y)) == rgb(COLORS["floor"])
    assert pixel(surface, (x, y + 1)) == rgb(COLORS["player"])


def test_draw_moves_writes_red_text():
    surface = pygame.Surface((160, 40))
    surface.fill((0, 0, 0))
    renderer = Renderer(surface, textures())
    renderer.draw_moves(7)
    red = rgb("#FF0000")
    found = {
        pixel(surface, (x, y))
        for x in range(surface.get_width())
        for y in range(surface.get_height())
    }
    assert red in found


def test_load_textures_missing_directory(tmp_path):
    with pytest.raises(TextureError, match="wall"):
        load_textures(tmp_path / "absent")


def test_load_textures_reports_first_missing(tmp_path):
    (tmp_path / "wall.xpm").write_text('"2 2 1 1",\n". c #112233",\n"..",\n".."\n')
    with pytest.raises(TextureError, match="floor"):
        load_textures(tmp_path)


def test_load_textures_reads_all(tmp_path):
    for name, color in COLORS.items():
        (tmp_path / f"{name}.xpm").write_text(
            f'"{SIZE} {SIZE} 1 1",\n". c {color}",\n"..",\n".."\n'
        )
    loaded = load_textures(tmp_path)
    assert set(loaded) == set(COLORS)
    assert loaded["exit"] == solid(COLORS["exit"])