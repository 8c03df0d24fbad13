"""Textures and drawing of the map onto a pygame surface."""

from __future__ import annotations

from pathlib import Path

import pygame

from .game import Game
from .xpm import TRANSPARENT, XpmError, XpmImage, load_xpm

TEXTURE_NAMES = ("wall", "floor", "player", "collectible", "exit")
TEXT_COLOR = (0xFF, 0x00, 0x00)
_OVERLAYS = {"P": "player", "C": "collectible", "E": "exit"}


class TextureError(RuntimeError):
    """Raised when a texture cannot be loaded."""


def load_textures(directory: str | Path = "textures") -> dict[str, XpmImage]:
    """Load the five game textures from ``<name>.xpm`` files in directory."""
    base = Path(directory)
    textures: dict[str, XpmImage] = {}
    for name in TEXTURE_NAMES:
        try:
            textures[name] = load_xpm(base / f"{name}.xpm")
        except XpmError as exc:
            raise TextureError(f"cannot load the {name} texture") from exc
    return textures


def _to_surface(image: XpmImage) -> pygame.Surface:
    surface = pygame.Surface((image.width, image.height), pygame.SRCALPHA, 32)
    for y, row in enumerate(image.pixels):
        for x, value in enumerate(row):
            if value == TRANSPARENT:
                surface.set_at((x, y), (0, 0, 0, 0))
            else:
                surface.set_at(
                    (x, y), ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, 0xFF)
                )
    return surface


class Renderer:
    """Draws a game onto a surface, one texture per tile."""

    def __init__(
        self,
        surface: pygame.Surface,
        textures: dict[str, XpmImage],
        font: pygame.font.Font | None = None,
    ) -> None:
        self.surface = surface
        self.tile_size = textures["wall"].width
        self._images = {name: _to_surface(textures[name]) for name in TEXTURE_NAMES}
        self._font = font

    def _blit(self, name: str, x: int, y: int) -> None:
        self.surface.blit(self._images[name], (x * self.tile_size, y * self.tile_size))

    def draw(self, game: Game) -> None:
        """Draw every tile: walls, or floor with the player, collectible or exit on top."""
        for y, row in enumerate(game.game_map.grid):
            for x, tile in enumerate(row):
                if tile == "1":
                    self._blit("wall", x, y)
                    continue
                self._blit("floor", x, y)
                overlay = _OVERLAYS.get(tile)
                if overlay:
                    self._blit(overlay, x, y)

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 18)
        return self._font

    def draw_moves(self, moves: int) -> None:
        """Write the move counter in the top-left corner."""
        font = self._get_font()
        top = max(0, 20 - font.get_ascent())
        for x, text in ((10, "Moves:"), (70, str(moves))):
            self.surface.blit(font.render(text, False, TEXT_COLOR), (x, top))