"""Loading and validation of .ber maps."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .pathfinding import check_path

VALID_TILES = frozenset("PEC01")


class MapError(ValueError):
    """Raised when a map file or its contents are not acceptable."""


@dataclass
class GameMap:
    """A grid of tiles with the positions found during validation."""

    grid: list[list[str]] = field(default_factory=list)
    player_pos: tuple[int, int] = (0, 0)
    exit_pos: tuple[int, int] = (0, 0)
    collectibles: int = 0

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def lines(self) -> list[str]:
        """The rows as strings."""
        return ["".join(row) for row in self.grid]


def check_file_extension(filename: str) -> str:
    """Return filename if it ends in ``.ber`` and is long enough, else raise."""
    if len(filename) < 5:
        raise MapError("the file name is too short")
    if filename[-4:] != ".ber":
        raise MapError("the file does not have the .ber extension")
    return filename


def is_valid_char(c: str) -> bool:
    """True for the tiles a map may contain."""
    return c in VALID_TILES


def parse_map(lines: Iterable[str]) -> GameMap:
    """Build a map from lines, dropping one trailing newline from each."""
    return GameMap(grid=[list(line.removesuffix("\n")) for line in lines])


def read_map(path: str | Path) -> GameMap:
    """Read a map file; a final newline does not start an extra row."""
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError as exc:
        raise MapError(f"cannot open the file: {exc}") from exc
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return parse_map(lines)


def check_rectangular(game_map: GameMap) -> bool:
    """True when every row is as long as the first."""
    width = game_map.width
    return all(len(row) == width for row in game_map.grid)


def check_walls(game_map: GameMap) -> bool:
    """True when the border of the map is made of walls."""
    grid = game_map.grid
    width = game_map.width
    if not grid or not width:
        return False
    if not all(tile == "1" for tile in (*grid[0][:width], *grid[-1][:width])):
        return False
    return all(row[:1] == ["1"] and row[width - 1:width] == ["1"] for row in grid)


def check_elements(game_map: GameMap) -> bool:
    """Check tiles and counts; record player, exit and collectible count."""
    counts: Counter[str] = Counter()
    for x, column in enumerate(zip(*game_map.grid)):
        for y, tile in enumerate(column):
            if not is_valid_char(tile):
                return False
            counts[tile] += 1
            if tile == "P":
                game_map.player_pos = (x, y)
            elif tile == "E":
                game_map.exit_pos = (x, y)
    if counts["P"] != 1 or counts["E"] != 1 or counts["C"] < 1:
        return False
    game_map.collectibles = counts["C"]
    return True


def validate_map(game_map: GameMap) -> GameMap:
    """Run every check in order and raise MapError on the first failure."""
    if game_map.height == 0 or game_map.width == 0:
        raise MapError("the map is empty")
    if not check_rectangular(game_map):
        raise MapError("the map is not rectangular")
    if not check_walls(game_map):
        raise MapError("the map is not enclosed by walls")
    if not check_elements(game_map):
        raise MapError("invalid elements (P, E, C)")
    if not check_path(game_map.lines, game_map.player_pos):
        raise MapError("no valid path to every collectible and the exit")
    return game_map