"""Reachability check for the player on a map."""

from __future__ import annotations

from collections.abc import Sequence

_MARKS = {"C": "c", "E": "e"}
_STOP = frozenset("1vce")


def flood_fill(rows: Sequence[str], start: tuple[int, int]) -> list[str]:
    """Return a copy of the map with every tile reachable from start marked.

    Collectibles become ``c``, the exit ``e`` and other tiles ``v``; walls stop
    the fill. The input rows are left untouched.
    """
    grid = [list(row) for row in rows]
    height = len(grid)
    width = len(grid[0]) if grid else 0
    pending = [start]
    while pending:
        x, y = pending.pop()
        if not (0 <= x < width and 0 <= y < height) or x >= len(grid[y]):
            continue
        tile = grid[y][x]
        if tile in _STOP:
            continue
        grid[y][x] = _MARKS.get(tile, "v")
        pending.extend(((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)))
    return ["".join(row) for row in grid]


def check_path(rows: Sequence[str], start: tuple[int, int]) -> bool:
    """True when every collectible and the exit can be reached from start."""
    filled = flood_fill(rows, start)
    return not any("C" in row or "E" in row for row in filled)