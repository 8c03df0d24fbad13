"""Game state and the effect of the player's key presses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .gamemap import GameMap


class Direction(Enum):
    """A step on the grid as (dx, dy); y grows downwards."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class MoveResult(Enum):
    """What a key press or a move did to the game."""

    IGNORED = "ignored"
    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"
    QUIT = "quit"


_KEY_DIRECTIONS = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}
QUIT_KEY = "escape"


@dataclass
class Game:
    """A validated map together with the move and collectible counters."""

    game_map: GameMap
    moves: int = 0
    collected: int = 0

    def move(self, direction: Direction) -> MoveResult:
        """Move the player one tile; walls block, the exit wins once all is collected."""
        dx, dy = direction.value
        x, y = self.game_map.player_pos
        new_x, new_y = x + dx, y + dy
        grid = self.game_map.grid
        if not (0 <= new_y < len(grid) and 0 <= new_x < len(grid[new_y])):
            return MoveResult.BLOCKED
        tile = grid[new_y][new_x]
        if tile == "1":
            return MoveResult.BLOCKED
        grid[y][x] = "E" if (x, y) == self.game_map.exit_pos else "0"
        grid[new_y][new_x] = "P"
        if tile == "C":
            self.collected += 1
        self.game_map.player_pos = (new_x, new_y)
        self.moves += 1
        if tile == "E" and self.collected == self.game_map.collectibles:
            return MoveResult.WON
        return MoveResult.MOVED

    def handle_key(self, key: str) -> MoveResult:
        """React to a key name: w, a, s, d move, escape quits, others are ignored."""
        if key == QUIT_KEY:
            return MoveResult.QUIT
        direction = _KEY_DIRECTIONS.get(key)
        if direction is None:
            return MoveResult.IGNORED
        return self.move(direction)