# solong

A small top-down puzzle game. You move a player around a tile map,
pick up every collectible, then walk onto the exit to finish.

## Installing

```
pip install .
```

## Playing

```
so_long path/to/map.ber
```

Controls:

- `W` `A` `S` `D` move up, left, down and right
- `Esc` or closing the window quits

Walls block movement. Stepping onto the exit before every collectible
has been picked up does nothing special: the player stands on it, and
the exit reappears when the player walks away. Stepping onto the exit
with everything collected ends the game.

After each move the move counter is written in the top-left corner of
the window.

Tile textures are read from XPM files in a `textures/` directory under
the current working directory: `wall.xpm`, `floor.xpm`, `player.xpm`,
`collectible.xpm` and `exit.xpm`. The width of `wall.xpm` sets the tile
size, and the window is the map's width and height in tiles.

## Map files

A map is a plain-text file whose name ends in `.ber` (and is at least
five characters long). Each line is one row of tiles:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `E`  | exit         |
| `C`  | collectible  |

A map is accepted only when it:

- is not empty and is rectangular,
- is enclosed by walls on all four sides,
- uses only the characters above,
- has exactly one `P`, exactly one `E` and at least one `C`,
- lets the player reach every collectible and the exit.

Example:

```
1111111
1P0C0E1
1111111
```

When the arguments, the map or a texture is rejected, `Error` and a
short reason are printed to standard error and the command exits with
status 1.

## Using it as a library

- `solong.gamemap`: `read_map` and `parse_map` build a `GameMap`;
  `validate_map` runs `check_rectangular`, `check_walls`,
  `check_elements` and the path check in turn and raises `MapError` on
  the first failure. `check_file_extension` checks a file name.
  A `GameMap` has `grid`, `width`, `height`, `lines`, `player_pos`,
  `exit_pos` and `collectibles`.
- `solong.pathfinding`: `flood_fill` marks every tile reachable from a
  start position, and `check_path` says whether every collectible and
  the exit can be reached.
- `solong.game`: `Game` holds a map with `moves` and `collected`
  counters. `Game.move` takes a `Direction` and `Game.handle_key` a key
  name (`"w"`, `"a"`, `"s"`, `"d"`, `"escape"`); both return a
  `MoveResult` (`IGNORED`, `BLOCKED`, `MOVED`, `WON` or `QUIT`).
- `solong.xpm`: `load_xpm`, `parse_xpm_text` and `parse_xpm_lines` read
  XPM images into an `XpmImage` of 0xRRGGBB pixel rows, raising
  `XpmError` on bad data. `text_to_rgb` reads a colour specification,
  and `channel_shifts` with `good_color` convert colours for visuals of
  less than 24 bits.
- `solong.colors`: `color_by_name` looks up X11 colour names.
- `solong.render`: `load_textures` reads the five textures (raising
  `TextureError`), and `Renderer` draws a game and the move counter onto
  a pygame surface.
- `solong.cli`: `main` is the `so_long` command.

## Running the tests

```
pip install .[test]
pytest
```