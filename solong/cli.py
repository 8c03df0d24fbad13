"""Command line entry point: load a map and play it in a window."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import pygame

from .game import Game, MoveResult
from .gamemap import MapError, check_file_extension, read_map, validate_map
from .render import Renderer, TextureError, load_textures

TEXTURE_DIR = "textures"
_KEYS = {
    pygame.K_ESCAPE: "escape",
    pygame.K_w: "w",
    pygame.K_a: "a",
    pygame.K_s: "s",
    pygame.K_d: "d",
}


def _fail(message: str) -> int:
    print("Error", file=sys.stderr)
    print(message, file=sys.stderr)
    return 1


def _play(game: Game, textures) -> int:
    pygame.init()
    try:
        tile = textures["wall"].width
        size = (game.game_map.width * tile, game.game_map.height * tile)
        try:
            screen = pygame.display.set_mode(size)
        except pygame.error as exc:
            return _fail(f"cannot create the window: {exc}")
        pygame.display.set_caption("so_long")
        renderer = Renderer(screen, textures)
        renderer.draw(game)
        pygame.display.flip()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                break
            if event.type != pygame.KEYDOWN:
                continue
            key = _KEYS.get(event.key)
            if key is None:
                continue
            result = game.handle_key(key)
            if result in (MoveResult.WON, MoveResult.QUIT):
                break
            if result is MoveResult.MOVED:
                renderer.draw(game)
                renderer.draw_moves(game.moves)
                pygame.display.flip()
        return 0
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map file named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return _fail("Usage: so_long <map.ber>")
    try:
        path = check_file_extension(args[0])
        game_map = validate_map(read_map(path))
        textures = load_textures(TEXTURE_DIR)
    except (MapError, TextureError) as exc:
        return _fail(str(exc))
    return _play(Game(game_map), textures)


if __name__ == "__main__":
    sys.exit(main())