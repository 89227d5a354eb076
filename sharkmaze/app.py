"""Window, drawing and the command that starts a game."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

import pygame

from sharkmaze.game import Direction, Facing, Game, direction_for_key
from sharkmaze.mapfile import (
    COLLECTIBLE,
    EMPTY,
    EXIT,
    PLAYER,
    WALL,
    GameMap,
    MapError,
    check_extension,
    load_map,
)

TITLE = "Shark attack"
DEFAULT_TILE_SIZE = 48
FRAME_RATE = 30

WALL_COLOR = (92, 64, 51)
WATER_COLOR = (30, 110, 200)
FISH_COLOR = (250, 170, 40)
SHARK_COLOR = (120, 130, 140)
EYE_COLOR = (10, 10, 10)
EXIT_CLOSED_COLOR = (200, 30, 30)
EXIT_OPEN_COLOR = (40, 190, 60)

ARGUMENT_ERROR = "Error: Argument(s) not valid"
DISPLAY_ERROR = "Error: mlx_init()"

_FACING_OFFSETS = {
    Facing.LEFT: (-1, 0),
    Facing.RIGHT: (1, 0),
    Facing.TOP_LEFT: (-1, -1),
    Facing.TOP_RIGHT: (1, -1),
    Facing.BOTTOM_LEFT: (-1, 1),
    Facing.BOTTOM_RIGHT: (1, 1),
}

_ARROWS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


class Renderer:
    """Draws a game as a grid of coloured tiles."""

    def __init__(self, game: Game, tile_size: int = DEFAULT_TILE_SIZE) -> None:
        if tile_size <= 0:
            raise ValueError("tile size must be positive")
        self.game = game
        self.tile_size = tile_size

    def window_size(self) -> tuple[int, int]:
        """Return the pixel size of a window that shows the whole map."""
        game_map = self.game.map
        return game_map.width * self.tile_size, game_map.height * self.tile_size

    def tile_color(self, cell: str) -> tuple[int, int, int]:
        """Return the colour of a tile holding ``cell``."""
        if cell == WALL:
            return WALL_COLOR
        if cell == COLLECTIBLE:
            return FISH_COLOR
        if cell == PLAYER:
            return SHARK_COLOR
        if cell == EXIT:
            return EXIT_OPEN_COLOR if self.game.exit_open() else EXIT_CLOSED_COLOR
        return WATER_COLOR

    def draw(self, surface: pygame.Surface) -> None:
        """Paint every tile of the map onto ``surface``."""
        size = self.tile_size
        for x, y, cell in self.game.map:
            rect = pygame.Rect(x * size, y * size, size, size)
            surface.fill(self.tile_color(cell), rect)
            if cell == PLAYER:
                self._draw_eye(surface, rect)

    def _draw_eye(self, surface: pygame.Surface, rect: pygame.Rect) -> None:
        dx, dy = _FACING_OFFSETS[self.game.facing]
        quarter = self.tile_size // 4
        centre = (rect.centerx + dx * quarter, rect.centery + dy * quarter)
        pygame.draw.circle(surface, EYE_COLOR, centre, max(1, self.tile_size // 10))


def _direction_for_event(event: pygame.event.Event) -> Direction | None:
    return _ARROWS.get(event.key) or direction_for_key(event.key)


def run(game_map: GameMap, tile_size: int = DEFAULT_TILE_SIZE) -> int:
    """Open a window and play ``game_map`` until won or closed.

    Returns the number of moves made.
    """
    game = Game(game_map)
    renderer = Renderer(game, tile_size)
    pygame.init()
    try:
        screen = pygame.display.set_mode(renderer.window_size())
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                        continue
                    direction = _direction_for_event(event)
                    if direction is not None:
                        game.move(direction)
            report = game.take_report()
            if report is not None:
                print(report, flush=True)
            if game.is_won():
                break
            renderer.draw(screen)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return game.moves


def main(argv: Sequence[str] | None = None) -> int:
    """Start a game on the ``.ber`` map named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(ARGUMENT_ERROR, file=sys.stderr)
        return 1
    try:
        path = check_extension(args[0])
        game_map = load_map(path)
    except MapError as exc:
        print(exc, file=sys.stderr)
        return 1
    if os.environ.get("SHARKMAZE_TILE_SIZE", "").isdigit():
        tile_size = int(os.environ["SHARKMAZE_TILE_SIZE"]) or DEFAULT_TILE_SIZE
    else:
        tile_size = DEFAULT_TILE_SIZE
    try:
        run(game_map, tile_size)
    except pygame.error:
        print(DISPLAY_ERROR, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())