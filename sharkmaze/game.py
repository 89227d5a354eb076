"""Game state: moving the shark, collecting fish and reaching the exit."""

from __future__ import annotations

from enum import Enum

from sharkmaze.mapfile import COLLECTIBLE, EMPTY, EXIT, PLAYER, WALL, GameMap

KEY_ESCAPE = 65307


class Direction(Enum):
    """A step the player can take."""

    UP = "t"
    DOWN = "b"
    LEFT = "l"
    RIGHT = "r"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class Facing(Enum):
    """Which way the shark sprite points."""

    LEFT = "left"
    RIGHT = "right"
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"


_KEYS = {
    65362: Direction.UP,
    119: Direction.UP,
    65364: Direction.DOWN,
    115: Direction.DOWN,
    65361: Direction.LEFT,
    97: Direction.LEFT,
    65363: Direction.RIGHT,
    100: Direction.RIGHT,
}


def direction_for_key(key: int) -> Direction | None:
    """Map a key symbol (arrows or WASD) to a direction, or None."""
    return _KEYS.get(key)


def move_message(count: int) -> str:
    """Return the text shown for a move counter."""
    return f"{count} move" if count <= 1 else f"{count} moves"


class Game:
    """A running game on a validated map. The map is updated in place."""

    def __init__(self, game_map: GameMap) -> None:
        self.map = game_map
        self.moves = 0
        self.facing = Facing.RIGHT
        self.heading = Direction.RIGHT
        self._reported = 0

    @property
    def player(self) -> tuple[int, int] | None:
        return self.map.find(PLAYER)

    def _turn(self, direction: Direction) -> None:
        if direction is Direction.LEFT or direction is Direction.RIGHT:
            self.heading = direction
            self.facing = Facing.LEFT if direction is Direction.LEFT else Facing.RIGHT
        elif direction is Direction.UP:
            self.facing = (
                Facing.TOP_RIGHT if self.heading is Direction.RIGHT else Facing.TOP_LEFT
            )
        else:
            self.facing = (
                Facing.BOTTOM_RIGHT
                if self.heading is Direction.RIGHT
                else Facing.BOTTOM_LEFT
            )

    def _cell(self, x: int, y: int) -> str:
        if 0 <= y < self.map.height and 0 <= x < len(self.map.grid[y]):
            return self.map[x, y]
        return WALL

    def move(self, direction: Direction) -> bool:
        """Try to step in ``direction``; return whether the player moved.

        The shark turns to face the direction even when the step is blocked
        by a wall or by the exit while fish remain.
        """
        start = self.player
        if start is None:
            self._turn(direction)
            return False
        x, y = start
        dx, dy = direction.delta
        tx, ty = x + dx, y + dy
        target = self._cell(tx, ty)
        if target == WALL or (target == EXIT and not self.exit_open()):
            self._turn(direction)
            return False
        self.map[x, y] = EMPTY
        self.map[tx, ty] = PLAYER
        self.moves += 1
        self._turn(direction)
        return True

    def exit_open(self) -> bool:
        """Tell whether every collectible has been taken."""
        return self.map.find(COLLECTIBLE) is None

    def is_won(self) -> bool:
        """Tell whether all fish are eaten and the player stands on the exit."""
        return self.map.find(COLLECTIBLE) is None and self.map.find(EXIT) is None

    def take_report(self) -> str | None:
        """Return the move message if the counter grew since the last report."""
        if self.moves > self._reported:
            self._reported = self.moves
            return move_message(self.moves)
        return None