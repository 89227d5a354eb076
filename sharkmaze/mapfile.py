"""Loading and validating ``.ber`` maps.

A map is a rectangle of characters: ``1`` walls, ``0`` open water,
``C`` collectibles, ``E`` the single exit and ``P`` the single player
start. It must be walled in on every side. Every collectible must be
reachable, and so must the exit.
"""

from __future__ import annotations

import copy as _copy
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

WALL = "1"
EMPTY = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
ALLOWED = frozenset("ECP01")
EXTENSION = ".ber"

BAD_EXTENSION = "Bad extension => .ber"
INVALID_MAP = "Error: invalid Map"
BAD_CONTENT = "Error: check Map content"
NOT_ENCLOSED = "Error: Map is not rectangle or surround with 1"
UNPLAYABLE = "Unplayable Map"

_REACHED = "N"


class MapError(ValueError):
    """Raised when a map file is missing, malformed or unplayable."""


@dataclass
class GameMap:
    """A validated map grid, indexed as ``game_map[x, y]``."""

    grid: list[list[str]]
    items: int = 0
    path: Path | None = field(default=None, compare=False)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def rows(self) -> list[str]:
        return ["".join(row) for row in self.grid]

    def __getitem__(self, pos: tuple[int, int]) -> str:
        x, y = pos
        return self.grid[y][x]

    def __setitem__(self, pos: tuple[int, int], value: str) -> None:
        x, y = pos
        self.grid[y][x] = value

    def __iter__(self) -> Iterator[tuple[int, int, str]]:
        for y, row in enumerate(self.grid):
            for x, cell in enumerate(row):
                yield x, y, cell

    def __str__(self) -> str:
        return "\n".join(self.rows)

    def find(self, item: str) -> tuple[int, int] | None:
        """Return the ``(x, y)`` of the first ``item`` in row order, or None."""
        return _find(self.grid, item)

    def count(self, item: str) -> int:
        """Return how many cells hold ``item``."""
        return sum(row.count(item) for row in self.grid)

    def copy(self) -> GameMap:
        """Return an independent copy of the map."""
        return GameMap(_copy.deepcopy(self.grid), self.items, self.path)


def _find(rows: Sequence[Sequence[str]], item: str) -> tuple[int, int] | None:
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            if cell == item:
                return x, y
    return None


def check_extension(path: str | Path) -> str:
    """Check that ``path`` names a ``.ber`` file with a non-empty name."""
    name = str(path)
    if len(name) <= len(EXTENSION) or not name.endswith(EXTENSION):
        raise MapError(BAD_EXTENSION)
    if name[-len(EXTENSION) - 1] in "/ ":
        raise MapError(BAD_EXTENSION)
    return name


def read_lines(path: str | Path) -> list[str]:
    """Read a map file as lines split on ``\\n`` only, newlines kept."""
    try:
        with open(path, "rb") as handle:
            raw_lines = handle.readlines()
    except OSError as exc:
        raise MapError(f"{path}: {exc.strerror}") from exc
    return [line.decode("latin-1") for line in raw_lines]


def check_size(lines: Sequence[str]) -> tuple[int, int]:
    """Check that all lines share one width and there are at least three.

    The width is taken from the first line minus its newline. Returns
    ``(width, height)``.
    """
    if not lines:
        raise MapError(INVALID_MAP)
    width = len(lines[0]) - 1
    for line in lines:
        length = len(line) - 1 if line.endswith("\n") else len(line)
        if length != width:
            raise MapError(INVALID_MAP)
    if len(lines) < 3:
        raise MapError(INVALID_MAP)
    return width, len(lines)


def check_content(rows: Sequence[Sequence[str]]) -> int:
    """Check the map's characters and counts; return the number of collectibles."""
    exits = collectibles = players = 0
    for row in rows:
        for cell in row:
            if cell == EXIT:
                exits += 1
            elif cell == COLLECTIBLE:
                collectibles += 1
            elif cell == PLAYER:
                players += 1
            if cell not in ALLOWED:
                raise MapError(BAD_CONTENT)
    if exits != 1 or players != 1 or collectibles == 0:
        raise MapError(BAD_CONTENT)
    return collectibles


def is_enclosed(rows: Sequence[Sequence[str]]) -> bool:
    """Tell whether the first and last rows and both side columns are walls."""
    if not rows:
        return False
    width = len(rows[0])
    if width == 0:
        return False
    if any(cell != WALL for cell in rows[0]):
        return False
    if any(cell != WALL for cell in rows[-1]):
        return False
    return all(
        len(row) >= width and row[0] == WALL and row[width - 1] == WALL
        for row in rows[1:-1]
    )


def is_playable(rows: Sequence[Sequence[str]]) -> bool:
    """Tell whether every collectible and the exit can be reached from the start.

    The exit itself is not walked through: it counts as reached when an
    open cell next to it is.
    """
    grid = [list(row) for row in rows]
    start = _find(grid, PLAYER)
    if start is None:
        return False
    sx, sy = start
    grid[sy][sx] = EMPTY
    stack = [start]
    while stack:
        x, y = stack.pop()
        if not (0 <= y < len(grid) and 0 <= x < len(grid[y])):
            continue
        if grid[y][x] not in (EMPTY, COLLECTIBLE):
            continue
        grid[y][x] = _REACHED
        stack.extend(((x, y - 1), (x + 1, y), (x, y + 1), (x - 1, y)))
    if any(COLLECTIBLE in row for row in grid):
        return False
    exit_pos = _find(grid, EXIT)
    if exit_pos is None:
        return False
    ex, ey = exit_pos
    for nx, ny in ((ex, ey + 1), (ex, ey - 1), (ex + 1, ey), (ex - 1, ey)):
        if 0 <= ny < len(grid) and 0 <= nx < len(grid[ny]):
            if grid[ny][nx] == _REACHED:
                return True
    return False


def parse_map(lines: Sequence[str]) -> GameMap:
    """Validate raw map lines and build a :class:`GameMap`."""
    width, _ = check_size(lines)
    rows = [line[:width] for line in lines]
    items = check_content(rows)
    if not is_enclosed(rows):
        raise MapError(NOT_ENCLOSED)
    if not is_playable(rows):
        raise MapError(UNPLAYABLE)
    return GameMap([list(row) for row in rows], items)


def load_map(path: str | Path) -> GameMap:
    """Read and validate the map stored at ``path``."""
    game_map = parse_map(read_lines(path))
    game_map.path = Path(path)
    return game_map