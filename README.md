# sharkmaze

A small tile-based puzzle game. You steer a shark around a walled maze,
eat every fish, and then swim into the exit. The move counter is
printed to standard output as you play.

## Installing

```
pip install .
```

The game window uses pygame.

## Playing

```
sharkmaze path/to/level.ber
```

The command takes exactly one argument, the map file. The window is
titled "Shark attack". Each tile is 48 pixels square; set the
environment variable `SHARKMAZE_TILE_SIZE` to a whole number of pixels
to change that (a value of `0` or anything that is not a number keeps
the default).

Controls:

| Key                 | Action      |
|---------------------|-------------|
| `W` or Up arrow     | move up     |
| `S` or Down arrow   | move down   |
| `A` or Left arrow   | move left   |
| `D` or Right arrow  | move right  |
| `Esc`               | quit        |

The map is drawn as coloured squares: walls brown, water blue, fish
orange, the shark grey with a dark eye showing which way it faces. The
exit is red while fish remain and cannot be entered; once every fish
has been eaten it turns green. Walking into the open exit wins the game
and closes the window. Whenever the move counter has grown, a line such
as `1 move` or `12 moves` is printed. Bumping into a wall turns the
shark but does not count as a move.

The command exits with status 0 when the game ends, and with status 1
after printing a message on standard error when the arguments are
wrong, the map is rejected, or no window can be opened.

## Map files

A level is a text file whose name ends in `.ber`. It is a rectangle of
these characters:

| Char | Meaning           |
|------|-------------------|
| `1`  | wall              |
| `0`  | open water        |
| `P`  | the shark (start) |
| `C`  | a fish to collect |
| `E`  | the exit          |

Example:

```
1111111111
1P0C00C001
1011110101
1C000000E1
1111111111
```

A map is rejected when:

- the file name does not end in `.ber`, or the extension has no name
  in front of it (`.ber`, `dir/.ber`, `my .ber`);
- the file cannot be opened;
- the file is empty, the rows are not all the same length, or there
  are fewer than three rows;
- it holds a character other than `0`, `1`, `C`, `E` and `P`;
- it does not hold exactly one `P`, exactly one `E` and at least one `C`;
- the border is not made entirely of walls;
- not every fish can be reached from the start, or no open cell next
  to the exit can be reached.

## Using it from Python

The package has three modules:

- `sharkmaze.mapfile` reads and checks maps: `load_map(path)`,
  `parse_map(lines)`, `check_extension(path)`, `read_lines(path)`,
  `check_size(lines)`, `check_content(rows)`, `is_enclosed(rows)` and
  `is_playable(rows)`. Problems raise `MapError`, a `ValueError`.
  A loaded map is a `GameMap`, indexed as `game_map[x, y]`, with
  `width`, `height`, `rows`, `find(item)`, `count(item)` and `copy()`.
- `sharkmaze.game` holds the rules: `Game`, `Direction`, `Facing`,
  `direction_for_key(key)` and `move_message(count)`.
- `sharkmaze.app` holds the window: `Renderer`, `run(game_map, tile_size)`
  and `main(argv)`, which the `sharkmaze` command calls.

```python
from sharkmaze.mapfile import load_map, MapError
from sharkmaze.game import Game, Direction

try:
    game_map = load_map("level.ber")
except MapError as err:
    print(err)
else:
    game = Game(game_map)
    if game.move(Direction.RIGHT):
        print(game.take_report())
    print(game.exit_open(), game.is_won())
```

`Game.move` changes the map in place and returns whether the shark
moved. `Game.take_report()` returns the move message once each time the
counter has grown, and `None` otherwise.

`sharkmaze.app.run(game_map, tile_size)` opens the window for an
already loaded map and returns the number of moves made.

## What it does not do

There are no sprite images or sounds: everything is drawn as plain
coloured tiles. There are no enemies, no levels bundled with the
package and no saved progress.

## Running the tests

```
pip install .[test]
pytest
```