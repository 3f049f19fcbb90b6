# labyrintuine

A small labyrinth game for the terminal. It has a main menu, an options
menu, a list of the `.labmap` maze files found in a directory, and a game
screen that draws the walls of the chosen maze. The interface uses the
standard library's `curses` module, so it needs a terminal where `curses`
is available.

## Installing

```
pip install .
```

## Playing

Run the game from the directory that holds your maps:

```
labyrintuine
```

or name the directory to scan for maps:

```
labyrintuine path/to/maps
```

Keys:

- `j` moves down a menu
- `k` moves up a menu
- `l` selects the highlighted entry
- `h` leaves the map list and returns to the options menu
- `q` quits at any time

From the main menu, *Start Game* opens the game screen with the selected
maze, *Options* opens the options menu, and *Quit* exits. In the options
menu, *Map* opens the list of maps and *Return* goes back to the main
menu. The map list always starts with the built-in `Default` map, followed
by the valid map files of the directory in file-name order. A dot marks
the map currently in use; pressing `l` on an entry makes it the active map.
The list scrolls when the cursor moves past the visible rows.

## Map files

A map is a plain text file whose name ends in `.labmap`. Its name without
that extension is the name shown in the map list. Every line has the same
length and holds only these digits:

| Digit | Meaning      |
|-------|--------------|
| `1`   | entry point  |
| `2`   | wall         |
| `3`   | open path    |
| `4`   | exit point   |

There is at most one entry point. On every line except the first and the
last, `1` and `4` may only appear in the first or last column. Files that
break these rules are left out of the map list. Only files directly inside
the scanned directory are read.

## Using it as a library

```python
from labyrintuine.maps import default_map, is_valid_map, load_maps
from labyrintuine.solver import explore

game_map = default_map()
print(game_map.key, game_map.width, game_map.height)

result = explore(game_map.rows)
for path in result.paths:
    print(path)          # list of (row, column) cells walked on one pass
```

- `labyrintuine.maps`
  - `Map` is a frozen dataclass with a `key` (the map's name) and `rows`
    (a tuple of strings), plus `width` and `height`.
  - `make_map(file_name, text)` builds a `Map`; `map_key(file_name)` cuts
    the name at the last `.labmap` and raises `ValueError` if there is none.
  - `default_map()` returns the built-in maze.
  - `is_valid_map(text)` checks text against the rules above.
  - `load_maps(directory)` returns the valid maps in a directory, sorted by
    file name.
- `labyrintuine.solver`
  - `explore(rows)` walks the maze from its entry, pass after pass, until
    every entry, path and exit cell has been visited. At a fork it takes the
    first unexplored branch (north, south, west, east order); a pass ends at
    a dead end. It returns an `Exploration` holding the `paths` walked and
    the `Fork` tree recorded on each pass, and raises `SolverError` when a
    fork offers only explored branches or a pass reaches nothing new.
  - `find_entry`, `initial_marks`, `open_neighbours` and `count_unexplored`
    are the building blocks it uses; cell states are the `CellState` enum.
- `labyrintuine.app`
  - `App(directory)` holds the game state. `handle_key(key)` applies the
    key bindings listed above; `move_down`, `move_up`, `select` and `back`
    are the individual actions, and `viewport_maps()` returns the maps
    visible in the map list. Invalid map-list states raise `AppStateError`.
- `labyrintuine.ui`
  - `main(argv=None)` is the `labyrintuine` command; `run(stdscr, app)` and
    `draw(stdscr, app)` drive a `curses` window. `menu_entries`,
    `map_menu_entries`, `wall_points` and `canvas_bounds` compute what is
    drawn without touching the terminal.

## What it does not do

The game screen only draws the maze's walls. It does not show the entry,
the exits or the paths found by `explore`, and it does not animate the
exploration; `explore` is available only as a library function. There is
no way to walk the maze yourself, and the game keeps no scores or saved
state between runs.