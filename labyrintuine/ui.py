"""Terminal front end: menus, the map list and the maze view drawn with curses."""

from __future__ import annotations

import argparse
import curses
from dataclasses import dataclass
from typing import Sequence

from labyrintuine.app import App, AppStateError, MainMenuItem, OptionsMenuItem, Screen

MENU_HINT = "(j) down / (k) up / (l) select"
MAP_MENU_HINT = "(j) down / (k) up / (l) select / (h) return"
DOT = "\u2022"
WALL = "\u2588"
POLL_MILLISECONDS = 100

_WALL_TILE = "2"


@dataclass(frozen=True)
class _Styles:
    normal: int
    active: int


def menu_entries(app: App) -> list[tuple[str, bool]]:
    """Return the labels of the current menu, each with whether the cursor is on it."""
    if app.screen is Screen.MAIN_MENU:
        return [(item.value, item is app.main_item) for item in MainMenuItem]
    if app.screen is Screen.OPTIONS_MENU:
        return [(item.value, item is app.options_item) for item in OptionsMenuItem]
    raise ValueError(f"screen {app.screen.value!r} is not a menu")


def map_menu_entries(app: App) -> list[tuple[str, bool, bool]]:
    """Return the visible map list as (name, under cursor, currently chosen) triples."""
    window = app.viewport_maps()
    if window and app.viewport_map is None:
        raise AppStateError("failed to retrieve cursor-selected map")
    return [(item.key, item == app.viewport_map, item == app.map) for item in window]


def canvas_bounds(width: int, height: int) -> tuple[tuple[int, int], tuple[int, int]]:
    """Return x and y bounds centred on the origin, each half rounded to nearest."""
    if width < 0 or height < 0:
        raise ValueError("canvas dimensions must not be negative")
    half_width = (width + 1) // 2
    half_height = (height + 1) // 2
    return (-half_width, half_width), (-half_height, half_height)


def wall_points(rows: Sequence[str]) -> list[tuple[float, float]]:
    """Return wall tiles as (x, y) coordinates spread evenly around the origin.

    Rows run top to bottom with y decreasing; columns left to right with x
    increasing. The column count is taken from the first row.
    """
    if not rows:
        return []
    row_centre = (len(rows) - 1) / 2
    col_centre = (len(rows[0]) - 1) / 2
    ys = [row_centre - index for index, row in enumerate(rows) if _WALL_TILE in row]
    xs = [
        [index - col_centre for index, tile in enumerate(row) if tile == _WALL_TILE]
        for row in rows
    ]
    return [(x, y) for y, row_xs in zip(ys, xs) for x in row_xs]


def _styles() -> _Styles:
    try:
        return _Styles(curses.color_pair(1), curses.color_pair(2))
    except curses.error:
        return _Styles(curses.A_NORMAL, curses.A_REVERSE)


def _init_colors() -> None:
    try:
        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(1, curses.COLOR_GREEN, -1)
        curses.init_pair(2, curses.COLOR_WHITE, curses.COLOR_GREEN)
    except curses.error:
        pass


def _put(stdscr, y: int, x: int, text: str, attr: int) -> None:
    if y < 0 or x < 0 or not text:
        return
    try:
        stdscr.addstr(y, x, text, attr)
    except curses.error:
        # Writing into the last cell of the screen moves the cursor off it.
        pass


def _overlay(fill: str, text: str) -> str:
    text = text[: len(fill)]
    start = (len(fill) - len(text)) // 2
    return fill[:start] + text + fill[start + len(text) :]


def _box(stdscr, top: int, left: int, height: int, width: int, title: str, footer: str, attr: int) -> None:
    if height < 2 or width < 2:
        return
    inner = width - 2
    line = "\u2500" * inner
    _put(stdscr, top, left, "\u256d" + _overlay(line, title) + "\u256e", attr)
    for row in range(top + 1, top + height - 1):
        _put(stdscr, row, left, "\u2502" + " " * inner + "\u2502", attr)
    _put(stdscr, top + height - 1, left, "\u2570" + _overlay(line, footer) + "\u256f", attr)


def _draw_menu(stdscr, app: App, styles: _Styles) -> None:
    entries = menu_entries(app)
    screen_height, screen_width = stdscr.getmaxyx()
    region_top = screen_height * 40 // 100
    region_height = screen_height * 20 // 100
    box_height = min(len(entries) + 2, region_height)
    top = region_top + (region_height - box_height) // 2
    box_width = screen_width * 20 // 100
    left = screen_width * 40 // 100
    _box(stdscr, top, left, box_height, box_width, app.screen.value, MENU_HINT, styles.normal)
    inner = box_width - 2
    if inner <= 0:
        return
    for row, (label, active) in zip(range(top + 1, top + box_height - 1), entries):
        _put(stdscr, row, left + 1, label.center(inner)[:inner], styles.active if active else styles.normal)


def _draw_map_menu(stdscr, app: App, styles: _Styles) -> None:
    screen_height, screen_width = stdscr.getmaxyx()
    left = screen_width * 30 // 100
    box_width = screen_width - 2 * left
    top = screen_height * 40 // 100
    box_height = screen_height - 2 * top
    _box(stdscr, top, left, box_height, box_width, Screen.MAP_MENU.value, MAP_MENU_HINT, styles.normal)

    inner_height = max(box_height - 2, 0)
    inner_width = max(box_width - 2, 0)
    app.viewport_height = inner_height

    selector_width = inner_width * 5 // 100
    list_width = inner_width - selector_width
    for offset, (name, is_cursor, is_current) in enumerate(map_menu_entries(app)):
        row = top + 1 + offset
        attr = styles.active if is_cursor else styles.normal
        if selector_width:
            mark = DOT if is_current else " "
            _put(stdscr, row, left + 1, mark.center(selector_width), attr)
        if list_width > 0:
            _put(stdscr, row, left + 1 + selector_width, name.ljust(list_width)[:list_width], attr)


def _draw_game(stdscr, app: App, styles: _Styles) -> None:
    rows = app.map.rows
    if not rows:
        raise AppStateError("failed to retrieve maze in selected map")
    screen_height, screen_width = stdscr.getmaxyx()
    row_count, col_count = len(rows), len(rows[0])
    top = max((screen_height - row_count) // 2, 0)
    left = max((screen_width - col_count) // 2, 0)
    row_centre = (row_count - 1) / 2
    col_centre = (col_count - 1) / 2
    for x, y in wall_points(rows):
        row = top + round(row_centre - y)
        col = left + round(x + col_centre)
        if row < screen_height and col < screen_width:
            _put(stdscr, row, col, WALL, styles.normal)


def draw(stdscr, app: App) -> None:
    """Render the current screen of the application onto a curses window."""
    styles = _styles()
    stdscr.erase()
    if app.screen in (Screen.MAIN_MENU, Screen.OPTIONS_MENU):
        _draw_menu(stdscr, app, styles)
    elif app.screen is Screen.MAP_MENU:
        _draw_map_menu(stdscr, app, styles)
    else:
        _draw_game(stdscr, app, styles)
    stdscr.refresh()


def run(stdscr, app: App) -> None:
    """Draw and handle keys until the application asks to exit."""
    _init_colors()
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    stdscr.timeout(POLL_MILLISECONDS)
    while not app.should_exit:
        draw(stdscr, app)
        code = stdscr.getch()
        if 0 <= code < 256:
            app.handle_key(chr(code))


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="labyrintuine",
        description="Browse labyrinth maps and watch them in the terminal.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="directory scanned for .labmap files (default: current directory)",
    )
    args = parser.parse_args(argv)
    curses.wrapper(run, App(args.directory))
    return 0