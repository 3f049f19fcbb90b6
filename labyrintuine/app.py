"""Application state and the key-driven transitions between screens."""

from __future__ import annotations

import os
from enum import Enum

from labyrintuine.maps import Map, default_map, load_maps


class AppStateError(RuntimeError):
    """Raised when the application state does not allow the requested action."""


class Screen(Enum):
    """The screen currently shown."""

    MAIN_MENU = "Main Menu"
    OPTIONS_MENU = "Options Menu"
    IN_GAME = "In Game"
    MAP_MENU = "Map list"


class MainMenuItem(Enum):
    """Entries of the main menu, in display order."""

    START_GAME = "Start Game"
    OPTIONS = "Options"
    QUIT = "Quit"


class OptionsMenuItem(Enum):
    """Entries of the options menu, in display order."""

    MAP = "Map"
    BACK = "Return"


_MAIN_DOWN = {
    MainMenuItem.START_GAME: MainMenuItem.OPTIONS,
    MainMenuItem.OPTIONS: MainMenuItem.QUIT,
}
_MAIN_UP = {
    MainMenuItem.QUIT: MainMenuItem.OPTIONS,
    MainMenuItem.OPTIONS: MainMenuItem.START_GAME,
}
_OPTIONS_DOWN = {OptionsMenuItem.MAP: OptionsMenuItem.BACK}
_OPTIONS_UP = {OptionsMenuItem.BACK: OptionsMenuItem.MAP}


class App:
    """The state of the game: current screen, menu cursors and the map list viewport."""

    def __init__(self, directory: str | os.PathLike[str] = ".") -> None:
        self.directory = directory
        self.should_exit = False
        self.screen = Screen.MAIN_MENU
        self.main_item = MainMenuItem.START_GAME
        self.options_item = OptionsMenuItem.MAP
        self.map: Map = default_map()
        self.maps: list[Map] = []
        self.viewport_map: Map | None = None
        self.viewport_offset = 0
        self.viewport_height = 0

    def handle_key(self, key: str) -> None:
        """Apply the action bound to a key; unbound keys are ignored."""
        if key == "q":
            self.should_exit = True
            return
        action = {
            "j": self.move_down,
            "k": self.move_up,
            "l": self.select,
            "h": self.back,
        }.get(key)
        if action is not None:
            action()

    def _cursor(self) -> Map:
        if self.viewport_map is None:
            raise AppStateError("failed to retrieve cursor-selected map")
        return self.viewport_map

    def _cursor_index(self, cursor: Map) -> int:
        return next((index for index, item in enumerate(self.maps) if item == cursor), 0)

    def viewport_maps(self) -> list[Map]:
        """Return the maps visible in the map menu's scrolled window."""
        return self.maps[self.viewport_offset : self.viewport_offset + self.viewport_height]

    def move_down(self) -> None:
        """Move the cursor of the current menu one entry down."""
        if self.screen is Screen.MAIN_MENU:
            self.main_item = _MAIN_DOWN.get(self.main_item, self.main_item)
        elif self.screen is Screen.OPTIONS_MENU:
            self.options_item = _OPTIONS_DOWN.get(self.options_item, self.options_item)
        elif self.screen is Screen.MAP_MENU:
            cursor = self._cursor()
            window = self.viewport_maps()
            if not window:
                raise AppStateError("no last element in viewport maps")
            if not self.maps:
                raise AppStateError("failed to retrieve last map")
            if cursor == window[-1] and cursor != self.maps[-1]:
                self.viewport_offset += 1
            following = self._cursor_index(cursor) + 1
            if following < len(self.maps):
                self.viewport_map = self.maps[following]

    def move_up(self) -> None:
        """Move the cursor of the current menu one entry up."""
        if self.screen is Screen.MAIN_MENU:
            self.main_item = _MAIN_UP.get(self.main_item, self.main_item)
        elif self.screen is Screen.OPTIONS_MENU:
            self.options_item = _OPTIONS_UP.get(self.options_item, self.options_item)
        elif self.screen is Screen.MAP_MENU:
            cursor = self._cursor()
            window = self.viewport_maps()
            if not window:
                raise AppStateError("no first element in viewport maps")
            if not self.maps:
                raise AppStateError("failed to retrieve first map")
            if cursor == window[0] and cursor != self.maps[0]:
                if self.viewport_offset == 0:
                    raise AppStateError("viewport cannot scroll above the first map")
                self.viewport_offset -= 1
            previous = max(self._cursor_index(cursor) - 1, 0)
            if previous < len(self.maps):
                self.viewport_map = self.maps[previous]

    def select(self) -> None:
        """Activate the entry under the cursor."""
        if self.screen is Screen.MAIN_MENU:
            if self.main_item is MainMenuItem.START_GAME:
                self.screen = Screen.IN_GAME
            elif self.main_item is MainMenuItem.OPTIONS:
                self.screen = Screen.OPTIONS_MENU
                self.options_item = OptionsMenuItem.MAP
            else:
                self.should_exit = True
        elif self.screen is Screen.OPTIONS_MENU:
            if self.options_item is OptionsMenuItem.MAP:
                self.screen = Screen.MAP_MENU
                first = default_map()
                self.maps = [first]
                self.maps.extend(load_maps(self.directory))
                self.viewport_map = first
                self.viewport_offset = 0
            else:
                self.screen = Screen.MAIN_MENU
                self.main_item = MainMenuItem.START_GAME
        elif self.screen is Screen.MAP_MENU:
            self.map = self._cursor()

    def back(self) -> None:
        """Leave the map menu for the options menu."""
        if self.screen is Screen.MAP_MENU:
            self.screen = Screen.OPTIONS_MENU
            self.options_item = OptionsMenuItem.MAP