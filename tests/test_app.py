import pytest

from labyrintuine.app import App, AppStateError, MainMenuItem, OptionsMenuItem, Screen
from labyrintuine.maps import default_map


MAZES = {
    "a.labmap": "2222\n1334\n2222\n",
    "b.labmap": "22222\n13334\n22222\n",
    "c.labmap": "222\n134\n222\n",
}


@pytest.fixture
def maze_dir(tmp_path):
    for name, text in MAZES.items():
        (tmp_path / name).write_text(text, encoding="utf-8")
    (tmp_path / "bad.labmap").write_text("2x22\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("2222\n", encoding="utf-8")
    return tmp_path


def open_map_menu(app):
    app.handle_key("j")
    app.handle_key("l")
    app.handle_key("l")
    return app


def test_initial_state(tmp_path):
    app = App(tmp_path)
    assert app.screen is Screen.MAIN_MENU
    assert app.main_item is MainMenuItem.START_GAME
    assert app.map == default_map()
    assert app.should_exit is False


def test_main_menu_moves_down_and_stops():
    app = App()
    seen = []
    for _ in range(3):
        app.move_down()
        seen.append(app.main_item)
    assert seen == [MainMenuItem.OPTIONS, MainMenuItem.QUIT, MainMenuItem.QUIT]


def test_main_menu_moves_up_and_stops():
    app = App()
    app.move_down()
    app.move_down()
    seen = []
    for _ in range(3):
        app.move_up()
        seen.append(app.main_item)
    assert seen == [MainMenuItem.OPTIONS, MainMenuItem.START_GAME, MainMenuItem.START_GAME]


def test_q_key_exits():
    app = App()
    app.handle_key("q")
    assert app.should_exit is True


def test_selecting_quit_exits():
    app = App()
    app.handle_key("j")
    app.handle_key("j")
    app.handle_key("l")
    assert app.should_exit is True


def test_start_game_enters_game_and_ignores_navigation():
    app = App()
    app.select()
    assert app.screen is Screen.IN_GAME
    for key in "jklh":
        app.handle_key(key)
    assert app.screen is Screen.IN_GAME
    assert app.should_exit is False


def test_unknown_key_is_ignored():
    app = App()
    app.handle_key("x")
    assert app.screen is Screen.MAIN_MENU
    assert app.main_item is MainMenuItem.START_GAME


def test_options_menu_navigation_and_return():
    app = App()
    app.move_down()
    app.select()
    assert app.screen is Screen.OPTIONS_MENU
    assert app.options_item is OptionsMenuItem.MAP
    app.move_down()
    assert app.options_item is OptionsMenuItem.BACK
    app.move_down()
    assert app.options_item is OptionsMenuItem.BACK
    app.move_up()
    assert app.options_item is OptionsMenuItem.MAP
    app.move_down()
    app.select()
    assert app.screen is Screen.MAIN_MENU
    assert app.main_item is MainMenuItem.START_GAME


def test_map_menu_loads_valid_maps(maze_dir):
    app = open_map_menu(App(maze_dir))
    assert app.screen is Screen.MAP_MENU
    assert [item.key for item in app.maps] == ["Default", "a", "b", "c"]
    assert app.viewport_map == default_map()
    assert app.viewport_offset == 0


def test_map_menu_reload_does_not_duplicate(maze_dir):
    app = open_map_menu(App(maze_dir))
    app.back()
    app.select()
    assert [item.key for item in app.maps] == ["Default", "a", "b", "c"]


def test_viewport_maps_window(maze_dir):
    app = open_map_menu(App(maze_dir))
    app.viewport_height = 2
    app.viewport_offset = 1
    assert app.viewport_maps() == app.maps[1:3]


def test_scrolling_down_keeps_cursor_visible(maze_dir):
    app = open_map_menu(App(maze_dir))
    app.viewport_height = 2
    keys = []
    offsets = []
    for _ in range(4):
        app.move_down()
        keys.append(app.viewport_map.key)
        offsets.append(app.viewport_offset)
        assert app.viewport_map in app.viewport_maps()
    assert keys == ["a", "b", "c", "c"]
    assert offsets == [0, 1, 2, 2]


def test_scrolling_up_keeps_cursor_visible(maze_dir):
    app = open_map_menu(App(maze_dir))
    app.viewport_height = 2
    for _ in range(3):
        app.move_down()
    keys = []
    for _ in range(4):
        app.move_up()
        keys.append(app.viewport_map.key)
        assert app.viewport_map in app.viewport_maps()
    assert keys == ["b", "a", "Default", "Default"]
    assert app.viewport_offset == 0


def test_large_viewport_never_scrolls(maze_dir):
    app = open_map_menu(App(maze_dir))
    app.viewport_height = 10
    for _ in range(5):
        app.move_down()
    assert app.viewport_offset == 0
    assert app.viewport_map == app.maps[-1]


def test_move_in_map_menu_without_viewport_raises(maze_dir):
    app = open_map_menu(App(maze_dir))
    app.viewport_height = 0
    with pytest.raises(AppStateError):
        app.move_down()
    with pytest.raises(AppStateError):
        app.move_up()


def test_move_in_map_menu_without_cursor_raises(maze_dir):
    app = open_map_menu(App(maze_dir))
    app.viewport_height = 2
    app.viewport_map = None
    with pytest.raises(AppStateError):
        app.move_down()
    with pytest.raises(AppStateError):
        app.select()


def test_select_in_map_menu_chooses_map(maze_dir):
    app = open_map_menu(App(maze_dir))
    app.viewport_height = 4
    app.move_down()
    app.move_down()
    app.select()
    assert app.map == app.maps[2]
    assert app.map.rows == ("22222", "13334", "22222")
    assert app.screen is Screen.MAP_MENU


def test_back_leaves_map_menu(maze_dir):
    app = open_map_menu(App(maze_dir))
    app.handle_key("h")
    assert app.screen is Screen.OPTIONS_MENU
    assert app.options_item is OptionsMenuItem.MAP


def test_back_outside_map_menu_does_nothing():
    app = App()
    app.back()
    assert app.screen is Screen.MAIN_MENU


def test_missing_directory_raises(tmp_path):
    app = App(tmp_path / "absent")
    app.move_down()
    app.select()
    with pytest.raises(OSError):
        app.select()
    assert app.screen is Screen.MAP_MENU
    assert app.maps == [default_map()]