"""Terminal labyrinth game: maze maps, their exploration, menu state and a curses interface."""

__version__ = "0.1.0"
__all__ = ["app", "maps", "solver", "ui"]