"""Console utilities for Smart To-Do."""

from functools import lru_cache

from rich.console import Console
from rich.theme import Theme

THEMES = {
    "light": Theme(
        {
            "task.title": "bold black",
            "task.desc": "grey39",
            "task.done": "strike grey50",
            "task.meta": "grey50",
        }
    ),
    "dark": Theme(
        {
            "task.title": "bold bright_white",
            "task.desc": "grey70",
            "task.done": "strike grey42",
            "task.meta": "grey58",
        }
    ),
}

_active_theme = "light"


def use_theme(theme: str) -> None:
    """Select the theme used by subsequent get_console() calls."""
    global _active_theme
    _active_theme = theme if theme in THEMES else "light"


@lru_cache(maxsize=4)
def _make_console(highlight: bool, theme: str) -> Console:
    return Console(highlight=highlight, theme=THEMES[theme])


def get_console(highlight: bool = True) -> Console:
    """Get a Rich Console instance for consistent output formatting."""
    return _make_console(highlight, _active_theme)
