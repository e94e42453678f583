"""Action implementations invoked through keymaps."""

from .navigation import (
    page_down,
    page_up,
    scroll_down,
    scroll_end,
    scroll_home,
    scroll_left,
    scroll_right,
    scroll_up,
)

__all__ = [
    "page_down",
    "page_up",
    "scroll_down",
    "scroll_end",
    "scroll_home",
    "scroll_left",
    "scroll_right",
    "scroll_up",
]
