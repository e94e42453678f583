"""Navigation commands bound to keys by the default keymap."""

from __future__ import annotations

from textview_engine.viewport import ViewportScroller


def scroll_home(scroller: ViewportScroller) -> None:
    scroller.to_top()


def scroll_end(scroller: ViewportScroller) -> None:
    scroller.to_bottom()


def scroll_down(scroller: ViewportScroller) -> None:
    scroller.move_line(1)


def scroll_up(scroller: ViewportScroller) -> None:
    scroller.move_line(-1)


def scroll_left(scroller: ViewportScroller) -> None:
    scroller.move_column(-1)


def scroll_right(scroller: ViewportScroller) -> None:
    scroller.move_column(1)


def page_down(scroller: ViewportScroller) -> None:
    scroller.page_down()


def page_up(scroller: ViewportScroller) -> None:
    scroller.page_up()


__all__ = [
    "scroll_home",
    "scroll_end",
    "scroll_down",
    "scroll_up",
    "scroll_left",
    "scroll_right",
    "page_down",
    "page_up",
]
