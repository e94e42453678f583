from __future__ import annotations

from typing import List

import pytest

from textview_engine.config import Alignment, TextViewConfig
from textview_engine.keymaps import KeyInput
from textview_engine.render import CellGrid
from textview_engine.view import TextView


def draw(view: TextView, width: int, height: int) -> CellGrid:
    grid = CellGrid(width, height)
    view.draw(grid, width, height)
    return grid


def numbered(count: int) -> str:
    return "".join(f"line {i}\n" for i in range(count))


def test_track_end_follows_appended_lines() -> None:
    view = TextView()
    for i in range(12):
        view.write(f"line {i}\n")
        draw(view, 20, 5)
        total = len(view.reindex(20))
        line, _ = view.scroll_offset
        assert line == max(total - 5, 0)
        assert view.track_end


def test_scrolling_up_stops_following() -> None:
    view = TextView()
    view.write(numbered(20))
    draw(view, 20, 5)
    assert view.scroll_offset == (16, 0)

    result = view.handle_key(KeyInput("k"))
    assert result.consumed
    assert result.action == "nav.up"
    assert not view.track_end

    draw(view, 20, 5)
    assert view.scroll_offset == (15, 0)


def test_scroll_to_beginning_and_end() -> None:
    view = TextView()
    view.write(numbered(20))
    draw(view, 20, 5)

    view.scroll_to_beginning()
    grid = draw(view, 20, 5)
    assert view.scroll_offset == (0, 0)
    assert grid.lines()[0] == "line 0"

    view.scroll_to_end()
    grid = draw(view, 20, 5)
    assert view.scroll_offset == (16, 0)
    assert grid.lines() == ["line 16", "line 17", "line 18", "line 19", ""]


def test_paging_uses_last_drawn_height() -> None:
    view = TextView()
    view.write(numbered(50))
    draw(view, 20, 10)
    assert view.scroll_offset == (0, 0)

    view.handle_key(KeyInput("PGDN"))
    draw(view, 20, 10)
    assert view.scroll_offset == (10, 0)

    view.handle_key(KeyInput("f", modifiers=("ctrl",)))
    draw(view, 20, 10)
    assert view.scroll_offset == (20, 0)

    view.handle_key(KeyInput("PGUP"))
    draw(view, 20, 10)
    assert view.scroll_offset == (10, 0)


def test_line_offset_never_goes_negative() -> None:
    view = TextView()
    view.write(numbered(3))
    view.scroll_to(-7, 0)

    draw(view, 20, 10)

    assert view.scroll_offset == (0, 0)


def _regioned_lines(first: int, last: int, total: int = 30) -> str:
    lines: List[str] = []
    for i in range(total):
        text = f"line {i}"
        if i == first:
            text = '["a"]' + text
        if i == last:
            text += '[""]'
        lines.append(text)
    return "\n".join(lines) + "\n"


def test_scroll_to_highlight_centers_region() -> None:
    view = TextView(TextViewConfig(regions=True))
    view.write(_regioned_lines(20, 22))
    view.highlight("a")
    view.scroll_to_beginning()
    view.scroll_to_highlight()

    draw(view, 20, 10)

    assert view.scroll_offset == (16, 0)
    assert not view.track_end


def test_scroll_to_highlight_near_top_clamps_to_zero() -> None:
    view = TextView(TextViewConfig(regions=True))
    view.write(_regioned_lines(3, 5))
    view.highlight("a")
    view.scroll_to_highlight()

    draw(view, 20, 10)

    assert view.scroll_offset == (0, 0)


def test_tall_highlight_aligns_to_top() -> None:
    view = TextView(TextViewConfig(regions=True))
    view.write(_regioned_lines(5, 19))
    view.highlight("a")
    view.scroll_to_highlight()

    draw(view, 20, 10)

    assert view.scroll_offset == (5, 0)


def test_scroll_to_highlight_is_one_shot() -> None:
    view = TextView(TextViewConfig(regions=True))
    view.write(_regioned_lines(20, 22))
    view.highlight("a")
    view.scroll_to_highlight()
    draw(view, 20, 10)

    view.scroll_to(2, 0)
    draw(view, 20, 10)

    assert view.scroll_offset == (2, 0)


def test_scroll_to_highlight_needs_regions() -> None:
    view = TextView()
    view.write(_regioned_lines(20, 22))
    view.highlight("a")
    view.scroll_to_beginning()
    view.scroll_to_highlight()

    draw(view, 20, 10)

    assert view.scroll_offset == (0, 0)


@pytest.mark.parametrize(
    ("align", "requested", "expected"),
    [
        (Alignment.LEFT, 100, 20),
        (Alignment.LEFT, -5, 0),
        (Alignment.RIGHT, -100, -20),
        (Alignment.RIGHT, 5, 0),
        (Alignment.CENTER, 100, 10),
        (Alignment.CENTER, -100, -10),
    ],
)
def test_column_offset_is_clamped_per_alignment(
    align: Alignment, requested: int, expected: int
) -> None:
    view = TextView(TextViewConfig(wrap=False, align=align))
    view.write("x" * 30)
    view.scroll_to(0, requested)

    draw(view, 10, 3)

    assert view.scroll_offset == (0, expected)


def test_column_offset_resets_when_content_fits() -> None:
    view = TextView(TextViewConfig(wrap=False, align=Alignment.CENTER))
    view.write("short")
    view.scroll_to(0, 4)

    draw(view, 10, 3)

    assert view.scroll_offset == (0, 0)


def test_horizontal_scroll_skips_leading_cells() -> None:
    view = TextView(TextViewConfig(wrap=False))
    view.write("0123456789abcdef")
    view.handle_key(KeyInput("l"))
    view.handle_key(KeyInput("RIGHT"))

    grid = draw(view, 5, 1)

    assert grid.lines() == ["23456"]


def test_non_scrollable_view_evicts_scrolled_lines() -> None:
    view = TextView(TextViewConfig(scrollable=False))
    view.write("".join(f"l{i}\n" for i in range(10)))

    grid = draw(view, 10, 3)

    assert grid.lines() == ["l8", "l9", ""]
    assert view.line_count == 3
    assert view.get_text() == "l8\nl9\n"


def test_non_scrollable_view_ignores_navigation() -> None:
    view = TextView(TextViewConfig(scrollable=False))
    view.write(numbered(10))

    result = view.handle_key(KeyInput("j"))
    view.scroll_to_beginning()

    assert not result.consumed
    assert result.status == "ignored"
    assert view.track_end


def test_evict_scrolled_lines_is_noop_while_scrollable() -> None:
    view = TextView()
    view.write(numbered(10))
    draw(view, 10, 3)

    assert view.evict_scrolled_lines() == 0
    assert view.line_count == 11


def test_configure_scrollable_false_pins_to_end() -> None:
    view = TextView()
    view.write(numbered(10))
    view.scroll_to_beginning()

    view.configure(scrollable=False)
    draw(view, 10, 3)

    assert view.track_end
    assert view.line_count == 3
