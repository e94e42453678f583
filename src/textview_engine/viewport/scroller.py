"""Viewport offsets, navigation commands and draw-time clamping."""

from __future__ import annotations

from dataclasses import dataclass

from textview_engine.config import Alignment
from textview_engine.layout import LineIndex


@dataclass(slots=True)
class ViewportState:
    """Scroll position of the view.

    Offsets may leave their legal range between draws; ``ViewportScroller.clamp``
    pulls them back right before painting.
    """

    line_offset: int = 0
    column_offset: int = 0
    track_end: bool = False
    scroll_to_highlight: bool = False
    page_size: int = 0


class ViewportScroller:
    """Applies navigation commands to a ``ViewportState``.

    While the view is not scrollable every command is ignored and the view
    stays pinned to the end of the content.
    """

    def __init__(self, state: ViewportState | None = None, *, scrollable: bool = True):
        self.state = state or ViewportState()
        self.scrollable = scrollable

    @property
    def scrollable(self) -> bool:
        return self._scrollable

    @scrollable.setter
    def scrollable(self, value: bool) -> None:
        self._scrollable = value
        if not value:
            self.state.track_end = True

    def move_line(self, delta: int) -> None:
        if not self._scrollable:
            return
        if delta < 0:
            self.state.track_end = False
        self.state.line_offset += delta

    def move_column(self, delta: int) -> None:
        if not self._scrollable:
            return
        self.state.column_offset += delta

    def page_down(self) -> None:
        self.move_line(self.state.page_size)

    def page_up(self) -> None:
        if not self._scrollable:
            return
        self.state.track_end = False
        self.state.line_offset -= self.state.page_size

    def to_top(self) -> None:
        if not self._scrollable:
            return
        self.state.track_end = False
        self.state.line_offset = 0
        self.state.column_offset = 0

    def to_bottom(self) -> None:
        if not self._scrollable:
            return
        self.state.track_end = True
        self.state.column_offset = 0

    def scroll_to(self, line: int, column: int) -> None:
        if not self._scrollable:
            return
        self.state.track_end = False
        self.state.line_offset = line
        self.state.column_offset = column

    def request_scroll_to_highlight(self) -> bool:
        """Arm the one-shot jump to the highlight; return whether it was armed."""

        if not self._scrollable:
            return False
        self.state.scroll_to_highlight = True
        self.state.track_end = False
        return True

    def clamp(
        self,
        index: LineIndex,
        width: int,
        height: int,
        *,
        align: Alignment,
        regions: bool,
    ) -> None:
        state = self.state
        total = len(index)

        if regions and state.scroll_to_highlight and index.has_highlight:
            first, last = index.from_highlight, index.to_highlight
            if last - first + 1 < height:
                state.line_offset = (first + last - height) // 2
            else:
                state.line_offset = first
        state.scroll_to_highlight = False

        if state.line_offset + height > total:
            state.track_end = True
        if state.track_end:
            state.line_offset = total - height
        if state.line_offset < 0:
            state.line_offset = 0

        overflow = index.longest_line - width
        if align is Alignment.LEFT:
            state.column_offset = min(state.column_offset, max(overflow, 0))
            state.column_offset = max(state.column_offset, 0)
        elif align is Alignment.RIGHT:
            state.column_offset = max(state.column_offset, -max(overflow, 0))
            state.column_offset = min(state.column_offset, 0)
        else:
            half = overflow // 2
            if half > 0:
                state.column_offset = max(-half, min(state.column_offset, half))
            else:
                state.column_offset = 0


__all__ = ["ViewportState", "ViewportScroller"]
