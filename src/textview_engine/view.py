"""The text view engine: buffer, index, viewport and drawing behind one lock."""

from __future__ import annotations

import threading
from bisect import bisect_left
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Tuple

from rich.color import Color
from rich.style import Style

from textview_engine.buffer import LineBuffer, StreamIngest, region_text
from textview_engine.config import (
    LAYOUT_FIELDS,
    Alignment,
    TextViewConfig,
    check_field_names,
)
from textview_engine.keymaps import KeyInput, KeymapRegistry, load_default_keymaps
from textview_engine.layout import DisplayLineEntry, LineIndex, build_index, char_width
from textview_engine.markup import TagKind, resolve_color, strip_tags
from textview_engine.render import CellTarget
from textview_engine.runtime import telemetry
from textview_engine.viewport import ViewportScroller, ViewportState

DONE_KEYS = frozenset({"ESC", "ENTER", "TAB", "BACKTAB"})

ChangedHandler = Callable[[], None]
DoneHandler = Callable[[str], None]


@dataclass(slots=True)
class InputResult:
    consumed: bool
    action: Optional[str] = None
    status: str = "ok"


class TextView:
    """Scrollable, markup-aware text display fed by a byte stream.

    ``write`` may be called from any thread. ``draw`` re-derives the display
    index when it is stale, clamps the viewport and paints the visible rows.
    Callbacks run after the internal lock has been released, so they may
    call back into the view.
    """

    def __init__(
        self,
        config: TextViewConfig | None = None,
        *,
        keymaps: KeymapRegistry | None = None,
        changed: ChangedHandler | None = None,
        done: DoneHandler | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._config = config or TextViewConfig()
        self._buffer = LineBuffer()
        self._ingest = StreamIngest()
        self._index: Optional[LineIndex] = None
        self._highlights: set[str] = set()
        self._scroller = ViewportScroller(
            ViewportState(), scrollable=self._config.scrollable
        )
        self._keymaps = keymaps or load_default_keymaps(
            KeymapRegistry(logger_name="textview_engine.keymaps")
        )
        self._changed = changed
        self._done = done

    # -- configuration -------------------------------------------------

    @property
    def config(self) -> TextViewConfig:
        return self._config

    def configure(self, **changes: object) -> TextViewConfig:
        """Apply configuration changes, invalidating the index when needed."""

        check_field_names(changes)
        with self._lock:
            updated = replace(self._config, **changes)
            if any(
                getattr(updated, name) != getattr(self._config, name)
                for name in LAYOUT_FIELDS
            ):
                self._index = None
            self._config = updated
            self._scroller.scrollable = updated.scrollable
            return updated

    def set_changed_func(self, handler: ChangedHandler | None) -> None:
        self._changed = handler

    def set_done_func(self, handler: DoneHandler | None) -> None:
        self._done = handler

    # -- content ---------------------------------------------------------

    def write(self, data: bytes | str) -> int:
        """Append ``data`` to the buffer and return the number of bytes accepted.

        Text is encoded as UTF-8 first, so it queues behind any partial
        multi-byte sequence left by an earlier write.
        """

        if isinstance(data, str):
            data = data.encode("utf-8")
        with self._lock:
            config = self._config
            segments = self._ingest.feed(
                data,
                colors=config.dynamic_colors,
                regions=config.regions,
                tab_size=config.tab_size,
            )
            self._buffer.extend(segments)
            self._index = None
            line_count = len(self._buffer)
            pending = self._ingest.pending
            changed = self._changed
        telemetry.record_event(
            "textview.write",
            level="debug",
            data={"size": len(data), "lines": line_count, "pending": pending},
        )
        if changed is not None:
            changed()
        return len(data)

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()
            self._ingest.reset()
            self._index = None
            changed = self._changed
        if changed is not None:
            changed()

    def get_text(self, stripped: bool = False) -> str:
        """Return the buffer joined by newlines, optionally without markup."""

        with self._lock:
            lines = self._buffer.snapshot()
            config = self._config
        if stripped:
            lines = [
                strip_tags(line, colors=config.dynamic_colors, regions=config.regions)
                for line in lines
            ]
        return "\n".join(lines)

    @property
    def line_count(self) -> int:
        with self._lock:
            return len(self._buffer)

    # -- regions and highlights -----------------------------------------

    def highlight(self, *region_ids: str) -> None:
        """Replace the highlighted regions; empty ids are ignored."""

        with self._lock:
            self._highlights = {region for region in region_ids if region}
            self._index = None
            active = sorted(self._highlights)
        telemetry.record_event(
            "textview.highlight", level="debug", data={"regions": active}
        )

    @property
    def highlights(self) -> List[str]:
        with self._lock:
            return sorted(self._highlights)

    def scroll_to_highlight(self) -> None:
        """Bring the highlighted regions into view on the next draw, once."""

        with self._lock:
            if not self._highlights or not self._config.regions:
                return
            if self._scroller.request_scroll_to_highlight():
                self._index = None

    def region_text(self, region_id: str) -> str:
        with self._lock:
            lines = self._buffer.snapshot()
            config = self._config
        return region_text(
            lines,
            region_id,
            colors=config.dynamic_colors,
            regions=config.regions,
        )

    # -- scrolling -------------------------------------------------------

    def scroll_to_beginning(self) -> None:
        with self._lock:
            self._scroller.to_top()

    def scroll_to_end(self) -> None:
        with self._lock:
            self._scroller.to_bottom()

    def scroll_to(self, line: int, column: int) -> None:
        with self._lock:
            self._scroller.scroll_to(line, column)

    @property
    def scroll_offset(self) -> Tuple[int, int]:
        with self._lock:
            state = self._scroller.state
            return state.line_offset, state.column_offset

    @property
    def track_end(self) -> bool:
        with self._lock:
            return self._scroller.state.track_end

    def handle_key(self, key: KeyInput) -> InputResult:
        """Run the navigation bound to ``key`` or report a done key."""

        token = key.token
        if token in DONE_KEYS:
            done = self._done
            if done is not None:
                done(token)
            return InputResult(consumed=True, action="done")

        with self._lock:
            if not self._config.scrollable:
                return InputResult(consumed=False, status="ignored")
            action = self._keymaps.resolve(token)
            if action is None:
                return InputResult(consumed=False, status="unbound")
            action(self._scroller)
        return InputResult(consumed=True, action=action.id)

    # -- layout and drawing ----------------------------------------------

    def reindex(self, width: int) -> LineIndex:
        """Return the display index for ``width``, rebuilding it if stale."""

        with self._lock:
            return self._ensure_index(width)

    def display_lines(self, width: int) -> List[str]:
        """Bare text of every display line at ``width``."""

        index = self.reindex(width)
        return [index.entry_text(position) for position in range(len(index))]

    def draw(self, target: CellTarget, width: int, height: int, *, x: int = 0, y: int = 0) -> None:
        """Paint the visible part of the text into ``target``.

        When the view is not scrollable, drawing also evicts every logical
        line that has scrolled fully above the first visible row.
        """

        if width < 0 or height < 0:
            raise ValueError("draw area must not have negative dimensions")

        with self._lock:
            state = self._scroller.state
            state.page_size = height
            index = self._ensure_index(width)
            if not index.entries:
                return
            config = self._config
            self._scroller.clamp(
                index, width, height, align=config.align, regions=config.regions
            )
            background = resolve_color(config.background_color)

            last = min(len(index), state.line_offset + height)
            for row, position in enumerate(range(state.line_offset, last)):
                self._paint_entry(
                    target,
                    index,
                    index.entries[position],
                    x=x,
                    y=y + row,
                    width=width,
                    background=background,
                )

            if not config.scrollable:
                self._evict_scrolled_lines(index)

    def evict_scrolled_lines(self) -> int:
        """Drop logical lines fully above the viewport of a non-scrollable view."""

        with self._lock:
            if self._config.scrollable or self._index is None:
                return 0
            return self._evict_scrolled_lines(self._index)

    # -- internals (lock held) -----------------------------------------

    def _ensure_index(self, width: int) -> LineIndex:
        index = self._index
        if index is not None and index.width == width:
            return index
        config = self._config
        index = build_index(
            self._buffer.snapshot(),
            width,
            wrap=config.wrap,
            word_wrap=config.word_wrap,
            colors=config.dynamic_colors,
            regions=config.regions,
            highlights=frozenset(self._highlights),
            text_color=resolve_color(config.text_color),
        )
        self._index = index
        return index

    def _evict_scrolled_lines(self, index: LineIndex) -> int:
        offset = self._scroller.state.line_offset
        if offset <= 0 or offset >= len(index):
            return 0
        removed = self._buffer.drop_before(index.entries[offset].line)
        if removed:
            self._index = None
            telemetry.record_event(
                "textview.evict", level="debug", data={"lines": removed}
            )
        return removed

    def _paint_entry(
        self,
        target: CellTarget,
        index: LineIndex,
        entry: DisplayLineEntry,
        *,
        x: int,
        y: int,
        width: int,
        background: Color,
    ) -> None:
        config = self._config
        column = self._scroller.state.column_offset
        if config.align is Alignment.LEFT:
            pos_x = -column
        elif config.align is Alignment.RIGHT:
            pos_x = width - entry.width - column
        else:
            pos_x = (width - entry.width) // 2 - column
        skip = 0
        if pos_x < 0:
            skip = -pos_x
            pos_x = 0

        scanned = index.scans[entry.line]
        first = bisect_left(scanned.offsets, entry.start)
        stop = bisect_left(scanned.offsets, entry.end)
        tags = [
            tag
            for tag in scanned.state_tags
            if entry.start <= tag.start < entry.end
        ]
        color = entry.color
        region = entry.region
        tag_cursor = 0
        skipped = 0

        for position in range(first, stop):
            while tag_cursor < len(tags) and tags[tag_cursor].position <= position:
                tag = tags[tag_cursor]
                if tag.kind is TagKind.COLOR:
                    color = resolve_color(tag.payload)
                else:
                    region = tag.payload
                tag_cursor += 1

            char = scanned.text[position]
            cells = char_width(char)
            if cells == 0:
                continue
            if not config.wrap and skipped < skip:
                skipped += cells
                continue
            if pos_x + cells > width:
                break

            if region and region in self._highlights:
                style = Style(color=background, bgcolor=color)
            else:
                style = Style(color=color, bgcolor=background)
            target.set_cell(x + pos_x, y, char, style)
            for extra in range(1, cells):
                target.set_cell(x + pos_x + extra, y, "", style)
            pos_x += cells


__all__ = ["DONE_KEYS", "InputResult", "TextView"]
