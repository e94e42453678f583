"""Textual widget hosting a TextView through the Line API."""

from __future__ import annotations

import threading
from typing import List, Optional

from textual import events
from textual.geometry import Size
from textual.message import Message
from textual.strip import Strip
from textual.widget import Widget

from textview_engine.view import TextView

from .controller import TextualHooks, TextualTextViewAdapter


class TextViewWidget(Widget, can_focus=True):
    """Paints a ``TextView`` and forwards keys to it.

    ``view.write`` may be called from worker threads; change notifications
    are marshalled back onto the app thread before repainting.
    """

    DEFAULT_CSS = """
    TextViewWidget {
        height: 1fr;
    }
    """

    class Done(Message):
        """Posted when the view sees Escape, Enter, Tab or Backtab."""

        def __init__(self, key: str) -> None:
            super().__init__()
            self.key = key

    class StatusChanged(Message):
        def __init__(self, status: str) -> None:
            super().__init__()
            self.status = status

    def __init__(
        self,
        view: TextView | None = None,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.view = view or TextView()
        self._frame: Optional[List[Strip]] = None
        self._frame_size: Optional[Size] = None
        self._thread_id = threading.get_ident()
        self.adapter = TextualTextViewAdapter(
            self.view,
            TextualHooks(
                refresh=self._schedule_refresh,
                done=lambda key: self.post_message(self.Done(key)),
                update_status=lambda status: self.post_message(
                    self.StatusChanged(status)
                ),
            ),
        )

    def on_mount(self) -> None:
        self._thread_id = threading.get_ident()

    def on_key(self, event: events.Key) -> None:
        result = self.adapter.handle_textual_key(event.key, character=event.character)
        if result is not None and result.consumed:
            event.stop()
            event.prevent_default()

    def render_line(self, y: int) -> Strip:
        size = self.size
        if self._frame is None or self._frame_size != size:
            self._frame = self.adapter.render_strips(
                size.width, size.height, self.rich_style
            )
            self._frame_size = size
        if 0 <= y < len(self._frame):
            return self._frame[y]
        return Strip.blank(size.width, self.rich_style)

    def _schedule_refresh(self) -> None:
        if threading.get_ident() == self._thread_id:
            self._invalidate()
        else:
            self.app.call_from_thread(self._invalidate)

    def _invalidate(self) -> None:
        self._frame = None
        self.refresh()


__all__ = ["TextViewWidget"]
