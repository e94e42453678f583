"""Textual adapter that wires a TextView into UI callbacks and strips."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from rich.segment import Segment
from rich.style import Style
from textual.strip import Strip

from textview_engine.keymaps import KeyInput
from textview_engine.render import CellGrid
from textview_engine.view import InputResult, TextView


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    refresh: Callable[[], None]
    done: Callable[[str], None] = _noop
    update_status: Callable[[str], None] = _noop
    # Optional realtime debug line sink
    log: Callable[[str], None] = _noop


_TEXTUAL_KEYS: Dict[str, str] = {
    "escape": "ESC",
    "enter": "ENTER",
    "tab": "TAB",
    "shift+tab": "BACKTAB",
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
    "home": "HOME",
    "end": "END",
    "pageup": "PGUP",
    "pagedown": "PGDN",
}


def normalize_textual_key(key: str, character: Optional[str] = None) -> Optional[KeyInput]:
    """Translate a Textual key name into the engine's ``KeyInput``."""

    named = _TEXTUAL_KEYS.get(key)
    if named is not None:
        return KeyInput(key=named)
    if key.startswith("ctrl+") and len(key) > len("ctrl+"):
        return KeyInput(key=key[len("ctrl+") :], modifiers=("ctrl",))
    if character and len(character) == 1 and character.isprintable():
        return KeyInput(key=character, text=character)
    return None


class TextualTextViewAdapter:
    """Bridges a ``TextView`` to a Textual-friendly surface."""

    def __init__(self, view: TextView, hooks: TextualHooks) -> None:
        self.view = view
        self.hooks = hooks
        view.set_changed_func(self._content_changed)
        view.set_done_func(self._done)

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> Optional[InputResult]:
        stroke = normalize_textual_key(key, character)
        if stroke is None:
            return None
        result = self.view.handle_key(stroke)
        self._log_state(
            "key ->",
            key=stroke.token,
            consumed=result.consumed,
            action=result.action,
            status=result.status,
        )
        if result.consumed and result.action != "done":
            self.hooks.update_status(self.status_text())
            self.hooks.refresh()
        return result

    def render_strips(
        self, width: int, height: int, base_style: Optional[Style] = None
    ) -> List[Strip]:
        """Draw the view into a fresh grid and convert each row to a ``Strip``."""

        grid = CellGrid(width, height)
        self.view.draw(grid, width, height)
        strips: List[Strip] = []
        for y in range(height):
            segments = [
                Segment(text, style if style is not None else base_style)
                for text, style in grid.runs(y)
            ]
            strips.append(Strip(segments, width))
        return strips

    def status_text(self) -> str:
        line, column = self.view.scroll_offset
        mode = "follow" if self.view.track_end else "scroll"
        return f"line {line} col {column} [{mode}] {self.view.line_count} lines"

    def _content_changed(self) -> None:
        self.hooks.refresh()

    def _done(self, key: str) -> None:
        self._log_state("done ->", key=key)
        self.hooks.done(key)

    def _log_state(self, prefix: str, **fields: object) -> None:
        parts = [prefix]
        parts.extend(
            f"{key}={value!r}" for key, value in fields.items() if value is not None
        )
        self.hooks.log(" ".join(parts))


__all__ = ["TextualHooks", "TextualTextViewAdapter", "normalize_textual_key"]
