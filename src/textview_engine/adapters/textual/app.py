"""Executable Textual app that streams a file into a TextView."""

from __future__ import annotations

import argparse
import os
import time
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the demo is run
    from textual import work
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Static
    from textual.worker import get_current_worker
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use textview_engine.adapters.textual.app"
    ) from exc

from textview_engine.config import Alignment, TextViewConfig
from textview_engine.runtime import telemetry
from textview_engine.view import TextView

from .widget import TextViewWidget

ENV_PREFIX = "TEXTVIEW_ENGINE_"

DEMO_TEXT = """\
[yellow]textview-engine[white] demo

Pass a file path to stream it into this view; add [green]--follow[white] to keep tailing it.
Navigate with j/k/h/l, g/G, the arrow keys, Home/End and PgUp/PgDn (or Ctrl-F/Ctrl-B).

With --regions, text like ["intro"]this sentence[""] becomes a region that
--highlight intro draws inverted. Literal tags are escaped: [red[] stays visible.
"""


class TextViewApp(App[None]):
    """Minimal Textual UI around a single text view."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#text-view {
		height: 1fr;
		border: round $accent;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        *,
        source: Path | None = None,
        follow: bool = False,
        config: TextViewConfig | None = None,
        highlight: str | None = None,
        chunk_size: int = 4096,
        poll_interval: float = 0.25,
    ) -> None:
        super().__init__()
        self.view = TextView(config or TextViewConfig())
        self._source = source
        self._follow = follow
        self._highlight = highlight
        self._chunk_size = chunk_size
        self._poll_interval = poll_interval
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield TextViewWidget(self.view, id="text-view")
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        self.query_one(TextViewWidget).focus()
        if self._source is None:
            self.view.write(DEMO_TEXT)
            self._apply_highlight()
        else:
            self._update_status(f"streaming {self._source}")
            self.stream_source(self._source)

    def on_text_view_widget_done(self, message: TextViewWidget.Done) -> None:
        self._update_status(f"done: {message.key}")

    def on_text_view_widget_status_changed(
        self, message: TextViewWidget.StatusChanged
    ) -> None:
        self._update_status(message.status)

    @work(thread=True, exclusive=True)
    def stream_source(self, path: Path) -> None:
        worker = get_current_worker()
        with path.open("rb") as handle:
            while not worker.is_cancelled:
                chunk = handle.read(self._chunk_size)
                if chunk:
                    self.view.write(chunk)
                    continue
                if not self._follow:
                    break
                time.sleep(self._poll_interval)
        self.call_from_thread(self._apply_highlight)

    def _apply_highlight(self) -> None:
        if not self._highlight:
            return
        self.view.highlight(self._highlight)
        self.view.scroll_to_highlight()
        self.query_one(TextViewWidget).refresh()
        found = self.view.region_text(self._highlight)
        self._update_status(f"highlight {self._highlight!r}: {found.strip()[:60]!r}")

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)


def _env_int(key: str, fallback: int) -> int:
    value = os.environ.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Stream a file into a text view.")
    parser.add_argument("source", nargs="?", type=Path, help="File to display")
    parser.add_argument(
        "--follow", action="store_true", help="Keep reading as the file grows"
    )
    parser.add_argument("--no-wrap", action="store_true", help="Disable line wrapping")
    parser.add_argument(
        "--word-wrap", action="store_true", help="Wrap at spaces and punctuation"
    )
    parser.add_argument(
        "--align",
        choices=[alignment.value for alignment in Alignment],
        default=os.environ.get(f"{ENV_PREFIX}ALIGN", Alignment.LEFT.value),
    )
    parser.add_argument(
        "--dynamic-colors", action="store_true", help="Interpret [color] tags"
    )
    parser.add_argument("--regions", action="store_true", help='Interpret ["id"] tags')
    parser.add_argument(
        "--no-scroll",
        action="store_true",
        help="Keep only what is visible (log tail mode)",
    )
    parser.add_argument(
        "--tab-size",
        type=int,
        default=_env_int("TAB_SIZE", 4),
        help="Spaces per tab (default: 4)",
    )
    parser.add_argument("--highlight", help="Region id to highlight and scroll to")
    parser.add_argument(
        "--telemetry-preset",
        choices=["development", "production", "performance"],
        default=os.environ.get(f"{ENV_PREFIX}TELEMETRY_PRESET"),
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.telemetry_preset:
        telemetry.configure(preset=args.telemetry_preset)
    demo = args.source is None
    config = TextViewConfig(
        scrollable=not args.no_scroll,
        wrap=not args.no_wrap,
        word_wrap=args.word_wrap or demo,
        align=Alignment(args.align),
        dynamic_colors=args.dynamic_colors or demo,
        regions=args.regions or demo,
        tab_size=args.tab_size,
    )
    app = TextViewApp(
        source=args.source,
        follow=args.follow,
        config=config,
        highlight=args.highlight or ("intro" if demo else None),
    )
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
