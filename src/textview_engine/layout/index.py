"""Display-line index derived from the logical line buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, List, Sequence

from rich.color import Color

from textview_engine.markup import ScannedLine, TagKind, resolve_color, scan
from textview_engine.runtime import telemetry

from .cells import string_width
from .wrap import split_line, trailing_space


@dataclass(frozen=True, slots=True)
class DisplayLineEntry:
    """One screen row: a slice of a logical line plus the state it starts in.

    ``start``/``end`` index the raw, tag-containing logical line so the
    slice can be re-scanned with ``color``/``region`` as its initial state.
    """

    line: int
    start: int
    end: int
    width: int
    color: Color
    region: str


@dataclass(frozen=True, slots=True)
class LineIndex:
    width: int
    entries: tuple[DisplayLineEntry, ...]
    scans: tuple[ScannedLine, ...]
    longest_line: int = 0
    from_highlight: int = -1
    to_highlight: int = -1

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def has_highlight(self) -> bool:
        return self.from_highlight >= 0

    def entry_text(self, position: int) -> str:
        """Bare text of entry ``position`` as it is shown on screen."""

        entry = self.entries[position]
        scanned = self.scans[entry.line]
        return "".join(
            char
            for char, offset in zip(scanned.text, scanned.offsets)
            if entry.start <= offset < entry.end
        )


def build_index(
    lines: Sequence[str],
    width: int,
    *,
    wrap: bool,
    word_wrap: bool,
    colors: bool,
    regions: bool,
    highlights: AbstractSet[str],
    text_color: Color,
) -> LineIndex:
    """Split every logical line into display entries for ``width`` columns."""

    if width < 1:
        return LineIndex(width=width, entries=(), scans=())

    with telemetry.span(
        "layout::reindex",
        component="layout",
        metadata={"width": width, "lines": len(lines), "wrap": wrap},
    ) as handle:
        entries: List[DisplayLineEntry] = []
        scans: List[ScannedLine] = []
        color = text_color
        region = ""
        from_highlight = to_highlight = -1
        trim = wrap and word_wrap

        for line_number, source in enumerate(lines):
            scanned = scan(source, colors=colors, regions=regions)
            scans.append(scanned)
            tags = scanned.state_tags
            tag_cursor = 0
            origin = 0

            for start, end in split_line(
                scanned.text, width, wrap=wrap, word_wrap=word_wrap
            ):
                entry_color, entry_region = color, region
                highlighted = region in highlights

                # Tags up to and including the piece's end belong to this entry.
                while tag_cursor < len(tags) and tags[tag_cursor].position <= end:
                    tag = tags[tag_cursor]
                    if tag.kind is TagKind.COLOR:
                        color = resolve_color(tag.payload)
                    else:
                        region = tag.payload
                        if region in highlights and (tag.position < end or start == end):
                            highlighted = True
                    tag_cursor += 1

                next_origin = scanned.offset_of(end)
                stop = next_origin
                piece_width = string_width(scanned.text[start:end])
                if trim:
                    spaces = trailing_space(source[origin:stop])
                    if spaces:
                        stop -= spaces
                        piece_width -= string_width(source[stop : stop + spaces])

                if highlighted:
                    if from_highlight < 0:
                        from_highlight = len(entries)
                    to_highlight = len(entries)

                entries.append(
                    DisplayLineEntry(
                        line=line_number,
                        start=origin,
                        end=stop,
                        width=piece_width,
                        color=entry_color,
                        region=entry_region,
                    )
                )
                origin = next_origin

        longest = max((entry.width for entry in entries), default=0)
        handle.add_metadata("entries", len(entries))

    return LineIndex(
        width=width,
        entries=tuple(entries),
        scans=tuple(scans),
        longest_line=longest,
        from_highlight=from_highlight,
        to_highlight=to_highlight,
    )


__all__ = ["DisplayLineEntry", "LineIndex", "build_index"]
