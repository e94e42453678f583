"""Carve stripped lines into pieces that fit the view width."""

from __future__ import annotations

import re
from typing import List, Tuple

from .cells import fit_prefix

# ASCII classes, matching what terminals treat as word boundaries.
_SPACE_CHARS = " \t\n\f\r\v"
_SPACE = r"[ \t\n\f\r\v]"
_PUNCT = r"[!-/:-@\[-`{-~]"

SPACE_RUN = re.compile(f"{_SPACE}+")
BOUNDARY = re.compile(f"{_PUNCT}{_SPACE}*|{_SPACE}+")

Piece = Tuple[int, int]


def split_line(text: str, width: int, *, wrap: bool, word_wrap: bool) -> List[Piece]:
    """Return ``(start, end)`` ranges of ``text``, one per display line.

    Without wrapping (or for an empty line) the whole text is one piece. With
    word wrap a cut inside the text first swallows the whitespace after it and
    then falls back to the last boundary in the carved prefix.
    """

    if not wrap or not text:
        return [(0, len(text))]

    pieces: List[Piece] = []
    start = 0
    length = len(text)
    while start < length:
        end = fit_prefix(text, width, start)
        if end == start:
            # A single character wider than the view still has to go somewhere.
            end = start + 1
        if word_wrap and end < length:
            spaces = SPACE_RUN.match(text, end)
            if spaces:
                end = spaces.end()
            last_boundary = None
            for last_boundary in BOUNDARY.finditer(text, start, end):
                pass
            if last_boundary is not None:
                end = last_boundary.end()
        pieces.append((start, end))
        start = end
    return pieces


def trailing_space(text: str) -> int:
    """Length of the whitespace run ending ``text``."""

    return len(text) - len(text.rstrip(_SPACE_CHARS))


__all__ = ["split_line", "trailing_space", "BOUNDARY", "SPACE_RUN"]
