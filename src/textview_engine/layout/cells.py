"""Terminal cell measurement for display lines."""

from __future__ import annotations

from functools import lru_cache

import wcwidth


@lru_cache(maxsize=4096)
def char_width(char: str) -> int:
    """Columns occupied by ``char``; non-printable characters occupy none."""

    width = wcwidth.wcwidth(char)
    return width if width > 0 else 0


def string_width(text: str) -> int:
    return sum(char_width(char) for char in text)


def fit_prefix(text: str, width: int, start: int = 0) -> int:
    """Return the end index of the longest ``text[start:end]`` fitting ``width``."""

    used = 0
    end = start
    for char in text[start:]:
        used += char_width(char)
        if used > width:
            break
        end += 1
    return end


__all__ = ["char_width", "string_width", "fit_prefix"]
