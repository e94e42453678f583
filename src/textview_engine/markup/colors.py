"""Translate color tag payloads into renderer colors."""

from __future__ import annotations

from functools import lru_cache

from rich.color import Color, ColorParseError


@lru_cache(maxsize=256)
def resolve_color(name: str) -> Color:
    """Resolve a tag payload (``red``, ``#ff8800``) to a ``rich`` color.

    Names the palette does not know fall back to the terminal default color.
    """

    try:
        return Color.parse(name.lower())
    except ColorParseError:
        return Color.default()


__all__ = ["resolve_color"]
