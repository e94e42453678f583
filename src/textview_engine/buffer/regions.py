"""Recover the plain text of one named region."""

from __future__ import annotations

from typing import List, Sequence

from textview_engine.markup import TagKind, scan


def region_text(
    lines: Sequence[str], region_id: str, *, colors: bool, regions: bool
) -> str:
    """Return the text of region ``region_id`` with markup removed.

    Line breaks inside the region come back as ``\\n``. The first region tag
    seen while inside the region ends it. Disabled regions, an empty id or an
    unknown id all yield ``""``.
    """

    if not regions or not region_id:
        return ""

    parts: List[str] = []
    current = ""
    for line in lines:
        scanned = scan(line, colors=colors, regions=True)
        cursor = 0
        for tag in scanned.tags:
            if tag.kind not in (TagKind.REGION_START, TagKind.REGION_END):
                continue
            if current == region_id:
                parts.append(scanned.text[cursor : tag.position])
                return "".join(parts)
            cursor = tag.position
            current = tag.payload
        if current == region_id:
            parts.append(scanned.text[cursor:])
            parts.append("\n")
    return "".join(parts)


__all__ = ["region_text"]
