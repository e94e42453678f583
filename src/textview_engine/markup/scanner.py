"""Single-pass scanner for color, region and escape tags."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List

COLOR_TAG = re.compile(r"\[([a-zA-Z]+|#[0-9a-fA-F]{6})\]")
REGION_TAG = re.compile(r'\["([a-zA-Z0-9_,;: \-\.]*)"\]')
ESCAPE_TAG = re.compile(r'\[([a-zA-Z0-9_,;: \-\."#]+)\[(\[*)\]')


class TagKind(str, Enum):
    COLOR = "color"
    REGION_START = "region_start"
    REGION_END = "region_end"
    ESCAPE = "escape"


@dataclass(frozen=True, slots=True)
class Tag:
    """One markup occurrence inside a logical line.

    ``start``/``end`` delimit the tag in the source line; ``position`` is the
    index in the stripped text the tag precedes. For escapes ``payload`` is
    the literal text the tag renders as.
    """

    kind: TagKind
    start: int
    end: int
    payload: str
    position: int


@dataclass(frozen=True, slots=True)
class ScannedLine:
    source: str
    text: str
    offsets: tuple[int, ...]
    tags: tuple[Tag, ...]

    def offset_of(self, index: int) -> int:
        """Source offset of stripped character ``index`` (line end past it)."""

        if index < len(self.offsets):
            return self.offsets[index]
        return len(self.source)

    @property
    def state_tags(self) -> tuple[Tag, ...]:
        return tuple(tag for tag in self.tags if tag.kind is not TagKind.ESCAPE)


def scan(line: str, *, colors: bool, regions: bool) -> ScannedLine:
    """Strip the enabled tag families from ``line`` in one forward pass.

    At any ``[`` the color tag is tried first, then the region tag, then the
    escape tag; the first that matches is consumed whole.
    """

    escapes = colors or regions
    chars: List[str] = []
    offsets: List[int] = []
    tags: List[Tag] = []
    pos = 0
    length = len(line)

    while pos < length:
        bracket = line.find("[", pos) if escapes else -1
        if bracket < 0:
            chars.extend(line[pos:])
            offsets.extend(range(pos, length))
            break
        chars.extend(line[pos:bracket])
        offsets.extend(range(pos, bracket))

        tag = _match_tag(line, bracket, len(chars), colors=colors, regions=regions)
        if tag is None:
            chars.append("[")
            offsets.append(bracket)
            pos = bracket + 1
            continue

        tags.append(tag)
        if tag.kind is TagKind.ESCAPE:
            # The second-to-last source character is the one that is dropped.
            dropped = tag.end - 2
            for offset in range(tag.start, tag.end):
                if offset != dropped:
                    chars.append(line[offset])
                    offsets.append(offset)
        pos = tag.end

    return ScannedLine(
        source=line,
        text="".join(chars),
        offsets=tuple(offsets),
        tags=tuple(tags),
    )


def _match_tag(
    line: str, at: int, position: int, *, colors: bool, regions: bool
) -> Tag | None:
    if colors:
        match = COLOR_TAG.match(line, at)
        if match:
            return Tag(TagKind.COLOR, at, match.end(), match.group(1), position)
    if regions:
        match = REGION_TAG.match(line, at)
        if match:
            region_id = match.group(1)
            kind = TagKind.REGION_START if region_id else TagKind.REGION_END
            return Tag(kind, at, match.end(), region_id, position)
    match = ESCAPE_TAG.match(line, at)
    if match:
        literal = f"[{match.group(1)}{match.group(2)}]"
        return Tag(TagKind.ESCAPE, at, match.end(), literal, position)
    return None


def strip_tags(line: str, *, colors: bool, regions: bool) -> str:
    return scan(line, colors=colors, regions=regions).text


__all__ = [
    "COLOR_TAG",
    "REGION_TAG",
    "ESCAPE_TAG",
    "TagKind",
    "Tag",
    "ScannedLine",
    "scan",
    "strip_tags",
]
