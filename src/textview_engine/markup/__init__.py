"""Inline markup: color, region and escape tags."""

from .colors import resolve_color
from .scanner import (
    COLOR_TAG,
    ESCAPE_TAG,
    REGION_TAG,
    ScannedLine,
    Tag,
    TagKind,
    scan,
    strip_tags,
)

__all__ = [
    "COLOR_TAG",
    "ESCAPE_TAG",
    "REGION_TAG",
    "ScannedLine",
    "Tag",
    "TagKind",
    "resolve_color",
    "scan",
    "strip_tags",
]
