"""Display-line layout: measurement, wrapping, indexing."""

from .cells import char_width, fit_prefix, string_width
from .index import DisplayLineEntry, LineIndex, build_index
from .wrap import split_line, trailing_space

__all__ = [
    "DisplayLineEntry",
    "LineIndex",
    "build_index",
    "char_width",
    "fit_prefix",
    "split_line",
    "string_width",
    "trailing_space",
]
