"""Turn an unbounded byte stream into logical lines."""

from __future__ import annotations

import codecs
import re
from typing import List

OPEN_COLOR_TAG = re.compile(r"\[([a-zA-Z]*|#[0-9a-zA-Z]*)\Z")
OPEN_REGION_TAG = re.compile(r'\["[a-zA-Z0-9_,;: \-\.]*"?\Z')
LINE_BREAK = re.compile(r"\r?\n")


class StreamIngest:
    """Holds back incomplete input between writes.

    Two things may be incomplete at the end of a chunk: a multi-byte UTF-8
    sequence (kept by the incremental decoder) and a tag whose closing
    bracket has not arrived yet (kept as text).
    """

    def __init__(self) -> None:
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._held = ""

    @property
    def pending(self) -> bool:
        buffered, _ = self._decoder.getstate()
        return bool(self._held or buffered)

    def reset(self) -> None:
        self._decoder.reset()
        self._held = ""

    def feed(
        self,
        data: bytes | str,
        *,
        colors: bool,
        regions: bool,
        tab_size: int,
    ) -> List[str]:
        """Return the segments ready to be committed to the line buffer.

        The first segment continues the current last line; each further
        segment starts a new logical line.
        """

        if isinstance(data, str):
            data = data.encode("utf-8")
        text = self._held + self._decoder.decode(bytes(data))
        self._held = ""

        cut = len(text)
        if colors:
            match = OPEN_COLOR_TAG.search(text, 0, cut)
            if match:
                cut = match.start()
        if regions:
            match = OPEN_REGION_TAG.search(text, 0, cut)
            if match:
                cut = match.start()
        self._held = text[cut:]
        text = text[:cut]

        text = text.replace("\t", " " * tab_size)
        return LINE_BREAK.split(text)


__all__ = ["StreamIngest", "OPEN_COLOR_TAG", "OPEN_REGION_TAG", "LINE_BREAK"]
