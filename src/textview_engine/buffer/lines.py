"""Logical line storage for the text view."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence


@dataclass(slots=True)
class LineBuffer:
    """Append-only list of raw (tag-containing) logical lines."""

    _lines: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self._lines)

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def extend(self, segments: Iterable[str]) -> None:
        """Continue the last line with the first segment, append the rest."""

        iterator = iter(segments)
        first = next(iterator, None)
        if first is None:
            return
        if self._lines:
            self._lines[-1] += first
        else:
            self._lines.append(first)
        self._lines.extend(iterator)

    def drop_before(self, line: int) -> int:
        """Remove every line above ``line``; return how many were removed."""

        removed = max(0, min(line, len(self._lines)))
        if removed:
            del self._lines[:removed]
        return removed

    def clear(self) -> None:
        self._lines.clear()


__all__ = ["LineBuffer"]
