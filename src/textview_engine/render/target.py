"""Cell-grid render targets the text view paints into."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Protocol, Tuple

from rich.style import Style

Cell = Tuple[str, Optional[Style]]


class CellTarget(Protocol):
    """Anything exposing a writable rectangle of terminal cells.

    Wide characters are written once, at their first cell; each continuation
    cell receives an empty string.
    """

    def set_cell(self, x: int, y: int, char: str, style: Style) -> None:
        ...


@dataclass(slots=True)
class CellGrid:
    """In-memory ``CellTarget``; cells outside the grid are ignored."""

    width: int
    height: int
    fill: str = " "
    _cells: List[List[Cell]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("grid dimensions must not be negative")
        self._cells = [
            [(self.fill, None) for _ in range(self.width)] for _ in range(self.height)
        ]

    def set_cell(self, x: int, y: int, char: str, style: Style) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self._cells[y][x] = (char, style)

    def cell(self, x: int, y: int) -> Cell:
        return self._cells[y][x]

    def row_text(self, y: int) -> str:
        return "".join(char for char, _ in self._cells[y])

    def lines(self) -> List[str]:
        """Painted text per row, trailing fill removed."""

        return [self.row_text(y).rstrip(self.fill) for y in range(self.height)]

    def runs(self, y: int) -> Iterator[Tuple[str, Optional[Style]]]:
        """Yield ``(text, style)`` runs of consecutive equally styled cells."""

        text: List[str] = []
        current: Optional[Style] = None
        for char, style in self._cells[y]:
            if text and style != current:
                yield "".join(text), current
                text = []
            current = style
            text.append(char)
        if text:
            yield "".join(text), current


__all__ = ["Cell", "CellGrid", "CellTarget"]
