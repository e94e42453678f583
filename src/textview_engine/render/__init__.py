"""Render targets."""

from .target import Cell, CellGrid, CellTarget

__all__ = ["Cell", "CellGrid", "CellTarget"]
