"""Scroll state and navigation."""

from .scroller import ViewportScroller, ViewportState

__all__ = ["ViewportScroller", "ViewportState"]
