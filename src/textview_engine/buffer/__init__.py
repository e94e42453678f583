"""Logical line buffer, stream ingest and region extraction."""

from .ingest import StreamIngest
from .lines import LineBuffer
from .regions import region_text

__all__ = ["LineBuffer", "StreamIngest", "region_text"]
