"""Data sources for paginated views."""

from pagenav.sources.slice import SliceSource

__all__ = ["SliceSource"]
