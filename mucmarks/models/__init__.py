"""Data models for mucmarks."""

from mucmarks.models.bookmark import Bookmark, MinimizeFlag

__all__ = ["Bookmark", "MinimizeFlag"]
