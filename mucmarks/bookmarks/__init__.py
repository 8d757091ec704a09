"""Room bookmarks: local store, completion index and server sync."""

from mucmarks.bookmarks.autocomplete import Autocomplete
from mucmarks.bookmarks.manager import BookmarkManager
from mucmarks.bookmarks.store import BookmarkStore
from mucmarks.bookmarks.sync import BOOKMARK_INIT_REQUEST_ID, BookmarkSync

__all__ = [
    "Autocomplete",
    "BookmarkManager",
    "BookmarkStore",
    "BookmarkSync",
    "BOOKMARK_INIT_REQUEST_ID",
]
