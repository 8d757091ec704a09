"""In-memory bookmark store keyed by room JID."""

from typing import Dict, Iterator, List, Optional

from loguru import logger

from mucmarks.models.bookmark import Bookmark


class BookmarkStore:
    """Mapping of bare room JID to Bookmark.

    The store is the single source of truth for the running session.
    It knows nothing about the autocomplete index or the server; the
    manager keeps those in step.
    """

    def __init__(self):
        self._bookmarks: Dict[str, Bookmark] = {}

    def fetch_begin(self) -> None:
        """Drop all records before a (re)fetch."""
        if self._bookmarks:
            logger.debug(f"Discarding {len(self._bookmarks)} cached bookmarks")
        self._bookmarks = {}

    def upsert(self, bookmark: Bookmark) -> None:
        """Insert or fully replace the record for ``bookmark.jid``."""
        self._bookmarks[bookmark.jid] = bookmark

    def get(self, jid: str) -> Optional[Bookmark]:
        return self._bookmarks.get(jid)

    def remove(self, jid: str) -> bool:
        """Remove a record.

        Returns:
            True if a record existed for ``jid``
        """
        return self._bookmarks.pop(jid, None) is not None

    def list(self) -> List[Bookmark]:
        """All records, in insertion order."""
        return list(self._bookmarks.values())

    def contains(self, jid: str) -> bool:
        return jid in self._bookmarks

    def clear(self) -> None:
        self._bookmarks.clear()

    def __contains__(self, jid: object) -> bool:
        return jid in self._bookmarks

    def __len__(self) -> int:
        return len(self._bookmarks)

    def __iter__(self) -> Iterator[Bookmark]:
        return iter(list(self._bookmarks.values()))
