"""Synchronization of the local bookmark store with server private storage."""

from typing import Callable, List, Optional
from xml.etree import ElementTree as ET

from loguru import logger

from mucmarks.bookmarks.autocomplete import Autocomplete
from mucmarks.bookmarks.store import BookmarkStore
from mucmarks.models.bookmark import Bookmark
from mucmarks.xmpp.codec import (
    JidParser,
    decode_fetch_result,
    decoded_bookmarks,
    encode_full_replace,
)
from mucmarks.xmpp.collaborators import Transport
from mucmarks.xmpp.iq import IqRouter, create_stanza_id
from mucmarks.xmpp.jid import parse_jid
from mucmarks.xmpp.stanza import create_bookmarks_storage_request

BOOKMARK_INIT_REQUEST_ID = "bookmark_init_request"

LoadedCallback = Callable[[List[Bookmark]], None]


class BookmarkSync:
    """Issues the bulk fetch and the full-replace pushes.

    The store and the index are owned by the caller; this class only
    resets and repopulates them when a fetch result comes in.
    """

    def __init__(
        self,
        store: BookmarkStore,
        index: Autocomplete,
        router: IqRouter,
        transport: Transport,
        jid_parser: JidParser = parse_jid,
    ):
        self.store = store
        self.index = index
        self.router = router
        self.transport = transport
        self.jid_parser = jid_parser

    def request_fetch(self, on_loaded: Optional[LoadedCallback] = None) -> None:
        """Reset local state and ask the server for the bookmark document.

        Any handler left over from an earlier fetch is replaced, so only
        the latest request populates the store.

        Args:
            on_loaded: Called with the decoded bookmarks once the result arrives
        """
        self.store.fetch_begin()
        self.index.clear()

        def _on_result(stanza: ET.Element) -> None:
            bookmarks = self.apply_fetch_result(stanza)
            if on_loaded:
                on_loaded(bookmarks)

        self.router.add_handler(BOOKMARK_INIT_REQUEST_ID, _on_result)
        self.transport.send(create_bookmarks_storage_request(BOOKMARK_INIT_REQUEST_ID))
        logger.debug("Requested bookmarks from private storage")

    def apply_fetch_result(self, stanza: ET.Element) -> List[Bookmark]:
        """Decode a fetch result into the store and the index.

        Returns:
            The bookmarks that were loaded, in document order
        """
        results = decode_fetch_result(stanza)
        bookmarks = decoded_bookmarks(results)
        for bookmark in bookmarks:
            self.store.upsert(bookmark)
            self.index.add(bookmark.jid)

        skipped = len(results) - len(bookmarks)
        if skipped:
            logger.debug(f"Skipped {skipped} bookmark storage entries")
        logger.info(f"Loaded {len(bookmarks)} bookmarks")
        return bookmarks

    def push_full(self) -> str:
        """Send the whole store to the server, replacing its copy.

        Returns:
            The stanza id of the IQ set
        """
        stanza_id = create_stanza_id()
        iq = encode_full_replace(self.store.list(), stanza_id, self.jid_parser)
        self.transport.send(iq)
        logger.debug(f"Pushed {len(self.store)} bookmarks (id {stanza_id})")
        return stanza_id
