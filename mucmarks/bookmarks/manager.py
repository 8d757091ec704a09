"""Bookmark manager: the public operations on a session's room bookmarks.

Every local change is applied to the store and the autocomplete index
together and then pushed to the server as a complete document.
"""

from typing import List, Optional, Union
from xml.etree import ElementTree as ET

from loguru import logger

from mucmarks.bookmarks.autocomplete import Autocomplete
from mucmarks.bookmarks.store import BookmarkStore
from mucmarks.bookmarks.sync import BOOKMARK_INIT_REQUEST_ID, BookmarkSync
from mucmarks.config.schema import Config
from mucmarks.models.bookmark import Bookmark
from mucmarks.xmpp.collaborators import Collaborators
from mucmarks.xmpp.iq import IqRouter

AFFILIATIONS = ("member", "admin", "owner")

Autojoin = Union[bool, str, None]


def parse_autojoin(value: Autojoin) -> Optional[bool]:
    """Interpret an autojoin argument.

    Accepts a bool or the command words "on"/"off". Anything else means
    "not supplied".
    """
    if isinstance(value, bool):
        return value
    if value == "on":
        return True
    if value == "off":
        return False
    return None


class BookmarkManager:
    """Owns the bookmark store and index for one XMPP session."""

    def __init__(self, collaborators: Collaborators, config: Optional[Config] = None):
        self.collaborators = collaborators
        self.config = config or Config()

        self.store = BookmarkStore()
        self.index = Autocomplete()
        self.router = IqRouter()
        self.sync = BookmarkSync(
            self.store,
            self.index,
            self.router,
            collaborators.transport,
            collaborators.jid_parser,
        )
        self._shutdown_registered = False

    # ------------------------------------------------------------------
    # Server synchronization
    # ------------------------------------------------------------------

    def request(self) -> None:
        """Fetch the bookmark document, discarding local state."""
        shutdown = self.collaborators.shutdown
        if shutdown and not self._shutdown_registered:
            shutdown.add_shutdown_routine(self.close)
            self._shutdown_registered = True

        self.sync.request_fetch(self._on_loaded)

    def handle_iq(self, stanza: ET.Element) -> bool:
        """Feed an incoming IQ stanza from the transport.

        Returns:
            True if the stanza answered one of our requests
        """
        return self.router.dispatch(stanza)

    def _on_loaded(self, bookmarks: List[Bookmark]) -> None:
        events = self.collaborators.events
        announce = events is not None and self.config.bookmarks.autojoin_on_fetch
        for bookmark in bookmarks:
            if bookmark.autojoin and announce:
                events.bookmark_autojoin(bookmark)
            self._register_confserver(bookmark.jid)

    def _register_confserver(self, jid: str) -> None:
        if not self.config.bookmarks.register_conf_servers:
            return
        domain = self.collaborators.jid_parser(jid).domainpart
        if domain:
            self.collaborators.muc.confserver_add(domain)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(
        self,
        jid: str,
        nick: Optional[str] = None,
        password: Optional[str] = None,
        autojoin: Autojoin = None,
        name: Optional[str] = None,
    ) -> bool:
        """Bookmark a room and push the new set to the server.

        Returns:
            False if the room is already bookmarked
        """
        if not jid:
            raise ValueError("Bookmark JID is required")

        self._register_confserver(jid)

        if self.store.contains(jid):
            return False

        bookmark = Bookmark(
            jid=jid,
            nick=nick,
            password=password,
            name=name,
            autojoin=parse_autojoin(autojoin) or False,
        )
        self.store.upsert(bookmark)
        self.index.add(jid)
        logger.info(f"Added bookmark: {jid}")

        self.sync.push_full()
        return True

    def update(
        self,
        jid: str,
        nick: Optional[str] = None,
        password: Optional[str] = None,
        autojoin: Autojoin = None,
        name: Optional[str] = None,
    ) -> bool:
        """Change the supplied fields of a bookmark; others are left alone.

        Returns:
            False if the room is not bookmarked
        """
        if not jid:
            raise ValueError("Bookmark JID is required")

        bookmark = self.store.get(jid)
        if not bookmark:
            return False

        if nick is not None:
            bookmark.nick = nick
        if password is not None:
            bookmark.password = password
        if name is not None:
            bookmark.name = name
        autojoin_value = parse_autojoin(autojoin)
        if autojoin_value is not None:
            bookmark.autojoin = autojoin_value

        logger.info(f"Updated bookmark: {jid}")
        self.sync.push_full()
        return True

    def remove(self, jid: str) -> bool:
        """Delete a bookmark and push the remaining set.

        Returns:
            False if the room is not bookmarked
        """
        if not self.store.remove(jid):
            return False

        self.index.remove(jid)
        logger.info(f"Removed bookmark: {jid}")

        self.sync.push_full()
        return True

    # ------------------------------------------------------------------
    # Joining
    # ------------------------------------------------------------------

    def default_nick(self) -> Optional[str]:
        """Account nickname for rooms bookmarked without one."""
        accounts = self.collaborators.accounts
        if accounts:
            nick = accounts.default_nick()
            if nick:
                return nick

        account = self.config.account
        if account.muc_nick:
            return account.muc_nick
        return self.collaborators.jid_parser(account.jid).localpart if account.jid else None

    def join(self, jid: str) -> bool:
        """Join a bookmarked room, or focus it if already joined.

        Returns:
            False if the room is not bookmarked
        """
        bookmark = self.store.get(jid)
        if not bookmark:
            return False

        muc = self.collaborators.muc
        if not muc.is_active(bookmark.jid):
            nick = bookmark.nick or self.default_nick()
            if not nick:
                logger.warning(f"No nickname available to join {bookmark.jid}")
                return True

            muc.presence_join(bookmark.jid, nick, bookmark.password)
            muc.join(bookmark.jid, nick, bookmark.password)
            for affiliation in AFFILIATIONS:
                muc.request_affiliation_list(bookmark.jid, affiliation)
            logger.info(f"Joining bookmarked room {bookmark.jid} as {nick}")
        elif muc.roster_complete(bookmark.jid):
            if self.collaborators.ui:
                self.collaborators.ui.focus_room(bookmark.jid)

        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, jid: str) -> Optional[Bookmark]:
        return self.store.get(jid)

    def list(self) -> List[Bookmark]:
        return self.store.list()

    def exists(self, jid: str) -> bool:
        return self.store.contains(jid)

    def find(self, prefix: Optional[str], previous: bool = False) -> Optional[str]:
        """Complete a bookmarked room JID from what the user typed."""
        return self.index.complete(prefix, previous)

    def autocomplete_reset(self) -> None:
        self.index.reset()

    def close(self) -> None:
        """Release all bookmarks, the index and any pending fetch."""
        self.store.clear()
        self.index.clear()
        self.router.remove_handler(BOOKMARK_INIT_REQUEST_ID)
        logger.debug("Bookmark manager closed")
