"""Interfaces to the parts of the client that bookmarks depend on.

The transport, the MUC subsystem, the UI and the account store all live
outside this package. A host wires its implementations in through
:class:`Collaborators`.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional
from xml.etree import ElementTree as ET

from mucmarks.models.bookmark import Bookmark
from mucmarks.xmpp.jid import Jid, parse_jid


class Transport(ABC):
    """Sends stanzas over the XMPP connection."""

    @abstractmethod
    def send(self, stanza: ET.Element) -> None:
        """Send a stanza. Delivery is fire-and-forget."""
        pass


class MucService(ABC):
    """The multi-user chat subsystem."""

    @abstractmethod
    def confserver_add(self, domain: str) -> None:
        """Remember ``domain`` as hosting chat rooms."""
        pass

    @abstractmethod
    def is_active(self, room: str) -> bool:
        pass

    @abstractmethod
    def roster_complete(self, room: str) -> bool:
        pass

    @abstractmethod
    def presence_join(self, room: str, nick: str, password: Optional[str]) -> None:
        """Send the presence that enters the room."""
        pass

    @abstractmethod
    def join(self, room: str, nick: str, password: Optional[str]) -> None:
        """Start tracking the room locally."""
        pass

    @abstractmethod
    def request_affiliation_list(self, room: str, affiliation: str) -> None:
        pass


class RoomUi(ABC):
    """User interface hooks."""

    @abstractmethod
    def focus_room(self, room: str) -> None:
        pass


class AccountDirectory(ABC):
    """Lookup of account level settings."""

    @abstractmethod
    def default_nick(self) -> Optional[str]:
        """Nickname to use in rooms without a bookmarked nick."""
        pass


class SessionEvents(ABC):
    """Session event notifications."""

    @abstractmethod
    def bookmark_autojoin(self, bookmark: Bookmark) -> None:
        """A fetched bookmark asks to be joined."""
        pass


class ShutdownRegistry(ABC):
    """Process shutdown hooks."""

    @abstractmethod
    def add_shutdown_routine(self, routine: Callable[[], None]) -> None:
        pass


@dataclass
class Collaborators:
    """Everything the bookmark manager talks to outside itself."""

    transport: Transport
    muc: MucService
    ui: Optional[RoomUi] = None
    accounts: Optional[AccountDirectory] = None
    events: Optional[SessionEvents] = None
    shutdown: Optional[ShutdownRegistry] = None
    jid_parser: Callable[[str], Jid] = parse_jid
