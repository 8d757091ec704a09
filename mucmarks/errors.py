"""Exception types for mucmarks."""


class MucmarksError(Exception):
    """Base class for mucmarks errors."""


class StanzaParseError(MucmarksError):
    """Raised when text cannot be parsed as an XML stanza."""
