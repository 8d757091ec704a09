"""mucmarks - chat room bookmarks synchronized with XMPP private storage."""

__version__ = "0.1.0"
__logo__ = "🔖"
