"""XMPP wire format and collaborator interfaces for bookmarks."""
