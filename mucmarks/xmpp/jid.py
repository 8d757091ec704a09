"""Minimal JID splitting.

Only decomposes ``local@domain/resource``; no stringprep or syntax
validation is attempted.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Jid:
    """Parts of a Jabber identifier. Absent parts are None."""

    localpart: str | None
    domainpart: str | None
    resourcepart: str | None = None

    @property
    def barejid(self) -> str | None:
        if not self.domainpart:
            return None
        if self.localpart:
            return f"{self.localpart}@{self.domainpart}"
        return self.domainpart


def parse_jid(value: str | None) -> Jid:
    """Split a JID string into its parts.

    Examples:
        "room@conf.example" -> Jid("room", "conf.example")
        "conf.example" -> Jid(None, "conf.example")
        "room@" -> Jid("room", None)
    """
    text = (value or "").strip()

    resource = None
    slash = text.find("/")
    if slash != -1:
        resource = text[slash + 1:] or None
        text = text[:slash]

    local = None
    at = text.find("@")
    if at != -1:
        local = text[:at] or None
        text = text[at + 1:]

    return Jid(localpart=local, domainpart=text or None, resourcepart=resource)
