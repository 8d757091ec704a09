"""Bookmark data model for persistent chat room entries."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional


class MinimizeFlag(Enum):
    """Gajim's non-standard ``minimize`` extension.

    Kept as three states so that a flag nobody set is never written
    back as an explicit ``false``.
    """

    UNSET = "unset"
    TRUE = "true"
    FALSE = "false"

    @classmethod
    def from_text(cls, text: Optional[str]) -> "MinimizeFlag":
        """Map element text to a flag; anything but true/false is unset."""
        if text == "true":
            return cls.TRUE
        if text == "false":
            return cls.FALSE
        return cls.UNSET

    @property
    def is_set(self) -> bool:
        return self is not MinimizeFlag.UNSET


TRUE_WORDS = ("1", "true", "on", "yes")


def _as_bool(value: Any) -> bool:
    """JSON booleans pass through; strings count only if they spell true."""
    if isinstance(value, str):
        return value.strip().lower() in TRUE_WORDS
    return bool(value)


@dataclass
class Bookmark:
    """A bookmarked multi-user chat room."""

    jid: str  # Bare room JID, the store key
    nick: Optional[str] = None  # None: use the account's default nick
    password: Optional[str] = None
    name: Optional[str] = None  # None: local part of the JID on the wire
    autojoin: bool = False
    minimize: MinimizeFlag = MinimizeFlag.UNSET

    def copy(self) -> "Bookmark":
        """Return a detached copy of this bookmark."""
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert bookmark to dictionary for serialization."""
        return {
            "jid": self.jid,
            "nick": self.nick,
            "password": self.password,
            "name": self.name,
            "autojoin": self.autojoin,
            "minimize": self.minimize.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Bookmark":
        """Create bookmark from dictionary."""
        minimize = data.get("minimize")
        if isinstance(minimize, bool):
            minimize = "true" if minimize else "false"
        return cls(
            jid=data["jid"],
            nick=data.get("nick"),
            password=data.get("password"),
            name=data.get("name"),
            autojoin=_as_bool(data.get("autojoin", False)),
            minimize=MinimizeFlag.from_text(minimize),
        )
