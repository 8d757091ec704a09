"""Routing of IQ responses to one-shot handlers by stanza id."""

import uuid
from typing import Callable, Dict, Optional
from xml.etree import ElementTree as ET

from loguru import logger

from mucmarks.xmpp import stanza as st

IqHandler = Callable[[ET.Element], None]


def create_stanza_id() -> str:
    """Generate a fresh stanza id."""
    return uuid.uuid4().hex


class IqRouter:
    """Correlates incoming IQ stanzas with the handler registered for their id.

    Handlers are one-shot: a handler is removed before it runs, so a
    duplicate response finds nothing to call. Registering the same id
    again replaces the previous handler.
    """

    def __init__(self):
        self._handlers: Dict[str, IqHandler] = {}

    def add_handler(self, stanza_id: str, handler: IqHandler) -> None:
        if stanza_id in self._handlers:
            logger.debug(f"Replacing IQ handler for id {stanza_id}")
        self._handlers[stanza_id] = handler

    def remove_handler(self, stanza_id: str) -> bool:
        return self._handlers.pop(stanza_id, None) is not None

    def has_handler(self, stanza_id: str) -> bool:
        return stanza_id in self._handlers

    def dispatch(self, stanza: ET.Element) -> bool:
        """Hand an incoming stanza to the handler registered for its id.

        Returns:
            True if a handler consumed the stanza
        """
        if st.name_of(stanza) != st.STANZA_NAME_IQ:
            return False

        stanza_id = stanza.get(st.STANZA_ATTR_ID)
        handler: Optional[IqHandler] = self._handlers.pop(stanza_id, None) if stanza_id else None
        if handler is None:
            logger.debug(f"No IQ handler for id {stanza_id}")
            return False

        handler(stanza)
        return True
