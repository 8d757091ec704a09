"""Stanza names, namespaces and small ElementTree helpers.

Namespaces are carried as an ``xmlns`` attribute on elements we build,
so serialized stanzas use default-namespace declarations rather than
generated prefixes. Parsed stanzas carry the namespace in the tag
instead; the helpers here accept either form.
"""

from typing import Optional
from xml.etree import ElementTree as ET

from mucmarks.errors import StanzaParseError

STANZA_NAME_IQ = "iq"
STANZA_NAME_QUERY = "query"
STANZA_NAME_STORAGE = "storage"
STANZA_NAME_CONFERENCE = "conference"
STANZA_NAME_NICK = "nick"
STANZA_NAME_PASSWORD = "password"
STANZA_NAME_MINIMIZE = "minimize"

STANZA_TYPE_GET = "get"
STANZA_TYPE_SET = "set"
STANZA_TYPE_RESULT = "result"

STANZA_ATTR_ID = "id"
STANZA_ATTR_TYPE = "type"
STANZA_ATTR_JID = "jid"
STANZA_ATTR_NAME = "name"
STANZA_ATTR_AUTOJOIN = "autojoin"

STANZA_NS_PRIVATE = "jabber:iq:private"
STANZA_NS_BOOKMARKS = "storage:bookmarks"
STANZA_NS_EXT_GAJIM_BOOKMARKS = "xmlns:gajim:bookmarks"


def new_element(name: str, ns: Optional[str] = None, **attrs: str) -> ET.Element:
    """Create an element, optionally declaring its namespace."""
    element = ET.Element(name)
    if ns:
        element.set("xmlns", ns)
    for key, value in attrs.items():
        element.set(key, value)
    return element


def name_of(element: ET.Element) -> str:
    """Local name of an element, without any namespace."""
    tag = element.tag if isinstance(element.tag, str) else ""
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def ns_of(element: ET.Element) -> Optional[str]:
    """Namespace of an element, from its tag or its xmlns attribute."""
    tag = element.tag if isinstance(element.tag, str) else ""
    if tag.startswith("{"):
        return tag[1:].split("}", 1)[0]
    return element.get("xmlns")


def get_child_by_name(element: ET.Element, name: str) -> Optional[ET.Element]:
    """First child with the given local name, in any namespace."""
    for child in element:
        if name_of(child) == name:
            return child
    return None


def get_child_by_name_and_ns(element: ET.Element, name: str, ns: str) -> Optional[ET.Element]:
    for child in element:
        if name_of(child) == name and ns_of(child) == ns:
            return child
    return None


def text_of(element: Optional[ET.Element]) -> Optional[str]:
    """Text content of an element, or None if it has none."""
    if element is None:
        return None
    return element.text or None


def add_text_child(parent: ET.Element, name: str, text: str, ns: Optional[str] = None) -> ET.Element:
    child = new_element(name, ns)
    child.text = text
    parent.append(child)
    return child


def create_iq(iq_type: str, stanza_id: str) -> ET.Element:
    return new_element(STANZA_NAME_IQ, **{STANZA_ATTR_TYPE: iq_type, STANZA_ATTR_ID: stanza_id})


def create_private_storage(iq: ET.Element) -> ET.Element:
    """Append ``query/storage`` for bookmark storage and return the storage element."""
    query = new_element(STANZA_NAME_QUERY, STANZA_NS_PRIVATE)
    storage = new_element(STANZA_NAME_STORAGE, STANZA_NS_BOOKMARKS)
    query.append(storage)
    iq.append(query)
    return storage


def create_bookmarks_storage_request(stanza_id: str) -> ET.Element:
    """Build the IQ get that asks private storage for the bookmark document."""
    iq = create_iq(STANZA_TYPE_GET, stanza_id)
    create_private_storage(iq)
    return iq


def to_string(element: ET.Element) -> str:
    return ET.tostring(element, encoding="unicode")


def from_string(text: str) -> ET.Element:
    """Parse a stanza from XML text.

    Raises:
        StanzaParseError: if the text is not well-formed XML
    """
    try:
        return ET.fromstring(text)
    except ET.ParseError as e:
        raise StanzaParseError(f"Invalid stanza: {e}") from e
