"""Bookmark storage codec (XEP-0048 over XEP-0049 private storage).

Decoding is tolerant: anything that is not a bookmark result yields no
entries, and each malformed ``conference`` child is skipped on its own
without affecting its siblings. Encoding always produces the complete
document, because every push replaces the whole remote collection.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional
from xml.etree import ElementTree as ET

from loguru import logger

from mucmarks.models.bookmark import Bookmark, MinimizeFlag
from mucmarks.xmpp import stanza as st
from mucmarks.xmpp.jid import Jid, parse_jid

JidParser = Callable[[str], Jid]


@dataclass
class DecodeResult:
    """Outcome of decoding one child of the storage element."""

    bookmark: Optional[Bookmark] = None
    skipped: Optional[str] = None  # Reason, when no bookmark was produced

    @property
    def ok(self) -> bool:
        return self.bookmark is not None


def find_storage(stanza: ET.Element) -> Optional[ET.Element]:
    """Locate ``query/storage`` in an IQ result, or None if this isn't one."""
    if st.name_of(stanza) != st.STANZA_NAME_IQ:
        return None
    if stanza.get(st.STANZA_ATTR_TYPE) != st.STANZA_TYPE_RESULT:
        return None

    query = st.get_child_by_name(stanza, st.STANZA_NAME_QUERY)
    if query is None:
        return None
    return st.get_child_by_name(query, st.STANZA_NAME_STORAGE)


def decode_conference(element: ET.Element) -> DecodeResult:
    """Decode a single storage child into a bookmark."""
    name = st.name_of(element)
    if name != st.STANZA_NAME_CONFERENCE:
        return DecodeResult(skipped=f"unsupported element <{name}>")

    jid = element.get(st.STANZA_ATTR_JID)
    if not jid:
        return DecodeResult(skipped="conference without jid")

    autojoin = element.get(st.STANZA_ATTR_AUTOJOIN)

    # Non-standard Gajim extension, carried through unchanged.
    minimize = MinimizeFlag.UNSET
    minimize_el = st.get_child_by_name_and_ns(
        element, st.STANZA_NAME_MINIMIZE, st.STANZA_NS_EXT_GAJIM_BOOKMARKS
    )
    if minimize_el is not None:
        minimize = MinimizeFlag.from_text(st.text_of(minimize_el))

    bookmark = Bookmark(
        jid=jid,
        nick=st.text_of(st.get_child_by_name(element, st.STANZA_NAME_NICK)),
        password=st.text_of(st.get_child_by_name(element, st.STANZA_NAME_PASSWORD)),
        name=element.get(st.STANZA_ATTR_NAME),
        autojoin=autojoin in ("1", "true"),
        minimize=minimize,
    )
    return DecodeResult(bookmark=bookmark)


def decode_fetch_result(stanza: ET.Element) -> List[DecodeResult]:
    """Decode a bookmark storage IQ result.

    Args:
        stanza: Incoming IQ stanza

    Returns:
        One result per child of the storage element, in document order.
        Empty if the stanza is not a result or lacks query/storage.
    """
    storage = find_storage(stanza)
    if storage is None:
        logger.debug("Ignoring stanza without bookmark storage")
        return []

    results = []
    for child in storage:
        result = decode_conference(child)
        if result.ok:
            logger.debug(f"Handle bookmark for {result.bookmark.jid}")
        else:
            logger.debug(f"Skipping bookmark entry: {result.skipped}")
        results.append(result)
    return results


def decoded_bookmarks(results: Iterable[DecodeResult]) -> List[Bookmark]:
    """The bookmarks from successful results only."""
    return [r.bookmark for r in results if r.bookmark is not None]


def encode_conference(bookmark: Bookmark, jid_parser: JidParser = parse_jid) -> ET.Element:
    """Build the ``conference`` element for one bookmark."""
    conference = st.new_element(st.STANZA_NAME_CONFERENCE)
    conference.set(st.STANZA_ATTR_JID, bookmark.jid)

    if bookmark.name:
        conference.set(st.STANZA_ATTR_NAME, bookmark.name)
    else:
        localpart = jid_parser(bookmark.jid).localpart
        if localpart:
            conference.set(st.STANZA_ATTR_NAME, localpart)

    conference.set(st.STANZA_ATTR_AUTOJOIN, "true" if bookmark.autojoin else "false")

    if bookmark.nick is not None:
        st.add_text_child(conference, st.STANZA_NAME_NICK, bookmark.nick)
    if bookmark.password is not None:
        st.add_text_child(conference, st.STANZA_NAME_PASSWORD, bookmark.password)
    if bookmark.minimize.is_set:
        st.add_text_child(
            conference,
            st.STANZA_NAME_MINIMIZE,
            bookmark.minimize.value,
            ns=st.STANZA_NS_EXT_GAJIM_BOOKMARKS,
        )

    return conference


def encode_full_replace(
    bookmarks: Iterable[Bookmark],
    stanza_id: str,
    jid_parser: JidParser = parse_jid,
) -> ET.Element:
    """Build the IQ set that replaces the whole remote bookmark document."""
    iq = st.create_iq(st.STANZA_TYPE_SET, stanza_id)
    storage = st.create_private_storage(iq)
    for bookmark in bookmarks:
        storage.append(encode_conference(bookmark, jid_parser))
    return iq
