"""Tests for the bookmark store and model."""

from mucmarks.bookmarks.store import BookmarkStore
from mucmarks.models.bookmark import Bookmark, MinimizeFlag


class TestMinimizeFlag:
    """Test MinimizeFlag enum."""

    def test_from_text(self):
        """Only the literal words true and false set the flag."""
        assert MinimizeFlag.from_text("true") is MinimizeFlag.TRUE
        assert MinimizeFlag.from_text("false") is MinimizeFlag.FALSE
        assert MinimizeFlag.from_text("1") is MinimizeFlag.UNSET
        assert MinimizeFlag.from_text(None) is MinimizeFlag.UNSET

    def test_is_set(self):
        """UNSET is the only state that is not set."""
        assert MinimizeFlag.TRUE.is_set
        assert MinimizeFlag.FALSE.is_set
        assert not MinimizeFlag.UNSET.is_set


class TestBookmark:
    """Test Bookmark dataclass."""

    def test_defaults(self):
        """A bare JID gives an empty, non-autojoin bookmark."""
        bookmark = Bookmark(jid="room@conf.example")

        assert bookmark.nick is None
        assert bookmark.password is None
        assert bookmark.name is None
        assert bookmark.autojoin is False
        assert bookmark.minimize is MinimizeFlag.UNSET

    def test_dict_round_trip(self):
        """to_dict output rebuilds the same bookmark."""
        bookmark = Bookmark(
            jid="room@conf.example",
            nick="alice",
            password="secret",
            name="Room",
            autojoin=True,
            minimize=MinimizeFlag.FALSE,
        )

        assert Bookmark.from_dict(bookmark.to_dict()) == bookmark

    def test_from_dict_reads_autojoin_strings(self):
        """String autojoin values count as true only when they say so."""
        for text in ("false", "0", "off", "no", ""):
            assert Bookmark.from_dict({"jid": "room@conf.example", "autojoin": text}).autojoin is False
        for text in ("true", "1", "on", "TRUE"):
            assert Bookmark.from_dict({"jid": "room@conf.example", "autojoin": text}).autojoin is True

    def test_from_dict_accepts_bool_minimize(self):
        """A JSON bool minimize maps to the enum."""
        bookmark = Bookmark.from_dict({"jid": "room@conf.example", "minimize": True})
        assert bookmark.minimize is MinimizeFlag.TRUE

    def test_copy_is_detached(self):
        """Changing a copy leaves the original alone."""
        bookmark = Bookmark(jid="room@conf.example", nick="alice")
        copy = bookmark.copy()
        copy.nick = "bob"
        assert bookmark.nick == "alice"


class TestBookmarkStore:
    """Test BookmarkStore."""

    def test_upsert_and_get(self):
        """An inserted bookmark is found by its JID."""
        store = BookmarkStore()
        bookmark = Bookmark(jid="room@conf.example")
        store.upsert(bookmark)

        assert store.get("room@conf.example") is bookmark
        assert store.contains("room@conf.example")
        assert "room@conf.example" in store
        assert len(store) == 1

    def test_upsert_replaces(self):
        """Upserting an existing JID replaces the record."""
        store = BookmarkStore()
        store.upsert(Bookmark(jid="room@conf.example", nick="alice"))
        store.upsert(Bookmark(jid="room@conf.example", nick="bob"))

        assert len(store) == 1
        assert store.get("room@conf.example").nick == "bob"

    def test_get_missing(self):
        """Unknown JIDs give None."""
        assert BookmarkStore().get("room@conf.example") is None

    def test_remove(self):
        """Remove reports whether a record was deleted."""
        store = BookmarkStore()
        store.upsert(Bookmark(jid="room@conf.example"))

        assert store.remove("room@conf.example") is True
        assert store.remove("room@conf.example") is False
        assert not store.contains("room@conf.example")

    def test_list_is_stable(self):
        """list() keeps insertion order across calls."""
        store = BookmarkStore()
        for jid in ("b@conf.example", "a@conf.example", "c@conf.example"):
            store.upsert(Bookmark(jid=jid))

        assert [b.jid for b in store.list()] == ["b@conf.example", "a@conf.example", "c@conf.example"]
        assert store.list() == store.list()

    def test_fetch_begin_discards_everything(self):
        """fetch_begin empties the store and can repeat."""
        store = BookmarkStore()
        store.upsert(Bookmark(jid="room@conf.example"))

        store.fetch_begin()
        store.fetch_begin()

        assert len(store) == 0
        assert store.list() == []
