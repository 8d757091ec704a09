"""Tests for configuration loading."""

import json
import os
import stat

from mucmarks.config.loader import load_config, save_config
from mucmarks.config.schema import AccountConfig, BookmarksConfig, Config


class TestConfig:
    """Test config schema and persistence."""

    def test_defaults(self):
        """An empty config has empty account and SUCCESS logging."""
        config = Config()
        assert config.account.jid == ""
        assert config.account.muc_nick == ""
        assert config.logging.level == "SUCCESS"
        assert config.logging.file_path is None

    def test_accepts_camel_case(self):
        """camelCase keys populate snake_case fields."""
        config = Config.model_validate({"account": {"jid": "a@example.org", "mucNick": "al"}})
        assert config.account.muc_nick == "al"

    def test_save_and_load(self, tmp_path):
        """A saved config loads back and is owner-only."""
        path = tmp_path / "config.json"
        save_config(Config(account=AccountConfig(jid="a@example.org", muc_nick="al")), path)

        data = json.loads(path.read_text())
        assert data["account"]["mucNick"] == "al"
        assert stat.S_IMODE(os.stat(path).st_mode) == 0o600

        config = load_config(path)
        assert config.account.jid == "a@example.org"
        assert config.account.muc_nick == "al"

    def test_missing_file_gives_defaults(self, tmp_path):
        """A missing file gives defaults."""
        config = load_config(tmp_path / "missing.json")
        assert config.account.jid == ""

    def test_invalid_file_gives_defaults(self, tmp_path):
        """Broken JSON gives defaults."""
        path = tmp_path / "config.json"
        path.write_text("{not json")
        os.chmod(path, 0o600)

        config = load_config(path)
        assert config.account.jid == ""

    def test_permissions_are_fixed(self, tmp_path):
        """Loading tightens loose permissions."""
        path = tmp_path / "config.json"
        path.write_text("{}")
        os.chmod(path, 0o644)

        load_config(path)
        assert stat.S_IMODE(os.stat(path).st_mode) == 0o600

    def test_bookmarks_section(self, tmp_path):
        """The bookmarks switches default on and persist in camelCase."""
        assert Config().bookmarks.autojoin_on_fetch is True
        assert Config().bookmarks.register_conf_servers is True

        path = tmp_path / "config.json"
        save_config(Config(bookmarks=BookmarksConfig(autojoin_on_fetch=False)), path)

        assert json.loads(path.read_text())["bookmarks"]["autojoinOnFetch"] is False
        assert load_config(path).bookmarks.autojoin_on_fetch is False
        assert load_config(path).bookmarks.register_conf_servers is True

    def test_env_overrides_bookmarks(self, monkeypatch):
        """Nested env variables reach the bookmarks section."""
        monkeypatch.setenv("MUCMARKS_BOOKMARKS__REGISTER_CONF_SERVERS", "false")
        assert Config().bookmarks.register_conf_servers is False
