"""Configuration schema using Pydantic."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings


class Base(BaseModel):
    """Base model that accepts both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AccountConfig(Base):
    """XMPP account settings used by bookmarks."""
    jid: str = ""  # Account JID, e.g. "alice@example.org"
    muc_nick: str = ""  # Default room nick; falls back to the JID's local part


class BookmarksConfig(Base):
    """Bookmark sync behaviour."""
    autojoin_on_fetch: bool = True  # Announce autojoin rooms when a fetch arrives
    register_conf_servers: bool = True  # Record bookmark domains as conference servers


class LoggingConfig(Base):
    """Logging configuration."""
    level: str = "SUCCESS"  # Console level
    file_level: str = "DEBUG"  # Level written to the log file
    file: str = ""  # Empty: ~/.mucmarks/mucmarks.log
    verbose: bool = False

    @property
    def file_path(self) -> Path | None:
        return Path(self.file).expanduser() if self.file else None


class Config(BaseSettings):
    """Root configuration for mucmarks."""
    account: AccountConfig = Field(default_factory=AccountConfig)
    bookmarks: BookmarksConfig = Field(default_factory=BookmarksConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(
        env_prefix="MUCMARKS_",
        env_nested_delimiter="__"
    )
