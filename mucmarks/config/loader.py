"""Read and write ``~/.mucmarks/config.json``."""

import json
import os
import stat
from pathlib import Path

from loguru import logger

from mucmarks.config.schema import Config

OWNER_ONLY = 0o600


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".mucmarks" / "config.json"


def _restrict_permissions(path: Path) -> None:
    """Make the file owner-only; it can hold the account JID and nick."""
    mode = stat.S_IMODE(path.stat().st_mode)
    if mode != OWNER_ONLY:
        logger.warning(f"Tightening permissions of {path} from {oct(mode)} to {oct(OWNER_ONLY)}")
        os.chmod(path, OWNER_ONLY)


def load_config(config_path: Path | None = None) -> Config:
    """
    Load the config file, falling back to defaults.

    A missing or unreadable file gives ``Config()``, which still picks up
    ``MUCMARKS_*`` environment variables.
    """
    path = config_path or get_config_path()
    if not path.exists():
        return Config()

    try:
        _restrict_permissions(path)
    except OSError as e:
        logger.warning(f"Could not check permissions of {path}: {e}")

    try:
        return Config.model_validate(json.loads(path.read_text()))
    except ValueError as e:
        logger.warning(f"Ignoring invalid config {path}: {e}")
        return Config()


def save_config(config: Config, config_path: Path | None = None) -> None:
    """Write the config as camelCase JSON, readable by the owner only."""
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.model_dump(by_alias=True), indent=2))
    _restrict_permissions(path)
    logger.debug(f"Saved config to {path}")
