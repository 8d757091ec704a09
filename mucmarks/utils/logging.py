"""Loguru sinks for mucmarks, driven by the ``logging`` config section."""

import sys
from pathlib import Path

from loguru import logger

from mucmarks.config.schema import LoggingConfig

DEFAULT_LOG_FILE = Path.home() / ".mucmarks" / "mucmarks.log"

CONSOLE_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_logging(config: LoggingConfig, verbose: bool = False) -> Path:
    """
    Replace loguru's sinks with a console sink and a rotating file sink.

    Args:
        config: The ``logging`` section of the mucmarks config
        verbose: Force DEBUG on the console regardless of ``config.level``

    Returns:
        Path of the log file in use
    """
    logger.remove()

    log_file = config.file_path or DEFAULT_LOG_FILE
    log_file.parent.mkdir(parents=True, exist_ok=True)

    console_level = "DEBUG" if verbose or config.verbose else config.level
    logger.add(
        sys.stderr,
        level=console_level,
        format=CONSOLE_FORMAT,
        diagnose=False,  # Tracebacks must not print room passwords
    )
    logger.add(
        str(log_file),
        level=config.file_level,
        format=FILE_FORMAT,
        rotation="5 MB",
        retention=3,
    )

    logger.debug(f"Console level {console_level}, file {log_file} at {config.file_level}")
    return log_file
