"""Logging helpers for ChatUIX."""

import sys

from loguru import logger

from chatuix.core.constants import LOGS_FPATH

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level:^7} | {file.name}:{line} | {message}"


def configure_logger(source: str) -> None:
    """Configure Loguru logging for an entrypoint identified by `source`."""
    # Clear any previously added handlers
    logger.remove()

    # Console handler: ERROR and above
    logger.add(sink=sys.stderr, level="ERROR", format=LOG_FORMAT)

    # File handler: DEBUG+, rotated daily
    LOGS_FPATH.mkdir(parents=True, exist_ok=True)
    log_path = LOGS_FPATH / f"{source}_{'{time:YYYYMMDD}'}.log"

    logger.add(
        sink=str(log_path),
        level="DEBUG",
        format=LOG_FORMAT,
        rotation="00:00",
        retention="7 days",
        compression="zip",
    )

    logger.info(
        f"Logger configured for source '{source}'. "
        f"Sinks: stderr (level=ERROR+), file (level=DEBUG+) at '{log_path}'. "
        f"Rotation daily at midnight, retention 7 days, zipped."
    )


def add_console_verbosity(verbose: int) -> None:
    """Add a console side channel: 1 for INFO, 2+ for DEBUG, 0 for none."""
    if verbose <= 0:
        return
    level = "DEBUG" if verbose > 1 else "INFO"
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{message}</level>",
    )
