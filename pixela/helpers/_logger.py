# pixela/helpers/_logger.py

# SECTION: MODULE DOCSTRING
"""Logging setup for the pixela package.

Console output goes through Rich on stderr; a rotating file log is added
only when a log directory is given.
"""

# SECTION: IMPORTS
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

# SECTION: CONSTANTS
LOG_FILENAME = "pixela.log"
LOG_FORMAT_FILE = "%(asctime)s - %(filename)s:%(lineno)d - %(levelname)s - %(message)s"
LOG_FORMAT_RICH = "%(message)s"
LOGGER_NAME = "pixela"

error_console = Console(stderr=True)


# FUNC: setup_logging
def setup_logging(
    log_level: int = logging.DEBUG,
    logger_name: str = LOGGER_NAME,
    log_dir: Path | None = None,
    console_level: int = logging.WARNING,
) -> logging.Logger:
    """Configure the package logger with a Rich console handler.

    Args:
        log_level: Level of the logger itself.
        logger_name: Name of the logger to configure.
        log_dir: If set, also write DEBUG records to a rotating file there.
        console_level: Minimum level shown on the console.

    Returns:
        The configured logger.
    """
    log = logging.getLogger(logger_name)
    log.setLevel(log_level)

    # Clear existing handlers to prevent duplicates
    if log.hasHandlers():
        log.handlers.clear()

    rich_handler = RichHandler(console=error_console, rich_tracebacks=True)
    rich_handler.setLevel(console_level)
    rich_handler.setFormatter(logging.Formatter(LOG_FORMAT_RICH))
    log.addHandler(rich_handler)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / LOG_FILENAME,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT_FILE))
        log.addHandler(file_handler)

    log.propagate = False
    return log


_log_instance: logging.Logger | None = None


# FUNC: get_logger
def get_logger() -> logging.Logger:
    """Return the shared package logger, configuring it on first use."""
    global _log_instance
    if _log_instance is None:
        _log_instance = setup_logging()
    return _log_instance


log = get_logger()


# FUNC: configure_third_party_loggers
def configure_third_party_loggers() -> None:
    """Keep the HTTP stack's own loggers at WARNING."""
    for logger_name in ("httpx", "httpcore"):
        logging.getLogger(logger_name).setLevel(logging.WARNING)


configure_third_party_loggers()
