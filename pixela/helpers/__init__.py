# pixela/helpers/__init__.py

"""Pixela helper utilities (logging setup)."""

from ._logger import get_logger, log, setup_logging

__all__ = [
    "get_logger",
    "log",
    "setup_logging",
]
