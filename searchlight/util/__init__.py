"""Utility module initialization."""

from .logging import get_logger, resolve_level, setup_logging

__all__ = [
    "get_logger",
    "resolve_level",
    "setup_logging",
]
