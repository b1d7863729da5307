"""Logging setup for SearchLight."""

import logging
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "searchlight"

FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d %(message)s"


def resolve_level(level: Union[str, int]) -> int:
    """Turn a level name such as "debug" or a numeric level into a logging level.

    Raises:
        ValueError: If the name is not a standard logging level
    """
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def _console_handler(console: Console, level: int) -> logging.Handler:
    # Search queries show up in messages; keep them out of rich markup parsing
    handler = RichHandler(console=console, show_path=level <= logging.DEBUG, markup=False, rich_tracebacks=True)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    return handler


def _file_handler(log_file: Path) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(
    level: Union[str, int] = "INFO",
    log_file: Optional[Path] = None,
    console: Optional[Console] = None
) -> logging.Logger:
    """Configure the package logger.

    Replaces any handlers installed by an earlier call, so the CLI can call
    this once per invocation.

    Args:
        level: Console level name or number
        log_file: Also write DEBUG and above to this file
        console: Rich console for log output (stderr by default)

    Returns:
        The package logger
    """
    resolved = resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler(console or Console(stderr=True), resolved))
    if log_file:
        logger.addHandler(_file_handler(log_file))

    # The file handler wants DEBUG records even when the console is quieter
    logger.setLevel(min(resolved, logging.DEBUG) if log_file else resolved)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
