"""Candidate sets to search."""

from pathlib import Path
from typing import Tuple

from ..util.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CANDIDATES = (
    "a",
    "ab",
    "abc",
    "abcd",
    "aa",
    "abab",
    "abcabc",
    "abcdabcd",
)


def get_candidates() -> Tuple[str, ...]:
    """Get the built-in demo candidate set."""
    return tuple(DEFAULT_CANDIDATES)


def load_candidates(path: Path) -> Tuple[str, ...]:
    """Load a candidate set from a text file, one candidate per line.

    Args:
        path: File to read

    Returns:
        Candidates in file order, blank lines skipped
    """
    with open(path, "r", encoding="utf-8") as f:
        candidates = tuple(line.rstrip("\r\n") for line in f if line.strip())

    logger.debug(f"Loaded {len(candidates)} candidates from {path}")
    return candidates
