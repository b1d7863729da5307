"""Query compilation and candidate matching."""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Pattern, Sequence, Tuple

from ..util.logging import get_logger

logger = get_logger(__name__)

Span = Tuple[int, int]


class InvalidQueryError(ValueError):
    """Raised when a regex query cannot be compiled."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"Invalid query {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class EmptyQueryPolicy(str, Enum):
    """What an empty query returns."""

    MATCH_ALL = "all"
    MATCH_NONE = "none"


@dataclass(frozen=True)
class MatchResult:
    """A candidate that matched a query, with every matched span."""

    candidate: str
    pattern: Pattern[str]
    spans: Tuple[Span, ...] = ()

    @property
    def matched_text(self) -> List[str]:
        """Get the matched substrings in left-to-right order."""
        return [self.candidate[start:end] for start, end in self.spans]


@dataclass
class SearchOutcome:
    """Matches for a query plus whether the query was usable."""

    results: List[MatchResult] = field(default_factory=list)
    error: Optional[InvalidQueryError] = None

    @property
    def valid(self) -> bool:
        return self.error is None


def compile_query(needle: Optional[str], regex_enabled: bool) -> Pattern[str]:
    """Compile a search query into a pattern.

    Args:
        needle: Text to search for; None is treated as an empty string
        regex_enabled: Interpret regex syntax in the needle if True,
            otherwise match the needle literally

    Returns:
        Compiled pattern

    Raises:
        InvalidQueryError: If regex_enabled is set and the needle is not a valid pattern
    """
    needle = needle or ""
    source = needle if regex_enabled else re.escape(needle)

    try:
        return re.compile(source)
    except (re.error, OverflowError, RecursionError) as e:
        raise InvalidQueryError(needle, str(e)) from e


def find_spans(pattern: Pattern[str], text: str) -> List[Span]:
    """Find the spans of all non-empty matches of pattern in text."""
    return [match.span() for match in pattern.finditer(text) if match.end() > match.start()]


def _scan(candidates: Sequence[str], pattern: Pattern[str]) -> List[MatchResult]:
    results = []

    for candidate in candidates:
        # Zero-width matches still count, they just have nothing to highlight
        if pattern.search(candidate) is None:
            continue
        results.append(MatchResult(candidate, pattern, tuple(find_spans(pattern, candidate))))

    return results


def match_query(
    candidates: Sequence[str],
    needle: Optional[str],
    regex_enabled: bool = False,
    empty_query: EmptyQueryPolicy = EmptyQueryPolicy.MATCH_ALL,
) -> SearchOutcome:
    """Match a query against candidates, reporting invalid queries.

    Args:
        candidates: Strings to search, in display order
        needle: Query text; None is treated as an empty string
        regex_enabled: Interpret regex syntax in the needle
        empty_query: Policy applied when the needle is empty

    Returns:
        SearchOutcome with the matches in candidate order, or an empty
        result list and the compilation error for a malformed regex
    """
    needle = needle or ""

    if not needle and EmptyQueryPolicy(empty_query) is EmptyQueryPolicy.MATCH_NONE:
        return SearchOutcome()

    try:
        pattern = compile_query(needle, regex_enabled)
    except InvalidQueryError as e:
        logger.warning(str(e))
        return SearchOutcome(error=e)

    results = _scan(candidates, pattern)
    logger.debug(f"Query {needle!r} (regex={regex_enabled}) matched {len(results)}/{len(candidates)} candidates")

    return SearchOutcome(results=results)


def find_matches(
    candidates: Sequence[str],
    needle: Optional[str],
    regex_enabled: bool = False,
    empty_query: EmptyQueryPolicy = EmptyQueryPolicy.MATCH_ALL,
) -> List[MatchResult]:
    """Find the candidates matching a query.

    A malformed regex yields an empty list instead of raising.
    """
    return match_query(candidates, needle, regex_enabled, empty_query).results
