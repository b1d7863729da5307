"""Search pipeline feeding a rendering layer."""

from typing import List, NamedTuple, Optional, Sequence

from ..util.logging import get_logger
from .highlight import BOLD_CLOSE, BOLD_OPEN, highlight_match
from .matcher import EmptyQueryPolicy, InvalidQueryError, MatchResult, match_query

logger = get_logger(__name__)


class RenderedMatch(NamedTuple):
    """A match ready for display: plain text and its markup."""

    display: str
    markup: str


def render_results(
    results: Sequence[MatchResult],
    open_tag: str = BOLD_OPEN,
    close_tag: str = BOLD_CLOSE,
) -> List[RenderedMatch]:
    """Highlight each match result, keeping result order."""
    return [RenderedMatch(r.candidate, highlight_match(r, open_tag, close_tag)) for r in results]


def render_matches(
    candidates: Sequence[str],
    needle: Optional[str],
    regex_enabled: bool = False,
    empty_query: EmptyQueryPolicy = EmptyQueryPolicy.MATCH_ALL,
    open_tag: str = BOLD_OPEN,
    close_tag: str = BOLD_CLOSE,
) -> List[RenderedMatch]:
    """Match a query and highlight every result.

    Args:
        candidates: Strings to search, in display order
        needle: Query text
        regex_enabled: Interpret regex syntax in the needle
        empty_query: Policy applied when the needle is empty
        open_tag: Markup inserted before each match
        close_tag: Markup inserted after each match

    Returns:
        (display, markup) pairs in candidate order; empty for a malformed regex
    """
    outcome = match_query(candidates, needle, regex_enabled, empty_query)
    return render_results(outcome.results, open_tag, close_tag)


class SearchSession:
    """Search state for one search box over a fixed candidate set.

    A GUI calls update() from its text-changed and toggle handlers and
    replaces its rendered list with the returned matches.
    """

    def __init__(
        self,
        candidates: Sequence[str],
        empty_query: EmptyQueryPolicy = EmptyQueryPolicy.MATCH_ALL,
        keep_previous_on_error: bool = False,
        open_tag: str = BOLD_OPEN,
        close_tag: str = BOLD_CLOSE,
    ):
        self.candidates = tuple(candidates)
        self.empty_query = EmptyQueryPolicy(empty_query)
        self.keep_previous_on_error = keep_previous_on_error
        self.open_tag = open_tag
        self.close_tag = close_tag

        self.matches: List[RenderedMatch] = render_results(
            match_query(self.candidates, "", False, self.empty_query).results, open_tag, close_tag
        )
        self.last_error: Optional[InvalidQueryError] = None

    @classmethod
    def from_config(cls, config) -> "SearchSession":
        """Create a session from a SearchLightConfig."""
        return cls(
            config.candidates,
            empty_query=config.search.empty_query,
            keep_previous_on_error=config.search.keep_previous_on_error,
            open_tag=config.highlight.open_tag,
            close_tag=config.highlight.close_tag,
        )

    def update(self, needle: Optional[str], regex_enabled: bool = False) -> List[RenderedMatch]:
        """Recompute the matches for the current query.

        Args:
            needle: Current search text
            regex_enabled: Current state of the regex toggle

        Returns:
            The full list of matches to render
        """
        outcome = match_query(self.candidates, needle, regex_enabled, self.empty_query)
        self.last_error = outcome.error

        if outcome.valid:
            self.matches = render_results(outcome.results, self.open_tag, self.close_tag)
        elif not self.keep_previous_on_error:
            self.matches = []
        else:
            logger.debug("Keeping previous results until the query is valid again")

        return list(self.matches)
