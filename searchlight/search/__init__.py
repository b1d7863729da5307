"""Search module initialization."""

from .candidates import DEFAULT_CANDIDATES, get_candidates, load_candidates
from .highlight import SpanError, escape_markup, highlight, highlight_match, strip_markup
from .matcher import (
    EmptyQueryPolicy,
    InvalidQueryError,
    MatchResult,
    SearchOutcome,
    compile_query,
    find_matches,
    find_spans,
    match_query,
)
from .pipeline import RenderedMatch, SearchSession, render_matches, render_results

__all__ = [
    # candidates
    "DEFAULT_CANDIDATES",
    "get_candidates",
    "load_candidates",
    # matcher
    "EmptyQueryPolicy",
    "InvalidQueryError",
    "MatchResult",
    "SearchOutcome",
    "compile_query",
    "find_matches",
    "find_spans",
    "match_query",
    # highlight
    "SpanError",
    "escape_markup",
    "highlight",
    "highlight_match",
    "strip_markup",
    # pipeline
    "RenderedMatch",
    "SearchSession",
    "render_matches",
    "render_results",
]
