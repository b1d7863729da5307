"""Markup generation for matched substrings."""

import html
from typing import List, Sequence, Tuple

from .matcher import MatchResult

BOLD_OPEN = "<b>"
BOLD_CLOSE = "</b>"


class SpanError(ValueError):
    """Spans that are unordered, overlapping or out of range."""
    pass


def escape_markup(text: str) -> str:
    """Escape characters that are significant in Pango/HTML markup."""
    return html.escape(text, quote=False)


def _validate_spans(text: str, spans: Sequence[Tuple[int, int]]) -> List[Tuple[int, int]]:
    checked = []
    position = 0

    for start, end in spans:
        if start < position or end < start or end > len(text):
            raise SpanError(f"Invalid span ({start}, {end}) for text of length {len(text)}")
        if end > start:
            checked.append((start, end))
        position = end

    return checked


def highlight(
    original: str,
    spans: Sequence[Tuple[int, int]],
    open_tag: str = BOLD_OPEN,
    close_tag: str = BOLD_CLOSE,
) -> str:
    """Wrap each matched span of a string in markup tags.

    Everything outside the inserted tags is escaped, so the result can be
    handed straight to a markup-aware label.

    Args:
        original: Text that was searched
        spans: (start, end) offsets, sorted and non-overlapping
        open_tag: Markup inserted before each match
        close_tag: Markup inserted after each match

    Returns:
        Marked-up string

    Raises:
        SpanError: If the spans are unordered, overlap or fall outside the text
    """
    parts = []
    position = 0

    for start, end in _validate_spans(original, spans):
        parts.append(escape_markup(original[position:start]))
        parts.append(open_tag + escape_markup(original[start:end]) + close_tag)
        position = end

    parts.append(escape_markup(original[position:]))

    return "".join(parts)


def highlight_match(result: MatchResult, open_tag: str = BOLD_OPEN, close_tag: str = BOLD_CLOSE) -> str:
    """Highlight every span recorded in a match result."""
    return highlight(result.candidate, result.spans, open_tag, close_tag)


def strip_markup(markup: str, open_tag: str = BOLD_OPEN, close_tag: str = BOLD_CLOSE) -> str:
    """Recover the original text from highlighted markup.

    Only exact when the tags start with "<", which never survives escaping.
    """
    return html.unescape(markup.replace(open_tag, "").replace(close_tag, ""))
