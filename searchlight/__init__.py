"""
SearchLight - search-as-you-type filtering with match highlighting.

A small toolkit for filtering a fixed list of strings while a user types:
- Literal or regex queries
- All match spans recorded per candidate
- Safe Pango/HTML markup with matches wrapped in bold tags
"""

__version__ = "0.1.0"
__author__ = "SearchLight Contributors"
