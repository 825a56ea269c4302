"""Widgets for Narrow Search."""

from narrow_search.widgets.search_bar import SearchBar, SuggestionItem

__all__ = [
    "SearchBar",
    "SuggestionItem",
]
