"""Central CSS definitions for narrow-search."""

# Search bar - minimal chrome
SEARCH_CSS = """
/* Input sits flush with the suggestion list */
SearchBar Input {
    background: $surface;
    border: round $surface-lighten-1;
    padding: 0 1;
}

SearchBar Input:focus {
    border: round $primary;
}

/* Exit button only stands out while usable */
SearchBar Button:disabled {
    color: $text-disabled;
}

/* Suggestion dropdown */
SearchBar #suggestions {
    border: round $surface-lighten-1;
    padding: 0;
    overflow-y: auto;
}
"""

# Common UI patterns shared across components
COMMON_CSS = """
/* Hidden containers take no space */
.hidden {
    display: none;
}

/* Empty list placeholder */
.empty-list {
    color: $text-disabled;
    padding: 2;
    text-align: center;
}
"""

# Combined base CSS for import
BASE_CSS = SEARCH_CSS + COMMON_CSS
