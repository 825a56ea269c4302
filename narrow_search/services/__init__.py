"""Services for Narrow Search."""

from narrow_search.services.engine import SearchEngine
from narrow_search.services.dispatch import Resolution, SearchDispatcher
from narrow_search.services.catalog import SuggestionCatalog
from narrow_search.services.narrow import Narrower, NarrowState, QueryField
from narrow_search.services.search_box import SearchBox
from narrow_search.services.roster import RosterService
from narrow_search.services.controller import SearchController
from narrow_search.services.operators import (
    parse_operators,
    unparse_operators,
    describe_operators,
)

__all__ = [
    "SearchEngine",
    "Resolution",
    "SearchDispatcher",
    "SuggestionCatalog",
    "Narrower",
    "NarrowState",
    "QueryField",
    "SearchBox",
    "RosterService",
    "SearchController",
    "parse_operators",
    "unparse_operators",
    "describe_operators",
]
