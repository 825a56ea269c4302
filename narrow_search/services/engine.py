"""SearchEngine: suggestions for the search bar.

Ties the catalog, the suggestion sources, the operator builder and the
dispatcher together behind the three calls the search bar makes:

- suggest(text)    -> ordered labels for the current keystroke
- highlight(label) -> markup description of a suggested label
- resolve(label)   -> narrow accordingly, report the resulting text

Ranking is by source priority only: the operators suggestion first, then
up to `per_source` streams, PM recipients, and senders.
"""

from __future__ import annotations

import logging
from typing import Iterable

from ..models.candidate import PrivateMessageCandidate, SenderCandidate
from ..models.person import Person
from .catalog import SuggestionCatalog
from .dispatch import Resolution, SearchDispatcher
from .narrow import Narrower, QueryField
from .operators import OperatorCandidateBuilder, OperatorParser, parse_operators
from .ranking import PersonComparator, PmRecipientCounts, prefix_sort
from .sources import PersonSource, StreamSorter, StreamSource

logger = logging.getLogger(__name__)

DEFAULT_PER_SOURCE = 4


class SearchEngine:
    """Incremental search suggestions and their dispatch."""

    def __init__(
        self,
        narrower: Narrower,
        field: QueryField,
        parser: OperatorParser = parse_operators,
        compare: PersonComparator | None = None,
        stream_sorter: StreamSorter = prefix_sort,
        per_source: int = DEFAULT_PER_SOURCE,
    ):
        self.per_source = per_source
        self._catalog = SuggestionCatalog()
        self._builder = OperatorCandidateBuilder(parser)
        compare = compare or PmRecipientCounts().compare
        self._streams = StreamSource(self._catalog, stream_sorter)
        self._recipients = PersonSource(self._catalog, PrivateMessageCandidate, compare)
        self._senders = PersonSource(self._catalog, SenderCandidate, compare)
        self._dispatcher = SearchDispatcher(self._catalog, narrower, field)
        self._descriptions: dict[str, str] = {}

    @property
    def catalog(self) -> SuggestionCatalog:
        return self._catalog

    def rebuild(self, stream_names: Iterable[str], people: Iterable[Person]) -> None:
        """Rebuild the catalog after the roster changed."""
        self._catalog.rebuild(stream_names, people)
        self._descriptions = {}

    def suggest(self, query_text: str) -> list[str]:
        """Ordered suggestion labels for the text typed so far.

        Text that parses to no operators gets no suggestions at all.
        """
        # The previous operators entry is keyed by stale text
        self._catalog.set_operators(None)
        descriptions: dict[str, str] = {}

        candidate = self._builder.build(query_text)
        if candidate is None:
            self._descriptions = descriptions
            return []

        self._catalog.set_operators(candidate)
        result = [candidate.label]

        cap = self.per_source
        result.extend(self._streams.suggest(query_text, descriptions)[:cap])
        result.extend(self._recipients.suggest(query_text, descriptions)[:cap])
        result.extend(self._senders.suggest(query_text, descriptions)[:cap])

        # Operators description wins if a source produced the same label
        descriptions[candidate.label] = self._builder.describe(candidate)
        self._descriptions = descriptions
        return result

    def highlight(self, label: str) -> str:
        """Markup description for a label returned by the last suggest()."""
        return self._descriptions.get(label, "")

    def resolve(self, label: str) -> Resolution:
        """Apply the suggestion behind label."""
        return self._dispatcher.resolve(label)
