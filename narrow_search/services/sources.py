"""Suggestion sources over the catalog.

Each source filters one candidate variant against the typed query,
writes a highlighted description for every match, and returns the
matching labels in its own order. Descriptions depend on the query, so
nothing here is cached between keystrokes.
"""

from __future__ import annotations

from typing import Callable, Iterable

from ..models.candidate import (
    PersonCandidate,
    PrivateMessageCandidate,
    SenderCandidate,
    StreamCandidate,
)
from .catalog import SuggestionCatalog
from .highlight import highlight_person, highlight_query_in_phrase
from .phrase import matches, person_matches
from .ranking import PersonComparator, prefix_sort, sort_people

# Canonical ordering for streams: (query, candidates, key) -> ordered candidates
StreamSorter = Callable[
    [str, Iterable[StreamCandidate], Callable[[StreamCandidate], str]],
    list[StreamCandidate],
]

PERSON_PREFIXES: dict[type, str] = {
    PrivateMessageCandidate: "Narrow to private messages with",
    SenderCandidate: "Narrow to messages sent by",
}


class StreamSource:
    """Suggests streams whose name has a word starting with the query."""

    def __init__(self, catalog: SuggestionCatalog, sorter: StreamSorter = prefix_sort):
        self._catalog = catalog
        self._sorter = sorter

    def suggest(self, query: str, descriptions: dict[str, str]) -> list[str]:
        found = []
        for candidate in self._catalog.of_type(StreamCandidate):
            if not matches(candidate.stream, query):
                continue
            stream = highlight_query_in_phrase(query, candidate.stream)
            descriptions[candidate.label] = f"Narrow to stream {stream}"
            found.append(candidate)

        # Streams are already sorted by name; the sorter lifts prefix matches
        ordered = self._sorter(query, found, lambda c: c.stream)
        return [c.label for c in ordered]


class PersonSource:
    """Suggests people, either as PM recipients or as senders."""

    def __init__(
        self,
        catalog: SuggestionCatalog,
        variant: type[PrivateMessageCandidate] | type[SenderCandidate],
        compare: PersonComparator,
    ):
        self._catalog = catalog
        self._variant = variant
        self._compare = compare
        self._prefix = PERSON_PREFIXES[variant]

    def suggest(self, query: str, descriptions: dict[str, str]) -> list[str]:
        found: list[PersonCandidate] = []
        for candidate in self._catalog.of_type(self._variant):
            if not person_matches(candidate.person, query):
                continue
            name = highlight_person(query, candidate.person)
            descriptions[candidate.label] = f"{self._prefix} {name}"
            found.append(candidate)

        ordered = sort_people(found, self._compare, lambda c: c.person)
        return [c.label for c in ordered]
