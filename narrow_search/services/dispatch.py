"""Turns a selected suggestion label back into a narrowing call."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..models.candidate import (
    OperatorsCandidate,
    PrivateMessageCandidate,
    SenderCandidate,
    StreamCandidate,
)
from .catalog import SuggestionCatalog
from .narrow import Narrower, QueryField

logger = logging.getLogger(__name__)

SEARCH_TRIGGER = "search"


@dataclass(frozen=True)
class Resolution:
    """Outcome of selecting a suggestion."""

    text: str  # What the query field should contain afterwards
    blur: bool = True  # Whether the query field should lose focus


class SearchDispatcher:
    """Resolves suggestion labels into narrows."""

    def __init__(self, catalog: SuggestionCatalog, narrower: Narrower, field: QueryField):
        self._catalog = catalog
        self._narrower = narrower
        self._field = field

    def resolve(self, label: str) -> Resolution:
        """Narrow according to the candidate behind label.

        An unknown label is left in the field as literal text.
        """
        candidate = self._catalog.get(label)
        if candidate is None:
            logger.debug(f"No suggestion for label {label!r}, keeping it as text")
            return Resolution(text=label, blur=False)

        if isinstance(candidate, StreamCandidate):
            self._narrower.by("stream", candidate.stream, trigger=SEARCH_TRIGGER)
        elif isinstance(candidate, PrivateMessageCandidate):
            self._narrower.by("pm-with", candidate.person.email, trigger=SEARCH_TRIGGER)
        elif isinstance(candidate, SenderCandidate):
            self._narrower.by("sender", candidate.person.email, trigger=SEARCH_TRIGGER)
        elif isinstance(candidate, OperatorsCandidate):
            self._narrower.activate(list(candidate.operators), trigger=SEARCH_TRIGGER)
        else:
            raise TypeError(f"Unhandled candidate type: {type(candidate).__name__}")

        logger.debug(f"Dispatched {candidate.action.value} suggestion {label!r}")
        # Narrowing rewrites the field with normalized operators; report that
        return Resolution(text=self._field.text, blur=True)
