"""Suggestion catalog: label <-> candidate store.

The catalog is an arena of candidates plus a label index. Slot 0 is
reserved for the operators candidate, which is replaced on every
keystroke; the rest is rebuilt wholesale whenever the roster changes.

Generation order: operators slot, streams (sorted), people as
private-message recipients, people as senders.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, TypeVar, cast

from ..models.candidate import (
    Candidate,
    OperatorsCandidate,
    PrivateMessageCandidate,
    SenderCandidate,
    StreamCandidate,
)
from ..models.person import Person

logger = logging.getLogger(__name__)

C = TypeVar("C", StreamCandidate, PrivateMessageCandidate, SenderCandidate)

OPERATORS_SLOT = 0


class SuggestionCatalog:
    """Bidirectional store of suggestion candidates keyed by label."""

    def __init__(self) -> None:
        self._candidates: list[Candidate] = [OperatorsCandidate()]
        self._index: dict[str, int] = {}

    def rebuild(self, stream_names: Iterable[str], people: Iterable[Person]) -> None:
        """Replace the whole catalog from the current roster.

        A label seen twice (two people sharing an email) resolves to the
        last candidate produced for it; each replacement is logged.
        """
        people = list(people)
        options: list[Candidate] = [StreamCandidate(name) for name in sorted(stream_names)]
        options.extend(PrivateMessageCandidate(person) for person in people)
        options.extend(SenderCandidate(person) for person in people)

        candidates: list[Candidate] = [OperatorsCandidate()]
        index: dict[str, int] = {}
        for candidate in options:
            label = candidate.label
            if label in index:
                logger.warning(f"Duplicate suggestion label {label!r}, replacing earlier entry")
                candidates[index[label]] = candidate
                continue
            index[label] = len(candidates)
            candidates.append(candidate)

        # Swap in one step so readers never see a half-built catalog
        self._candidates, self._index = candidates, index
        logger.debug(
            f"Rebuilt suggestion catalog: {len(candidates) - 1} candidates "
            f"from {len(people)} people"
        )

    @property
    def operators(self) -> OperatorsCandidate:
        return cast(OperatorsCandidate, self._candidates[OPERATORS_SLOT])

    def set_operators(self, candidate: OperatorsCandidate | None) -> None:
        """Replace the operators slot; None resets it to the placeholder."""
        self._candidates[OPERATORS_SLOT] = candidate or OperatorsCandidate()

    def get(self, label: str) -> Candidate | None:
        """Look up a candidate by label.

        The operators slot wins when typed text happens to equal a
        stream or person label.
        """
        operators = self.operators
        if operators.operators and operators.label == label:
            return operators
        idx = self._index.get(label)
        if idx is None:
            return None
        return self._candidates[idx]

    def of_type(self, variant: type[C]) -> list[C]:
        """All roster candidates of one variant, in generation order."""
        return [c for c in self._candidates[OPERATORS_SLOT + 1:] if isinstance(c, variant)]

    @property
    def labels(self) -> list[str]:
        """Labels in generation order, operators slot first."""
        return [c.label for c in self._candidates]

    def __contains__(self, label: str) -> bool:
        return self.get(label) is not None

    def __iter__(self) -> Iterator[Candidate]:
        return iter(list(self._candidates))

    def __len__(self) -> int:
        return len(self._candidates)
