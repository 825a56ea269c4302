"""Narrowing: restricting the message view to a set of operators.

Narrower is the contract the search bar drives. NarrowState is the
in-process implementation used by the app: it records the active
operators, writes their normalized text back into the query field, and
announces every change on the event bus.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..models.candidate import Operator
from .events import EventBus, NarrowChangedEvent
from .operators import unparse_operators

logger = logging.getLogger(__name__)


@dataclass
class QueryField:
    """Contents and focus of the search query input."""

    text: str = ""
    focused: bool = False


class Narrower(ABC):
    """Contract for the view-narrowing subsystem."""

    @abstractmethod
    def activate(self, operators: list[Operator], trigger: str = "") -> None:
        """Narrow the view to the given operators."""

    def by(self, kind: str, value: str, trigger: str = "") -> None:
        """Narrow by a single operator."""
        self.activate([(kind, value)], trigger=trigger)

    @abstractmethod
    def deactivate(self) -> None:
        """Return to the unnarrowed view."""

    @abstractmethod
    def active(self) -> bool:
        """Whether a narrow is currently applied."""


class NarrowState(Narrower):
    """Tracks the current narrow and mirrors it into the query field."""

    def __init__(self, field: QueryField, bus: EventBus | None = None):
        self._field = field
        self._bus = bus or EventBus.get()
        self._operators: list[Operator] = []
        self._trigger = ""

    @property
    def operators(self) -> list[Operator]:
        return list(self._operators)

    @property
    def trigger(self) -> str:
        """What caused the current narrow (e.g. "search")."""
        return self._trigger

    def activate(self, operators: list[Operator], trigger: str = "") -> None:
        operators = list(operators)
        if not operators:
            self.deactivate()
            return

        self._operators = operators
        self._trigger = trigger
        self._field.text = unparse_operators(operators)
        logger.debug(f"Narrowed to {operators!r} (trigger={trigger or 'none'})")
        self._bus.emit(NarrowChangedEvent(operators=list(operators), trigger=trigger))

    def deactivate(self) -> None:
        was_active = self.active()
        self._operators = []
        self._trigger = ""
        self._field.text = ""
        if was_active:
            logger.debug("Narrow cleared")
            self._bus.emit(NarrowChangedEvent(operators=[], trigger=""))

    def active(self) -> bool:
        return bool(self._operators)
