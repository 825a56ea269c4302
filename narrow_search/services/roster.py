"""Roster of subscribed streams and known people.

The roster is the input to the suggestion catalog. It can be loaded from
a JSON file:

    {
      "streams": ["general", "social"],
      "people": [
        {"full_name": "Alice Arden", "email": "alice@example.com",
         "pm_recipient_count": 12}
      ]
    }

Every change emits a RosterChangedEvent so the search controller can
rebuild its catalog.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from ..models.exceptions import RosterError
from ..models.person import Person
from .events import EventBus, RosterChangedEvent
from .ranking import PmRecipientCounts

logger = logging.getLogger(__name__)


class RosterService:
    """Holds the streams and people the search bar can suggest."""

    def __init__(self, bus: EventBus | None = None):
        self._bus = bus or EventBus.get()
        self._streams: set[str] = set()
        self._people: list[Person] = []
        self.pm_counts = PmRecipientCounts()

    def stream_names(self) -> set[str]:
        return set(self._streams)

    def people(self) -> list[Person]:
        return list(self._people)

    def set_streams(self, names: Iterable[str]) -> None:
        self._streams = set(names)
        self._changed()

    def add_stream(self, name: str) -> None:
        if name not in self._streams:
            self._streams.add(name)
            self._changed()

    def remove_stream(self, name: str) -> None:
        if name in self._streams:
            self._streams.discard(name)
            self._changed()

    def set_people(self, people: Iterable[Person]) -> None:
        self._people = list(people)
        self._changed()

    def load(self, path: Path) -> None:
        """Replace the roster with the contents of a JSON roster file.

        Raises:
            RosterError: If the file cannot be read or is malformed
        """
        try:
            data = json.loads(path.read_text())
        except OSError as e:
            raise RosterError(f"Cannot read roster file {path}", str(e)) from e
        except json.JSONDecodeError as e:
            raise RosterError(f"Roster file {path} is not valid JSON", str(e)) from e

        if not isinstance(data, dict):
            raise RosterError(f"Roster file {path} must contain a JSON object")

        try:
            streams = [str(name) for name in data.get("streams", [])]
            entries = data.get("people", [])
            people = [Person.from_dict(entry) for entry in entries]
            counts = {
                entry["email"]: int(entry.get("pm_recipient_count", 0))
                for entry in entries
            }
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise RosterError(
                f"Roster file {path} has a malformed entry",
                "people need full_name and email",
            ) from e

        self._streams = set(streams)
        self._people = people
        self.pm_counts.reset(counts)
        logger.debug(f"Loaded roster from {path}: {len(streams)} streams, {len(people)} people")
        self._changed()

    def _changed(self) -> None:
        self._bus.emit(RosterChangedEvent(
            stream_count=len(self._streams),
            people_count=len(self._people),
        ))
