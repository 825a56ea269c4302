"""SearchController: wires the search engine to roster and config changes."""

from __future__ import annotations

import logging

from .config import ConfigManager, SearchSettings
from .engine import SearchEngine
from .events import ConfigChangedEvent, EventBus, RosterChangedEvent
from .narrow import NarrowState, QueryField
from .roster import RosterService
from .search_box import SearchBox

logger = logging.getLogger(__name__)


class SearchController:
    """Owns one search session: query field, narrow, and engine.

    The catalog is rebuilt from the roster whenever a RosterChangedEvent
    arrives, before the next keystroke can read it.
    """

    def __init__(
        self,
        roster: RosterService,
        config: ConfigManager,
        bus: EventBus | None = None,
    ):
        self._roster = roster
        self._config = config
        self._bus = bus or EventBus.get()

        self.field = QueryField()
        self.narrow = NarrowState(self.field, self._bus)
        self.search_box = SearchBox(self.field, self.narrow)
        self.engine = SearchEngine(
            self.narrow,
            self.field,
            compare=roster.pm_counts.compare,
            per_source=config.settings.suggestions_per_source,
        )

        self._bus.subscribe(RosterChangedEvent, self._on_roster_changed)
        self._bus.subscribe(ConfigChangedEvent, self._on_config_changed)
        self.refresh()

    @property
    def settings(self) -> SearchSettings:
        """Current settings, re-read on every access so updates apply at once."""
        return self._config.settings

    def refresh(self) -> None:
        """Rebuild the suggestion catalog from the current roster."""
        self.engine.rebuild(self._roster.stream_names(), self._roster.people())

    def close(self) -> None:
        """Stop listening for roster and config changes."""
        self._bus.unsubscribe(RosterChangedEvent, self._on_roster_changed)
        self._bus.unsubscribe(ConfigChangedEvent, self._on_config_changed)

    def _on_roster_changed(self, event: RosterChangedEvent) -> None:
        logger.debug(
            f"Roster changed ({event.stream_count} streams, "
            f"{event.people_count} people), rebuilding suggestions"
        )
        self.refresh()

    def _on_config_changed(self, event: ConfigChangedEvent) -> None:
        self.engine.per_source = self._config.settings.suggestions_per_source
