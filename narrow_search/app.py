"""Narrow Search: incremental search suggestions for a chat client.

Main Textual application.
"""

import sys
from dataclasses import dataclass
from pathlib import Path

from textual.app import App

from narrow_search.models.exceptions import RosterError
from narrow_search.screens.main import MainScreen
from narrow_search.services.config import ConfigManager
from narrow_search.services.controller import SearchController
from narrow_search.services.events import EventBus
from narrow_search.services.roster import RosterService
from narrow_search.styles import BASE_CSS


@dataclass
class Services:
    """Application service container for dependency injection."""

    bus: EventBus
    config: ConfigManager
    roster: RosterService
    search: SearchController

    @classmethod
    def create(
        cls,
        roster_path: Path | None = None,
        config_dir: Path | None = None,
    ) -> "Services":
        """Wire up all services with proper dependencies.

        Args:
            roster_path: Roster JSON to load (defaults to the configured one)
            config_dir: Config directory (defaults to ~/.config/narrow-search)

        Raises:
            RosterError: If the roster file cannot be loaded
        """
        bus = EventBus.get()
        config = ConfigManager(config_dir=config_dir, bus=bus)
        roster = RosterService(bus=bus)

        # Controller subscribes before the roster load so it sees the change
        search = SearchController(roster, config, bus=bus)

        roster_path = roster_path or config.settings.roster_path
        if roster_path:
            roster.load(roster_path)

        return cls(bus=bus, config=config, roster=roster, search=search)


class NarrowSearchApp(App):
    """The main Narrow Search application."""

    TITLE = "Narrow Search"
    CSS = BASE_CSS + """
    Screen {
        background: $background;
    }
    """

    def __init__(self, services: Services | None = None, **kwargs):
        """Initialize the app with injected services.

        Args:
            services: Service container (created with defaults if not provided)
            **kwargs: Additional Textual app arguments
        """
        super().__init__(**kwargs)
        self.services = services or Services.create()

    def on_mount(self) -> None:
        self.push_screen(MainScreen(
            self.services.search,
            bus=self.services.bus,
        ))

    def on_unmount(self) -> None:
        self.services.search.close()


def main():
    """Run the Narrow Search application.

    Usage: narrow-search [ROSTER_JSON]
    """
    roster_path = Path(sys.argv[1]).expanduser() if len(sys.argv) > 1 else None
    try:
        services = Services.create(roster_path=roster_path)
    except RosterError as e:
        print(f"Error: {e}")
        sys.exit(1)

    NarrowSearchApp(services=services).run()


if __name__ == "__main__":
    main()
