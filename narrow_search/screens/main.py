"""Main screen: the search bar above a view of the current narrow."""

from __future__ import annotations

from rich.markup import escape
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Footer, Static

from ..models.events import SearchSubmitted, SuggestionChosen
from ..services.controller import SearchController
from ..services.events import EventBus, NarrowChangedEvent
from ..services.operators import describe_operators
from ..widgets.search_bar import SearchBar

HOME_TEXT = "All messages"


def describe_narrow(operators: list[tuple[str, str]]) -> str:
    """Status line text for the current narrow."""
    if not operators:
        return HOME_TEXT
    return describe_operators(operators)


class MainScreen(Screen):
    """Search bar plus narrow status."""

    DEFAULT_CSS = """
    MainScreen #narrow-view {
        height: 1fr;
        padding: 1 2;
    }

    MainScreen #narrow-status {
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("/", "search", "Search"),
    ]

    def __init__(
        self,
        controller: SearchController,
        bus: EventBus | None = None,
    ) -> None:
        super().__init__()
        self._controller = controller
        self._bus = bus or EventBus.get()

    def compose(self) -> ComposeResult:
        yield SearchBar(self._controller, id="search-bar")
        with Vertical(id="narrow-view"):
            yield Static(HOME_TEXT, id="narrow-status")
        yield Footer()

    def on_mount(self) -> None:
        self._bus.subscribe(NarrowChangedEvent, self._on_narrow_changed)

    def on_unmount(self) -> None:
        self._bus.unsubscribe(NarrowChangedEvent, self._on_narrow_changed)

    def action_search(self) -> None:
        self.query_one(SearchBar).initiate_search()

    def _on_narrow_changed(self, event: NarrowChangedEvent) -> None:
        status = self.query_one("#narrow-status", Static)
        status.update(escape(describe_narrow(event.operators)))

    def on_suggestion_chosen(self, event: SuggestionChosen) -> None:
        self.sub_title = event.text

    def on_search_submitted(self, event: SearchSubmitted) -> None:
        self.sub_title = event.text
