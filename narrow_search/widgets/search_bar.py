"""SearchBar: query input with incremental suggestions.

Typing asks the SearchEngine for labels and renders each label's
description. Enter picks the highlighted suggestion, or narrows by the
raw text when there is none. Esc clears the search.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.events import DescendantBlur, DescendantFocus
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Button, Input, Static

from ..models.events import SearchSubmitted, SuggestionChosen
from ..services.controller import SearchController


class SuggestionItem(Static):
    """A single suggestion row."""

    DEFAULT_CSS = """
    SuggestionItem {
        width: 100%;
        height: 1;
        padding: 0 1;
    }

    SuggestionItem:hover {
        background: $surface-lighten-1;
    }

    SuggestionItem.selected {
        background: $primary-darken-2;
    }
    """

    class Picked(Message):
        """Posted when the row is clicked."""

        def __init__(self, label: str) -> None:
            self.label = label
            super().__init__()

    def __init__(self, label: str, description: str, **kwargs) -> None:
        super().__init__(description, **kwargs)
        self.label = label

    def on_click(self) -> None:
        self.post_message(self.Picked(self.label))


class SearchBar(Widget):
    """Search input with a suggestion dropdown."""

    DEFAULT_CSS = """
    SearchBar {
        width: 100%;
        height: auto;
    }

    SearchBar #search-row {
        height: 3;
    }

    SearchBar #search-input {
        width: 1fr;
    }

    SearchBar #search-exit {
        min-width: 5;
        width: 5;
    }

    SearchBar #suggestions {
        height: auto;
        max-height: 22;
        background: $surface;
    }

    SearchBar #suggestions.empty {
        display: none;
    }
    """

    BINDINGS = [
        Binding("escape", "clear_search", "Clear", show=False),
        Binding("up", "move_up", "Up", show=False),
        Binding("down", "move_down", "Down", show=False),
        Binding("tab", "pick", "Pick", show=False),
    ]

    selected_index: reactive[int] = reactive(0)

    def __init__(self, controller: SearchController, **kwargs) -> None:
        super().__init__(**kwargs)
        self._controller = controller
        self._labels: list[str] = []
        self._echo: str | None = None  # Value we set ourselves; not a keystroke

    def compose(self) -> ComposeResult:
        with Horizontal(id="search-row"):
            yield Input(placeholder="search", id="search-input")
            yield Button("x", id="search-exit", disabled=True)
        yield Vertical(id="suggestions", classes="empty")

    @property
    def labels(self) -> list[str]:
        """Labels currently shown."""
        return list(self._labels)

    def visible(self, labels: list[str]) -> list[str]:
        """Cap labels at the current max_items setting."""
        return labels[: self._controller.settings.max_items]

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        # Let Tab move focus when there is nothing to pick
        if action == "pick" and not self._labels:
            return False
        return True

    def initiate_search(self) -> None:
        """Focus the input with its text selected for replacement."""
        search_input = self.query_one("#search-input", Input)
        search_input.focus()
        search_input.select_all()

    # Input events

    def on_input_changed(self, event: Input.Changed) -> None:
        """Refresh suggestions as the user types."""
        event.stop()
        if self._echo is not None and event.value == self._echo:
            self._echo = None
            return
        self._controller.search_box.text = event.value
        labels = self._controller.engine.suggest(event.value)
        self._labels = self.visible(labels)
        self.selected_index = 0
        self._update_results()
        self._update_buttons()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        if self._labels:
            self._pick(self._labels[self.selected_index])
            return
        box = self._controller.search_box
        generation = box.submit()
        self._set_text(box.text)
        self._leave_field(generation)
        self.post_message(SearchSubmitted(box.text))

    def on_descendant_focus(self, event: DescendantFocus) -> None:
        if isinstance(event.widget, Input):
            self._controller.search_box.focus()
            self._update_buttons()

    def on_descendant_blur(self, event: DescendantBlur) -> None:
        if isinstance(event.widget, Input):
            self._schedule_clear(self._controller.search_box.blur())

    def on_suggestion_item_picked(self, event: SuggestionItem.Picked) -> None:
        event.stop()
        self._pick(event.label)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "search-exit":
            event.stop()
            self.action_clear_search()

    # Actions

    def action_move_down(self) -> None:
        if self._labels:
            self.selected_index = min(self.selected_index + 1, len(self._labels) - 1)

    def action_move_up(self) -> None:
        if self._labels:
            self.selected_index = max(self.selected_index - 1, 0)

    def action_pick(self) -> None:
        if self._labels:
            self._pick(self._labels[self.selected_index])

    def action_clear_search(self) -> None:
        box = self._controller.search_box
        generation = box.clear_search()
        self._set_text(box.text)
        self._leave_field(generation)

    # Internals

    def _pick(self, label: str) -> None:
        resolution = self._controller.engine.resolve(label)
        self._set_text(resolution.text)
        if resolution.blur:
            self._leave_field(self._controller.search_box.blur())
        self.post_message(SuggestionChosen(label, resolution.text))

    def _set_text(self, text: str) -> None:
        """Replace the input value without treating it as typing."""
        search_input = self.query_one("#search-input", Input)
        self._labels = []
        self._update_results()
        if search_input.value != text:
            self._echo = text
            search_input.value = text
        self._update_buttons()

    def _leave_field(self, generation: int) -> None:
        if self.screen.focused is self.query_one("#search-input", Input):
            # The blur handler schedules its own deferred clear
            self.screen.set_focus(None)
        else:
            self._schedule_clear(generation)

    def _schedule_clear(self, generation: int) -> None:
        self._update_buttons()
        self.set_timer(
            self._controller.settings.blur_clear_delay,
            lambda: self._deferred_clear(generation),
        )

    def _deferred_clear(self, generation: int) -> None:
        box = self._controller.search_box
        if box.clear_if_idle(generation):
            self._set_text("")
        self._update_buttons()

    def _update_results(self) -> None:
        """Rebuild the suggestion list."""
        results = self.query_one("#suggestions", Vertical)
        results.remove_children()
        results.set_class(not self._labels, "empty")
        engine = self._controller.engine
        for i, label in enumerate(self._labels):
            item = SuggestionItem(label, engine.highlight(label))
            if i == self.selected_index:
                item.add_class("selected")
            results.mount(item)

    def _update_buttons(self) -> None:
        button = self.query_one("#search-exit", Button)
        button.disabled = not self._controller.search_box.buttons_enabled()

    def watch_selected_index(self, new_index: int) -> None:
        """Update visual selection."""
        if not self.is_mounted:
            return
        results = self.query_one("#suggestions", Vertical)
        for i, child in enumerate(results.query(SuggestionItem)):
            child.set_class(i == new_index, "selected")
