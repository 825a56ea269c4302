"""Custom Textual Message events for the Narrow Search UI.

Note: Service-level events (RosterChanged, NarrowChanged, etc.) are in
services/events.py and use the EventBus pattern.
"""

from textual.message import Message


class SuggestionChosen(Message):
    """Fired when a suggestion is picked in the search bar (UI event)."""

    def __init__(self, label: str, text: str) -> None:
        self.label = label
        self.text = text  # Query field contents after dispatch
        super().__init__()


class SearchSubmitted(Message):
    """Fired when Enter is pressed with no suggestion highlighted."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__()
