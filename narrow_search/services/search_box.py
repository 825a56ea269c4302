"""Query field behaviour around the suggestion engine.

Covers what happens outside of picking a suggestion: focus and blur,
Enter without a suggestion, the clear button, and whether the search
buttons are enabled.

Blurring the field schedules a deferred clear. Picking a suggestion blurs
the field a moment before the narrow lands, so the clear must wait; the
caller runs clear_if_idle() after the configured delay. Each blur or
focus bumps a generation counter, and a deferred check whose generation
is stale does nothing.
"""

from __future__ import annotations

import logging

from .narrow import Narrower, QueryField
from .operators import OperatorParser, parse_operators

logger = logging.getLogger(__name__)


class SearchBox:
    """Focus, submit, and clear logic for the search query field."""

    def __init__(
        self,
        field: QueryField,
        narrower: Narrower,
        parser: OperatorParser = parse_operators,
    ):
        self._field = field
        self._narrower = narrower
        self._parser = parser
        self._generation = 0

    @property
    def field(self) -> QueryField:
        return self._field

    @property
    def text(self) -> str:
        return self._field.text

    @text.setter
    def text(self, value: str) -> None:
        self._field.text = value

    @property
    def focused(self) -> bool:
        return self._field.focused

    @property
    def generation(self) -> int:
        return self._generation

    def focus(self) -> None:
        """Field gained focus; any pending deferred clear is abandoned."""
        self._field.focused = True
        self._generation += 1

    def blur(self) -> int:
        """Field lost focus.

        Returns:
            Generation token to pass to clear_if_idle() once the delay expires
        """
        self._field.focused = False
        self._generation += 1
        return self._generation

    def clear_if_idle(self, generation: int) -> bool:
        """Clear the field if it is still blurred and nothing is narrowed.

        Returns:
            True if the text was cleared
        """
        if generation != self._generation or self._field.focused:
            return False
        if self._narrower.active():
            return False
        self._field.text = ""
        return True

    def submit(self) -> int:
        """Enter pressed without using a suggestion.

        Narrows by whatever the text parses to, then blurs.

        Returns:
            Generation token from the blur
        """
        if self._field.text.strip():
            self._narrower.activate(self._parser(self._field.text))
        return self.blur()

    def clear_search(self) -> int:
        """Drop the current narrow and leave the field.

        Returns:
            Generation token from the blur
        """
        self._narrower.deactivate()
        return self.blur()

    def buttons_enabled(self) -> bool:
        """Search buttons are usable while focused, non-empty, or narrowed."""
        return bool(self._field.focused or self._field.text or self._narrower.active())
