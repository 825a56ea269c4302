"""Highlighting of matched query prefixes in suggestion descriptions.

Descriptions are rendered by the search bar as Rich console markup, so
every piece of roster-supplied text is escaped before it is wrapped in
emphasis tags.
"""

from __future__ import annotations

from rich.markup import escape

from ..models.person import Person

HIGHLIGHT_OPEN = "[b]"
HIGHLIGHT_CLOSE = "[/b]"


def highlight_query_in_phrase(query: str, phrase: str) -> str:
    """Embolden the query wherever it prefixes a word of phrase.

    Words are split on any run of whitespace, as the phrase matcher
    splits them, and rejoined with single spaces.
    """
    query_lower = query.lower()
    parts = []
    for word in phrase.split():
        if query_lower and word.lower().startswith(query_lower):
            head, tail = word[: len(query)], word[len(query):]
            parts.append(f"{HIGHLIGHT_OPEN}{escape(head)}{HIGHLIGHT_CLOSE}{escape(tail)}")
        else:
            parts.append(escape(word))
    return " ".join(parts)


def highlight_person(query: str, person: Person) -> str:
    """Render "Full Name <email>" with matched prefixes emboldened."""
    name = highlight_query_in_phrase(query, person.full_name)
    email = highlight_query_in_phrase(query, person.email)
    return f"{name} <{email}>"
