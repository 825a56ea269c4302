"""Word-prefix matching for search suggestions.

A query matches a phrase when any whitespace-separated word of the
phrase starts with it:
- "tes" matches "test" and "stream test"
- "tes" does not match "hostess"
"""

from __future__ import annotations

from ..models.person import Person


def matches(phrase: str, query: str) -> bool:
    """Check if query is a case-insensitive prefix of any word in phrase.

    An empty query matches every phrase.
    """
    query_lower = query.lower()
    if not query_lower:
        return True

    for word in phrase.split():
        if word.lower().startswith(query_lower):
            return True
    return False


def person_matches(person: Person, query: str) -> bool:
    """Match on full name first, then on email."""
    return matches(person.full_name, query) or matches(person.email, query)
