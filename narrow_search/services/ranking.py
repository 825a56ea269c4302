"""Ordering helpers for suggestion sources.

- prefix_sort: canonical ordering for stream suggestions
- PmRecipientCounts: relevance comparator for people suggestions
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Iterable, TypeVar

from ..models.person import Person

T = TypeVar("T")

# Orders two people: negative if a ranks first, positive if b does
PersonComparator = Callable[[Person, Person], int]


def prefix_sort(query: str, items: Iterable[T], key: Callable[[T], str]) -> list[T]:
    """Order items so that those beginning with query come first.

    Case-sensitive prefix matches rank above case-insensitive ones, which
    rank above everything else. Each group keeps its input order.
    """
    exact_case: list[T] = []
    any_case: list[T] = []
    rest: list[T] = []
    query_lower = query.lower()

    for item in items:
        text = key(item)
        if text.startswith(query):
            exact_case.append(item)
        elif text.lower().startswith(query_lower):
            any_case.append(item)
        else:
            rest.append(item)

    return exact_case + any_case + rest


class PmRecipientCounts:
    """Ranks people by how often they received a private message.

    People with more private messages come first; ties are broken by
    full name.
    """

    def __init__(self, counts: dict[str, int] | None = None):
        self._counts: dict[str, int] = dict(counts or {})

    def count(self, email: str) -> int:
        return self._counts.get(email, 0)

    def set_count(self, email: str, count: int) -> None:
        self._counts[email] = count

    def reset(self, counts: dict[str, int]) -> None:
        """Replace all counts in place."""
        self._counts = dict(counts)

    def record_message(self, email: str) -> None:
        """Note that a private message was sent to email."""
        self._counts[email] = self.count(email) + 1

    def compare(self, a: Person, b: Person) -> int:
        count_a = self.count(a.email)
        count_b = self.count(b.email)
        if count_a != count_b:
            return -1 if count_a > count_b else 1
        if a.full_name < b.full_name:
            return -1
        if a.full_name > b.full_name:
            return 1
        return 0


def sort_people(
    items: list[T],
    compare: PersonComparator,
    person: Callable[[T], Person],
) -> list[T]:
    """Stable sort of items by a comparator over their underlying person."""
    return sorted(items, key=cmp_to_key(lambda x, y: compare(person(x), person(y))))
