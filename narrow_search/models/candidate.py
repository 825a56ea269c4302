"""Suggestion candidates for the search bar.

A candidate is one of four closed variants. Each carries only its own
payload and derives a label, the string identity the search bar uses as
its item key:

- StreamCandidate:          "stream:<name>"
- PrivateMessageCandidate:  "pm-with:<email>"
- SenderCandidate:          "sender:<email>"
- OperatorsCandidate:       the raw query text, unprefixed
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from .person import Person

# (operator_name, operand), e.g. ("stream", "general")
Operator = tuple[str, str]


class Action(Enum):
    """What selecting a candidate does."""

    STREAM = "stream"  # Narrow to a stream
    PRIVATE_MESSAGE = "private_message"  # Narrow to PMs with a person
    SENDER = "sender"  # Narrow to messages sent by a person
    OPERATORS = "operators"  # Apply the parsed operator list


@dataclass(frozen=True)
class StreamCandidate:
    """Narrow to a single stream."""

    stream: str

    action: ClassVar[Action] = Action.STREAM

    @property
    def label(self) -> str:
        return f"stream:{self.stream}"

    @property
    def query(self) -> str:
        return self.stream


@dataclass(frozen=True)
class PrivateMessageCandidate:
    """Narrow to the private conversation with a person."""

    person: Person

    action: ClassVar[Action] = Action.PRIVATE_MESSAGE

    @property
    def label(self) -> str:
        return f"pm-with:{self.person.email}"

    @property
    def query(self) -> Person:
        return self.person


@dataclass(frozen=True)
class SenderCandidate:
    """Narrow to messages sent by a person."""

    person: Person

    action: ClassVar[Action] = Action.SENDER

    @property
    def label(self) -> str:
        return f"sender:{self.person.email}"

    @property
    def query(self) -> Person:
        return self.person


@dataclass(frozen=True)
class OperatorsCandidate:
    """Free-text search, expressed as parsed operators.

    The label is the raw typed text, so it changes on every keystroke.
    """

    query: str = ""
    operators: tuple[Operator, ...] = ()

    action: ClassVar[Action] = Action.OPERATORS

    @property
    def label(self) -> str:
        return self.query


Candidate = Union[
    StreamCandidate,
    PrivateMessageCandidate,
    SenderCandidate,
    OperatorsCandidate,
]

PersonCandidate = Union[PrivateMessageCandidate, SenderCandidate]
