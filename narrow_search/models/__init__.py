"""Data models for Narrow Search."""

from .person import Person
from .candidate import (
    Action,
    Candidate,
    Operator,
    OperatorsCandidate,
    PersonCandidate,
    PrivateMessageCandidate,
    SenderCandidate,
    StreamCandidate,
)
from .events import SearchSubmitted, SuggestionChosen
from .exceptions import (
    NarrowSearchError,
    ConfigError,
    ConfigValidationError,
    RosterError,
)

__all__ = [
    "Person",
    # Candidates
    "Action",
    "Candidate",
    "Operator",
    "OperatorsCandidate",
    "PersonCandidate",
    "PrivateMessageCandidate",
    "SenderCandidate",
    "StreamCandidate",
    # UI events
    "SearchSubmitted",
    "SuggestionChosen",
    # Exceptions
    "NarrowSearchError",
    "ConfigError",
    "ConfigValidationError",
    "RosterError",
]
