"""Exception hierarchy for Narrow Search.

Failures carry an optional suggestion so the UI can say what to do next.
"""


class NarrowSearchError(Exception):
    """Base exception for all Narrow Search errors.

    All domain-specific exceptions inherit from this base class,
    enabling consistent error handling across the application.
    """

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.message} ({self.suggestion})"
        return self.message


class ConfigError(NarrowSearchError):
    """Configuration is invalid or missing."""

    pass


class ConfigValidationError(ConfigError):
    """Configuration value failed validation."""

    pass


class RosterError(NarrowSearchError):
    """Roster of streams and people could not be loaded."""

    pass
