"""Configuration management for Narrow Search.

Single-file configuration stored at ~/.config/narrow-search/config.json.
Missing keys fall back to defaults; an unreadable file falls back to
defaults entirely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from pathlib import Path

from ..models.exceptions import ConfigValidationError
from .events import ConfigChangedEvent, EventBus

logger = logging.getLogger(__name__)

# The search bar's own display cap
DEFAULT_MAX_ITEMS = 20


@dataclass
class SearchSettings:
    """Tunables for the search bar."""

    suggestions_per_source: int = 4  # Streams, recipients, senders each
    max_items: int = DEFAULT_MAX_ITEMS  # Rows the search bar shows
    blur_clear_delay: float = 0.1  # Seconds before a blurred field is cleared
    roster_path: Path | None = None  # Roster JSON to load on startup

    def validate(self) -> None:
        """Raise ConfigValidationError for out-of-range values."""
        if self.suggestions_per_source < 1:
            raise ConfigValidationError(
                "suggestions_per_source must be at least 1",
                f"got {self.suggestions_per_source}",
            )
        if self.max_items < 1 + 3 * self.suggestions_per_source:
            raise ConfigValidationError(
                "max_items is too small to show every suggestion",
                f"needs at least {1 + 3 * self.suggestions_per_source}",
            )
        if self.blur_clear_delay < 0:
            raise ConfigValidationError("blur_clear_delay cannot be negative")

    def to_dict(self) -> dict:
        result: dict = {
            "suggestions_per_source": self.suggestions_per_source,
            "max_items": self.max_items,
            "blur_clear_delay": self.blur_clear_delay,
        }
        if self.roster_path:
            result["roster_path"] = str(self.roster_path)
        return result

    @classmethod
    def from_dict(cls, data: dict) -> "SearchSettings":
        roster_path = data.get("roster_path")
        return cls(
            suggestions_per_source=int(data.get("suggestions_per_source", 4)),
            max_items=int(data.get("max_items", DEFAULT_MAX_ITEMS)),
            blur_clear_delay=float(data.get("blur_clear_delay", 0.1)),
            roster_path=Path(roster_path).expanduser() if roster_path else None,
        )


class ConfigManager:
    """Loads and saves SearchSettings."""

    def __init__(self, config_dir: Path | None = None, bus: EventBus | None = None):
        if config_dir is None:
            config_dir = Path.home() / ".config" / "narrow-search"
        self._config_dir = config_dir
        self._config_file = config_dir / "config.json"
        self._bus = bus or EventBus.get()
        self._settings: SearchSettings | None = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    @property
    def settings(self) -> SearchSettings:
        if self._settings is None:
            self._settings = self._load_settings()
        return self._settings

    def _load_settings(self) -> SearchSettings:
        """Load settings from disk."""
        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
                settings = SearchSettings.from_dict(data)
                settings.validate()
                return settings
            except (json.JSONDecodeError, AttributeError, TypeError, ValueError) as e:
                logger.warning(f"Failed to load config, using defaults: {e}")
            except ConfigValidationError as e:
                logger.warning(f"Invalid config, using defaults: {e}")
        return SearchSettings()

    def save_settings(self, settings: SearchSettings) -> None:
        """Validate and save settings to disk."""
        settings.validate()
        self._config_dir.mkdir(parents=True, exist_ok=True)
        self._config_file.write_text(json.dumps(settings.to_dict(), indent=2))
        self._settings = settings
        self._bus.emit(ConfigChangedEvent(key="search"))

    def update(self, **changes) -> SearchSettings:
        """Save a copy of the current settings with some fields changed."""
        settings = replace(self.settings, **changes)
        self.save_settings(settings)
        return settings
