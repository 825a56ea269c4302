"""Shared test fixtures for Narrow Search."""

import pytest
from pathlib import Path
from unittest.mock import MagicMock

from narrow_search.models.person import Person
from narrow_search.services.config import ConfigManager
from narrow_search.services.engine import SearchEngine
from narrow_search.services.events import EventBus
from narrow_search.services.narrow import Narrower, NarrowState, QueryField
from narrow_search.services.roster import RosterService

ALICE = Person(full_name="Alice A", email="alice@x.com")


@pytest.fixture
def bus() -> EventBus:
    """Fresh event bus for each test."""
    EventBus.reset()
    yield EventBus.get()
    EventBus.reset()


@pytest.fixture
def field() -> QueryField:
    return QueryField()


@pytest.fixture
def narrow(field: QueryField, bus: EventBus) -> NarrowState:
    return NarrowState(field, bus)


@pytest.fixture
def mock_narrower() -> MagicMock:
    """Create a mock Narrower that reports no active narrow."""
    narrower = MagicMock(spec=Narrower)
    narrower.active.return_value = False
    return narrower


@pytest.fixture
def engine(narrow: NarrowState, field: QueryField) -> SearchEngine:
    """Engine over streams general/random and Alice."""
    engine = SearchEngine(narrow, field)
    engine.rebuild({"general", "random"}, [ALICE])
    return engine


@pytest.fixture
def config_manager(tmp_path: Path, bus: EventBus) -> ConfigManager:
    """Create a ConfigManager with temp directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return ConfigManager(config_dir=config_dir, bus=bus)


@pytest.fixture
def roster(bus: EventBus) -> RosterService:
    return RosterService(bus=bus)
