"""Tests for the SearchBar widget."""

import asyncio

import pytest

from narrow_search.app import NarrowSearchApp, Services
from narrow_search.models.person import Person
from narrow_search.widgets.search_bar import SearchBar


@pytest.fixture
def services(tmp_path, bus) -> Services:
    services = Services.create(config_dir=tmp_path / "config")
    services.roster.set_streams([f"sales{i}" for i in range(10)])
    services.roster.set_people(
        [Person(full_name=f"Sam {i}", email=f"sam{i}@x.com") for i in range(10)]
    )
    yield services
    services.search.close()


class TestVisibleLabels:
    """Tests for capping the suggestion list."""

    def test_cap_tracks_config_updates(self, services):
        bar = SearchBar(services.search)
        labels = [f"label{i}" for i in range(30)]
        services.config.update(suggestions_per_source=4, max_items=13)
        assert len(bar.visible(labels)) == 13

        services.config.update(suggestions_per_source=7, max_items=22)

        assert len(bar.visible(labels)) == 22

    def test_typing_after_config_update_shows_every_suggestion(self, services):
        services.config.update(suggestions_per_source=7, max_items=22)
        expected = services.search.engine.suggest("s")
        assert len(expected) == 22

        async def type_query() -> list[str]:
            app = NarrowSearchApp(services=services)
            async with app.run_test() as pilot:
                bar = app.screen.query_one(SearchBar)
                bar.initiate_search()
                await pilot.pause()
                await pilot.press("s")
                await pilot.pause()
                return bar.labels

        assert asyncio.run(type_query()) == expected


class TestPickAction:
    """Tests for enabling the Tab pick action."""

    def test_pick_disabled_without_suggestions(self, services):
        bar = SearchBar(services.search)
        assert bar.check_action("pick", ()) is False

    def test_pick_enabled_with_suggestions(self, services):
        bar = SearchBar(services.search)
        bar._labels = ["sales1"]
        assert bar.check_action("pick", ()) is True

    def test_other_actions_unaffected(self, services):
        bar = SearchBar(services.search)
        assert bar.check_action("move_down", ()) is True
        assert bar.check_action("clear_search", ()) is True
