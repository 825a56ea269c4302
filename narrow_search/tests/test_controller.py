"""Tests for SearchController wiring."""

import pytest

from narrow_search.models.person import Person
from narrow_search.services.controller import SearchController


@pytest.fixture
def controller(roster, config_manager, bus) -> SearchController:
    controller = SearchController(roster, config_manager, bus=bus)
    yield controller
    controller.close()


class TestSearchController:
    """Tests for SearchController."""

    def test_roster_change_rebuilds_catalog(self, controller, roster):
        assert controller.engine.suggest("gen") == ["gen"]

        roster.set_streams(["general"])

        assert controller.engine.suggest("gen") == ["gen", "stream:general"]

    def test_people_from_roster(self, controller, roster):
        roster.set_people([Person("Alice A", "alice@x.com")])
        assert "sender:alice@x.com" in controller.engine.suggest("ali")

    def test_roster_counts_order_people(self, controller, roster):
        roster.set_people([Person("Ann A", "ann@x.com"), Person("Ann B", "annb@x.com")])
        roster.pm_counts.set_count("annb@x.com", 3)
        labels = controller.engine.suggest("ann")
        assert labels[1] == "pm-with:annb@x.com"

    def test_config_change_updates_cap(self, controller, roster, config_manager):
        roster.set_streams([f"s{i}" for i in range(6)])
        assert len(controller.engine.suggest("s")) == 5

        config_manager.update(suggestions_per_source=2)

        assert len(controller.engine.suggest("s")) == 3

    def test_settings_follow_config_updates(self, controller, config_manager):
        config_manager.update(suggestions_per_source=7, max_items=22, blur_clear_delay=0.5)

        assert controller.settings.max_items == 22
        assert controller.settings.blur_clear_delay == 0.5
        assert controller.engine.per_source == 7

    def test_close_stops_rebuilds(self, controller, roster):
        controller.close()
        roster.set_streams(["general"])
        assert controller.engine.suggest("gen") == ["gen"]

    def test_selection_flows_into_field(self, controller, roster):
        roster.set_streams(["general"])
        controller.search_box.focus()
        controller.search_box.text = "gen"
        labels = controller.engine.suggest("gen")

        resolution = controller.engine.resolve(labels[1])

        assert resolution.text == "stream:general"
        assert controller.field.text == "stream:general"
        assert controller.narrow.active()
