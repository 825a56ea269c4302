"""Tests for NarrowState."""

from narrow_search.services.events import NarrowChangedEvent


class TestNarrowState:
    """Tests for the in-process narrow."""

    def test_starts_inactive(self, narrow, field):
        assert not narrow.active()
        assert narrow.operators == []
        assert field.text == ""

    def test_by_is_single_operator_activate(self, narrow, field):
        narrow.by("pm-with", "alice@x.com", trigger="search")
        assert narrow.operators == [("pm-with", "alice@x.com")]
        assert field.text == "pm-with:alice@x.com"

    def test_activate_writes_normalized_text(self, narrow, field):
        narrow.activate([("subject", "team lunch"), ("search", "pizza")])
        assert field.text == "subject:team+lunch pizza"

    def test_activate_empty_deactivates(self, narrow):
        narrow.by("stream", "general")
        narrow.activate([])
        assert not narrow.active()

    def test_deactivate_clears_field(self, narrow, field):
        narrow.by("stream", "general")
        narrow.deactivate()
        assert not narrow.active()
        assert field.text == ""
        assert narrow.trigger == ""

    def test_emits_events(self, narrow, bus):
        received = []
        bus.subscribe(NarrowChangedEvent, received.append)

        narrow.by("stream", "general", trigger="search")
        narrow.deactivate()

        assert [e.operators for e in received] == [[("stream", "general")], []]
        assert received[0].trigger == "search"

    def test_deactivate_when_inactive_is_silent(self, narrow, bus):
        received = []
        bus.subscribe(NarrowChangedEvent, received.append)
        narrow.deactivate()
        assert received == []
