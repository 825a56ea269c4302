"""Tests for EventBus service."""

import gc

from narrow_search.services.events import (
    Event,
    EventBus,
    ConfigChangedEvent,
    NarrowChangedEvent,
    RosterChangedEvent,
)


class TestEventBusBasics:
    """Test basic event bus functionality."""

    def test_singleton_pattern(self, bus):
        """EventBus.get() returns same instance."""
        assert bus is EventBus.get()

    def test_reset_creates_new_instance(self, bus):
        """EventBus.reset() creates fresh instance."""
        EventBus.reset()
        assert bus is not EventBus.get()

    def test_subscribe_and_emit(self, bus):
        """Subscribers receive emitted events."""
        received = []
        bus.subscribe(RosterChangedEvent, received.append)

        event = RosterChangedEvent(stream_count=2, people_count=5)
        bus.emit(event)

        assert received == [event]

    def test_no_duplicate_subscriptions(self, bus):
        """Same handler can't subscribe twice."""
        received = []

        def handler(event):
            received.append(event)

        bus.subscribe(NarrowChangedEvent, handler)
        bus.subscribe(NarrowChangedEvent, handler)
        bus.emit(NarrowChangedEvent())

        assert len(received) == 1

    def test_unsubscribe(self, bus):
        """Unsubscribed handlers don't receive events."""
        received = []
        bus.subscribe(NarrowChangedEvent, received.append)
        bus.unsubscribe(NarrowChangedEvent, received.append)

        bus.emit(NarrowChangedEvent())

        assert received == []

    def test_unsubscribe_nonexistent_handler(self, bus):
        """Unsubscribing non-subscribed handler doesn't raise."""
        bus.unsubscribe(NarrowChangedEvent, lambda e: None)

    def test_event_type_isolation(self, bus):
        """Events only go to subscribers of that type."""
        roster_received = []
        config_received = []
        bus.subscribe(RosterChangedEvent, roster_received.append)
        bus.subscribe(ConfigChangedEvent, config_received.append)

        bus.emit(RosterChangedEvent())

        assert len(roster_received) == 1
        assert config_received == []

    def test_handler_error_isolation(self, bus):
        """One handler's error doesn't affect others."""
        received = []

        def bad_handler(event):
            raise ValueError("Intentional error")

        bus.subscribe(RosterChangedEvent, bad_handler)
        bus.subscribe(RosterChangedEvent, received.append)

        bus.emit(RosterChangedEvent())

        assert len(received) == 1

    def test_subscriber_count(self, bus):
        assert bus.subscriber_count(RosterChangedEvent) == 0
        bus.subscribe(RosterChangedEvent, lambda e: None)
        assert bus.subscriber_count(RosterChangedEvent) == 1

    def test_clear(self, bus):
        bus.subscribe(RosterChangedEvent, lambda e: None)
        bus.clear()
        assert bus.subscriber_count(RosterChangedEvent) == 0


class TestWeakSubscribers:
    """Tests for weak subscriptions."""

    def test_weak_method_dropped_with_owner(self, bus):
        class Listener:
            def __init__(self):
                self.received = []

            def on_event(self, event: Event) -> None:
                self.received.append(event)

        listener = Listener()
        bus.subscribe(RosterChangedEvent, listener.on_event, weak=True)
        bus.emit(RosterChangedEvent())
        assert len(listener.received) == 1

        del listener
        gc.collect()
        assert bus.subscriber_count(RosterChangedEvent) == 0

    def test_weak_unsubscribe(self, bus):
        received = []

        def handler(event):
            received.append(event)

        bus.subscribe(RosterChangedEvent, handler, weak=True)
        bus.unsubscribe(RosterChangedEvent, handler)
        bus.emit(RosterChangedEvent())

        assert received == []
