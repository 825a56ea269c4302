"""EventBus: Decoupled service-to-UI communication.

Services emit domain events, the UI and the search controller subscribe
to what they need.

Usage:
    # In services (emit events)
    bus = EventBus.get()
    bus.emit(RosterChangedEvent(stream_count=3, people_count=10))

    # In screens (subscribe to events)
    bus = EventBus.get()
    bus.subscribe(NarrowChangedEvent, self._on_narrow_changed)

    # Cleanup on unmount
    bus.unsubscribe(NarrowChangedEvent, self._on_narrow_changed)
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, TypeVar
import logging
import weakref

logger = logging.getLogger(__name__)

# Event type variable for generic typing
E = TypeVar("E", bound="Event")


@dataclass
class Event:
    """Base class for all domain events."""

    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class RosterChangedEvent(Event):
    """Emitted when the known streams or people change."""

    stream_count: int = 0
    people_count: int = 0


@dataclass
class NarrowChangedEvent(Event):
    """Emitted when a narrow is applied or cleared."""

    operators: list[tuple[str, str]] = field(default_factory=list)  # Empty = unnarrowed
    trigger: str = ""  # e.g. "search"


@dataclass
class ConfigChangedEvent(Event):
    """Emitted when configuration is updated."""

    key: str = ""  # Which setting changed


# Type alias for event handlers
EventHandler = Callable[[Event], None]


class EventBus:
    """Central event bus for service-to-UI communication.

    Singleton pattern ensures one bus per application.
    Uses weak references for automatic cleanup when subscribers are garbage collected.
    """

    _instance: "EventBus | None" = None

    def __init__(self) -> None:
        self._subscribers: dict[type[Event], list[EventHandler]] = {}
        self._weak_subscribers: dict[type[Event], list[weakref.ref]] = {}

    @classmethod
    def get(cls) -> "EventBus":
        """Get the singleton event bus instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton (for testing)."""
        cls._instance = None

    def subscribe(
        self,
        event_type: type[E],
        handler: Callable[[E], None],
        weak: bool = False,
    ) -> None:
        """Subscribe to an event type.

        Args:
            event_type: The event class to subscribe to
            handler: Callback function to invoke when event is emitted
            weak: Use weak reference (auto-cleanup when handler owner is GC'd)
        """
        if weak:
            # Bound methods need WeakMethod or the ref dies immediately
            ref = weakref.WeakMethod(handler) if hasattr(handler, "__func__") else weakref.ref(handler)
            self._weak_subscribers.setdefault(event_type, []).append(ref)
        else:
            handlers = self._subscribers.setdefault(event_type, [])
            if handler not in handlers:
                handlers.append(handler)

    def unsubscribe(
        self,
        event_type: type[E],
        handler: Callable[[E], None],
    ) -> None:
        """Unsubscribe from an event type."""
        handlers = self._subscribers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)
        if event_type in self._weak_subscribers:
            self._weak_subscribers[event_type] = [
                ref for ref in self._weak_subscribers[event_type] if ref() != handler
            ]

    def emit(self, event: Event) -> None:
        """Emit an event to all subscribers.

        Logs errors but doesn't let one subscriber's failure affect others.
        """
        event_type = type(event)

        for handler in list(self._subscribers.get(event_type, [])):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Event handler error for {event_type.__name__}: {e}")

        # Call weak reference handlers (cleanup dead refs)
        live_refs = []
        for ref in self._weak_subscribers.get(event_type, []):
            handler = ref()
            if handler is None:
                continue
            live_refs.append(ref)
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Event handler error for {event_type.__name__}: {e}")
        if event_type in self._weak_subscribers:
            self._weak_subscribers[event_type] = live_refs

    def subscriber_count(self, event_type: type[Event]) -> int:
        """Get number of subscribers for an event type (for debugging)."""
        strong = len(self._subscribers.get(event_type, []))
        weak = len([r for r in self._weak_subscribers.get(event_type, []) if r() is not None])
        return strong + weak

    def clear(self) -> None:
        """Clear all subscribers (for testing)."""
        self._subscribers.clear()
        self._weak_subscribers.clear()
