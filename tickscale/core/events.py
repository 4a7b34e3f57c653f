"""Event bus for diagnostics emitted by tick scales.

This module provides a simple publish-subscribe event system. A TickScale
emits events when its range changes or when the cursor has to be clamped,
so renderers and tests can observe them without subclassing.
"""

import logging
from enum import Enum
from typing import Callable

logger = logging.getLogger(__name__)


class EventType(str, Enum):
    """Enumeration of all event types for type safety."""

    RANGE_CHANGED = "range_changed"  # scale selected and margins snapped
    CURSOR_CLAMPED = "cursor_clamped"  # advance() could not move the cursor


class EventBus:
    """Simple publish-subscribe event bus.

    Usage:
        bus = EventBus()
        bus.subscribe(EventType.CURSOR_CLAMPED, lambda **kw: print(kw["value"]))
        bus.emit(EventType.CURSOR_CLAMPED, value=1e17)

    Thread Safety:
        This implementation is NOT thread-safe. All subscriptions and emissions
        should happen on the thread that owns the scale.
    """

    def __init__(self):
        self._subscribers: dict[str, list[Callable]] = {}

    def subscribe(self, event_type: str, callback: Callable) -> Callable:
        """Subscribe to an event type.

        Args:
            event_type: Event identifier (an EventType or its string value)
            callback: Function to call when event is emitted. Receives **kwargs.

        Returns:
            The callback function (for easy unsubscribe later)
        """
        self._subscribers.setdefault(EventType(event_type).value, []).append(callback)
        return callback

    def unsubscribe(self, event_type: str, callback: Callable) -> None:
        """Unsubscribe a callback from an event type."""
        key = EventType(event_type).value
        if key in self._subscribers:
            self._subscribers[key] = [cb for cb in self._subscribers[key] if cb != callback]

    def emit(self, event_type: str, **kwargs) -> None:
        """Emit an event to all subscribers.

        Exceptions in callbacks are logged and do not stop delivery to the
        remaining subscribers.

        Args:
            event_type: Event identifier
            **kwargs: Data to pass to subscribers
        """
        key = EventType(event_type).value
        for callback in self._subscribers.get(key, []):
            try:
                callback(**kwargs)
            except Exception:
                logger.exception("Event handler error for %s", key)

    def clear(self, event_type: str | None = None) -> None:
        """Clear all subscribers for an event type, or all events if None."""
        if event_type is None:
            self._subscribers.clear()
        else:
            self._subscribers.pop(EventType(event_type).value, None)

    def has_subscribers(self, event_type: str) -> bool:
        """Check if an event type has any subscribers."""
        return bool(self._subscribers.get(EventType(event_type).value))
