"""Publish-subscribe bus for import resolution events."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable

Listener = Callable[[Any], None]


class EventBus:
    """Dispatches events to listeners registered by event class.

    A listener registered for a class also receives events of its subclasses,
    so subscribing to :class:`~atimport.events.types.ImportEvent` sees every
    import event. Catch-all listeners run first, then typed listeners in
    registration order. Dispatch is synchronous and happens on the event loop
    thread that emitted the event; listeners must not block.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Listener]] = defaultdict(list)
        self._global_listeners: list[Listener] = []

    def subscribe(self, event_type: type, callback: Listener) -> Callable[[], None]:
        """Register *callback* for *event_type*; returns an unsubscribe function."""
        self._listeners[event_type].append(callback)

        def _unsubscribe() -> None:
            listeners = self._listeners.get(event_type, [])
            if callback in listeners:
                listeners.remove(callback)

        return _unsubscribe

    def on_all(self, callback: Listener) -> None:
        """Register a callback that receives every event."""
        self._global_listeners.append(callback)

    def emit(self, event: Any) -> None:
        for cb in list(self._global_listeners):
            cb(event)
        for event_type in type(event).__mro__:
            for cb in list(self._listeners.get(event_type, ())):
                cb(event)
