"""In-process registry routing events to handlers by event-type name.

Handlers for one event type are delivered in registration order.  A
handler that raises does not stop the rest of the chain: every handler
runs, failures are logged, and a single ``EventDispatchError`` is raised
once the chain has finished.
"""

from __future__ import annotations

import logging
import threading

from ordercore.domain.event.event import Event, EventHandler
from ordercore.domain.exceptions import EventDispatchError

logger = logging.getLogger(__name__)


class EventDispatcher:

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}
        self._lock = threading.Lock()

    @property
    def event_handlers(self) -> dict[str, list[EventHandler]]:
        """Snapshot of the registry; mutating it has no effect."""
        with self._lock:
            return {name: list(handlers) for name, handlers in self._handlers.items()}

    # --- Registration ---------------------------------------------------------

    def register(self, event_type: str, handler: EventHandler) -> None:
        """Append *handler* for *event_type*. Duplicates are kept."""
        with self._lock:
            self._handlers.setdefault(event_type, []).append(handler)
        logger.debug("Registered %s for %s", type(handler).__name__, event_type)

    def unregister(self, event_type: str, handler: EventHandler) -> None:
        """Remove the first registration of *handler*; unknown ones are ignored."""
        with self._lock:
            handlers = self._handlers.get(event_type)
            if handlers is None or handler not in handlers:
                return
            handlers.remove(handler)
        logger.debug("Unregistered %s from %s", type(handler).__name__, event_type)

    def unregister_all(self) -> None:
        """Drop every event type and its handlers."""
        with self._lock:
            self._handlers.clear()

    # --- Delivery -------------------------------------------------------------

    def notify(self, event: Event) -> None:
        """Deliver *event* to each handler registered for its type."""
        event_type = event.event_type()
        with self._lock:
            handlers = list(self._handlers.get(event_type, ()))

        failures: list[tuple[EventHandler, Exception]] = []
        for handler in handlers:
            try:
                handler.handle(event)
            except Exception as exc:
                logger.exception(
                    "Handler %s failed on %s", type(handler).__name__, event_type
                )
                failures.append((handler, exc))

        if failures:
            raise EventDispatchError(event_type, failures) from failures[0][1]
