"""Domain event record and the handler capability.

An event is an opaque record: the dispatcher only reads its
``event_type()`` to pick handlers, the ``event_data`` payload is
meaningful to the handlers alone.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class Event:
    event_data: Any
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def event_type(self) -> str:
        """Dispatch key; the concrete class name."""
        return type(self).__name__


class EventHandler(ABC):
    """A unit of work reacting to one kind of event."""

    @abstractmethod
    def handle(self, event: Event) -> None:
        """React to *event*. The return value is ignored."""
