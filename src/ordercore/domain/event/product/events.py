"""Events raised by the Product aggregate."""

from __future__ import annotations

from ordercore.domain.event.event import Event


class ProductCreatedEvent(Event):
    """Payload: ``{"name": ..., "description": ..., "price": ...}``."""
