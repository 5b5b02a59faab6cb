"""Events published by the order use cases after a successful write.

Payload: ``{"id": ..., "customer_id": ..., "total": ...}`` where ``total``
is a ``Decimal``.
"""

from __future__ import annotations

from ordercore.domain.event.event import Event


class OrderCreatedEvent(Event):
    pass


class OrderCustomerChangedEvent(Event):
    pass


class OrderItemsChangedEvent(Event):
    pass
