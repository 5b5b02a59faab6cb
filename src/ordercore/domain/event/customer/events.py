"""Events raised by the Customer aggregate.

Payload: ``{"id": ..., "name": ..., "address": ...}``.
"""

from __future__ import annotations

from ordercore.domain.event.event import Event


class CustomerCreatedEvent(Event):
    pass


class CustomerChangedAddressEvent(Event):
    pass
