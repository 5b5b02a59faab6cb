"""Log handlers for order events."""

from __future__ import annotations

import logging

from ordercore.domain.event.event import Event, EventHandler

logger = logging.getLogger(__name__)


class LogWhenOrderIsCreatedHandler(EventHandler):

    def handle(self, event: Event) -> None:
        data = event.event_data
        logger.info(
            "Order %s created for customer %s (total %s)",
            data["id"],
            data["customer_id"],
            data["total"],
        )


class LogWhenOrderIsChangedHandler(EventHandler):
    """Registered for both customer and item changes."""

    def handle(self, event: Event) -> None:
        data = event.event_data
        logger.info(
            "Order %s changed (%s): customer %s, total %s",
            data["id"],
            event.event_type(),
            data["customer_id"],
            data["total"],
        )
