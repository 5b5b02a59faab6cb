"""Sample handlers for customer events. They only write a log line."""

from __future__ import annotations

import logging

from ordercore.domain.event.event import Event, EventHandler

logger = logging.getLogger(__name__)


class LogWhenCustomerIsCreatedHandler1(EventHandler):

    def handle(self, event: Event) -> None:
        logger.info("This is the first log of the event: %s", event.event_type())


class LogWhenCustomerIsCreatedHandler2(EventHandler):

    def handle(self, event: Event) -> None:
        logger.info("This is the second log of the event: %s", event.event_type())


class LogWhenCustomerChangedAddressHandler(EventHandler):

    def handle(self, event: Event) -> None:
        data = event.event_data
        logger.info(
            "Customer address: (%s, %s) changed to: %s",
            data["id"],
            data["name"],
            data["address"],
        )
