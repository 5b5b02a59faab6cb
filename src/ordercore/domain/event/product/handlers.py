from __future__ import annotations

import logging

from ordercore.domain.event.event import Event, EventHandler

logger = logging.getLogger(__name__)


class SendEmailWhenProductIsCreatedHandler(EventHandler):
    """Stands in for a mail notification; logs what would be sent."""

    def handle(self, event: Event) -> None:
        logger.info("Sending email: product %s was created", event.event_data["name"])
