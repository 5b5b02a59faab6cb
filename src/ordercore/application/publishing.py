"""Publishing of order events once the write has been committed."""

from __future__ import annotations

import logging

from ordercore.domain.event.event import Event
from ordercore.domain.event.event_dispatcher import EventDispatcher
from ordercore.domain.exceptions import EventDispatchError

logger = logging.getLogger(__name__)


def publish_committed(dispatcher: EventDispatcher, event: Event) -> None:
    """Notify handlers about a change that is already stored.

    Handler failures are logged, not raised: the write cannot be undone at
    this point, so callers must not report the operation as failed.
    """
    try:
        dispatcher.notify(event)
    except EventDispatchError as exc:
        logger.warning("Order %s was saved but %s", event.event_data["id"], exc)
