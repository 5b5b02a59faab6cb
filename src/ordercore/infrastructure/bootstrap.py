"""Composition root: configuration plus the concrete objects behind the
domain interfaces.

Only this module imports from every layer.  The event dispatcher is built
here and handed to the use cases that publish; nothing reaches it globally.
"""

from __future__ import annotations

import os
from pathlib import Path

from sqlalchemy.orm import Session, sessionmaker

from ordercore.domain.event.customer.events import (
    CustomerChangedAddressEvent,
    CustomerCreatedEvent,
)
from ordercore.domain.event.customer.handlers import (
    LogWhenCustomerChangedAddressHandler,
    LogWhenCustomerIsCreatedHandler1,
    LogWhenCustomerIsCreatedHandler2,
)
from ordercore.domain.event.event_dispatcher import EventDispatcher
from ordercore.domain.event.order.events import (
    OrderCreatedEvent,
    OrderCustomerChangedEvent,
    OrderItemsChangedEvent,
)
from ordercore.domain.event.order.handlers import (
    LogWhenOrderIsChangedHandler,
    LogWhenOrderIsCreatedHandler,
)
from ordercore.domain.event.product.events import ProductCreatedEvent
from ordercore.domain.event.product.handlers import SendEmailWhenProductIsCreatedHandler
from ordercore.infrastructure.persistence.database import (
    build_engine,
    build_session_factory,
    create_schema,
)
from ordercore.infrastructure.persistence.sqlalchemy_order_repository import (
    SqlAlchemyOrderRepository,
)

DATABASE_URL_ENV = "ORDERCORE_DATABASE_URL"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def database_url() -> str:
    url = os.environ.get(DATABASE_URL_ENV)
    if url:
        return url
    _DATA_DIR.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{_DATA_DIR / 'ordercore.db'}"


def session_factory(url: str | None = None) -> sessionmaker[Session]:
    engine = build_engine(url or database_url())
    create_schema(engine)
    return build_session_factory(engine)


def order_repository(url: str | None = None) -> SqlAlchemyOrderRepository:
    return SqlAlchemyOrderRepository(session_factory(url))


def event_dispatcher() -> EventDispatcher:
    """Build the dispatcher with every known handler registered."""
    dispatcher = EventDispatcher()

    order_changed = LogWhenOrderIsChangedHandler()
    dispatcher.register(OrderCreatedEvent.__name__, LogWhenOrderIsCreatedHandler())
    dispatcher.register(OrderCustomerChangedEvent.__name__, order_changed)
    dispatcher.register(OrderItemsChangedEvent.__name__, order_changed)

    dispatcher.register(CustomerCreatedEvent.__name__, LogWhenCustomerIsCreatedHandler1())
    dispatcher.register(CustomerCreatedEvent.__name__, LogWhenCustomerIsCreatedHandler2())
    dispatcher.register(
        CustomerChangedAddressEvent.__name__, LogWhenCustomerChangedAddressHandler()
    )
    dispatcher.register(ProductCreatedEvent.__name__, SendEmailWhenProductIsCreatedHandler())
    return dispatcher
