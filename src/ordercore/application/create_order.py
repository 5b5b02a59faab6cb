"""Application service: Create Order use case.

Orchestrates the flow between the repository, the domain model and the
event dispatcher.  The event is published only after the order has been
stored, so a failed write never produces a notification.
"""

from __future__ import annotations

from ordercore.application.dto import (
    OrderDTO,
    OrderItemSpec,
    order_event_data,
    order_to_dto,
)
from ordercore.application.publishing import publish_committed
from ordercore.domain.event.event_dispatcher import EventDispatcher
from ordercore.domain.event.order.events import OrderCreatedEvent
from ordercore.domain.model.order import Order
from ordercore.domain.repository.order_repository import OrderRepository


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        dispatcher: EventDispatcher,
    ) -> None:
        self._order_repo = order_repo
        self._dispatcher = dispatcher

    def handle(
        self,
        order_id: str,
        customer_id: str,
        item_specs: list[OrderItemSpec],
    ) -> OrderDTO:
        """Create a new order.

        Steps:
        1. Build OrderItems from the raw specs (price coercion).
        2. Let the Order aggregate validate all invariants.
        3. Persist header and items in one transaction.
        4. Publish OrderCreatedEvent and return a DTO.
        """
        order = Order(
            id=order_id,
            customer_id=customer_id,
            items=[spec.to_item() for spec in item_specs],
        )
        self._order_repo.create(order)

        publish_committed(self._dispatcher, OrderCreatedEvent(order_event_data(order)))
        return order_to_dto(order)
