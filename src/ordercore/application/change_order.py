"""Application services: change the customer or the items of an order.

Both follow the same shape: load, mutate the aggregate (which
re-validates), write back with the replace protocol, then publish.
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
from ordercore.domain.event.order.events import (
    OrderCustomerChangedEvent,
    OrderItemsChangedEvent,
)
from ordercore.domain.repository.order_repository import OrderRepository


class ChangeOrderCustomerHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        dispatcher: EventDispatcher,
    ) -> None:
        self._order_repo = order_repo
        self._dispatcher = dispatcher

    def handle(self, order_id: str, customer_id: str) -> OrderDTO:
        order = self._order_repo.find(order_id)
        order.change_customer(customer_id)
        self._order_repo.update(order)

        publish_committed(self._dispatcher, OrderCustomerChangedEvent(order_event_data(order)))
        return order_to_dto(order)


class ChangeOrderItemsHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        dispatcher: EventDispatcher,
    ) -> None:
        self._order_repo = order_repo
        self._dispatcher = dispatcher

    def handle(self, order_id: str, item_specs: list[OrderItemSpec]) -> OrderDTO:
        """Replace every item of the order with the given lines."""
        order = self._order_repo.find(order_id)
        order.change_items([spec.to_item() for spec in item_specs])
        self._order_repo.update(order)

        publish_committed(self._dispatcher, OrderItemsChangedEvent(order_event_data(order)))
        return order_to_dto(order)
