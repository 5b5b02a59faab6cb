"""Application services: Show / List Orders use cases (queries)."""

from __future__ import annotations

from ordercore.application.dto import OrderDTO, order_to_dto
from ordercore.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> OrderDTO:
        return order_to_dto(self._order_repo.find(order_id))


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[OrderDTO]:
        # Storage order is unspecified; sort for a stable display.
        orders = sorted(self._order_repo.find_all(), key=lambda o: o.id)
        return [order_to_dto(order) for order in orders]
