"""Abstract repository for Order aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. The SQLAlchemy implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ordercore.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def create(self, order: Order) -> None:
        """Persist a new order together with all of its items, atomically."""

    @abstractmethod
    def update(self, order: Order) -> None:
        """Replace the stored items and header fields of an existing order.

        Raises OrderNotFoundError if no order with this id is stored.
        """

    @abstractmethod
    def find(self, order_id: str) -> Order:
        """Return the order with this id.

        Raises OrderNotFoundError if it does not exist.
        """

    @abstractmethod
    def find_all(self) -> list[Order]:
        """Return every stored order, in no particular order."""
