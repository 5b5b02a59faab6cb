"""Input specs and output DTOs for the order use cases.

The CLI hands raw primitives in as OrderItemSpec and gets formatted
OrderDTOs back, never the aggregate itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ordercore.domain.model.order import Order, OrderItem


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one order line as supplied by the caller (raw primitives)."""

    id: str
    product_id: str
    name: str
    price: str
    quantity: int

    def to_item(self) -> OrderItem:
        return OrderItem(
            id=self.id,
            product_id=self.product_id,
            name=self.name,
            price=self.price,  # type: ignore[arg-type]  # coerced by OrderItem
            quantity=self.quantity,
        )


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single line item as displayed to the user."""

    id: str
    product_id: str
    name: str
    quantity: int
    price: str  # formatted, e.g. "10.00"
    total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    customer_id: str
    items: list[OrderItemDTO]
    total: str


def format_amount(amount: Decimal) -> str:
    return f"{amount:.2f}"


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        customer_id=order.customer_id,
        items=[
            OrderItemDTO(
                id=item.id,
                product_id=item.product_id,
                name=item.name,
                quantity=item.quantity,
                price=format_amount(item.price),
                total=format_amount(item.total),
            )
            for item in order.items
        ],
        total=format_amount(order.total),
    )


def order_event_data(order: Order) -> dict:
    """Payload shared by the order events."""
    return {"id": order.id, "customer_id": order.customer_id, "total": order.total}
