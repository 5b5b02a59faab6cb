"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its line items.
All business invariants are enforced here; an Order instance in memory is
never observably invalid.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from ordercore.domain.exceptions import ValidationError

# Prices are stored with two decimal places.
CENT = Decimal("0.01")


def _is_blank(value: str | None) -> bool:
    return not value or not value.strip()


@dataclass(frozen=True)
class OrderItem:
    """One priced line of an order.

    Immutable once built.  The price is a snapshot of the product price at
    the time the line was created.  ``quantity`` is validated by the owning
    Order, not here.
    """

    id: str
    product_id: str
    name: str
    price: Decimal
    quantity: int

    def __post_init__(self) -> None:
        if _is_blank(self.id):
            raise ValidationError("Item id is required")
        if _is_blank(self.product_id):
            raise ValidationError("ProductId is required")

        try:
            price = Decimal(str(self.price))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid price: {self.price!r}") from exc
        if not price.is_finite():
            raise ValidationError(f"Invalid price: {self.price!r}")
        if price < Decimal("0"):
            raise ValidationError(f"Price cannot be negative, got {price}")
        try:
            cents = price.quantize(CENT)
        except InvalidOperation as exc:
            raise ValidationError(f"Invalid price: {self.price!r}") from exc
        if price != cents:
            raise ValidationError(
                f"Price cannot have more than 2 decimal places, got {price}"
            )
        object.__setattr__(self, "price", price)

    @property
    def total(self) -> Decimal:
        return self.price * self.quantity


class Order:
    """Aggregate root for purchase orders.

    ``items`` is replaced wholesale via ``change_items`` and exposed as a
    tuple, so nothing outside the aggregate can patch it in place.
    """

    def __init__(self, id: str, customer_id: str, items: Iterable[OrderItem]) -> None:
        self._id = id
        self._customer_id = customer_id
        self._items: tuple[OrderItem, ...] = tuple(items)

        self.validate()

    # --- Invariants -----------------------------------------------------------

    def validate(self) -> bool:
        """Check every invariant, raising on the first one violated."""
        if _is_blank(self._id):
            raise ValidationError("Id is required")
        if _is_blank(self._customer_id):
            raise ValidationError("CustomerId is required")
        if not self._items:
            raise ValidationError("Items are required")
        for item in self._items:
            if not isinstance(item.quantity, int) or isinstance(item.quantity, bool):
                raise ValidationError(
                    f"Quantity must be an integer, got {type(item.quantity).__name__}"
                )
            if item.quantity <= 0:
                raise ValidationError("Quantity must be greater than 0")
        return True

    # --- Accessors ------------------------------------------------------------

    @property
    def id(self) -> str:
        return self._id

    @property
    def customer_id(self) -> str:
        return self._customer_id

    @property
    def items(self) -> tuple[OrderItem, ...]:
        return self._items

    @property
    def total(self) -> Decimal:
        return sum((item.total for item in self._items), Decimal("0"))

    # --- Mutations ------------------------------------------------------------

    def change_customer(self, customer_id: str) -> None:
        """Reassign the order to another customer.

        On a validation failure the previous customer is restored before
        the error is raised.
        """
        previous = self._customer_id
        self._customer_id = customer_id
        try:
            self.validate()
        except ValidationError:
            self._customer_id = previous
            raise

    def change_items(self, items: Iterable[OrderItem]) -> None:
        """Replace the whole item collection (never patched per item)."""
        previous = self._items
        self._items = tuple(items)
        try:
            self.validate()
        except ValidationError:
            self._items = previous
            raise

    # --- Comparison / display -------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return (
            self._id == other._id
            and self._customer_id == other._customer_id
            and self._items == other._items
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Order(id={self._id!r}, customer_id={self._customer_id!r}, "
            f"items={list(self._items)!r})"
        )
