"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from ordercore.application.change_order import (
    ChangeOrderCustomerHandler,
    ChangeOrderItemsHandler,
)
from ordercore.application.create_order import CreateOrderHandler
from ordercore.application.dto import OrderDTO, OrderItemSpec
from ordercore.application.show_order import ListOrdersHandler, ShowOrderHandler
from ordercore.domain.exceptions import DomainException
from ordercore.infrastructure.bootstrap import event_dispatcher, order_repository


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'id:product_id:name:price:qty,...' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for entry in raw.split(","):
        entry = entry.strip()
        parts = entry.split(":")
        if len(parts) != 5:
            raise click.BadParameter(
                f"Invalid item format '{entry}'. "
                f"Expected 'Id:ProductId:Name:Price:Quantity'."
            )
        item_id, product_id, name, price, qty_str = (p.strip() for p in parts)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for item '{item_id}'."
            )
        specs.append(
            OrderItemSpec(
                id=item_id,
                product_id=product_id,
                name=name,
                price=price,
                quantity=qty,
            )
        )
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}")
    click.echo(f"Customer: {dto.customer_id}")
    click.echo()
    click.echo(f"  {'Item':<8} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*56}")
    for item in dto.items:
        click.echo(
            f"  {item.id:<8} {item.name:<20} {item.quantity:>5} {item.price:>10} {item.total:>10}"
        )
    click.echo(f"  {'-'*56}")
    click.echo(f"  {'Order Total':<36} {dto.total:>20}")


@click.command("create")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--customer", required=True, help="Customer ID.")
@click.option(
    "--items", required=True, help="Items as 'Id:ProductId:Name:Price:Qty,...'."
)
def order_create(order_id: str, customer: str, items: str) -> None:
    """Create a new order."""
    specs = _parse_items(items)

    handler = CreateOrderHandler(
        order_repo=order_repository(),
        dispatcher=event_dispatcher(),
    )

    try:
        dto = handler.handle(order_id=order_id, customer_id=customer, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
def order_list() -> None:
    """List all orders."""
    dtos = ListOrdersHandler(order_repo=order_repository()).handle()

    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<10} {'Customer':<12} {'Items':>5} {'Total':>12}")
    click.echo("-" * 42)
    for dto in dtos:
        click.echo(f"{dto.id:<10} {dto.customer_id:<12} {len(dto.items):>5} {dto.total:>12}")


@click.command("change-customer")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--customer", required=True, help="New customer ID.")
def order_change_customer(order_id: str, customer: str) -> None:
    """Reassign an order to another customer."""
    handler = ChangeOrderCustomerHandler(
        order_repo=order_repository(),
        dispatcher=event_dispatcher(),
    )

    try:
        handler.handle(order_id=order_id, customer_id=customer)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} now belongs to customer {customer}.")


@click.command("change-items")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option(
    "--items", required=True, help="New items as 'Id:ProductId:Name:Price:Qty,...'."
)
def order_change_items(order_id: str, items: str) -> None:
    """Replace every item of an order."""
    specs = _parse_items(items)

    handler = ChangeOrderItemsHandler(
        order_repo=order_repository(),
        dispatcher=event_dispatcher(),
    )

    try:
        dto = handler.handle(order_id=order_id, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} items replaced, new total {dto.total}.")
