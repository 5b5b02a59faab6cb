import click

from ordercore.infrastructure.cli.order_commands import (
    order_change_customer,
    order_change_items,
    order_create,
    order_list,
    order_show,
)
from ordercore.infrastructure.log_config import setup_logging


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    envvar="ORDERCORE_LOG_LEVEL",
    show_default=True,
    help="Logging level (DEBUG, INFO, WARNING, ERROR).",
)
def cli(log_level: str) -> None:
    """ordercore — orders, line items and domain events"""
    setup_logging(log_level)


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
order.add_command(order_change_customer)
order.add_command(order_change_items)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
