"""CLI commands for order history."""

from __future__ import annotations

import click

from bakery.application.list_orders import ListOrdersHandler
from bakery.application.show_order_items import ShowOrderItemsHandler
from bakery.domain.exceptions import DomainException
from bakery.infrastructure.bootstrap import (
    catalog_repository,
    line_item_store,
    order_store,
)


@click.command("list")
@click.option("--customer", "customer_id", required=True, type=int, help="Customer ID.")
@click.pass_obj
def order_list(data_dir, customer_id: int) -> None:
    """List a customer's orders, newest first."""
    handler = ListOrdersHandler(order_store=order_store(data_dir))

    try:
        summaries = handler.handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not summaries:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Date':<22} {'Mode':<10} {'Total':>12}  Notes")
    click.echo("-" * 60)
    for s in summaries:
        click.echo(f"{s.id:<6} {s.created_at:<22} {s.mode:<10} {s.total:>12}  {s.notes or ''}")


@click.command("items")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.pass_obj
def order_items(data_dir, order_id: int) -> None:
    """Show the items of an order at the prices they were sold for."""
    handler = ShowOrderItemsHandler(
        line_store=line_item_store(data_dir),
        catalog=catalog_repository(data_dir),
    )

    try:
        items = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not items:
        click.echo(f"Order #{order_id} has no items.")
        return

    click.echo(f"  {'Product':<28} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*60}")
    for item in items:
        click.echo(
            f"  {item.product_name:<28} {item.quantity:>5} "
            f"{item.price_at_moment:>12} {item.line_total:>12}"
        )
