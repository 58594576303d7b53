"""Shared parsing of the ``--items`` option into the process cart."""

from __future__ import annotations

import click

from bakery.application.dto import CartViewDTO
from bakery.domain.model.cart import Cart


def parse_items(raw: str) -> list[tuple[str, int]]:
    """Parse '1:2,3:1' into [(product_id, quantity), ...]."""
    pairs: list[tuple[str, int]] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        pairs.append((product_id.strip(), qty))
    return pairs


def fill_cart(cart: Cart, raw: str) -> None:
    for product_id, qty in parse_items(raw):
        cart.add(product_id, qty)


def display_cart(view: CartViewDTO) -> None:
    click.echo(f"  {'Product':<28} {'Qty':>5} {'Unit':>12} {'Total':>12}")
    click.echo(f"  {'-'*60}")
    for row in view.rows:
        click.echo(
            f"  {row.product_name:<28} {row.quantity:>5} "
            f"{str(row.unit_price):>12} {str(row.line_total):>12}"
        )
    click.echo(f"  {'-'*60}")
    click.echo(f"  {'Subtotal':<34} {str(view.subtotal):>25}")
