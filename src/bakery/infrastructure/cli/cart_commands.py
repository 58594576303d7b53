"""CLI commands for the cart."""

from __future__ import annotations

import click

from bakery.application.project_cart import ProjectCartHandler
from bakery.domain.exceptions import DomainException
from bakery.infrastructure.bootstrap import cart_session, catalog_repository
from bakery.infrastructure.cli._items import display_cart, fill_cart


@click.command("show")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.pass_obj
def cart_show(data_dir, items: str) -> None:
    """Price the given items as a cart, without ordering."""
    cart = cart_session()
    fill_cart(cart, items)

    handler = ProjectCartHandler(cart=cart, catalog=catalog_repository(data_dir))

    try:
        view = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not view.rows:
        click.echo("Cart is empty.")
        return
    display_cart(view)
