"""CLI command for checking out the cart."""

from __future__ import annotations

import click

from bakery.application.quote_checkout import QuoteCheckoutHandler
from bakery.application.submit_order import SubmitOrderHandler
from bakery.domain.exceptions import DomainException, PersistenceFailure
from bakery.infrastructure.bootstrap import (
    cart_session,
    catalog_repository,
    customer_directory,
    customer_session,
    line_item_store,
    order_store,
)
from bakery.infrastructure.cli._items import display_cart, fill_cart


@click.command("checkout")
@click.option("--customer", "customer_id", required=True, type=int, help="Customer ID.")
@click.option("--mode", required=True, help="'delivery' or 'pickup'.")
@click.option("--notes", default=None, help="Notes for the bakery.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.pass_obj
def checkout(data_dir, customer_id: int, mode: str, notes: str | None, items: str) -> None:
    """Price the cart, show the total and place the order."""
    customers = customer_directory(data_dir)
    catalog = catalog_repository(data_dir)
    session = customer_session()
    cart = cart_session()

    quote_handler = QuoteCheckoutHandler(cart, catalog, customers)
    submit_handler = SubmitOrderHandler(
        cart=cart,
        catalog=catalog,
        fee_resolver=customers,
        order_store=order_store(data_dir),
        line_store=line_item_store(data_dir),
        session=session,
    )

    try:
        if not customers.exists(customer_id):
            raise click.ClickException(f"Customer #{customer_id} not found")
        session.login(customer_id)
        fill_cart(cart, items)

        quote = quote_handler.handle(customer_id, mode)
        display_cart(quote.view)
        click.echo(f"  {'Delivery fee':<34} {str(quote.delivery_fee):>25}")
        click.echo(f"  {'Total':<34} {str(quote.total):>25}")
        click.echo()
        order_id = submit_handler.handle(customer_id, mode, notes=notes, total=quote.total)
    except PersistenceFailure as exc:
        submission = exc.submission
        if submission is not None and submission.order_id is not None:
            raise click.ClickException(
                f"{exc} Order #{submission.order_id} was left "
                f"{submission.state.value} with {len(submission.lines_written)} item(s)."
            )
        raise click.ClickException(str(exc))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} placed.")
