from pathlib import Path

import click

from bakery.infrastructure.bootstrap import DEFAULT_DATA_DIR
from bakery.infrastructure.cli.cart_commands import cart_show
from bakery.infrastructure.cli.catalog_commands import catalog_list
from bakery.infrastructure.cli.checkout_commands import checkout
from bakery.infrastructure.cli.order_commands import order_items, order_list
from bakery.infrastructure.logging import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    envvar="BAKERY_DATA_DIR",
    show_default=True,
    help="Directory holding the JSON data files.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, verbose: bool) -> None:
    """Bakery — cart and checkout"""
    configure_logging(verbose)
    ctx.obj = data_dir


@cli.group()
def catalog() -> None:
    """Browse the catalog."""


@cli.group()
def cart() -> None:
    """Inspect the cart."""


@cli.group()
def orders() -> None:
    """Order history."""


# Register subcommands
catalog.add_command(catalog_list)
cart.add_command(cart_show)
orders.add_command(order_list)
orders.add_command(order_items)
cli.add_command(checkout)
