"""CLI commands for the catalog."""

from __future__ import annotations

import click

from bakery.domain.exceptions import DomainException
from bakery.domain.service.pricing import unit_price
from bakery.infrastructure.bootstrap import catalog_repository


@click.command("list")
@click.pass_obj
def catalog_list(data_dir) -> None:
    """List all products with their current unit price."""
    try:
        records = catalog_repository(data_dir).list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not records:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<28} {'Price':>12}")
    click.echo("-" * 48)
    for r in records:
        click.echo(f"{r.id:<6} {r.name:<28} {str(unit_price(r)):>12}")
