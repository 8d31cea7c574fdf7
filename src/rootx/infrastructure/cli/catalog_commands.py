"""CLI commands for colors and the sales dashboard."""

from __future__ import annotations

import click

from rootx.application.manage_colors import AddColorHandler, ListColorsHandler
from rootx.application.sales_dashboard import SalesDashboardHandler
from rootx.domain.exceptions import DomainException
from rootx.infrastructure.bootstrap import color_repository, order_repository


@click.command("add")
@click.option("--name", required=True, help="Color name.")
@click.option("--hex", "hex_code", default=None, help="Hex code, e.g. #ff0000.")
def color_add(name: str, hex_code: str | None) -> None:
    """Add a color to the master list."""
    handler = AddColorHandler(color_repo=color_repository())

    try:
        color = handler.handle(name, hex_code)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Color {color.id} '{color.name}' added")


@click.command("list")
def color_list() -> None:
    """List colors, newest first."""
    try:
        colors = ListColorsHandler(color_repo=color_repository()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not colors:
        click.echo("No colors found.")
        return

    for c in colors:
        click.echo(f"{c.name:<20} {c.hex or ''}")


@click.command("totals")
def dashboard_totals() -> None:
    """Show all-time sales."""
    try:
        totals = SalesDashboardHandler(order_repo=order_repository()).totals()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Orders: {totals.order_count}")
    click.echo(f"Sales:  BDT {totals.total}")


@click.command("monthly")
def dashboard_monthly() -> None:
    """Show sales for the last six months."""
    try:
        months = SalesDashboardHandler(order_repo=order_repository()).monthly()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not months:
        click.echo("No sales in the last six months.")
        return

    click.echo(f"{'Month':<10} {'Orders':>8} {'Sales':>14}")
    click.echo("-" * 34)
    for m in months:
        click.echo(f"{m.year:04d}-{m.month:02d}    {m.order_count:>8} {str(m.total):>14}")
