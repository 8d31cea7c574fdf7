"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from rootx.application.create_order import CreateOrderHandler
from rootx.application.delete_order import DeleteOrderHandler
from rootx.application.set_order_status import SetOrderStatusHandler
from rootx.application.show_order import ListOrdersHandler, ShowOrderHandler
from rootx.domain.exceptions import DomainException
from rootx.domain.model.cart import CartLine, CustomerInfo
from rootx.domain.model.order import Order, OrderStatus
from rootx.infrastructure.bootstrap import order_repository, product_repository


def _parse_items(raw: str) -> list[CartLine]:
    """Parse 'ID:3,ID' into CartLines; a missing quantity means one."""
    lines: list[CartLine] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        product_id, _, qty = pair.partition(":")
        lines.append(CartLine(product_id=product_id.strip(), quantity=qty.strip() or None))
    return lines


def _display_order(order: Order) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {order.id}  (status={order.status.value})")
    if order.customer.customer_name:
        click.echo(f"Customer: {order.customer.customer_name}")
    click.echo(f"Created:  {order.created_at.strftime('%Y-%m-%d %H:%M UTC')}")
    click.echo()
    click.echo(f"  {'Code':<12} {'Title':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*65}")
    for item in order.items:
        click.echo(
            f"  {item.code:<12} {item.title:<24} {item.quantity.value:>5} "
            f"{str(item.unit_price):>10} {str(item.line_total):>10}"
        )
    click.echo(f"  {'-'*65}")
    click.echo(f"  {'Order Total':<44} {str(order.total_value):>20}")
    click.echo(f"  {'Delivery Charge':<44} {str(order.delivery_charge):>20}")


@click.command("create")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId'.")
@click.option("--customer-name", default=None, help="Customer name.")
@click.option("--phone", default=None)
@click.option("--division", default=None)
@click.option("--district", default=None)
@click.option("--upazila", default=None)
@click.option("--address", default=None)
@click.option("--color", default=None, help="Preferred color for the whole order.")
@click.option("--delivery-charge", default=None, help="Delivery charge (e.g. 60).")
def order_create(
    items: str,
    customer_name: str | None,
    phone: str | None,
    division: str | None,
    district: str | None,
    upazila: str | None,
    address: str | None,
    color: str | None,
    delivery_charge: str | None,
) -> None:
    """Create a new order priced from the current catalog."""
    handler = CreateOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
    )
    info = CustomerInfo(
        customer_name=customer_name,
        phone=phone,
        division=division,
        district=district,
        upazila=upazila,
        address=address,
        color=color,
        delivery_charge=delivery_charge,
    )

    try:
        order = handler.handle(_parse_items(items), info)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(order)


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        order = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(order)


@click.command("list")
def order_list() -> None:
    """List all orders, newest first."""
    try:
        orders = ListOrdersHandler(order_repo=order_repository()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<26} {'Status':<12} {'Customer':<20} {'Total':>10}")
    click.echo("-" * 71)
    for o in orders:
        name = o.customer.customer_name or "-"
        click.echo(f"{o.id:<26} {o.status.value:<12} {name:<20} {str(o.total_value):>10}")


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option(
    "--status",
    required=True,
    type=click.Choice([s.value for s in OrderStatus]),
    help="New status.",
)
def order_status(order_id: str, status: str) -> None:
    """Move an order to another status."""
    handler = SetOrderStatusHandler(order_repo=order_repository())

    try:
        handler.handle(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} is now {status}.")


@click.command("delete")
@click.option("--id", "order_id", required=True, help="Order ID to delete.")
def order_delete(order_id: str) -> None:
    """Delete an order permanently."""
    handler = DeleteOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} removed.")
