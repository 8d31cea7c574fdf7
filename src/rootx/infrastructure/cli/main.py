import click
import uvicorn

from rootx.infrastructure.bootstrap import settings
from rootx.infrastructure.cli.catalog_commands import (
    color_add,
    color_list,
    dashboard_monthly,
    dashboard_totals,
)
from rootx.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_list,
    order_show,
    order_status,
)
from rootx.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_remove,
    product_update,
)
from rootx.infrastructure.log_config import configure_logging


@click.group()
@click.option("--log-level", default=None, help="Override ROOTX_LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """Rootx: e-commerce admin backend"""
    configure_logging(log_level or settings().log_level)


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def color() -> None:
    """Manage the color master list."""


@cli.group()
def dashboard() -> None:
    """Sales rollups."""


@cli.command()
@click.option("--host", default=None, help="Bind address (default ROOTX_HOST).")
@click.option("--port", default=None, type=int, help="Port (default PORT).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    config = settings()
    uvicorn.run(
        "rootx.infrastructure.bootstrap:create_asgi_app",
        factory=True,
        host=host or config.host,
        port=port or config.port,
        reload=False,
    )


# Register subcommands
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_remove)
product.add_command(product_update)
color.add_command(color_add)
color.add_command(color_list)
dashboard.add_command(dashboard_monthly)
dashboard.add_command(dashboard_totals)
