"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from rootx.application.add_product import AddProductHandler
from rootx.application.list_products import ListProductsHandler
from rootx.application.remove_product import RemoveProductHandler
from rootx.application.update_product import UpdateProductHandler
from rootx.domain.exceptions import DomainException
from rootx.domain.model.product import ALLOWED_CATEGORIES
from rootx.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--title", required=True, help="Product title.")
@click.option("--code", required=True, help="Unique product code.")
@click.option("--price", required=True, help="Price (e.g. 1200).")
@click.option("--discount-price", default=None, help="Price after discount.")
@click.option("--description", default=None)
@click.option("--image-url", default=None)
@click.option(
    "--category",
    "categories",
    multiple=True,
    type=click.Choice(ALLOWED_CATEGORIES),
    help="Category (repeatable).",
)
@click.option("--size", "sizes", multiple=True, help="Size (repeatable).")
def product_add(
    title: str,
    code: str,
    price: str,
    discount_price: str | None,
    description: str | None,
    image_url: str | None,
    categories: tuple[str, ...],
    sizes: tuple[str, ...],
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            title=title,
            code=code,
            price=price,
            price_after_discount=discount_price,
            description=description,
            image_url=image_url,
            categories=list(categories),
            sizes=list(sizes) or None,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.title}' ({product.code}) added at {product.price}")


@click.command("list")
@click.option("--category", "categories", multiple=True, help="Filter by category.")
@click.option("--search", default=None, help="Match title, description or code.")
def product_list(categories: tuple[str, ...], search: str | None) -> None:
    """List products in the catalog, newest first."""
    handler = ListProductsHandler(product_repo=product_repository())

    try:
        products = handler.handle(categories=list(categories), search=search)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<26} {'Code':<12} {'Title':<24} {'Price':>10} {'Discount':>10}")
    click.echo("-" * 86)
    for p in products:
        discount = str(p.price_after_discount) if p.price_after_discount is not None else "-"
        click.echo(
            f"{p.id:<26} {p.code:<12} {p.title:<24} {str(p.price):>10} {discount:>10}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--title", default=None, help="New title.")
@click.option("--price", default=None, help="New price (e.g. 1500).")
@click.option("--discount-price", default=None, help="New price after discount.")
@click.option("--clear-discount", is_flag=True, default=False, help="Remove the discount.")
def product_update(
    product_id: str,
    title: str | None,
    price: str | None,
    discount_price: str | None,
    clear_discount: bool,
) -> None:
    """Update a product.  Existing orders keep their prices."""
    if clear_discount and discount_price is not None:
        raise click.ClickException("--clear-discount cannot be combined with --discount-price")

    changes: dict[str, object] = {}
    if title is not None:
        changes["title"] = title
    if price is not None:
        changes["price"] = price
    if discount_price is not None:
        changes["price_after_discount"] = discount_price
    if clear_discount:
        changes["price_after_discount"] = None

    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(product_id=product_id, changes=changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} updated (price {product.price})")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_remove(product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = RemoveProductHandler(product_repo=product_repository())

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} removed.")
