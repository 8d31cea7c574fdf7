"""Application service: Update Product use case."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rootx.application.show_product import load_product
from rootx.domain.exceptions import ValidationError
from rootx.domain.model.product import Product
from rootx.domain.model.value_objects import Money
from rootx.domain.repository.product_repository import ProductRepository

EDITABLE_FIELDS = (
    "code",
    "title",
    "price",
    "price_after_discount",
    "description",
    "image_url",
    "categories",
    "sizes",
)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, changes: Mapping[str, Any]) -> Product:
        """Merge the given fields into a product.

        This does NOT affect any existing orders; they captured a
        price snapshot at creation time.  An explicit ``None`` for
        ``price_after_discount`` removes the discount.
        """
        unknown = sorted(set(changes) - set(EDITABLE_FIELDS))
        if unknown:
            raise ValidationError(f"Cannot update field(s): {', '.join(unknown)}")

        product = load_product(self._product_repo, product_id)

        price = changes.get("price")
        discount = changes.get("price_after_discount")
        product.update(
            code=changes.get("code"),
            title=changes.get("title"),
            price=Money.of(price) if price is not None else None,
            price_after_discount=Money.of(discount) if discount is not None else None,
            clear_discount="price_after_discount" in changes and discount is None,
            description=changes.get("description"),
            image_url=changes.get("image_url"),
            categories=changes.get("categories"),
            sizes=changes.get("sizes"),
        )
        self._product_repo.save(product)
        return product
