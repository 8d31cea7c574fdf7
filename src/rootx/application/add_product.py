"""Application service: Add Product use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from rootx.domain.model.product import Product
from rootx.domain.model.value_objects import Money
from rootx.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

Amount = str | float | int | Decimal


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        title: str,
        code: str,
        price: Amount,
        price_after_discount: Amount | None = None,
        description: str | None = None,
        image_url: str | None = None,
        categories: list[str] | None = None,
        sizes: list[str] | None = None,
    ) -> Product:
        """Add a new product to the catalog."""
        product = Product.create(
            code=code,
            title=title,
            price=Money.of(price),
            price_after_discount=(
                Money.of(price_after_discount) if price_after_discount is not None else None
            ),
            description=description,
            image_url=image_url,
            categories=categories,
            sizes=sizes,
        )

        self._product_repo.add(product)
        logger.info("Product %s added with code %r", product.id, product.code)
        return product
