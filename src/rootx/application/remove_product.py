"""Application service: Remove Product use case.

Orders that reference the product keep their snapshot.
"""

from __future__ import annotations

import logging

from rootx.application.show_product import load_product
from rootx.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class RemoveProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        product = load_product(self._product_repo, product_id)
        self._product_repo.delete(product.id)
        logger.info("Product %s removed", product.id)
